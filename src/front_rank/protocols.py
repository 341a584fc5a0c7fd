"""Protocol definition for ranking strategies.

A ranker turns a population of evaluated individuals into a total order:
every individual receives a distinct rank in [0, N-1], higher is better.
The ranking is consumed by the surrounding evolutionary loop to choose
parents, elites and survivors.

Example usage:
    ```python
    def next_generation(ranker: Ranker, individuals: list[Individual]):
        result = ranker(individuals)
        elites = result.top(5)
        ...
    ```
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from front_rank.population import Individual
from front_rank.results import RankingResult


@runtime_checkable
class Ranker(Protocol):
    """Protocol for ranking strategies.

    Rankers read the fitness results of the given individuals and overwrite
    each individual's rank. A ranker either ranks every individual or raises
    before writing any rank.

    Parameters:
        individuals: The individuals to rank. Order of iteration must not
            influence the outcome.

    Returns:
        RankingResult describing the fronts, the assigned ranks and, where
        applicable, the crowding distances.

    Example implementations:
        - NSGA-II: Non-dominated sorting, crowding distance within each front
        - Simple: Sort by a single objective

    Example:
        ```python
        def reverse_id_ranker(individuals) -> RankingResult:
            members = sorted(individuals, key=lambda ind: ind.id)
            ranks = {ind.id: i for i, ind in enumerate(members)}
            for ind in members:
                ind.rank = ranks[ind.id]
            return RankingResult(fronts=(tuple(reversed(members)),), ranks=ranks)
        ```
    """

    def __call__(self, individuals: Iterable[Individual]) -> RankingResult:
        """Rank the individuals.

        Args:
            individuals: The individuals to rank.

        Returns:
            RankingResult for the ranked individuals.
        """
        ...
