"""Result type returned by the rankers.

RankingResult records the outcome of one ranking pass: the ordered fronts,
the rank given to every individual and the crowding distances used to
order each front. It is immutable (frozen dataclass); mappings are copied
on construction.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from front_rank.population import Individual


@dataclass(frozen=True)
class RankingResult:
    """Outcome of ranking a population.

    Attributes:
        fronts: Fronts in order, front 0 (best) first. Each front lists its
            individuals best first.
        ranks: Rank assigned to each individual, keyed by individual id.
            Ranks are a permutation of 0..N-1, higher is better.
        crowding_distance: Crowding distance of each individual, keyed by
            individual id. Empty when the ranker does not use crowding.

    Example:
        >>> # Assuming ranker is a Ranker and individuals were evaluated
        >>> result = ranker(individuals)
        >>> best = result.fittest
        >>> elites = result.top(3)
    """

    fronts: tuple[tuple[Individual, ...], ...]
    ranks: Mapping[int, int]
    crowding_distance: Mapping[int, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate that the fronts and ranks describe one total order.

        Raises:
            ValueError: If ranks are not a permutation of 0..N-1, or if the
                fronts do not cover exactly the ranked individuals.
        """
        fronts = tuple(tuple(front) for front in self.fronts)
        ranks = dict(self.ranks)
        n = len(ranks)

        if sorted(ranks.values()) != list(range(n)):
            raise ValueError(f"ranks must be a permutation of 0..{n - 1}")

        front_ids = [ind.id for front in fronts for ind in front]
        if len(front_ids) != n or set(front_ids) != set(ranks):
            raise ValueError(f"fronts cover {len(front_ids)} individuals, expected the {n} ranked individuals")

        unknown = set(self.crowding_distance) - set(ranks)
        if unknown:
            raise ValueError(f"crowding_distance has entries for unranked ids {sorted(unknown)}")

        object.__setattr__(self, "fronts", fronts)
        object.__setattr__(self, "ranks", MappingProxyType(ranks))
        object.__setattr__(self, "crowding_distance", MappingProxyType(dict(self.crowding_distance)))

    @property
    def n_individuals(self) -> int:
        return len(self.ranks)

    @property
    def ordered(self) -> tuple[Individual, ...]:
        """All ranked individuals, highest rank first."""
        members = [ind for front in self.fronts for ind in front]
        return tuple(sorted(members, key=lambda ind: self.ranks[ind.id], reverse=True))

    @property
    def pareto_front(self) -> tuple[Individual, ...]:
        """Individuals of front 0, or () if nothing was ranked."""
        return self.fronts[0] if self.fronts else ()

    @property
    def fittest(self) -> Individual | None:
        """The highest ranked individual, or None if nothing was ranked."""
        ordered = self.ordered
        return ordered[0] if ordered else None

    def front_index(self, individual: Individual) -> int:
        """Return the index of the front containing the individual.

        Raises:
            KeyError: If the individual was not part of this ranking.
        """
        for index, front in enumerate(self.fronts):
            if any(member.id == individual.id for member in front):
                return index
        raise KeyError(f"individual {individual.id} was not ranked")

    def top(self, n: int) -> tuple[Individual, ...]:
        """Return the n highest ranked individuals, best first.

        Front members are taken whole until a front no longer fits; the
        remainder comes from the next front in crowded order.

        Raises:
            ValueError: If n is negative or exceeds the number of individuals.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        if n > self.n_individuals:
            raise ValueError(f"n ({n}) cannot exceed number of ranked individuals ({self.n_individuals})")
        return self.ordered[:n]
