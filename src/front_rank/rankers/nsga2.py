"""NSGA-II ranking strategy.

This module implements the non-dominated sorting ranker based on NSGA-II
(Deb, Pratap, Agarwal, Meyarivan: "A Fast and Elitist Multiobjective
Genetic Algorithm: NSGA-II", IEEE Transactions on Evolutionary Computation,
vol. 6, no. 2, 2002). Individuals are ordered by Pareto front, and within a
front by crowding distance, giving every individual a distinct rank.
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from front_rank.population import Individual, Objective
from front_rank.primitives import crowded_sort, crowding_distance, non_dominated_sort
from front_rank.results import RankingResult
from front_rank.validation import objective_matrix, validate_objectives

_logger = logging.getLogger(__name__)


def fast_non_dominated_sort(
    individuals: Iterable[Individual],
    objectives: Sequence[Objective] | None = None,
) -> list[list[Individual]]:
    """Partition individuals into Pareto fronts.

    Individuals are keyed by their stable id, so the fronts do not depend on
    the iteration order of the input or on object identity.

    Args:
        individuals: Individuals sharing one set of fitness objectives.
        objectives: The shared objectives, if already validated.

    Returns:
        Fronts in order, front 0 (non-dominated) first. Within a front the
        individuals are in ascending id order.

    Raises:
        RankingError: If the individuals do not share one non-empty set of
            fitness objectives.

    Example:
        >>> f1, f2 = Objective("f1"), Objective("f2")
        >>> a = Individual.from_results({f1: 1.0, f2: 5.0})
        >>> d = Individual.from_results({f1: 0.0, f2: 0.0})
        >>> [[ind is a for ind in front] for front in fast_non_dominated_sort([d, a])]
        [[True], [False]]
    """
    members = sorted(individuals, key=lambda ind: ind.id)
    if objectives is None:
        objectives = validate_objectives(members)
    if not members:
        return []

    by_id = {ind.id: ind for ind in members}
    ids = [ind.id for ind in members]
    fronts = non_dominated_sort(objective_matrix(members, objectives))

    return [[by_id[ids[i]] for i in front] for front in fronts]


def nsga2_ranker():
    """Create an NSGA-II ranker.

    The NSGA-II ranker orders a population by:
    1. Pareto front (front 0, the non-dominated individuals, is best)
    2. Within a front, crowding distance (more isolated is better)
    3. Within equal crowding distance, ascending individual id

    Ranks count down from N-1 for the best individual to 0 for the worst, so
    every individual in front i outranks every individual in front i+1.

    Returns:
        A Ranker callable that assigns ranks and returns a RankingResult.

    Example:
        >>> ranker = nsga2_ranker()
        >>> result = ranker(population.members)
        >>> result.fittest.rank == len(population) - 1
        True
    """

    def ranker(individuals: Iterable[Individual]) -> RankingResult:
        """Rank individuals by non-domination and crowding distance.

        Args:
            individuals: Individuals sharing one set of fitness objectives.
                An empty collection is ranked trivially.

        Returns:
            RankingResult with:
            - fronts: each front ordered best first
            - ranks: individual id -> rank in [0, N-1]
            - crowding_distance: individual id -> distance within its front

        Raises:
            RankingError: If the individuals do not share one non-empty set
                of fitness objectives. No rank is written in that case.
        """
        members = sorted(individuals, key=lambda ind: ind.id)
        objectives = validate_objectives(members)
        fronts = fast_non_dominated_sort(members, objectives)

        # Compute every rank before touching any individual
        rank = len(members)
        ranks: dict[int, int] = {}
        distances: dict[int, float] = {}
        ordered_fronts: list[tuple[Individual, ...]] = []

        for front in fronts:
            ids = np.array([ind.id for ind in front], dtype=np.int64)
            cd = crowding_distance(objective_matrix(front, objectives), ids)
            order = crowded_sort(cd, ids)

            ordered = tuple(front[i] for i in order)
            for i in order:
                distances[front[i].id] = float(cd[i])
            for ind in ordered:
                rank -= 1
                ranks[ind.id] = rank
            ordered_fronts.append(ordered)

        for ind in members:
            ind.rank = ranks[ind.id]

        _logger.debug(
            "NSGA-II ranked %d individuals on %d objectives into %d fronts (sizes %s)",
            len(members),
            len(objectives),
            len(fronts),
            [len(front) for front in fronts],
        )

        return RankingResult(fronts=tuple(ordered_fronts), ranks=ranks, crowding_distance=distances)

    return ranker
