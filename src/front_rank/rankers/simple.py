"""Single-objective ranking strategy."""

import logging
import math
from collections.abc import Iterable
from itertools import groupby

from front_rank.population import Individual
from front_rank.results import RankingResult
from front_rank.validation import ObjectiveMismatchError, validate_objectives

_logger = logging.getLogger(__name__)


def simple_ranker():
    """Create a single-objective ranker.

    The simple ranker orders individuals by their one fitness result, higher
    is better. NaN results rank below every number. Equal results are broken
    by ascending id, so the lower id ranks higher.

    Returns:
        A Ranker callable.

    Example:
        >>> ranker = simple_ranker()
        >>> result = ranker(individuals)
        >>> result.fittest  # individual with the highest result
    """

    def ranker(individuals: Iterable[Individual]) -> RankingResult:
        """Rank individuals by their single fitness objective.

        Returns:
            RankingResult whose fronts group individuals with equal results,
            best group first. No crowding distances are recorded.

        Raises:
            ObjectiveMismatchError: If the individuals report more than one
                fitness objective, or not the same one.
            UnevaluatedIndividualError: If an individual has no fitness results.
        """
        members = sorted(individuals, key=lambda ind: ind.id)
        objectives = validate_objectives(members)
        if members and len(objectives) != 1:
            raise ObjectiveMismatchError(
                f"simple ranker requires exactly one fitness objective, got {len(objectives)}"
            )

        def value_of(ind: Individual) -> float:
            return ind.evaluation_data.fitness_results[objectives[0]]

        def sort_key(ind: Individual) -> tuple[bool, float, int]:
            value = value_of(ind)
            if math.isnan(value):
                return (True, 0.0, ind.id)
            return (False, -value, ind.id)

        # Best first
        ordered = sorted(members, key=sort_key)

        n = len(ordered)
        ranks = {ind.id: n - 1 - i for i, ind in enumerate(ordered)}
        fronts = tuple(tuple(group) for _, group in groupby(ordered, key=lambda ind: sort_key(ind)[:2]))

        for ind in members:
            ind.rank = ranks[ind.id]

        _logger.debug("Simple ranker ranked %d individuals", n)

        return RankingResult(fronts=fronts, ranks=ranks)

    return ranker
