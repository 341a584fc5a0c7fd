"""front-rank: Ranking engine for evolutionary populations.

A numpy implementation of NSGA-II ranking (fast non-dominated sorting with
crowding-distance tie-breaking) over populations of evaluated individuals,
plus a single-objective ranker. Objectives are maximised and every
individual receives a distinct rank in [0, N-1], higher is better.

Example (multi-objective with NSGA-II):
    >>> from front_rank import Individual, Objective, Population
    >>> f1, f2 = Objective("f1"), Objective("f2")
    >>> pop = Population([
    ...     Individual.from_results({f1: 1.0, f2: 5.0}),
    ...     Individual.from_results({f1: 5.0, f2: 1.0}),
    ...     Individual.from_results({f1: 3.0, f2: 3.0}),
    ...     Individual.from_results({f1: 0.0, f2: 0.0}),
    ... ])
    >>> result = pop.rank()
    >>> len(result.fronts)
    2
    >>> sorted(ind.rank for ind in pop)
    [0, 1, 2, 3]

Example (single objective):
    >>> from front_rank import simple_ranker
    >>> score = Objective("score")
    >>> pop = Population([Individual.from_results({score: s}) for s in (0.2, 0.9)], ranker="simple")
    >>> pop.rank().fittest.evaluation_data.get_result(score)
    0.9
"""

from front_rank.population import EvaluationData, Individual, Objective, Population
from front_rank.primitives import (
    crowded_sort,
    crowding_distance,
    dominates,
    dominates_matrix,
    non_dominated_sort,
)
from front_rank.protocols import Ranker
from front_rank.rankers import fast_non_dominated_sort, nsga2_ranker, simple_ranker
from front_rank.registry import RankerRegistry, list_rankers
from front_rank.results import RankingResult
from front_rank.validation import (
    ObjectiveMismatchError,
    RankingError,
    UnevaluatedIndividualError,
    objective_matrix,
    validate_objectives,
)

__all__ = [
    # Rankers
    "nsga2_ranker",
    "simple_ranker",
    "fast_non_dominated_sort",
    # Primitives
    "dominates",
    "dominates_matrix",
    "non_dominated_sort",
    "crowding_distance",
    "crowded_sort",
    # Registry system
    "RankerRegistry",
    "list_rankers",
    # Data structures
    "Objective",
    "EvaluationData",
    "Individual",
    "Population",
    "objective_matrix",
    # Result and protocol types
    "RankingResult",
    "Ranker",
    # Errors
    "RankingError",
    "ObjectiveMismatchError",
    "UnevaluatedIndividualError",
    "validate_objectives",
]
