"""Data structures for ranking evaluated individuals.

This module provides the data model consumed by the rankers:

- Objective: Identifier for one evaluation dimension
- EvaluationData: The results recorded for one individual
- Individual: An evaluated candidate solution with a stable numeric id
- Population: A container of individuals that drives a ranker

Objectives are maximised throughout: a higher result is a better result.
"""

from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from front_rank.protocols import Ranker
    from front_rank.results import RankingResult

_logger = logging.getLogger(__name__)

_id_counter = itertools.count()


def _next_id() -> int:
    return next(_id_counter)


@dataclass(frozen=True)
class Objective:
    """Identifier for a single fitness or performance dimension.

    Attributes:
        name: Human readable name of the evaluation.
        range: Optional (low, high) pair bounding the possible results.
        optimal_value: Optional best achievable result.
        is_performance_indicator: If True the result is recorded for reporting
            only and never takes part in ranking.

    Example:
        >>> speed = Objective("speed", range=(0.0, 1.0), optimal_value=1.0)
        >>> speed.name
        'speed'
    """

    name: str
    range: tuple[float, float] | None = None
    optimal_value: float | None = None
    is_performance_indicator: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"name must be a string, got {type(self.name).__name__}")
        if self.range is not None:
            low, high = self.range
            if low > high:
                raise ValueError(f"range low ({low}) cannot exceed high ({high}) for objective '{self.name}'")
            object.__setattr__(self, "range", (float(low), float(high)))


class EvaluationData:
    """Results of evaluating one individual, keyed by Objective.

    Fitness results and performance results are tracked separately; only
    fitness results are considered when ranking.
    """

    def __init__(self) -> None:
        self._all: dict[Objective, float] = {}
        self._fitness: dict[Objective, float] = {}
        self._performance: dict[Objective, float] = {}

    def set_result(self, objective: Objective, value: float) -> None:
        """Record the result for an objective.

        Raises:
            TypeError: If objective is not an Objective.
            ValueError: If a result has already been set for the objective.
        """
        if not isinstance(objective, Objective):
            raise TypeError(f"objective must be an Objective, got {type(objective).__name__}")
        if objective in self._all:
            raise ValueError(f"a result has already been set for objective '{objective.name}'")
        value = float(value)
        self._all[objective] = value
        if objective.is_performance_indicator:
            self._performance[objective] = value
        else:
            self._fitness[objective] = value

    def get_result(self, objective: Objective) -> float:
        if objective not in self._all:
            raise KeyError(f"no result recorded for objective '{getattr(objective, 'name', objective)}'")
        return self._all[objective]

    @property
    def results(self) -> Mapping[Objective, float]:
        return MappingProxyType(self._all)

    @property
    def fitness_results(self) -> Mapping[Objective, float]:
        return MappingProxyType(self._fitness)

    @property
    def performance_results(self) -> Mapping[Objective, float]:
        return MappingProxyType(self._performance)

    def clear(self) -> None:
        """Remove all recorded results."""
        self._all.clear()
        self._fitness.clear()
        self._performance.clear()

    def __len__(self) -> int:
        return len(self._all)

    def __repr__(self) -> str:
        body = ", ".join(f"{obj.name}: {value:g}" for obj, value in self._all.items())
        return f"EvaluationData({body})"


@dataclass(eq=False)
class Individual:
    """An evaluated candidate solution.

    The id is assigned from a process-wide counter at creation and is never
    reused, so individuals are totally ordered by creation. Rankers only read
    the evaluation data and overwrite the rank.

    Attributes:
        genotype: Opaque genetic material, unused by the rankers.
        evaluation_data: Results recorded by the evaluators.
        rank: Position in the population after ranking (higher is better),
            or None if the individual has not been ranked.
        id: Stable numeric identity.

    Example:
        >>> f1, f2 = Objective("f1"), Objective("f2")
        >>> ind = Individual.from_results({f1: 1.0, f2: 5.0})
        >>> ind.is_evaluated
        True
    """

    genotype: Any = None
    evaluation_data: EvaluationData = field(default_factory=EvaluationData)
    rank: int | None = None
    id: int = field(default_factory=_next_id, init=False)

    @classmethod
    def from_results(cls, results: Mapping[Objective, float], genotype: Any = None) -> Individual:
        """Create an individual with the given results already recorded."""
        individual = cls(genotype=genotype)
        for objective, value in results.items():
            individual.evaluation_data.set_result(objective, value)
        return individual

    @property
    def is_evaluated(self) -> bool:
        return len(self.evaluation_data) > 0

    def __lt__(self, other: Individual) -> bool:
        if not isinstance(other, Individual):
            return NotImplemented
        return self.id < other.id

    def __repr__(self) -> str:
        return f"Individual(id={self.id}, rank={self.rank}, {self.evaluation_data!r})"


class Population:
    """A set of individuals ranked by a pluggable Ranker.

    Args:
        members: Initial individuals.
        ranker: Ranking strategy. Can be:
            - String: Name of a registered ranker (e.g., "nsga2", "simple")
            - Ranker: Direct callable following the Ranker protocol

    Raises:
        KeyError: If a ranker name is not registered.

    Example:
        >>> f1, f2 = Objective("f1"), Objective("f2")
        >>> pop = Population([Individual.from_results({f1: 1.0, f2: 0.0}),
        ...                   Individual.from_results({f1: 0.0, f2: 0.0})])
        >>> result = pop.rank()
        >>> pop.fittest.rank
        1
    """

    def __init__(self, members: Iterable[Individual] = (), ranker: str | Ranker = "nsga2") -> None:
        # Import here to trigger ranker registration without a circular import
        import front_rank.rankers  # noqa: F401
        from front_rank.registry import RankerRegistry

        self._ranker = RankerRegistry.get(ranker) if isinstance(ranker, str) else ranker
        self._members: dict[int, Individual] = {}
        self._fittest: Individual | None = None
        self._best_performing: Individual | None = None
        for individual in members:
            self.add(individual)

    def add(self, individual: Individual) -> None:
        """Add an individual.

        Raises:
            TypeError: If individual is not an Individual.
            ValueError: If an individual with the same id is already present.
        """
        if not isinstance(individual, Individual):
            raise TypeError(f"individual must be an Individual, got {type(individual).__name__}")
        if individual.id in self._members:
            raise ValueError(f"individual {individual.id} is already in the population")
        self._members[individual.id] = individual

    def remove(self, individual: Individual) -> None:
        if individual.id not in self._members:
            raise KeyError(f"individual {individual.id} is not in the population")
        del self._members[individual.id]
        if self._fittest is individual:
            self._fittest = None
        if self._best_performing is individual:
            self._best_performing = None

    def get_individual(self, individual_id: int) -> Individual:
        if individual_id not in self._members:
            raise KeyError(f"no individual with id {individual_id} in the population")
        return self._members[individual_id]

    @property
    def members(self) -> tuple[Individual, ...]:
        """All individuals in ascending id order."""
        return tuple(self._members[i] for i in sorted(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self.members)

    def __contains__(self, individual: object) -> bool:
        return isinstance(individual, Individual) and self._members.get(individual.id) is individual

    @property
    def fittest(self) -> Individual | None:
        """The highest ranked individual, set by rank()."""
        return self._fittest

    @property
    def best_performing(self) -> Individual | None:
        """The individual with the highest value of the first performance indicator, set by rank()."""
        return self._best_performing

    def clear_rankings(self) -> None:
        self._fittest = None
        self._best_performing = None

    def rank(self, callback: Callable[[RankingResult], None] | None = None) -> RankingResult:
        """Rank all members with the configured ranker.

        Args:
            callback: Optional callable invoked with the RankingResult once
                ranking has finished.

        Returns:
            The RankingResult produced by the ranker.

        Raises:
            RankingError: If the members do not share one non-empty set of
                fitness objectives. No rank is changed in that case.
        """
        self.clear_rankings()
        members = self.members
        result = self._ranker(members)

        self._fittest = result.fittest
        performance = _first_performance_objective(members)
        if performance is not None:
            best_value = -math.inf
            for individual in members:
                value = individual.evaluation_data.performance_results.get(performance, math.nan)
                if math.isnan(value):
                    continue
                if self._best_performing is None or value > best_value:
                    self._best_performing = individual
                    best_value = value

        _logger.debug(
            "Ranked population of %d individuals; fittest is %s",
            len(members),
            None if self._fittest is None else self._fittest.id,
        )
        if callback is not None:
            callback(result)
        return result


def _first_performance_objective(individuals: Iterable[Individual]) -> Objective | None:
    for individual in individuals:
        for objective in individual.evaluation_data.performance_results:
            return objective
    return None
