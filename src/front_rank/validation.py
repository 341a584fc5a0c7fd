"""Precondition checks shared by the rankers.

A population can only be ranked when every individual reports results for
exactly the same, non-empty set of fitness objectives. Ranking on a subset
would silently corrupt every later comparison, so violations are raised
before any rank is written.
"""

from collections.abc import Sequence

import numpy as np

from front_rank.population import Individual, Objective


class RankingError(ValueError):
    """Base class for populations that cannot be ranked."""


class UnevaluatedIndividualError(RankingError):
    """An individual has no fitness results at all."""


class ObjectiveMismatchError(RankingError):
    """Fitness objective sets differ across individuals."""


def _names(objectives) -> str:
    return ", ".join(sorted(repr(obj.name) for obj in objectives))


def validate_objectives(individuals: Sequence[Individual]) -> tuple[Objective, ...]:
    """Return the fitness objectives shared by all individuals.

    The objectives are returned in the insertion order of the individual
    with the lowest id, which fixes the order in which per-objective
    contributions are accumulated.

    Args:
        individuals: Individuals about to be ranked.

    Returns:
        Tuple of shared objectives, or () for an empty sequence.

    Raises:
        ValueError: If the same individual appears more than once.
        UnevaluatedIndividualError: If an individual has no fitness results.
        ObjectiveMismatchError: If the fitness objective sets differ.
    """
    if len(individuals) == 0:
        return ()

    ids = [ind.id for ind in individuals]
    if len(set(ids)) != len(ids):
        raise ValueError("individuals must be unique, got duplicate ids")

    for ind in individuals:
        if len(ind.evaluation_data.fitness_results) == 0:
            raise UnevaluatedIndividualError(f"individual {ind.id} has no fitness results to rank on")

    reference = min(individuals, key=lambda ind: ind.id)
    objectives = tuple(reference.evaluation_data.fitness_results)
    expected = set(objectives)

    for ind in individuals:
        actual = set(ind.evaluation_data.fitness_results)
        if actual != expected:
            missing = expected - actual
            unexpected = actual - expected
            details = []
            if missing:
                details.append(f"missing {_names(missing)}")
            if unexpected:
                details.append(f"unexpected {_names(unexpected)}")
            raise ObjectiveMismatchError(
                f"individual {ind.id} does not share the objectives of individual {reference.id}: "
                + "; ".join(details)
            )

    return objectives


def objective_matrix(individuals: Sequence[Individual], objectives: Sequence[Objective]) -> np.ndarray:
    """Collect fitness results into an array of shape (n, n_obj)."""
    values = np.empty((len(individuals), len(objectives)), dtype=np.float64)
    for i, ind in enumerate(individuals):
        results = ind.evaluation_data.fitness_results
        for m, objective in enumerate(objectives):
            values[i, m] = results[objective]
    return values
