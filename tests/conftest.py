"""Shared test fixtures for front-rank tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- f1, f2, f3: Fitness objectives
- make_individuals: Factory building individuals from rows of results
- scenario: The four-individual bi-objective example population
"""

import numpy as np
import pytest

from front_rank import Individual, Objective


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def f1() -> Objective:
    return Objective("f1")


@pytest.fixture
def f2() -> Objective:
    return Objective("f2")


@pytest.fixture
def f3() -> Objective:
    return Objective("f3")


@pytest.fixture
def make_individuals():
    """Factory creating one individual per row of results.

    Individuals are created in row order, so their ids ascend with the row.
    """

    def make(objectives: list[Objective], rows) -> list[Individual]:
        return [Individual.from_results(dict(zip(objectives, row))) for row in rows]

    return make


@pytest.fixture
def scenario(f1: Objective, f2: Objective, make_individuals) -> dict[str, Individual]:
    """Bi-objective population A=(1,5), B=(5,1), C=(3,3), D=(0,0).

    Front 0 is {A, B, C}; D is dominated by all three.
    """
    a, b, c, d = make_individuals([f1, f2], [(1.0, 5.0), (5.0, 1.0), (3.0, 3.0), (0.0, 0.0)])
    return {"A": a, "B": b, "C": c, "D": d}


@pytest.fixture
def random_population(f1: Objective, f2: Objective, f3: Objective, rng: np.random.Generator, make_individuals):
    """Thirty three-objective individuals with small integer results (many ties)."""
    rows = rng.integers(0, 5, size=(30, 3)).astype(np.float64)
    return make_individuals([f1, f2, f3], rows.tolist())
