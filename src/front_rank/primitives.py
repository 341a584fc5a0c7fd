"""NSGA-II primitives for Pareto-based ranking and diversity.

This module provides the core pure functions used by the rankers:
- dominates: scalar Pareto dominance check
- dominates_matrix: vectorized pairwise dominance
- non_dominated_sort: Deb's fast non-dominated sorting algorithm
- crowding_distance: diversity metric for solutions in a Pareto front
- crowded_sort: order of a front by descending crowding distance

Objectives are maximised. A NaN result marks a failed evaluation: a solution
with any NaN result dominates nothing, and a solution without NaN results
dominates every solution that has one.
"""

import numpy as np


def dominates(a: np.ndarray, b: np.ndarray) -> bool:
    """Check if solution a Pareto-dominates solution b (maximization).

    A solution a dominates b if and only if:
      - a has no NaN results, and
      - b has a NaN result, or
      - a[i] >= b[i] for ALL objectives and a[i] > b[i] for AT LEAST ONE.

    Args:
        a: Objective values for solution a. Shape (n_obj,).
        b: Objective values for solution b. Shape (n_obj,).

    Returns:
        True if a dominates b, False otherwise.

    Examples:
        >>> dominates(np.array([2.0, 3.0]), np.array([1.0, 2.0]))
        True
        >>> dominates(np.array([1.0, 3.0]), np.array([2.0, 2.0]))
        False
        >>> dominates(np.array([0.0, 0.0]), np.array([np.nan, 9.0]))
        True
    """
    if np.any(np.isnan(a)):
        return False
    if np.any(np.isnan(b)):
        return True
    return bool(np.all(a >= b) and np.any(a > b))


def dominates_matrix(objectives: np.ndarray) -> np.ndarray:
    """Compute pairwise dominance for all individuals (vectorized).

    Uses broadcasting to compute whether individual i dominates individual j
    for all pairs (i, j), applying the same NaN policy as dominates().

    Args:
        objectives: Objective values for all individuals. Shape (n, n_obj).

    Returns:
        Boolean array of shape (n, n) where result[i, j] = True iff
        individual i dominates individual j.

    Examples:
        >>> objs = np.array([[2.0, 2.0], [1.0, 1.0], [2.0, 1.0]])
        >>> dom = dominates_matrix(objs)
        >>> dom[0, 1]  # Does [2,2] dominate [1,1]?
        True
        >>> dom[0, 2]  # Does [2,2] dominate [2,1]?
        True
    """
    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D, got shape {objectives.shape}")

    has_nan = np.isnan(objectives).any(axis=1)  # (n,)

    # Reshape for broadcasting: (n, 1, n_obj) vs (1, n, n_obj)
    a = objectives[:, np.newaxis, :]
    b = objectives[np.newaxis, :, :]

    # Comparisons involving NaN are False; NaN rows are overridden below
    all_geq = np.all(a >= b, axis=2)  # (n, n)
    any_gt = np.any(a > b, axis=2)  # (n, n)
    numeric = all_geq & any_gt

    # Row with NaN dominates nothing; otherwise a column with NaN is dominated
    return ~has_nan[:, np.newaxis] & (has_nan[np.newaxis, :] | numeric)


def non_dominated_sort(objectives: np.ndarray) -> list[np.ndarray]:
    """Partition individuals into Pareto fronts using Deb's fast algorithm.

    Implements the fast non-dominated sorting algorithm from NSGA-II.
    Time complexity: O(M * N^2) where M = number of objectives, N = population size.

    Args:
        objectives: Objective values for all individuals. Shape (n, n_obj).

    Returns:
        List of integer arrays, front 0 (non-dominated) first. Each array
        holds the row indices of one front in ascending order. Every row
        appears in exactly one front; empty input gives an empty list.

    Examples:
        >>> objs = np.array([[3.0, 3.0], [2.0, 2.0], [1.0, 1.0]])
        >>> [front.tolist() for front in non_dominated_sort(objs)]
        [[0], [1], [2]]
    """
    n = objectives.shape[0]

    if n == 0:
        return []

    dom_matrix = dominates_matrix(objectives)

    # domination_count[i] = number of individuals that dominate i
    domination_count = dom_matrix.sum(axis=0).astype(np.int64)

    fronts: list[np.ndarray] = []
    front = np.flatnonzero(domination_count == 0)

    while len(front) > 0:
        fronts.append(front)

        # Each front member releases the individuals it dominates
        released = dom_matrix[front].sum(axis=0)
        before = domination_count.copy()
        domination_count -= released

        # Next front: counters that reached zero during this pass
        front = np.flatnonzero((domination_count == 0) & (before > 0))

    return fronts


def crowding_distance(front_objectives: np.ndarray, ids: np.ndarray | None = None) -> np.ndarray:
    """Compute crowding distance for individuals in a single Pareto front.

    Crowding distance measures how isolated a solution is in objective space.
    Higher values indicate more isolated solutions (preferred for diversity).

    For each objective the front is sorted ascending by value (ties by id),
    the first and last solutions get infinite distance, and every interior
    solution gains the normalized gap between its two neighbours. Once a
    distance is infinite it stays infinite. Objectives whose range in the
    front is zero or not finite contribute nothing to interior solutions.

    Args:
        front_objectives: Objective values for individuals in ONE front only.
            Shape (n_front, n_obj).
        ids: Stable ids used to break ties between equal values. Shape
            (n_front,). Defaults to the row index.

    Returns:
        Array of shape (n_front,) containing crowding distances.

    Examples:
        >>> objs = np.array([[1.0, 4.0], [2.0, 3.0], [3.0, 2.0], [4.0, 1.0]])
        >>> cd = crowding_distance(objs)
        >>> bool(np.isinf(cd[0]) and np.isinf(cd[-1]))  # Boundary points
        True
    """
    n_front = front_objectives.shape[0]

    if n_front == 0:
        return np.array([], dtype=np.float64)

    if ids is None:
        ids = np.arange(n_front)
    elif len(ids) != n_front:
        raise ValueError(f"ids has {len(ids)} elements, expected {n_front} to match front_objectives")

    n_obj = front_objectives.shape[1]
    distances = np.zeros(n_front, dtype=np.float64)

    for m in range(n_obj):
        values = front_objectives[:, m]

        # Ascending by value, ties by id (lexsort keys are last-primary)
        sorted_indices = np.lexsort((ids, values))

        # Boundary points get infinite distance
        distances[sorted_indices[0]] = np.inf
        distances[sorted_indices[-1]] = np.inf

        if n_front < 3:
            continue

        obj_range = values[sorted_indices[-1]] - values[sorted_indices[0]]
        if not np.isfinite(obj_range) or obj_range <= 0:
            continue

        interior = sorted_indices[1:-1]
        gaps = (values[sorted_indices[2:]] - values[sorted_indices[:-2]]) / obj_range
        gaps = np.where(np.isnan(gaps), 0.0, gaps)

        # Never add to an infinite distance
        finite = np.isfinite(distances[interior])
        distances[interior[finite]] += gaps[finite]

    return distances


def crowded_sort(distances: np.ndarray, ids: np.ndarray) -> np.ndarray:
    """Order a front by descending crowding distance.

    Ties (including between infinite distances) are broken by ascending id,
    so the order never depends on input order or sort stability.

    Args:
        distances: Crowding distances of a front. Shape (n_front,).
        ids: Stable ids of the same individuals. Shape (n_front,).

    Returns:
        Index array of shape (n_front,), best (most isolated) first.

    Examples:
        >>> crowded_sort(np.array([0.5, np.inf, 0.5]), np.array([7, 9, 3])).tolist()
        [1, 2, 0]
    """
    if len(distances) != len(ids):
        raise ValueError(f"distances has {len(distances)} elements, expected {len(ids)} to match ids")
    return np.lexsort((ids, -distances))
