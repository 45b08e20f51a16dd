# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Lloyd's iteration: alternate assignment and center updates until the
centers stop moving or the iteration budget runs out.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Sequence

import numpy as np

from .distance import max_movement, nearest_center

logger = logging.getLogger(__name__)


@dataclass
class LloydResult:
    """
    Outcome of a Lloyd run.

    Attributes
    ----------
    centers : np.ndarray
        Final (k, d) centers.
    assignment : np.ndarray
        Center index for every observation, in dataset order.
    iterations : int
        Number of assignment/update rounds performed.
    converged : bool
        True if the last round moved every center by less than the delta
        threshold, False if the iteration budget was exhausted first.
    movement : float
        Largest center movement in the last round.
    """

    centers: np.ndarray
    assignment: np.ndarray
    iterations: int
    converged: bool
    movement: float


def update_centers(points: np.ndarray, assignment: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """
    Move each center to the mean of the points assigned to it.

    A center that owns no points keeps its previous position.
    """
    k = centers.shape[0]
    sums = np.zeros_like(centers)
    np.add.at(sums, assignment, points)
    counts = np.bincount(assignment, minlength=k)

    updated = centers.copy()
    owned = counts > 0
    updated[owned] = sums[owned] / counts[owned, np.newaxis]
    return updated


def run_lloyd(
    points: np.ndarray,
    centers: np.ndarray,
    delta_threshold: float,
    iteration_threshold: int,
) -> LloydResult:
    """
    Run Lloyd's algorithm from the given initial centers.

    ``centers`` is not modified; each round produces a new center array.
    """
    assignment = np.zeros(points.shape[0], dtype=int)
    movement = float("inf")
    converged = False
    iterations = 0

    for iterations in range(1, iteration_threshold + 1):
        assignment = nearest_center(points, centers)
        updated = update_centers(points, assignment, centers)
        movement = max_movement(centers, updated)
        centers = updated
        logger.debug("Iteration %d: max center movement %.6g", iterations, movement)
        if movement < delta_threshold:
            converged = True
            break

    if converged:
        logger.info("Converged after %d iterations", iterations)
    else:
        logger.info(
            "Stopped after %d iterations without converging (last movement %.6g)",
            iterations,
            movement,
        )
    return LloydResult(
        centers=centers,
        assignment=assignment,
        iterations=iterations,
        converged=converged,
        movement=movement,
    )


def materialize(dataset: Sequence[Any], assignment: Sequence[int], k: int) -> List[List[Any]]:
    """Group observations by assignment, keeping dataset order inside each group."""
    clusters: List[List[Any]] = [[] for _ in range(k)]
    for observation, index in zip(dataset, assignment):
        clusters[int(index)].append(observation)
    return clusters
