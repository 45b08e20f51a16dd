# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Euclidean distance helpers.
"""

import numpy as np


def euclidean_distance(a: np.ndarray, b: np.ndarray) -> float:
    """
    Euclidean distance between two equal-length coordinate vectors.

    Raises
    ------
    ValueError
        If the vectors differ in length. Callers validate dimensions up
        front, so this only fires on a programming error.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"dimensions mismatch: {a.shape} vs {b.shape}")
    diff = a - b
    return float(np.sqrt(np.dot(diff, diff)))


def _check_dimensions(points: np.ndarray, centers: np.ndarray) -> None:
    if points.shape[1] != centers.shape[1]:
        raise ValueError(
            f"dimensions mismatch: {points.shape[1]} vs {centers.shape[1]}"
        )


def _distances_to(points: np.ndarray, center: np.ndarray) -> np.ndarray:
    diff = points - center
    return np.sqrt(np.einsum("ij,ij->i", diff, diff))


def distances_to_centers(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """
    Distances from every point to every center.

    Returns an (n_points, n_centers) array; entry [i, j] is the Euclidean
    distance from ``points[i]`` to ``centers[j]``.
    """
    _check_dimensions(points, centers)
    return np.column_stack([_distances_to(points, center) for center in centers])


def nearest_center(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """
    Index of the nearest center for every point.

    Ties go to the lowest center index, matching a left-to-right scan that
    only replaces the best center on a strictly smaller distance.
    """
    _check_dimensions(points, centers)
    best = np.full(points.shape[0], np.inf)
    nearest = np.zeros(points.shape[0], dtype=int)
    for index, center in enumerate(centers):
        distances = _distances_to(points, center)
        closer = distances < best
        best[closer] = distances[closer]
        nearest[closer] = index
    return nearest


def max_movement(previous: np.ndarray, current: np.ndarray) -> float:
    """Largest distance any center moved between two iterations."""
    moved = np.sqrt(np.einsum("ij,ij->i", current - previous, current - previous))
    return float(moved.max()) if moved.size else 0.0
