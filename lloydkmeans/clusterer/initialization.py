# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Random selection of initial centers.
"""

import logging
from typing import Any, List

import numpy as np

logger = logging.getLogger(__name__)


def select_seed_indices(size: int, k: int, random_source: Any) -> List[int]:
    """
    Pick k distinct dataset indices uniformly at random, without replacement.

    The full index list is shuffled in place with ``random_source.shuffle``
    and the first k entries are kept, so a fixed random-source state always
    selects the same seeds.
    """
    indices = list(range(size))
    random_source.shuffle(indices)
    return [int(i) for i in indices[:k]]


def initial_centers(points: np.ndarray, k: int, random_source: Any) -> np.ndarray:
    """
    Seed k centers with copies of randomly chosen points.

    Parameters
    ----------
    points : np.ndarray
        (n, d) coordinate matrix of the dataset.
    k : int
        Number of centers, 1 <= k <= n.
    random_source : object
        Anything with an in-place ``shuffle`` over a list, such as
        ``numpy.random.Generator`` or ``random.Random``. Not safe to share
        between simultaneous runs.

    Returns
    -------
    np.ndarray
        A new (k, d) float array owned by the caller.
    """
    seeds = select_seed_indices(points.shape[0], k, random_source)
    logger.debug("Seeding %d centers from observations %s", k, seeds)
    return np.array(points[seeds], dtype=float, copy=True)
