# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Lloyd K-Means Clustering
========================

Partition point-like data into k groups with Lloyd's algorithm.

Functions:
    cluster: Cluster a dataset and return the groups directly

Classes:
    KMeans: Estimator holding k, maxIter, tol and seed
    KMeansModel: Fitted model with centers, prediction and cost
    TrainingSummary: Iterations, convergence and distortion of a fit

Example:
    >>> import numpy as np
    >>> from lloydkmeans.clusterer import cluster, KMeans
    >>>
    >>> data = [[0.0, 0.0], [1.0, 1.0], [9.0, 8.0], [8.0, 9.0]]
    >>> groups = cluster(data, 2, 1e-4, 20, np.random.default_rng(42))
    >>>
    >>> model = KMeans(k=2, maxIter=20, seed=42).fit(data)
    >>> model.predict([0.5, 0.5])
"""

from .errors import (
    EmptyDatasetError,
    InconsistentDimensionsError,
    InvalidClusterCountError,
    InvalidDeltaThresholdError,
    InvalidIterationThresholdError,
    KMeansError,
    MissingRandomSourceError,
)
from .kmeans import KMeans, KMeansModel, TrainingSummary, cluster
from .observation import Observation

__all__ = [
    "cluster",
    "KMeans",
    "KMeansModel",
    "TrainingSummary",
    "Observation",
    "KMeansError",
    "EmptyDatasetError",
    "InvalidClusterCountError",
    "InvalidDeltaThresholdError",
    "InvalidIterationThresholdError",
    "MissingRandomSourceError",
    "InconsistentDimensionsError",
]
