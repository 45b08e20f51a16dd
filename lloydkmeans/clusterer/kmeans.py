# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
K-means clustering with Lloyd's algorithm.

This module provides the functional entry point ``cluster`` and an
estimator/model pair, ``KMeans`` and ``KMeansModel``, configured through
pyspark ``Params``.
"""

import logging
import time
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from pyspark import keyword_only
from pyspark.ml.param import Param, Params, TypeConverters
from pyspark.ml.param.shared import HasMaxIter, HasSeed, HasTol

from .distance import nearest_center
from .errors import EmptyDatasetError, InconsistentDimensionsError
from .initialization import initial_centers
from .lloyd import LloydResult, materialize, run_lloyd
from .observation import coordinate_rows
from .validation import validate

logger = logging.getLogger(__name__)


def fit_lloyd(
    dataset: Sequence[Any],
    k: int,
    delta_threshold: float,
    iteration_threshold: int,
    random_source: Any,
) -> Tuple[np.ndarray, LloydResult]:
    """
    Validate a request and run it to completion.

    Returns the (n, d) coordinate matrix of the dataset together with the
    run's outcome. When k equals the dataset size or k is one, no random
    draws are made and no iteration runs.
    """
    points = validate(dataset, k, delta_threshold, iteration_threshold, random_source)
    size = points.shape[0]

    if k == size:
        logger.debug("k == %d equals the dataset size, one cluster per observation", k)
        result = LloydResult(
            centers=points.copy(),
            assignment=np.arange(size),
            iterations=0,
            converged=True,
            movement=0.0,
        )
        return points, result

    if k == 1:
        logger.debug("k == 1, the whole dataset forms one cluster")
        result = LloydResult(
            centers=points.mean(axis=0, keepdims=True),
            assignment=np.zeros(size, dtype=int),
            iterations=0,
            converged=True,
            movement=0.0,
        )
        return points, result

    centers = initial_centers(points, k, random_source)
    return points, run_lloyd(points, centers, delta_threshold, iteration_threshold)


def cluster(
    dataset: Sequence[Any],
    k: int,
    delta_threshold: float,
    iteration_threshold: int,
    random_source: Any,
) -> List[List[Any]]:
    """
    Partition a dataset into k clusters with Lloyd's algorithm.

    Parameters
    ----------
    dataset : sequence
        Observations to cluster. Each is either an object with a
        ``coordinates()`` method or a numeric sequence. All must have the
        same dimension.
    k : int
        Number of clusters, 1 <= k <= len(dataset).
    delta_threshold : float
        Iteration stops once no center moves by this much or more.
    iteration_threshold : int
        Maximum number of assignment/update rounds.
    random_source : object
        Supplies the initial centers through ``shuffle``; for example
        ``numpy.random.default_rng(seed)`` or ``random.Random(seed)``. It
        is mutated, so do not share one between simultaneous calls.

    Returns
    -------
    list of list
        Exactly k clusters in center order. Observations keep their dataset
        order within each cluster; a cluster can be empty if its center lost
        all of its observations.

    Raises
    ------
    EmptyDatasetError, InvalidClusterCountError, InvalidDeltaThresholdError,
    InvalidIterationThresholdError, MissingRandomSourceError,
    InconsistentDimensionsError
        Checked in that order before any work is done.

    Examples
    --------
    >>> import numpy as np
    >>> clusters = cluster([1, 2, 3, 11, 12, 13], 2, 0.01, 100, np.random.default_rng(0))
    >>> sorted(clusters)
    [[1, 2, 3], [11, 12, 13]]
    """
    _, result = fit_lloyd(dataset, k, delta_threshold, iteration_threshold, random_source)
    return materialize(dataset, result.assignment, k)


def _assigned_cost(points: np.ndarray, centers: np.ndarray, assignment: np.ndarray) -> float:
    diff = points - centers[assignment]
    return float(np.einsum("ij,ij->", diff, diff))


class KMeansParams(HasMaxIter, HasSeed, HasTol):
    """
    Params for KMeans and KMeansModel.

    Parameters
    ----------
    k : int, default=2
        Number of clusters to create.

    maxIter : int, default=20
        Maximum number of assignment/update rounds (> 0).

    tol : float, default=1e-4
        Convergence threshold on the largest center movement (> 0).

    seed : int, optional
        Seed for the default random source. If unset, every fit draws fresh
        entropy.
    """

    k = Param(
        Params._dummy(),
        "k",
        "Number of clusters to create (1 <= k <= number of observations).",
        typeConverter=TypeConverters.toInt,
    )

    def __init__(self, *args):
        super(KMeansParams, self).__init__(*args)
        self._setDefault(k=2, maxIter=20, tol=1e-4, seed=None)

    def getK(self) -> int:
        """Gets the value of k or its default value."""
        return self.getOrDefault(self.k)


class KMeans(KMeansParams):
    """
    K-means clustering with Lloyd's algorithm.

    Parameters
    ----------
    k : int, default=2
        Number of clusters to create.

    maxIter : int, default=20
        Maximum number of iterations.

    tol : float, default=1e-4
        Convergence tolerance (maximum center movement).

    seed : int, optional
        Random seed for reproducibility.

    Examples
    --------
    >>> from lloydkmeans.clusterer import KMeans
    >>> kmeans = KMeans(k=2, maxIter=20, seed=42)
    >>> model = kmeans.fit([[0.0, 0.0], [1.0, 1.0], [9.0, 8.0], [8.0, 9.0]])
    >>> model.predict([0.5, 0.5]) == model.predict([0.0, 0.0])
    True
    >>> model.summary.converged
    True

    Notes
    -----
    A KMeans instance holds no training state and may be fitted repeatedly.
    An explicit ``random_source`` passed to ``fit`` takes precedence over
    ``seed``.

    See Also
    --------
    KMeansModel : The fitted model
    cluster : Functional form returning the clusters directly
    """

    @keyword_only
    def __init__(
        self,
        *,
        k: int = 2,
        maxIter: int = 20,
        tol: float = 1e-4,
        seed: Optional[int] = None,
    ):
        super(KMeans, self).__init__()
        kwargs = self._input_kwargs
        self.setParams(**kwargs)

    @keyword_only
    def setParams(
        self,
        *,
        k: int = 2,
        maxIter: int = 20,
        tol: float = 1e-4,
        seed: Optional[int] = None,
    ):
        """
        Set parameters for KMeans.
        """
        kwargs = self._input_kwargs
        return self._set(**kwargs)

    def setK(self, value: int):
        """Sets the value of k."""
        return self._set(k=value)

    def setMaxIter(self, value: int):
        """Sets the value of maxIter."""
        return self._set(maxIter=value)

    def setTol(self, value: float):
        """Sets the value of tol."""
        return self._set(tol=value)

    def setSeed(self, value: int):
        """Sets the value of seed."""
        return self._set(seed=value)

    def fit(self, dataset: Sequence[Any], random_source: Any = None) -> "KMeansModel":
        """
        Cluster a dataset and return the fitted model.

        Parameters
        ----------
        dataset : sequence
            Observations (objects with ``coordinates()`` or numeric sequences).
        random_source : object, optional
            Random source with a ``shuffle`` method. Defaults to
            ``numpy.random.default_rng(seed)``.

        Returns
        -------
        KMeansModel
        """
        if random_source is None:
            random_source = np.random.default_rng(self.getSeed())

        k = self.getK()
        start = time.perf_counter()
        points, result = fit_lloyd(dataset, k, self.getTol(), self.getMaxIter(), random_source)
        elapsed_millis = int(round((time.perf_counter() - start) * 1000))

        clusters = materialize(dataset, result.assignment, k)
        summary = TrainingSummary(
            k=k,
            dim=points.shape[1],
            numPoints=points.shape[0],
            iterations=result.iterations,
            converged=result.converged,
            finalDistortion=_assigned_cost(points, result.centers, result.assignment),
            finalMovement=result.movement,
            elapsedMillis=elapsed_millis,
            clusterSizes=[len(members) for members in clusters],
        )
        model = KMeansModel(result.centers, clusters, summary)
        return self._copyValues(model)


class KMeansModel(KMeansParams):
    """
    Model fitted by KMeans.

    Attributes
    ----------
    clusterCenters : np.ndarray
        Array of cluster centers (k x d).

    numClusters : int
        Number of clusters.

    numFeatures : int
        Number of features (dimension).

    clusters : list of list
        The training observations grouped by cluster.

    Examples
    --------
    >>> centers = model.clusterCenters()
    >>> cluster = model.predict([2.0, 3.0])
    >>> cost = model.computeCost(data)
    """

    def __init__(
        self,
        centers: np.ndarray,
        clusters: Optional[List[List[Any]]] = None,
        summary: Optional["TrainingSummary"] = None,
    ):
        super(KMeansModel, self).__init__()
        self._centers = np.array(centers, dtype=float, copy=True)
        self._clusters = clusters
        self._summary = summary

    def clusterCenters(self) -> np.ndarray:
        """
        Get the cluster centers as a NumPy array.

        Returns
        -------
        np.ndarray
            A copy of the (k, d) center array.
        """
        return self._centers.copy()

    @property
    def numClusters(self) -> int:
        """Number of clusters."""
        return self._centers.shape[0]

    @property
    def numFeatures(self) -> int:
        """Number of features (dimension)."""
        return self._centers.shape[1]

    @property
    def clusters(self) -> Optional[List[List[Any]]]:
        """Training observations grouped by cluster, or None if unknown."""
        return self._clusters

    def _points(self, dataset: Sequence[Any]) -> np.ndarray:
        rows = coordinate_rows(dataset)
        for index, row in enumerate(rows):
            if row.shape[0] != self.numFeatures:
                raise InconsistentDimensionsError(self.numFeatures, row.shape[0], index)
        return np.vstack(rows)

    def predict(self, value: Any) -> int:
        """
        Predict the cluster for a single observation.

        Parameters
        ----------
        value : observation
            Object with ``coordinates()`` or a numeric sequence.

        Returns
        -------
        int
            Index of the nearest center; the lowest index wins ties.
        """
        return int(nearest_center(self._points([value]), self._centers)[0])

    def computeCost(self, dataset: Sequence[Any]) -> float:
        """
        Compute the within-cluster sum of squares (WCSS).

        This is the sum of squared distances from each observation to its
        nearest center.

        Parameters
        ----------
        dataset : sequence
            Observations to evaluate.

        Returns
        -------
        float
            The WCSS cost.
        """
        if len(dataset) == 0:
            raise EmptyDatasetError()
        points = self._points(dataset)
        return _assigned_cost(points, self._centers, nearest_center(points, self._centers))

    def hasSummary(self) -> bool:
        """
        Check if training summary is available.

        Returns
        -------
        bool
            True if the model was produced by ``KMeans.fit``.
        """
        return self._summary is not None

    @property
    def summary(self) -> "TrainingSummary":
        """
        Get the training summary.

        Raises
        ------
        RuntimeError
            If the model was built directly rather than fitted.
        """
        if self._summary is None:
            raise RuntimeError(
                "No training summary available for this %s" % self.__class__.__name__
            )
        return self._summary


class TrainingSummary(object):
    """
    Training summary with metrics about the clustering run.

    Attributes
    ----------
    algorithm : str
        Algorithm name.

    k : int
        Requested number of clusters.

    effectiveK : int
        Actual number of non-empty clusters.

    dim : int
        Feature dimensionality.

    numPoints : int
        Number of training points.

    iterations : int
        Number of iterations performed (0 for the k == 1 and k == n cases).

    converged : bool
        Whether the largest center movement fell below ``tol``.

    finalDistortion : float
        Within-cluster sum of squares at the final assignment.

    finalMovement : float
        Largest center movement in the last iteration.

    elapsedMillis : int
        Training time in milliseconds.

    clusterSizes : list of int
        Number of observations per cluster.
    """

    algorithm = "LloydKMeans"

    def __init__(
        self,
        k: int,
        dim: int,
        numPoints: int,
        iterations: int,
        converged: bool,
        finalDistortion: float,
        finalMovement: float,
        elapsedMillis: int,
        clusterSizes: List[int],
    ):
        self.k = k
        self.dim = dim
        self.numPoints = numPoints
        self.iterations = iterations
        self.converged = converged
        self.finalDistortion = finalDistortion
        self.finalMovement = finalMovement
        self.elapsedMillis = elapsedMillis
        self.clusterSizes = list(clusterSizes)

    @property
    def effectiveK(self) -> int:
        """Actual number of non-empty clusters."""
        return sum(1 for size in self.clusterSizes if size > 0)

    @property
    def avgIterationMillis(self) -> float:
        """Average time per iteration in milliseconds."""
        if self.iterations == 0:
            return 0.0
        return self.elapsedMillis / self.iterations

    def convergenceReport(self) -> str:
        """Get a detailed convergence report as a string."""
        status = "converged" if self.converged else "stopped at iteration limit"
        lines = [
            f"{self.algorithm}: {status} after {self.iterations} iterations",
            f"  k={self.k} effectiveK={self.effectiveK} dim={self.dim} numPoints={self.numPoints}",
            f"  final movement: {self.finalMovement:.6g}",
            f"  final distortion: {self.finalDistortion:.6g}",
            f"  cluster sizes: {self.clusterSizes}",
            f"  elapsed: {self.elapsedMillis}ms ({self.avgIterationMillis:.1f}ms/iteration)",
        ]
        return "\n".join(lines)
