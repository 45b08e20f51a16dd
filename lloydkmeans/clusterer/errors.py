# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Exceptions raised when clustering input is rejected.

Every error is raised before any clustering work starts; once the input is
accepted the algorithm cannot fail.
"""


class KMeansError(ValueError):
    """Base class for rejected clustering input."""


class EmptyDatasetError(KMeansError):
    def __init__(self):
        super(EmptyDatasetError, self).__init__("dataset is empty")


class InvalidClusterCountError(KMeansError):
    def __init__(self, k, size):
        self.k = k
        self.size = size
        super(InvalidClusterCountError, self).__init__(
            f"invalid number of clusters: {k} (dataset has {size} observations)"
        )


class InvalidDeltaThresholdError(KMeansError):
    def __init__(self, delta_threshold):
        self.delta_threshold = delta_threshold
        super(InvalidDeltaThresholdError, self).__init__(
            f"invalid delta threshold: {delta_threshold}"
        )


class InvalidIterationThresholdError(KMeansError):
    def __init__(self, iteration_threshold):
        self.iteration_threshold = iteration_threshold
        super(InvalidIterationThresholdError, self).__init__(
            f"invalid iteration threshold: {iteration_threshold}"
        )


class MissingRandomSourceError(KMeansError, TypeError):
    """The random source is absent or cannot shuffle."""

    def __init__(self, random_source):
        self.random_source = random_source
        if random_source is None:
            message = "random source is None"
        else:
            message = (
                f"random source {type(random_source).__name__} has no shuffle() method"
            )
        super(MissingRandomSourceError, self).__init__(message)


class InconsistentDimensionsError(KMeansError):
    def __init__(self, expected, actual, index):
        self.expected = expected
        self.actual = actual
        self.index = index
        super(InconsistentDimensionsError, self).__init__(
            f"inconsistent dimensions: observation {index} has {actual} "
            f"coordinates, expected {expected}"
        )
