# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Input validation for k-means runs.
"""

import numbers
from typing import Any, Sequence

import numpy as np

from .errors import (
    EmptyDatasetError,
    InconsistentDimensionsError,
    InvalidClusterCountError,
    InvalidDeltaThresholdError,
    InvalidIterationThresholdError,
    MissingRandomSourceError,
)
from .observation import coordinate_rows


def has_shuffle(random_source: Any) -> bool:
    return callable(getattr(random_source, "shuffle", None))


def is_count(value: Any) -> bool:
    """True for integers, numpy integers included, but not for bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_params(
    size: int,
    k: int,
    delta_threshold: float,
    iteration_threshold: int,
    random_source: Any,
) -> None:
    """
    Check the scalar arguments of a run, in priority order.

    ``not x > 0`` is used rather than ``x <= 0`` so that NaN thresholds are
    rejected as well. Counts must be integers; a float such as 2.0 is
    rejected rather than truncated.
    """
    if size == 0:
        raise EmptyDatasetError()
    if not is_count(k) or k <= 0 or k > size:
        raise InvalidClusterCountError(k, size)
    if not delta_threshold > 0:
        raise InvalidDeltaThresholdError(delta_threshold)
    if not is_count(iteration_threshold) or iteration_threshold <= 0:
        raise InvalidIterationThresholdError(iteration_threshold)
    if random_source is None or not has_shuffle(random_source):
        raise MissingRandomSourceError(random_source)


def validate_dimensions(dataset: Sequence[Any]) -> np.ndarray:
    """
    Read every observation's coordinates and stack them into an (n, d) array.

    Raises
    ------
    InconsistentDimensionsError
        If any observation reports a different number of coordinates than
        the first one.
    """
    rows = coordinate_rows(dataset)
    dim = rows[0].shape[0]
    for index, row in enumerate(rows):
        if row.shape[0] != dim:
            raise InconsistentDimensionsError(dim, row.shape[0], index)
    return np.vstack(rows)


def validate(
    dataset: Sequence[Any],
    k: int,
    delta_threshold: float,
    iteration_threshold: int,
    random_source: Any,
) -> np.ndarray:
    """
    Validate a full clustering request.

    Returns the (n, d) coordinate matrix of the dataset so callers never
    read observation coordinates twice.
    """
    validate_params(len(dataset), k, delta_threshold, iteration_threshold, random_source)
    return validate_dimensions(dataset)
