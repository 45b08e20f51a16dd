# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
The observation capability and coordinate extraction.
"""

from typing import Any, List, Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class Observation(Protocol):
    """
    A data point in n dimensions.

    Any object exposing ``coordinates()`` can be clustered. All observations
    in one run must report vectors of the same length.

    Examples
    --------
    >>> class City:
    ...     def __init__(self, name, lat, lon):
    ...         self.name, self.lat, self.lon = name, lat, lon
    ...     def coordinates(self):
    ...         return [self.lat, self.lon]
    """

    def coordinates(self) -> Sequence[float]:
        ...


def coordinates_of(observation: Any) -> np.ndarray:
    """
    Return the coordinate vector of an observation as a fresh float array.

    Objects without a callable ``coordinates`` are taken to be coordinate
    vectors themselves, so lists, tuples and numpy rows work unwrapped. A
    plain ``coordinates`` field, as on a namedtuple, does not count.
    """
    accessor = getattr(observation, "coordinates", None)
    if callable(accessor):
        values = accessor()
    else:
        values = observation
    return np.array(values, dtype=float).reshape(-1)


def coordinate_rows(dataset: Sequence[Any]) -> List[np.ndarray]:
    """Read the coordinates of every observation exactly once."""
    return [coordinates_of(observation) for observation in dataset]
