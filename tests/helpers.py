# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Shared fixtures for the clustering tests.
"""


class Number(int):
    """A one-dimensional observation."""

    def coordinates(self):
        return [float(self)]


class Coordinates(tuple):
    """A two-dimensional observation."""

    def coordinates(self):
        return [float(self[0]), float(self[1])]


class FixedShuffle(object):
    """
    Random source that moves the given indices to the front, in order.

    Lets a test choose the initial centers exactly.
    """

    def __init__(self, front):
        self.front = list(front)
        self.calls = 0

    def shuffle(self, items):
        self.calls += 1
        rest = [item for item in items if item not in self.front]
        items[:] = self.front + rest


def numbers(*values):
    return [Number(v) for v in values]


def coordinates(*pairs):
    return [Coordinates(pair) for pair in pairs]
