#!/usr/bin/env python
# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Clustering domain objects that expose coordinates().
"""

import logging
import random

from lloydkmeans.clusterer import InvalidClusterCountError, cluster


class City(object):
    def __init__(self, name, latitude, longitude):
        self.name = name
        self.latitude = latitude
        self.longitude = longitude

    def coordinates(self):
        return [self.latitude, self.longitude]

    def __repr__(self):
        return self.name


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    cities = [
        City("Lisbon", 38.7, -9.1),
        City("Madrid", 40.4, -3.7),
        City("Porto", 41.1, -8.6),
        City("Berlin", 52.5, 13.4),
        City("Hamburg", 53.6, 10.0),
        City("Munich", 48.1, 11.6),
        City("Tokyo", 35.7, 139.7),
    ]

    # Any object with shuffle() works as the random source
    groups = cluster(cities, 3, 0.01, 100, random.Random(7))
    for i, group in enumerate(groups):
        print(f"Cluster {i}: {group}")

    try:
        cluster(cities, 10, 0.01, 100, random.Random(7))
    except InvalidClusterCountError as e:
        print(f"\nRejected: {e}")


if __name__ == "__main__":
    main()
