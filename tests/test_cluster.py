# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Tests for the cluster entry point and Lloyd's iteration.
"""

import random
import unittest
from unittest import mock

import numpy as np

from lloydkmeans.clusterer import cluster
from lloydkmeans.clusterer.initialization import initial_centers, select_seed_indices
from lloydkmeans.clusterer.lloyd import materialize, run_lloyd, update_centers

from helpers import FixedShuffle, coordinates, numbers


def assert_same_groups(test, clusters, expected):
    """Compare clusters with expected groups, ignoring cluster order."""
    test.assertEqual(len(clusters), len(expected))
    remaining = [list(group) for group in expected]
    for group in clusters:
        test.assertIn(list(group), remaining, f"unexpected cluster: {group}")
        remaining.remove(list(group))


class ClusterScenarioTest(unittest.TestCase):
    """End-to-end clustering of well separated groups."""

    def test_cluster_numbers(self):
        dataset = numbers(1, 2, 3, 11, 12, 13, 21, 22, 23, 100)
        clusters = cluster(dataset, 4, 0.01, 100, FixedShuffle([1, 4, 7, 9]))
        assert_same_groups(
            self,
            clusters,
            [[1, 2, 3], [11, 12, 13], [21, 22, 23], [100]],
        )

    def test_cluster_coordinates(self):
        dataset = coordinates(
            (1, 2), (2, 3), (3, 4),
            (11, 12), (12, 13), (13, 14),
            (21, 22), (22, 23), (23, 24),
            (100, 200),
        )
        clusters = cluster(dataset, 4, 0.01, 100, FixedShuffle([2, 5, 8, 9]))
        assert_same_groups(
            self,
            clusters,
            [
                [(1, 2), (2, 3), (3, 4)],
                [(11, 12), (12, 13), (13, 14)],
                [(21, 22), (22, 23), (23, 24)],
                [(100, 200)],
            ],
        )

    def test_cluster_numbers_seeded_generators(self):
        dataset = numbers(1, 2, 3, 11, 12, 13, 21, 22, 23, 100)
        for source in (np.random.default_rng(0), random.Random(0)):
            clusters = cluster(dataset, 4, 0.01, 100, source)
            assert_same_groups(
                self,
                clusters,
                [[1, 2, 3], [11, 12, 13], [21, 22, 23], [100]],
            )

    def test_cluster_plain_sequences(self):
        dataset = [[0.0, 0.0], [0.1, 0.1], [0.2, 0.0], [50.0, 50.0], [50.1, 49.9]]
        clusters = cluster(dataset, 2, 1e-6, 50, np.random.default_rng(11))
        assert_same_groups(
            self,
            clusters,
            [[[0.0, 0.0], [0.1, 0.1], [0.2, 0.0]], [[50.0, 50.0], [50.1, 49.9]]],
        )

    def test_two_separated_groups_any_seed(self):
        dataset = numbers(0, 1, 2, 100, 101, 102)
        for seed in range(10):
            clusters = cluster(dataset, 2, 0.01, 100, np.random.default_rng(seed))
            assert_same_groups(self, clusters, [[0, 1, 2], [100, 101, 102]])


class ClusterPropertyTest(unittest.TestCase):
    def setUp(self):
        self.dataset = numbers(1, 2, 3, 11, 12, 13, 21, 22, 23, 100)

    def test_partition_of_dataset(self):
        for seed in range(20):
            for k in (2, 3, 4, 7):
                clusters = cluster(self.dataset, k, 0.01, 100, np.random.default_rng(seed))
                self.assertEqual(len(clusters), k)
                flattened = [obs for group in clusters for obs in group]
                self.assertEqual(sorted(flattened), sorted(self.dataset))

    def test_order_preserved_within_clusters(self):
        position = {value: index for index, value in enumerate(self.dataset)}
        clusters = cluster(self.dataset, 3, 0.01, 100, np.random.default_rng(5))
        for group in clusters:
            indices = [position[obs] for obs in group]
            self.assertEqual(indices, sorted(indices))

    def test_determinism(self):
        first = cluster(self.dataset, 4, 0.01, 100, np.random.default_rng(42))
        second = cluster(self.dataset, 4, 0.01, 100, np.random.default_rng(42))
        self.assertEqual(first, second)

    def test_observations_not_modified(self):
        class Point(object):
            def __init__(self, *values):
                self.values = list(values)

            def coordinates(self):
                return self.values

        dataset = [Point(0.0, 0.0), Point(1.0, 0.0), Point(10.0, 10.0), Point(11.0, 10.0)]
        before = [list(p.values) for p in dataset]
        clusters = cluster(dataset, 2, 1e-6, 100, FixedShuffle([0, 1]))
        self.assertEqual([p.values for p in dataset], before)
        self.assertEqual(len(clusters), 2)


class DegenerateClusterCountTest(unittest.TestCase):
    def test_k_equals_size_gives_singletons(self):
        dataset = numbers(5, 3, 9, 1, 7)
        for delta, iterations in ((0.01, 1), (1e6, 1000), (1e-12, 3)):
            clusters = cluster(dataset, 5, delta, iterations, np.random.default_rng(0))
            self.assertEqual(clusters, [[5], [3], [9], [1], [7]])

    def test_k_equals_size_ignores_random_source(self):
        source = mock.Mock()
        clusters = cluster(numbers(4, 4, 2), 3, 0.5, 2, source)
        self.assertEqual(clusters, [[4], [4], [2]])
        source.shuffle.assert_not_called()

    def test_k_one_gives_whole_dataset(self):
        dataset = coordinates((9, 9), (0, 0), (5, 1))
        source = mock.Mock()
        clusters = cluster(dataset, 1, 0.01, 10, source)
        self.assertEqual(clusters, [dataset])
        source.shuffle.assert_not_called()

    def test_single_observation(self):
        self.assertEqual(cluster(numbers(42), 1, 0.01, 10, FixedShuffle([])), [[42]])


class LloydIterationTest(unittest.TestCase):
    def test_ties_go_to_first_center(self):
        dataset = numbers(0, 1, 2)
        self.assertEqual(cluster(dataset, 2, 1e-9, 10, FixedShuffle([0, 2])), [[0, 1], [2]])
        self.assertEqual(cluster(dataset, 2, 1e-9, 10, FixedShuffle([2, 0])), [[1, 2], [0]])

    def test_iteration_budget_exhausted(self):
        points = np.array([[0.0], [1.0], [10.0], [11.0]])
        centers = np.array([[0.0], [1.0]])
        result = run_lloyd(points, centers, 0.01, 1)
        self.assertEqual(result.iterations, 1)
        self.assertFalse(result.converged)
        self.assertEqual(list(result.assignment), [0, 1, 1, 1])
        np.testing.assert_allclose(result.centers, [[0.0], [22.0 / 3.0]])

    def test_converges_within_budget(self):
        points = np.array([[0.0], [1.0], [10.0], [11.0]])
        centers = np.array([[0.0], [1.0]])
        result = run_lloyd(points, centers, 0.01, 100)
        self.assertTrue(result.converged)
        self.assertEqual(result.iterations, 3)
        self.assertEqual(list(result.assignment), [0, 0, 1, 1])
        np.testing.assert_allclose(result.centers, [[0.5], [10.5]])
        self.assertEqual(result.movement, 0.0)

    def test_iterations_never_exceed_budget(self):
        rng = np.random.default_rng(8)
        points = rng.normal(size=(40, 2))
        for budget in (1, 2, 5):
            centers = initial_centers(points, 5, np.random.default_rng(budget))
            result = run_lloyd(points, centers, 1e-12, budget)
            self.assertLessEqual(result.iterations, budget)

    def test_initial_centers_not_modified(self):
        points = np.array([[0.0], [1.0], [10.0], [11.0]])
        centers = np.array([[0.0], [1.0]])
        run_lloyd(points, centers, 0.01, 100)
        np.testing.assert_array_equal(centers, [[0.0], [1.0]])

    def test_empty_center_keeps_position(self):
        points = np.array([[0.0], [1.0]])
        updated = update_centers(points, np.array([0, 0]), np.array([[5.0], [100.0]]))
        np.testing.assert_allclose(updated, [[0.5], [100.0]])

    def test_empty_cluster_returned(self):
        clusters = cluster(numbers(5, 5, 5), 2, 0.01, 10, np.random.default_rng(3))
        self.assertEqual(clusters, [[5, 5, 5], []])

    def test_materialize(self):
        self.assertEqual(
            materialize(["a", "b", "c", "d"], [1, 0, 1, 2], 4),
            [["b"], ["a", "c"], ["d"], []],
        )


class InitializationTest(unittest.TestCase):
    def test_seeds_are_distinct(self):
        for seed in range(10):
            seeds = select_seed_indices(20, 7, np.random.default_rng(seed))
            self.assertEqual(len(set(seeds)), 7)
            self.assertTrue(all(0 <= s < 20 for s in seeds))

    def test_seeds_reproducible(self):
        first = select_seed_indices(50, 5, np.random.default_rng(123))
        second = select_seed_indices(50, 5, np.random.default_rng(123))
        self.assertEqual(first, second)

    def test_centers_are_copies(self):
        points = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        centers = initial_centers(points, 2, FixedShuffle([2, 0]))
        np.testing.assert_array_equal(centers, [[5.0, 6.0], [1.0, 2.0]])
        centers[0, 0] = -1.0
        self.assertEqual(points[2, 0], 5.0)


if __name__ == "__main__":
    unittest.main()
