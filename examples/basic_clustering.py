#!/usr/bin/env python
# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Basic clustering example using KMeans on two-dimensional points.
"""

import logging

import numpy as np

from lloydkmeans.clusterer import KMeans, cluster


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Create sample data - two well-separated clusters
    data = [
        [0.0, 0.0],
        [1.0, 1.0],
        [0.5, 0.5],
        [9.0, 8.0],
        [8.0, 9.0],
        [8.5, 8.5],
    ]

    print("Input data:")
    for point in data:
        print(f"  {point}")

    # Functional form
    groups = cluster(data, 2, 1e-4, 20, np.random.default_rng(42))
    print("\nClusters:")
    for i, group in enumerate(groups):
        print(f"  Cluster {i}: {group}")

    # Create and train clustering model
    kmeans = KMeans(k=2, maxIter=20, seed=42)

    print("\nTraining model...")
    model = kmeans.fit(data)

    # Display cluster centers
    print(f"\nNumber of clusters: {model.numClusters}")
    print(f"Number of features: {model.numFeatures}")
    print("\nCluster centers:")
    for i, center in enumerate(model.clusterCenters()):
        print(f"  Cluster {i}: {center}")

    # Compute clustering cost (WCSS)
    cost = model.computeCost(data)
    print(f"\nWithin-cluster sum of squares: {cost:.4f}")

    # Get summary statistics
    print()
    print(model.summary.convergenceReport())

    # Predict cluster for a new point
    new_point = [0.2, 0.3]
    print(f"\nNew point {new_point} assigned to cluster: {model.predict(new_point)}")


if __name__ == "__main__":
    main()
