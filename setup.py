#!/usr/bin/env python
# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Setup configuration for the lloyd-kmeans package.
"""

from setuptools import setup, find_packages
import os

# Read version from package
with open(os.path.join("lloydkmeans", "__init__.py")) as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break

# Read long description from README
long_description = """
# Lloyd K-Means

K-means clustering of arbitrary point-like data with Lloyd's algorithm.

## Features

- **Any observation type**: cluster objects exposing `coordinates()`, or plain
  numeric sequences and numpy rows
- **Injected randomness**: seeds are drawn through any random source with a
  `shuffle` method (`numpy.random.Generator`, `random.Random`), so runs are
  reproducible under a fixed seed
- **Typed validation errors**: malformed input is rejected before any work
- **Estimator/Model API**: `KMeans` params with getters and setters, a fitted
  `KMeansModel` with `predict`, `computeCost` and a training summary

## Installation

```bash
pip install lloyd-kmeans
```

## Quick Start

```python
import numpy as np
from lloydkmeans.clusterer import cluster, KMeans

data = [[0.0, 0.0], [1.0, 1.0], [9.0, 8.0], [8.0, 9.0]]

# Functional form: returns k lists of observations
groups = cluster(data, 2, 1e-4, 20, np.random.default_rng(42))

# Estimator form
model = KMeans(k=2, maxIter=20, seed=42).fit(data)
print(model.clusterCenters())
print(model.summary.convergenceReport())
```
"""

setup(
    name="lloyd-kmeans",
    version=version,
    description="K-means clustering of arbitrary point-like data with Lloyd's algorithm",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="MassiveDataScience",
    author_email="support@massivedatascience.com",
    license="Apache License 2.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.8",
    install_requires=[
        "pyspark>=3.4.0",
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries",
    ],
    keywords="clustering kmeans lloyd machine-learning",
)
