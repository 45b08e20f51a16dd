# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Lloyd K-Means
=============

K-means clustering of arbitrary point-like data with Lloyd's algorithm.
"""

__version__ = "0.1.0"
__all__ = ["clusterer"]
