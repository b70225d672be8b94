"""
Lloyd: K-means clustering with best-of-N random restarts.

This package implements Lloyd's algorithm as a small pipeline of pluggable
stages:
- Centroid initialization (random points, K-means++, or explicit centroids)
- Squared Euclidean distance evaluation
- Nearest-centroid assignment
- Mean update with an explicit empty-cluster policy
- A convergence loop reporting progress through a callback

Example usage:
    >>> import torch
    >>> from lloyd import KMeans
    >>>
    >>> X = torch.randn(1000, 10)
    >>>
    >>> def on_progress(record):
    ...     print(record.iteration, record.clustering_complete)
    >>>
    >>> kmeans = KMeans(random_init_count=5, cluster_count=3,
    ...                 notify_count=10, max_iterations=300,
    ...                 iteration_callback=on_progress)
    >>> result = kmeans.start_clustering(X).result()
    >>> result.centroids.shape
    torch.Size([3, 10])
"""

__version__ = '0.1.0'

from .algorithms.kmeans import KMeans

from .base import (
    KMeansParams,
    ClusterPartition,
    IterationRecord,
    ClusteringResult
)

from .exceptions import (
    ClusteringError,
    InvalidParam,
    DimensionMismatch,
    EmptyCluster
)

__all__ = [
    # Algorithms
    'KMeans',

    # Records
    'KMeansParams',
    'ClusterPartition',
    'IterationRecord',
    'ClusteringResult',

    # Errors
    'ClusteringError',
    'InvalidParam',
    'DimensionMismatch',
    'EmptyCluster',

    # Version
    '__version__'
]
