"""Clustering algorithms."""

from .kmeans import KMeans, KMeansObjective

__all__ = [
    'KMeans',
    'KMeansObjective'
]
