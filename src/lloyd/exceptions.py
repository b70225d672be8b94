"""
Exceptions raised by the clustering engine.

Each error also derives from the builtin exception generic validation code
would raise, so callers catching ``ValueError`` keep working.
"""

from typing import Optional


class ClusteringError(Exception):
    """Base class for all clustering errors."""


class InvalidParam(ClusteringError, ValueError):
    """Missing or malformed construction parameters."""


class DimensionMismatch(ClusteringError, ValueError):
    """Input shape is inconsistent with the requested clustering.

    Raised for ragged input rows, centroids whose dimension disagrees with
    the data, and cluster counts larger than the number of points.
    """


class EmptyCluster(ClusteringError, RuntimeError):
    """A cluster received no points and the empty-cluster policy is 'raise'."""

    def __init__(self, cluster_idx: int, iteration: Optional[int] = None):
        self.cluster_idx = cluster_idx
        self.iteration = iteration
        where = f" at iteration {iteration}" if iteration is not None else ""
        super().__init__(f"Cluster {cluster_idx} received no points{where}")
