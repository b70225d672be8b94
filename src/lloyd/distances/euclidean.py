"""
Squared Euclidean distance for centroid-based clustering.

The only metric the engine uses: the root is never taken since it does not
change which centroid is nearest.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric
from ..exceptions import DimensionMismatch


class EuclideanDistance(DistanceMetric):
    """Squared Euclidean distance metric.

    Computes ||x - μ||² where μ is the cluster centroid.
    """

    def compute(self, points: Tensor, centroid: Tensor, **kwargs) -> Tensor:
        """Compute squared distances from points to a centroid.

        Args:
            points: (n, d) tensor of points
            centroid: (d,) centroid vector

        Returns:
            (n,) tensor where entry i is sum_d (centroid_d - points[i, d])²
        """
        if points.dim() != 2:
            raise DimensionMismatch(f"Expected 2D tensor of points, got {points.dim()}D")
        if centroid.shape != (points.shape[1],):
            raise DimensionMismatch(f"Centroid has shape {tuple(centroid.shape)}, "
                                    f"expected ({points.shape[1]},)")

        diff = centroid.unsqueeze(0) - points
        return torch.sum(diff * diff, dim=1)

    def pairwise(self, points: Tensor, centroids: Tensor) -> Tensor:
        """Distances from every point to every centroid.

        Args:
            points: (n, d) tensor of points
            centroids: (K, d) tensor of centroids

        Returns:
            (K, n) tensor; row k holds ``compute(points, centroids[k])``
        """
        return torch.stack([self.compute(points, c) for c in centroids])
