"""
Random initialization strategy for clustering algorithms.

Selects random points from the dataset as initial centroids.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..utils.validation import check_n_clusters


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Selects n_clusters distinct point indices (without replacement) and uses
    copies of those points as the initial centroids.
    """

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Initialize centroids with random points.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            generator: Optional RNG for reproducible sampling

        Returns:
            (n_clusters, d) tensor of centroids

        Raises:
            DimensionMismatch: If n_clusters exceeds the number of points
        """
        n_points = points.shape[0]
        check_n_clusters(n_clusters, n_points)

        # randperm draws on CPU so a CPU generator works for any device
        indices = torch.randperm(n_points, generator=generator)[:n_clusters]

        return points[indices.to(points.device)].clone()
