"""
Mean update strategy for centroid-based clustering.
"""

from typing import Optional, Tuple
import warnings
import torch
from torch import Tensor

from ..base.interfaces import ParameterUpdater
from ..base.data_structures import EMPTY_CLUSTER_POLICIES
from ..exceptions import EmptyCluster


class MeanUpdater(ParameterUpdater):
    """Recomputes each centroid as the mean of its assigned points.

    Empty clusters have no mean, so they follow an explicit policy:

    - ``'retain'``: keep the previous centroid
    - ``'reseed'``: move the centroid to a uniformly random data point
    - ``'raise'``: raise EmptyCluster
    """

    def __init__(self, empty_cluster: str = 'retain', verbose: int = 0):
        if empty_cluster not in EMPTY_CLUSTER_POLICIES:
            raise ValueError(f"empty_cluster must be one of {EMPTY_CLUSTER_POLICIES}, "
                             f"got '{empty_cluster}'")
        self.empty_cluster = empty_cluster
        self.verbose = verbose

    def update(self, points: Tensor, labels: Tensor, centroids: Tensor,
               generator: Optional[torch.Generator] = None,
               iteration: Optional[int] = None,
               **kwargs) -> Tuple[Tensor, float]:
        """Compute new centroids and the total centroid shift.

        Args:
            points: (n, d) data points
            labels: (n,) hard assignments
            centroids: (K, d) current centroids (left untouched)
            generator: RNG used by the 'reseed' policy
            iteration: Current iteration, for error messages

        Returns:
            new_centroids: (K, d) tensor
            shift: sum of |previous - new| over every coordinate of every
                cluster
        """
        n_clusters = centroids.shape[0]
        new_centroids = centroids.clone()

        for k in range(n_clusters):
            members = points[labels == k]
            if members.shape[0] > 0:
                new_centroids[k] = members.mean(dim=0)
                continue

            if self.empty_cluster == 'raise':
                raise EmptyCluster(k, iteration)
            elif self.empty_cluster == 'reseed':
                idx = torch.randint(points.shape[0], (1,), generator=generator).item()
                new_centroids[k] = points[idx]
                if self.verbose:
                    warnings.warn(f"Cluster {k} was empty; reseeded from point {idx}")
            elif self.verbose:
                warnings.warn(f"Cluster {k} was empty; keeping previous centroid")

        # Compared against the previous centroids of every cluster, not just the last
        shift = torch.sum(torch.abs(centroids - new_centroids)).item()

        return new_centroids, shift
