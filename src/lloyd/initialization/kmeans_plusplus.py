"""
K-means++ initialization strategy.

Selects initial centroids using the K-means++ algorithm, which chooses
centroids that are far apart to improve convergence speed and quality.
"""

from typing import Optional
import math
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..distances.euclidean import EuclideanDistance
from ..utils.validation import check_n_clusters


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization for better starting positions.

    Algorithm:
    1. Choose first centroid uniformly at random
    2. For each remaining centroid:
       - Compute distance from each point to nearest existing centroid
       - Sample candidates with probability proportional to squared distance
       - Keep the candidate that most reduces the total squared distance

    Every centroid comes from a distinct point index.
    """

    def __init__(self, n_local_trials: Optional[int] = None):
        """
        Args:
            n_local_trials: Number of candidates to try for each centroid.
                           If None, uses 2 + log(k) as in sklearn
        """
        self.n_local_trials = n_local_trials
        self.metric = EuclideanDistance()

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Initialize centroids using K-means++.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            generator: Optional RNG for reproducible sampling

        Returns:
            (n_clusters, d) tensor of centroids
        """
        n_points = points.shape[0]
        check_n_clusters(n_clusters, n_points)

        if self.n_local_trials is None:
            n_local_trials = 2 + int(math.log(n_clusters))
        else:
            n_local_trials = self.n_local_trials

        # Sampling happens on CPU so a CPU generator works for any device
        first_idx = torch.randint(n_points, (1,), generator=generator).item()
        chosen = [first_idx]
        distances = self.metric.compute(points, points[first_idx]).cpu().double()

        for _ in range(1, n_clusters):
            available = torch.ones(n_points, dtype=torch.bool)
            available[chosen] = False
            weights = distances * available

            if weights.sum() <= 0:
                # Remaining points coincide with chosen ones; fall back to uniform
                weights = available.double()

            candidates = torch.multinomial(weights, n_local_trials,
                                           replacement=True, generator=generator)

            best_potential = math.inf
            best_candidate = None
            best_distances = None
            for idx in candidates.tolist():
                candidate_distances = self.metric.compute(points, points[idx]).cpu().double()
                new_distances = torch.minimum(distances, candidate_distances)
                potential = new_distances.sum().item()
                if potential < best_potential:
                    best_potential = potential
                    best_candidate = idx
                    best_distances = new_distances

            chosen.append(best_candidate)
            distances = best_distances

        return points[chosen].clone()
