"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest centroid under squared Euclidean distance.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, DistanceMetric
from ..distances.euclidean import EuclideanDistance


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest centroid.

    Each point is assigned to exactly one cluster. Centroids are scanned in
    index order and a centroid only displaces the current best when it is
    strictly closer, so ties go to the lowest index.
    """

    def __init__(self, metric: Optional[DistanceMetric] = None):
        """
        Args:
            metric: Distance metric (squared Euclidean by default)
        """
        super().__init__()
        self.metric = metric if metric is not None else EuclideanDistance()

    def compute_assignments(self, points: Tensor, centroids: Tensor,
                            **kwargs) -> Tensor:
        """Assign each point to nearest centroid.

        Args:
            points: (n, d) data points
            centroids: (K, d) centroids

        Returns:
            (n,) long tensor of cluster indices
        """
        labels, _ = self.assign_with_distances(points, centroids)
        return labels

    def assign_with_distances(self, points: Tensor, centroids: Tensor):
        """Assign points and also return the distance to the chosen centroid.

        Returns:
            labels: (n,) cluster indices
            best_distances: (n,) squared distance of each point to its centroid
        """
        # (K, n), one distance evaluation per centroid
        distances = self.metric.pairwise(points, centroids)

        # Fold over centroids; (best index, best distance) start fresh per point
        best_labels = torch.zeros(points.shape[0], dtype=torch.long, device=points.device)
        best_distances = distances[0].clone()
        for k in range(1, distances.shape[0]):
            closer = distances[k] < best_distances
            best_labels[closer] = k
            best_distances = torch.where(closer, distances[k], best_distances)

        return best_labels, best_distances

