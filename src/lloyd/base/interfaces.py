"""
Core interfaces for the stages of a Lloyd clustering run.

Each stage of the pipeline (initialize, measure, assign, update, check for
convergence, score) is an abstract base class so the loop in
``BaseClusteringAlgorithm`` can stay agnostic of the concrete strategy.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple, Dict, Any
import torch
from torch import Tensor


class DistanceMetric(ABC):
    """Abstract base class for point-to-centroid distance computations."""

    @abstractmethod
    def compute(self, points: Tensor, centroid: Tensor, **kwargs) -> Tensor:
        """Compute distances from every point to a single centroid.

        Args:
            points: (n, d) tensor of points
            centroid: (d,) centroid vector

        Returns:
            (n,) tensor of distances
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for centroid initialization strategies."""

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Produce initial centroids.

        Args:
            points: (n, d) tensor of data points
            n_clusters: Number of centroids to produce
            generator: Optional RNG used for sampling

        Returns:
            (n_clusters, d) tensor of centroids
        """
        pass

    @property
    def is_deterministic(self) -> bool:
        """Whether repeated calls return the same centroids."""
        return False


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Tensor, centroids: Tensor,
                            **kwargs) -> Tensor:
        """Compute cluster assignments for points.

        Args:
            points: (n, d) tensor of data points
            centroids: (K, d) tensor of centroids

        Returns:
            (n,) long tensor of cluster indices
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for centroid update strategies."""

    @abstractmethod
    def update(self, points: Tensor, labels: Tensor, centroids: Tensor,
               **kwargs) -> Tuple[Tensor, float]:
        """Recompute centroids from the current assignment.

        Args:
            points: (n, d) tensor of all data points
            labels: (n,) cluster index of every point
            centroids: (K, d) centroids before the update

        Returns:
            new_centroids: (K, d) tensor
            shift: Total centroid movement caused by the update
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []


class ClusteringObjective(ABC):
    """Abstract base class for clustering objective functions."""

    @abstractmethod
    def compute(self, points: Tensor, centroids: Tensor,
                labels: Tensor) -> float:
        """Compute objective function value.

        Args:
            points: (n, d) tensor of data points
            centroids: (K, d) tensor of centroids
            labels: (n,) cluster assignments

        Returns:
            Scalar objective value
        """
        pass

    @property
    @abstractmethod
    def minimize(self) -> bool:
        """Whether to minimize (True) or maximize (False) this objective."""
