"""
Core data structures for Lloyd clustering runs.

This module provides the immutable run parameters, the per-run working
state, the cluster partition handed to progress callbacks, and the records
exchanged with the caller.
"""

from collections.abc import Mapping
from typing import Optional, Callable, Dict, Any, Iterator, Union
import math
import torch
from torch import Tensor
from dataclasses import dataclass
import numpy as np

from ..exceptions import InvalidParam, DimensionMismatch
from ..utils.validation import check_positive_int, check_random_state, validate_init_params


EMPTY_CLUSTER_POLICIES = ('retain', 'reseed', 'raise')


@dataclass(frozen=True)
class KMeansParams:
    """Run parameters, fixed at construction.

    Required fields default to None only so that a missing value surfaces as
    InvalidParam rather than a TypeError from the constructor.
    """

    cluster_count: Optional[int] = None
    random_init_count: Optional[int] = None
    max_iterations: Optional[int] = None
    notify_count: Optional[int] = None
    iteration_callback: Optional[Callable[['IterationRecord'], Any]] = None

    init: Union[str, Tensor, np.ndarray, list] = 'random'
    tol: float = 0.0
    empty_cluster: str = 'retain'
    random_state: Optional[Union[int, torch.Generator]] = None
    verbose: int = 0

    def __post_init__(self):
        for name in ('cluster_count', 'random_init_count', 'max_iterations', 'notify_count'):
            # frozen dataclass: normalise numpy integers through object.__setattr__
            object.__setattr__(self, name, check_positive_int(name, getattr(self, name)))

        if self.iteration_callback is None:
            raise InvalidParam("Required parameter 'iteration_callback' is missing")
        if not callable(self.iteration_callback):
            raise InvalidParam("'iteration_callback' must be callable")

        object.__setattr__(self, 'init', validate_init_params(self.init, self.cluster_count))

        if isinstance(self.tol, bool) or not isinstance(self.tol, (int, float)) \
                or math.isnan(self.tol) or self.tol < 0:
            raise InvalidParam(f"tol must be a non-negative number, got {self.tol!r}")
        if self.empty_cluster not in EMPTY_CLUSTER_POLICIES:
            raise InvalidParam(f"empty_cluster must be one of {EMPTY_CLUSTER_POLICIES}, "
                               f"got '{self.empty_cluster}'")
        if isinstance(self.verbose, bool) or not isinstance(self.verbose, int) or self.verbose < 0:
            raise InvalidParam(f"verbose must be a non-negative integer, got {self.verbose!r}")
        check_random_state(self.random_state)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'KMeansParams':
        """Build parameters from a configuration mapping.

        Accepts ``random_Init_Count`` as an alias of ``random_init_count``.
        Unknown keys raise InvalidParam.
        """
        config = dict(config)
        if 'random_Init_Count' in config:
            if 'random_init_count' in config:
                raise InvalidParam("Both 'random_Init_Count' and 'random_init_count' given")
            config['random_init_count'] = config.pop('random_Init_Count')

        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(config) - known)
        if unknown:
            raise InvalidParam(f"Unknown configuration keys: {unknown}")
        return cls(**config)

    def as_dict(self) -> Dict[str, Any]:
        # asdict would deep-copy the callback and generator
        return {name: getattr(self, name) for name in self.__dataclass_fields__}


class ClusterPartition(Mapping):
    """Partition of a dataset into clusters.

    Behaves as a read-only mapping from cluster index to the (n_k, d) tensor
    of member points, in dataset order. Every cluster index in
    ``range(n_clusters)`` is present; empty clusters map to a (0, d) tensor.
    """

    def __init__(self, points: Tensor, labels: Tensor, n_clusters: int):
        """
        Args:
            points: (n, d) data the labels refer to
            labels: (n,) hard assignments
            n_clusters: Number of clusters K
        """
        if labels.dim() != 1 or labels.shape[0] != points.shape[0]:
            raise DimensionMismatch(f"Expected {points.shape[0]} labels, got shape {tuple(labels.shape)}")
        if labels.numel() > 0 and (labels.min() < 0 or labels.max() >= n_clusters):
            raise ValueError(f"Labels must lie in [0, {n_clusters}), got "
                             f"[{int(labels.min())}, {int(labels.max())}]")
        self.n_clusters = n_clusters
        # own copy, so callbacks cannot reach the run's labels
        self.labels = labels.to(torch.long, copy=True)
        self._members = {
            k: points[self.labels == k]
            for k in range(n_clusters)
        }

    def __getitem__(self, cluster_idx: int) -> Tensor:
        return self._members[cluster_idx]

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.n_clusters))

    def __len__(self) -> int:
        return self.n_clusters

    @property
    def n_points(self) -> int:
        """Number of data points."""
        return self.labels.shape[0]

    def get_cluster_indices(self, cluster_idx: int) -> Tensor:
        """Get dataset indices of points assigned to a specific cluster."""
        return torch.where(self.labels == cluster_idx)[0]

    def count_per_cluster(self) -> Tensor:
        """Count points per cluster."""
        return torch.bincount(self.labels, minlength=self.n_clusters)

    def empty_clusters(self) -> list:
        """Indices of clusters with no members."""
        counts = self.count_per_cluster()
        return [k for k in range(self.n_clusters) if counts[k] == 0]

    def __repr__(self) -> str:
        return f"ClusterPartition(n_clusters={self.n_clusters}, sizes={self.count_per_cluster().tolist()})"


@dataclass(frozen=True)
class IterationRecord:
    """Payload passed to the progress callback."""

    iteration: int
    clusters: ClusterPartition
    centroids: Tensor
    clustering_complete: bool


@dataclass(frozen=True)
class ClusteringResult:
    """Outcome of a clustering run.

    Cluster memberships are not part of the result; they are delivered to
    the progress callback and exposed as ``labels_`` on a fitted model.
    """

    iteration: int
    centroids: Tensor
    clustering_complete: bool = True
    converged: bool = False
    centroids_changed: float = math.inf
    inertia: float = math.nan


@dataclass
class RunState:
    """Mutable working state of a single run.

    Created fresh for every run and never shared between runs.
    """

    centroids: Tensor
    generator: Optional[torch.Generator] = None
    labels: Optional[Tensor] = None
    clusters: Optional[ClusterPartition] = None
    iteration: int = 0
    # truthy sentinel so the first iteration always runs
    centroids_changed: float = math.inf
    converged: bool = False

    def record(self, clustering_complete: bool) -> IterationRecord:
        """Snapshot of the state for the progress callback."""
        return IterationRecord(
            iteration=self.iteration,
            clusters=self.clusters,
            centroids=self.centroids.clone(),
            clustering_complete=bool(clustering_complete)
        )
