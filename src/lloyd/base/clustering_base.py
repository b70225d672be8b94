"""
Base class for Lloyd-style clustering algorithms.

Provides the common algorithmic skeleton: restart selection followed by
alternating assignment and update steps until the centroids stop moving or
the iteration cap is reached.
"""

from abc import abstractmethod
from concurrent.futures import Future
from typing import Optional, Dict, Any, Tuple, Union
import torch
from torch import Tensor
import numpy as np
import time
import warnings

from .interfaces import (
    AssignmentStrategy, ParameterUpdater, InitializationStrategy,
    ConvergenceCriterion, ClusteringObjective
)
from .data_structures import (
    KMeansParams, RunState, ClusteringResult, ClusterPartition
)
from ..exceptions import DimensionMismatch
from ..utils.validation import validate_data, check_n_clusters, check_random_state


class BaseClusteringAlgorithm:
    """Base class implementing the restart-then-iterate framework.

    Subclasses need to specify:
    - Assignment strategy
    - Parameter update strategy
    - Initialization strategy
    - Convergence criterion
    - Objective function

    All working state of a run lives in a ``RunState`` local to that run.
    Results are published on the instance only once the run completes.
    """

    def __init__(self,
                 params: KMeansParams,
                 device: Optional[Union[str, torch.device]] = None):
        """
        Args:
            params: Validated run parameters
            device: Torch device (None for CPU)
        """
        self.params = params
        self.device = torch.device(device) if device is not None else torch.device('cpu')

        # These will be set by subclasses
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.objective: Optional[ClusteringObjective] = None
        self._create_components()

        # Fitted state
        self.fitted_ = False
        self.n_iter_ = 0
        self.history_ = []

    @property
    def n_clusters(self) -> int:
        return self.params.cluster_count

    @property
    def verbose(self) -> int:
        return self.params.verbose

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.update_strategy
        - self.initialization_strategy
        - self.objective
        """
        pass

    @abstractmethod
    def _create_convergence_criterion(self) -> ConvergenceCriterion:
        """Create a fresh convergence criterion for one run."""
        pass

    def fit(self, X, y=None) -> 'BaseClusteringAlgorithm':
        """Run the clustering and publish the fitted attributes.

        Args:
            X: (n, d) data, as a tensor, numpy array or list of vectors
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        result, state, history = self._run(X)

        self.result_ = result
        self.cluster_centers_ = state.centroids
        self.labels_ = state.labels
        self.inertia_ = result.inertia
        self.n_iter_ = state.iteration
        self.converged_ = state.converged
        self.history_ = history
        self.fitted_ = True
        return self

    def start_clustering(self, X) -> 'Future[ClusteringResult]':
        """Run the clustering and report completion through a future.

        The computation runs synchronously before this method returns; the
        returned future is already resolved. Failures during the run,
        including exceptions raised by the iteration callback, reject the
        future instead of propagating from this call.

        Args:
            X: (n, d) data, as a tensor, numpy array or list of vectors

        Returns:
            Future resolved with the ClusteringResult
        """
        future = Future()
        try:
            self.fit(X)
        except Exception as e:
            future.set_exception(e)
        else:
            future.set_result(self.result_)
        return future

    def fit_predict(self, X, y=None) -> Tensor:
        """Fit and return cluster assignments.

        Returns:
            (n,) tensor of cluster assignments
        """
        return self.fit(X).labels_

    def predict(self, X) -> Tensor:
        """Assign new data to the fitted centroids.

        Args:
            X: (n, d) data

        Returns:
            (n,) tensor of cluster assignments
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        X = self._validate_data(X).to(self.cluster_centers_.dtype)
        if X.shape[1] != self.cluster_centers_.shape[1]:
            raise DimensionMismatch(f"Model was fitted on dimension {self.cluster_centers_.shape[1]}, "
                                    f"got {X.shape[1]}")
        return self.assignment_strategy.compute_assignments(X, self.cluster_centers_)

    def _run(self, X) -> Tuple[ClusteringResult, RunState, list]:
        """Internal run implementing restarts and the alternating loop."""
        params = self.params
        X = self._validate_data(X)
        check_n_clusters(self.n_clusters, X.shape[0])

        generator = check_random_state(params.random_state)
        criterion = self._create_convergence_criterion()

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters...")

        start_time = time.time()
        state = RunState(
            centroids=self._select_initial_centroids(X, generator),
            generator=generator
        )

        while state.iteration < params.max_iterations and not state.converged:
            iter_start_time = time.time()
            state.iteration += 1

            # Assignment step
            state.labels = self.assignment_strategy.compute_assignments(X, state.centroids)
            state.clusters = ClusterPartition(X, state.labels, self.n_clusters)

            # Update step
            state.centroids, state.centroids_changed = self.update_strategy.update(
                X, state.labels, state.centroids,
                generator=generator,
                iteration=state.iteration
            )

            state.converged = criterion.check({
                'iteration': state.iteration,
                'centroids_changed': state.centroids_changed
            })

            # Logging
            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and state.iteration % 10 == 0):
                print(f"Iteration {state.iteration:3d}: centroid shift = "
                      f"{state.centroids_changed:.6f} ({iter_time:.3f}s)")

            if state.iteration % params.notify_count == 0:
                self._notify(state, clustering_complete=False)

        total_time = time.time() - start_time

        if self.verbose:
            if state.converged:
                print(f"Converged at iteration {state.iteration}")
            else:
                warnings.warn(f"Failed to converge after {params.max_iterations} iterations")
            print(f"Total fitting time: {total_time:.3f}s")

        self._notify(state, clustering_complete=True)

        result = ClusteringResult(
            iteration=state.iteration,
            centroids=state.centroids.clone(),
            clustering_complete=True,
            converged=state.converged,
            centroids_changed=state.centroids_changed,
            inertia=self.objective.compute(X, state.centroids, state.labels)
        )
        return result, state, criterion.history

    def _select_initial_centroids(self, X: Tensor,
                                  generator: Optional[torch.Generator]) -> Tensor:
        """Draw restart candidates and keep the one with the best objective.

        Each candidate is scored by the objective of the assignment it
        induces. Ties keep the earliest candidate.
        """
        if self.initialization_strategy.is_deterministic:
            n_candidates = 1
        else:
            n_candidates = self.params.random_init_count

        best_centroids = None
        best_score = None
        for restart in range(n_candidates):
            candidate = self.initialization_strategy.initialize(
                X, self.n_clusters, generator=generator
            )
            labels = self.assignment_strategy.compute_assignments(X, candidate)
            score = self.objective.compute(X, candidate, labels)

            if self.verbose >= 2:
                print(f"Restart {restart}: objective = {score:.6f}")

            if best_score is None or self._is_better(score, best_score):
                best_centroids = candidate
                best_score = score

        if self.verbose and n_candidates > 1:
            print(f"Best of {n_candidates} restarts: objective = {best_score:.6f}")

        return best_centroids

    def _is_better(self, score: float, best_score: float) -> bool:
        if self.objective.minimize:
            return score < best_score
        return score > best_score

    def _notify(self, state: RunState, clustering_complete: bool) -> None:
        """Pass a snapshot of the run to the progress callback."""
        self.params.iteration_callback(state.record(clustering_complete))

    def _validate_data(self, X) -> Tensor:
        """Validate and prepare input data.

        Double-precision tensors and arrays stay float64; everything else
        becomes float32.
        """
        if isinstance(X, Tensor):
            double = X.dtype == torch.float64
        elif isinstance(X, np.ndarray):
            double = X.dtype == np.float64
        else:
            double = False
        dtype = torch.float64 if double else torch.float32
        return validate_data(X, dtype=dtype, device=self.device)

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        params = self.params.as_dict()
        params['device'] = self.device
        return params
