"""
K-means clustering algorithm.

Lloyd's algorithm with best-of-N random restarts, implemented using the
modular framework.
"""

from typing import Optional, Callable, Dict, Any, Union
import torch
from torch import Tensor

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import ClusteringObjective, ConvergenceCriterion
from ..base.data_structures import KMeansParams, IterationRecord
from ..assignments.hard import HardAssignment
from ..initialization.random import RandomInit
from ..initialization.kmeans_plusplus import KMeansPlusPlusInit
from ..initialization.from_previous import FromPreviousInit
from ..updates.mean import MeanUpdater
from ..utils.convergence import CentroidShift
from ..utils.metrics import inertia


class KMeansObjective(ClusteringObjective):
    """K-means objective: sum of squared distances to centroids."""

    def compute(self, points: Tensor, centroids: Tensor, labels: Tensor) -> float:
        """Compute within-cluster sum of squares."""
        return inertia(points, labels, centroids)

    @property
    def minimize(self) -> bool:
        return True


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Partitions data into ``cluster_count`` clusters by alternating
    nearest-centroid assignment and mean updates until no centroid moves.
    Data given as a float64 tensor or array is clustered in float64; any
    other input is converted to float32.

    Parameters
    ----------
    random_init_count : int
        Number of initial centroid sets drawn; the one with the lowest
        initial inertia seeds the iterations
    cluster_count : int
        Number of clusters
    notify_count : int
        Invoke ``iteration_callback`` every ``notify_count`` iterations
    max_iterations : int
        Hard cap on the number of iterations
    iteration_callback : callable
        Called with an IterationRecord every ``notify_count`` iterations
        and once more when clustering completes
    init : str or array-like, default='random'
        Initialization method:
        - 'random' : distinct random data points
        - 'k-means++' : K-means++ seeding
        - array of shape (cluster_count, n_features) : use as initial centroids
    tol : float, default=0.0
        Largest total centroid shift treated as converged; 0.0 requires the
        centroids to stop moving exactly
    empty_cluster : {'retain', 'reseed', 'raise'}, default='retain'
        What to do with a cluster that receives no points
    random_state : int or torch.Generator, optional
        Seed for reproducible initialization
    device : str or torch.device, optional
        Device for computation; CPU when None
    verbose : int, default=0
        Verbosity level

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (cluster_count, n_features)
        Final centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments from the last assignment step
    inertia_ : float
        Sum of squared distances of samples to their assigned centroid
    n_iter_ : int
        Number of iterations run
    converged_ : bool
        Whether the run stopped because the centroids stopped moving
    result_ : ClusteringResult
        Record returned by the last run

    Raises
    ------
    InvalidParam
        If a required parameter is missing or invalid
    """

    def __init__(self,
                 random_init_count: Optional[int] = None,
                 cluster_count: Optional[int] = None,
                 notify_count: Optional[int] = None,
                 max_iterations: Optional[int] = None,
                 iteration_callback: Optional[Callable[[IterationRecord], Any]] = None,
                 init: Union[str, Tensor, list] = 'random',
                 tol: float = 0.0,
                 empty_cluster: str = 'retain',
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[Union[str, torch.device]] = None,
                 verbose: int = 0):
        """Initialize K-means algorithm."""
        params = KMeansParams(
            cluster_count=cluster_count,
            random_init_count=random_init_count,
            max_iterations=max_iterations,
            notify_count=notify_count,
            iteration_callback=iteration_callback,
            init=init,
            tol=tol,
            empty_cluster=empty_cluster,
            random_state=random_state,
            verbose=verbose
        )
        super().__init__(params, device=device)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'KMeans':
        """Create a model from a configuration mapping.

        Keys are the constructor arguments; ``random_Init_Count`` is accepted
        as an alias of ``random_init_count``.
        """
        config = dict(config)
        device = config.pop('device', None)
        params = KMeansParams.from_config(config)
        return cls(device=device, **params.as_dict())

    def _create_components(self) -> None:
        """Create K-means specific components."""
        self.assignment_strategy = HardAssignment()
        self.update_strategy = MeanUpdater(
            empty_cluster=self.params.empty_cluster,
            verbose=self.params.verbose
        )

        init = self.params.init
        if isinstance(init, str):
            if init == 'k-means++':
                self.initialization_strategy = KMeansPlusPlusInit()
            else:
                self.initialization_strategy = RandomInit()
        else:
            self.initialization_strategy = FromPreviousInit(init)

        self.objective = KMeansObjective()

    def _create_convergence_criterion(self) -> ConvergenceCriterion:
        return CentroidShift(tol=self.params.tol)

    def score(self, X, y=None) -> float:
        """Opposite of the value of X on the K-means objective.

        Parameters
        ----------
        X : Tensor of shape (n_samples, n_features)
            New data
        y : Ignored
            Not used

        Returns
        -------
        score : float
            Negative of sum of squared distances to centroids
        """
        labels = self.predict(X)
        X = self._validate_data(X)
        return -self.objective.compute(X, self.cluster_centers_, labels)
