"""
Initialization from explicit starting centroids.

Useful for warm starts or when you have good initial guesses.
"""

from typing import Optional, Union
import numpy as np
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..exceptions import DimensionMismatch
from ..utils.validation import validate_data


class FromPreviousInit(InitializationStrategy):
    """Initialize from previous centroids or custom starting points."""

    def __init__(self, initial_centroids: Union[Tensor, np.ndarray, list]):
        """
        Args:
            initial_centroids: (n_clusters, d) starting centroids
        """
        self.initial_centroids = validate_data(initial_centroids)

    @property
    def is_deterministic(self) -> bool:
        return True

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Return a copy of the stored centroids on the data's device.

        Raises:
            DimensionMismatch: If the stored centroids do not have shape
                (n_clusters, d)
        """
        centroids = self.initial_centroids.to(device=points.device, dtype=points.dtype)

        if centroids.shape[0] != n_clusters:
            raise DimensionMismatch(f"Initial centroids has {centroids.shape[0]} clusters, "
                                    f"but cluster_count={n_clusters}")
        if centroids.shape[1] != points.shape[1]:
            raise DimensionMismatch(f"Initial centroids has dimension {centroids.shape[1]}, "
                                    f"but data has dimension {points.shape[1]}")

        return centroids.clone()
