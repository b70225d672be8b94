# tests/data_gen.py
"""
Tiny synthetic-data generators reused across the Lloyd test suite.

    >>> X, y, C = make_blobs(n_per=50, centers=[[0, 0], [5, 5]], seed=0)
    >>> X.shape, y.shape, C.shape
    ((100, 2), (100,), (2, 2))
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple
import numpy as np

NDArray = np.ndarray


def make_four_points() -> Tuple[list, NDArray]:
    """
    Two pairs of points far apart on the x axis.

    Returns
    -------
    X : list of 4 points [[0,0],[0,1],[10,0],[10,1]]
    C : (2, 2) expected centroids [[0, 0.5], [10, 0.5]]
    """
    X = [[0.0, 0.0], [0.0, 1.0], [10.0, 0.0], [10.0, 1.0]]
    C = np.asarray([[0.0, 0.5], [10.0, 0.5]], dtype=np.float32)
    return X, C


def make_blobs(
    n_per: int = 100,
    centers: Sequence[Sequence[float]] = ((0.0, 0.0), (3.0, 3.0)),
    scale: float = 0.3,
    seed: Optional[int] = None,
) -> Tuple[NDArray, NDArray, NDArray]:
    """
    Isotropic Gaussian blobs, one per center.

    Parameters
    ----------
    n_per : int
        Number of points per blob.
    centers : sequence of (d,) vectors
        Blob means.
    scale : float
        Standard deviation of every blob.
    seed : int or None
        RNG seed for reproducibility.

    Returns
    -------
    X : (K*n_per, d) float32, blobs stacked in center order
    y : (K*n_per,) int64 ground-truth labels
    C : (K, d) float32 blob means
    """
    rng = np.random.default_rng(seed)
    C = np.asarray(centers, dtype=np.float32)
    K, d = C.shape

    X = np.vstack([
        rng.normal(loc=C[k], scale=scale, size=(n_per, d))
        for k in range(K)
    ]).astype(np.float32)
    y = np.repeat(np.arange(K, dtype=np.int64), n_per)

    return X, y, C
