# tests/utils.py
"""
Small, reusable helpers used across the Lloyd test suite.

Functions:
- match_centroids(found, expected): pair found centroids with expected ones
  regardless of cluster order; returns (max abs error, perm).
- perm_invariant_accuracy(y_pred, split_index): best accuracy over label swap for 2-way synthetic splits.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import json
import itertools
import time
from contextlib import contextmanager
from typing import Any, Dict, Tuple

import numpy as np
import torch


def _to_numpy_2d(x: Any) -> np.ndarray:
    """Convert a 2D array or tensor to numpy array."""
    if isinstance(x, torch.Tensor):
        x = x.detach().cpu().numpy()
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 2:
        raise ValueError(f"Expected 2D array, got shape {x.shape}")
    return x


def match_centroids(found: Any, expected: Any) -> Tuple[float, Tuple[int, ...]]:
    """
    Best pairing of found centroids with expected centroids.

    Returns
    -------
    (max_abs_error, perm)
      max_abs_error: largest coordinate error under the best pairing
      perm: tuple p such that expected[p[i]] is matched to found[i]

    Brute force over permutations; tests keep K small.
    """
    F = _to_numpy_2d(found)
    E = _to_numpy_2d(expected)
    if F.shape != E.shape:
        raise ValueError(f"Shape mismatch: {F.shape} vs {E.shape}")
    k = F.shape[0]

    best_err = np.inf
    best_perm: Tuple[int, ...] = tuple(range(k))
    for perm in itertools.permutations(range(k)):
        err = float(np.max(np.abs(F - E[list(perm)])))
        if err < best_err:
            best_err = err
            best_perm = perm
    return best_err, best_perm


def perm_invariant_accuracy(y_pred: Any, split_index: int) -> float:
    """
    Best accuracy over label swaps for 2-way synthetic datasets where the
    first `split_index` points belong to class 0 and the rest to class 1.
    """
    if isinstance(y_pred, torch.Tensor):
        y_pred = y_pred.detach().cpu().numpy()
    y_pred = np.asarray(y_pred)
    n = y_pred.size

    first = y_pred[:split_index]
    second = y_pred[split_index:]

    acc_a = (np.sum(first == 0) + np.sum(second == 1)) / max(1, n)
    acc_b = (np.sum(first == 1) + np.sum(second == 0)) / max(1, n)

    return float(max(acc_a, acc_b))


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] fit {"n":400,"d":2,"K":2} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """
    Print timing in a compact, machine-readable single line.
    """
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"), default=str)
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
