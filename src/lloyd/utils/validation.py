"""
Input validation utilities.

Provides functions for validating data and construction parameters before
clustering, including data type conversion and sanity checks.
"""

from typing import Optional, Union, Any
import torch
from torch import Tensor
import numpy as np

from ..exceptions import InvalidParam, DimensionMismatch


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: torch.dtype = torch.float32,
                  device: Optional[torch.device] = None,
                  ensure_finite: bool = True,
                  ensure_min_samples: int = 1) -> Tensor:
    """Validate and convert input data to a 2D tensor.

    Args:
        X: Input data (tensor, numpy array, or list of equal-length vectors)
        dtype: Target data type
        device: Target device
        ensure_finite: Whether to check for inf/nan
        ensure_min_samples: Minimum number of samples required

    Returns:
        Validated (n, d) tensor. Tensors already matching dtype and device
        are returned as-is, never copied.

    Raises:
        DimensionMismatch: If rows have different lengths or X is not 2D
        ValueError: If X is empty or contains non-finite values
        TypeError: If X has an unsupported type
    """
    if isinstance(X, Tensor):
        if X.dtype != dtype or (device is not None and X.device != device):
            X = X.to(dtype=dtype, device=device)
    elif isinstance(X, np.ndarray):
        if X.dtype == object:
            raise DimensionMismatch("Input rows have inconsistent dimensions")
        X = torch.from_numpy(X).to(dtype=dtype, device=device)
    elif isinstance(X, (list, tuple)):
        _check_row_lengths(X)
        try:
            X = torch.tensor(X, dtype=dtype, device=device)
        except (ValueError, TypeError) as e:
            raise DimensionMismatch(f"Cannot convert input rows to a matrix: {e}") from e
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if X.dim() != 2:
        raise DimensionMismatch(f"Expected 2D array, got {X.dim()}D")

    n_samples, n_features = X.shape
    if n_samples < ensure_min_samples:
        raise ValueError(f"Found {n_samples} samples, but need at least "
                         f"{ensure_min_samples}")
    if n_features < 1:
        raise DimensionMismatch("Points must have at least one feature")

    if ensure_finite:
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def _check_row_lengths(rows) -> None:
    """Raise DimensionMismatch if a list of vectors is ragged."""
    lengths = set()
    for i, row in enumerate(rows):
        try:
            lengths.add(len(row))
        except TypeError:
            raise DimensionMismatch(f"Row {i} is not a vector: {row!r}") from None
    if len(lengths) > 1:
        raise DimensionMismatch(f"Input rows have inconsistent dimensions: {sorted(lengths)}")


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters against the data size.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of samples

    Raises:
        DimensionMismatch: If there are fewer points than clusters
    """
    if n_clusters > n_samples:
        raise DimensionMismatch(f"cluster_count ({n_clusters}) cannot be larger than "
                                f"the number of points ({n_samples})")


def check_positive_int(name: str, value: Any) -> int:
    """Validate a required positive integer parameter.

    Raises:
        InvalidParam: If value is missing, not an integer, or below 1
    """
    if value is None:
        raise InvalidParam(f"Required parameter '{name}' is missing")
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidParam(f"'{name}' must be an integer, got {type(value).__name__}")
    if value < 1:
        raise InvalidParam(f"'{name}' must be at least 1, got {value}")
    return int(value)


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator or None (use the global torch RNG)
    """
    if random_state is None:
        return None
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise InvalidParam(f"random_state must be int or Generator, got {type(random_state).__name__}")


def validate_init_params(init: Union[str, Tensor, np.ndarray, list],
                         n_clusters: int,
                         n_features: Optional[int] = None) -> Union[str, Tensor]:
    """Validate initialization parameters.

    Args:
        init: Initialization method name or explicit initial centroids
        n_clusters: Number of clusters
        n_features: Number of features, if already known

    Returns:
        The method name, or the initial centroids as a tensor

    Raises:
        InvalidParam: If the method name is unknown
        DimensionMismatch: If explicit centroids have the wrong shape
    """
    if isinstance(init, str):
        valid_methods = ['random', 'k-means++']
        if init not in valid_methods:
            raise InvalidParam(f"init must be one of {valid_methods}, got '{init}'")
        return init

    if isinstance(init, (Tensor, np.ndarray, list, tuple)):
        init_tensor = validate_data(init)
        if init_tensor.shape[0] != n_clusters:
            raise DimensionMismatch(f"init has {init_tensor.shape[0]} centroids, "
                                    f"but cluster_count={n_clusters}")
        if n_features is not None and init_tensor.shape[1] != n_features:
            raise DimensionMismatch(f"init centroids have dimension {init_tensor.shape[1]}, "
                                    f"but data has dimension {n_features}")
        return init_tensor

    raise InvalidParam(f"init must be str, array, or list, got {type(init).__name__}")
