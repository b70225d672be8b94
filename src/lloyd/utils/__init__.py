"""Utility functions for Lloyd clustering."""

from .convergence import CentroidShift

from .metrics import (
    inertia
)

from .validation import (
    validate_data,
    check_n_clusters,
    check_positive_int,
    check_random_state,
    validate_init_params
)

__all__ = [
    # Convergence criteria
    'CentroidShift',

    # Metrics
    'inertia',

    # Validation
    'validate_data',
    'check_n_clusters',
    'check_positive_int',
    'check_random_state',
    'validate_init_params'
]
