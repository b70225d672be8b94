"""
Convergence criteria for the Lloyd loop.

The loop stops when the centroids stop moving; the iteration cap is handled
by the loop itself.
"""

from typing import Dict, Any

from ..base.interfaces import ConvergenceCriterion


class CentroidShift(ConvergenceCriterion):
    """Convergence based on total centroid movement.

    The shift is the sum of absolute per-coordinate displacement across all
    centroids produced by the latest update. With the default ``tol=0.0``
    convergence requires the centroids to be exactly unchanged.
    """

    def __init__(self, tol: float = 0.0):
        """
        Args:
            tol: Largest shift still considered converged
        """
        super().__init__()
        if tol < 0:
            raise ValueError(f"tol must be non-negative, got {tol}")
        self.tol = tol

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if the centroids have stopped moving."""
        shift = current_state['centroids_changed']
        converged = shift <= self.tol

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'centroids_changed': shift,
            'converged': converged
        })

        return converged
