"""Convergence tracking for the Jacobi iteration."""

from typing import Optional

from . import kernels
from .datastructures import TimeSeries


class ConvergenceTracker:
    """Decides after every sweep whether the iteration continues.

    The loop continues while the max-difference of the last sweep is
    strictly greater than ``tolerance``. There is no cap unless
    ``max_iterations`` is given; with the default a tolerance that floating
    point arithmetic cannot reach keeps the loop running forever.

    Parameters
    ----------
    tolerance : float
        Convergence threshold on the max-difference.
    max_iterations : int, optional
        Stop after this many sweeps even if not converged.
    """

    def __init__(self, tolerance: float, max_iterations: Optional[int] = None):
        self.tolerance = tolerance
        self.max_iterations = max_iterations
        self.iteration_count = 0
        self.max_difference = None
        self.history = TimeSeries()

    @property
    def converged(self) -> bool:
        return self.max_difference is not None and self.max_difference <= self.tolerance

    @property
    def limit_reached(self) -> bool:
        return self.max_iterations is not None and self.iteration_count >= self.max_iterations

    @staticmethod
    def measure(grid, team) -> float:
        """Maximum absolute difference between ``current`` and ``previous``
        over the interior cells, reduced across the thread team."""
        return team.max_reduce(kernels.max_difference_rows, 1, grid.rows - 1,
                               grid.current, grid.previous)

    def update(self, max_difference: float, elapsed: float = 0.0) -> bool:
        """Record a completed sweep.

        Parameters
        ----------
        max_difference : float
            Max-difference produced by the sweep.
        elapsed : float
            Seconds since the start of the iterative phase.

        Returns
        -------
        bool
            True if another sweep is needed.
        """
        self.iteration_count += 1
        self.max_difference = max_difference
        self.history.residual.append(float(max_difference))
        self.history.elapsed.append(float(elapsed))

        return not self.converged and not self.limit_reached
