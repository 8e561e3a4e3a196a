"""Data structures for solver configuration and results.

This module defines the run configuration and the result data structures
for the heat plate solver.
"""
import math
import numbers
import os
from dataclasses import dataclass, field
from typing import Optional, List

import numpy as np

#========================================================
# Configuration
# =======================================================


def available_processors() -> int:
    """Number of processors this process may run on."""
    if hasattr(os, "sched_getaffinity"):
        return len(os.sched_getaffinity(0))
    return os.cpu_count() or 1


def _as_int(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


def _as_float(name, value):
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None


@dataclass
class PlateConfig:
    """Run configuration for the heat plate problem.

    Defaults reproduce the reference run: a 500 x 500 plate with the
    north edge held at 0 degrees and the other three edges at 100.
    """
    # Grid parameters
    rows: int = 500
    cols: int = 500

    # Edge temperatures (Dirichlet values)
    north: float = 0.0
    south: float = 100.0
    east: float = 100.0
    west: float = 100.0

    # Solver config
    tolerance: float = 1e-3
    num_threads: Optional[int] = None
    max_iterations: Optional[int] = None
    verbose: bool = True

    def __post_init__(self):
        self.rows = _as_int("rows", self.rows)
        self.cols = _as_int("cols", self.cols)
        if self.rows < 3 or self.cols < 3:
            raise ValueError(
                f"Plate must be at least 3x3 to have an interior, got {self.rows}x{self.cols}"
            )
        self.tolerance = _as_float("tolerance", self.tolerance)
        if not math.isfinite(self.tolerance) or self.tolerance < 0.0:
            raise ValueError(f"Tolerance must be finite and >= 0, got {self.tolerance}")
        for edge in ("north", "south", "east", "west"):
            value = _as_float(edge, getattr(self, edge))
            if not math.isfinite(value):
                raise ValueError(f"{edge} temperature must be finite, got {value}")
            setattr(self, edge, value)
        if self.num_threads is None:
            self.num_threads = available_processors()
        self.num_threads = _as_int("num_threads", self.num_threads)
        if self.num_threads < 1:
            raise ValueError(f"num_threads must be >= 1, got {self.num_threads}")
        if self.max_iterations is not None:
            self.max_iterations = _as_int("max_iterations", self.max_iterations)
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")


#========================================================
# Results
# =======================================================


@dataclass
class Fields:
    """Converged temperature field, its index coordinates and boundary mask."""
    temperature: np.ndarray
    x: np.ndarray
    y: np.ndarray
    boundary: Optional[np.ndarray] = None


@dataclass
class TimeSeries:
    """Per-sweep history of the iterative phase."""
    residual: List[float] = field(default_factory=list)
    elapsed: List[float] = field(default_factory=list)


@dataclass
class Info:
    """Solver metadata, config echo and convergence info."""
    rows: int
    cols: int
    tolerance: float
    north: float
    south: float
    east: float
    west: float
    num_threads: int
    num_processors: int = 1
    max_iterations: Optional[int] = None

    # Convergence info
    boundary_mean: Optional[float] = None
    iterations: int = 0
    converged: bool = False
    final_residual: Optional[float] = None
    wall_time: float = 0.0
