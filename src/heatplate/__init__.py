"""Steady-state heat plate solver.

Solves the 2D Laplace equation on a rectangular plate with fixed edge
temperatures by parallel Jacobi relaxation.

Components:
-----------
Grid                 (two-buffer temperature field)
BoundaryInitializer  (edge temperatures and their mean)
InteriorSeeder       (initial interior guess)
JacobiSolver         (sweep loop, extends PlateSolver)
ConvergenceTracker   (max-difference and stopping rule)
ProgressReporter     (console output)
ThreadTeam           (fork-join row partitioning)
"""

from .datastructures import PlateConfig, Fields, TimeSeries, Info
from .grid import Grid
from .boundary import BoundaryInitializer, InteriorSeeder
from .convergence import ConvergenceTracker
from .parallel import ThreadTeam
from .reporting import ProgressReporter
from .base_solver import PlateSolver
from .jacobi_solver import JacobiSolver
from .config import load_config

__version__ = "0.1.0"

__all__ = [
    # Configuration and results
    "PlateConfig",
    "Fields",
    "TimeSeries",
    "Info",
    "load_config",
    # Components
    "Grid",
    "BoundaryInitializer",
    "InteriorSeeder",
    "ConvergenceTracker",
    "ProgressReporter",
    "ThreadTeam",
    # Solvers
    "PlateSolver",
    "JacobiSolver",
]
