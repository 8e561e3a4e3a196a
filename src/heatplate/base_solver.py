"""Abstract base solver for the heat plate problem."""

from abc import ABC, abstractmethod
from typing import Tuple
import numpy as np

from .datastructures import PlateConfig
from .grid import Grid


class PlateSolver(ABC):
    """Abstract base solver for the steady-state heat plate.

    This base class handles:
    - Run configuration (grid size, edge temperatures, tolerance, threads)
    - Allocation of the two-buffer temperature grid
    - Result accessors

    Subclasses only need to:
    - Do solver-specific setup via _setup_solver_specifics()
    - Implement solve() method

    Parameters
    ----------
    config : PlateConfig
        Configuration with grid size, edge temperatures and solver settings.
    """

    Config = PlateConfig

    def __init__(self, config: PlateConfig = None, **kwargs):
        """Initialize solver with configuration.

        Parameters
        ----------
        config : PlateConfig, optional
            Configuration object. If not provided, kwargs are used to
            create one.
        **kwargs
            Configuration parameters passed to PlateConfig if config is None.
        """
        if config is None:
            config = self.Config(**kwargs)
        elif kwargs:
            raise ValueError("Pass either a config object or keyword arguments, not both")

        self.config = config

        # Results are filled in by solve()
        self.fields = None
        self.time_series = None
        self.metadata = None

        self.grid = Grid.allocate(config.rows, config.cols)

        self._setup_solver_specifics()

    def _setup_solver_specifics(self):
        """Solver-specific initialization (optional).

        Called after grid allocation. Default implementation does nothing.
        """
        pass

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @abstractmethod
    def solve(self):
        """Solve the heat plate problem.

        Stores results in solver attributes:
        - self.fields : Fields dataclass with the temperature field
        - self.time_series : TimeSeries dataclass with the residual history
        - self.metadata : Info dataclass with config and convergence info
        """
        pass

    def get_temperature_field(self) -> np.ndarray:
        """Return the converged temperature field.

        Returns
        -------
        temperature : np.ndarray
            Temperature field (shape: rows x cols).
        """
        if self.fields is None:
            raise RuntimeError("Solver has not been run yet. Call solve() first.")
        return self.fields.temperature
