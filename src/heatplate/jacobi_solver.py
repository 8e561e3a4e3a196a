"""Parallel Jacobi solver for the steady-state heat plate.

Solves the five-point discretization of ∇²T = 0 on a rectangular plate
with fixed edge temperatures. Every sweep snapshots ``current`` into
``previous`` and recomputes each interior cell as the average of its four
neighbours in ``previous``; the sweeps repeat until the largest change of
a cell drops to the tolerance.
"""

import time
from typing import Tuple

import numpy as np

from . import kernels
from .base_solver import PlateSolver
from .boundary import BoundaryInitializer, InteriorSeeder
from .convergence import ConvergenceTracker
from .datastructures import Fields, TimeSeries, Info, available_processors
from .parallel import ThreadTeam
from .reporting import ProgressReporter


class JacobiSolver(PlateSolver):
    """Jacobi relaxation solver parallelised over row ranges.

    Parameters
    ----------
    config : PlateConfig, optional
        Run configuration. Keyword arguments build one if omitted.
    reporter : ProgressReporter, optional
        Output collaborator. Defaults to a console reporter honouring
        ``config.verbose``.
    """

    def __init__(self, config=None, reporter=None, **kwargs):
        self.reporter = reporter
        super().__init__(config, **kwargs)

    def _setup_solver_specifics(self):
        if self.reporter is None:
            self.reporter = ProgressReporter(verbose=self.config.verbose)
        self.boundary = BoundaryInitializer.from_config(self.config)
        self.seeder = InteriorSeeder()

    def initialize(self, team: ThreadTeam) -> float:
        """Write the boundary, seed the interior and return the boundary mean."""
        mean = self.boundary.apply(self.grid, team)
        self.seeder.apply(self.grid, team, mean)
        return mean

    def sweep(self, team: ThreadTeam):
        """Advance the solution by one Jacobi sweep.

        The full-grid snapshot completes before any stencil update starts,
        and each worker writes a disjoint row range of ``current``.
        """
        grid = self.grid
        grid.copy_current_into_previous(team)
        team.parallel_for(kernels.stencil_rows, 1, grid.rows - 1, grid.previous, grid.current)

    def solve(self) -> Tuple[Fields, TimeSeries, Info]:
        """Iterate until the max-difference is within tolerance.

        Returns
        -------
        fields : Fields
            Final temperature field.
        time_series : TimeSeries
            Max-difference and elapsed time of every sweep.
        metadata : Info
            Configuration echo and convergence info.
        """
        config = self.config
        reporter = self.reporter
        num_processors = available_processors()
        tracker = ConvergenceTracker(config.tolerance, config.max_iterations)

        reporter.banner(config.tolerance, num_processors, config.num_threads)

        with ThreadTeam(config.num_threads) as team:
            mean = self.initialize(team)
            reporter.boundary_mean(mean)
            reporter.table_header()

            time_start = time.time()
            keep_going = True
            while keep_going:
                self.sweep(team)
                diff = tracker.measure(self.grid, team)
                elapsed = time.time() - time_start
                keep_going = tracker.update(diff, elapsed)
                reporter.iteration(tracker.iteration_count, diff, elapsed)

            wall_time = time.time() - time_start

        reporter.final(tracker.iteration_count, tracker.max_difference, wall_time,
                       converged=tracker.converged)

        self.fields = Fields(
            temperature=self.grid.current.copy(),
            x=np.arange(config.cols),
            y=np.arange(config.rows),
            boundary=self.grid.get_boundary_mask(),
        )
        self.time_series = tracker.history
        self.metadata = Info(
            rows=config.rows,
            cols=config.cols,
            tolerance=config.tolerance,
            north=config.north,
            south=config.south,
            east=config.east,
            west=config.west,
            num_threads=config.num_threads,
            num_processors=num_processors,
            max_iterations=config.max_iterations,
            boundary_mean=mean,
            iterations=tracker.iteration_count,
            converged=tracker.converged,
            final_residual=tracker.max_difference,
            wall_time=wall_time,
        )

        return self.fields, self.time_series, self.metadata
