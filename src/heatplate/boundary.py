"""Boundary conditions and interior seeding for the heat plate.

Corner ownership follows the plate diagram below: the north and south rows
span every column, the west and east columns only rows ``1..rows-2``::

                    row 0 (north)

          [0][0]-------------[0][N-1]
             |                  |
    col 0    |                  |  col N-1
    (west)   |                  |  (east)
        [M-1][0]-----------[M-1][N-1]

                 row M-1 (south)
"""

from . import kernels


class BoundaryInitializer:
    """Writes the fixed edge temperatures and computes their mean.

    Parameters
    ----------
    north, south, east, west : float
        Edge temperatures.
    """

    def __init__(self, north=0.0, south=100.0, east=100.0, west=100.0):
        self.north = north
        self.south = south
        self.east = east
        self.west = west

    @classmethod
    def from_config(cls, config):
        return cls(north=config.north, south=config.south,
                   east=config.east, west=config.west)

    def apply(self, grid, team):
        """Write the boundary cells of ``grid.current`` and return their mean.

        Parameters
        ----------
        grid : Grid
            Grid whose ``current`` field receives the boundary values.
        team : ThreadTeam
            Thread team used for the writes and the sum reduction.

        Returns
        -------
        float
            Mean of all ``2*rows + 2*cols - 4`` boundary cells.
        """
        w = grid.current
        M, N = grid.rows, grid.cols

        team.parallel_for(kernels.fill_column_span, 1, M - 1, w, 0, self.west)
        team.parallel_for(kernels.fill_column_span, 1, M - 1, w, N - 1, self.east)
        team.parallel_for(kernels.fill_row_span, 0, N, w, M - 1, self.south)
        team.parallel_for(kernels.fill_row_span, 0, N, w, 0, self.north)

        return self.boundary_mean(grid, team)

    @staticmethod
    def boundary_mean(grid, team):
        """Mean of the boundary cells currently stored in ``grid.current``.

        One partial sum per edge, added in the fixed order west, east,
        south, north.
        """
        w = grid.current
        M, N = grid.rows, grid.cols
        total = team.sum_reduce([
            (kernels.sum_column_span, (w, 0, 1, M - 1)),
            (kernels.sum_column_span, (w, N - 1, 1, M - 1)),
            (kernels.sum_row_span, (w, M - 1, 0, N)),
            (kernels.sum_row_span, (w, 0, 0, N)),
        ])
        return total / float(grid.boundary_count)


class InteriorSeeder:
    """Fills every interior cell of ``grid.current`` with a single value."""

    def apply(self, grid, team, value):
        team.parallel_for(kernels.fill_interior_rows, 1, grid.rows - 1, grid.current, value)
