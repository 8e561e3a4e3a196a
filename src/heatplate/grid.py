"""
Temperature grid holding the two Jacobi buffers.
"""

import numpy as np

from . import kernels


class Grid:
    """
    Pair of same-shaped temperature fields for the heat plate.

    ``current`` holds the latest sweep and ``previous`` the sweep before
    it. Both are C-contiguous float64 arrays indexed ``[row, col]`` with
    row 0 on the north edge and column 0 on the west edge. Cells carry no
    guaranteed value after allocation.

    Parameters
    ----------
    rows : int
        Number of grid rows (>= 3)
    cols : int
        Number of grid columns (>= 3)
    """

    def __init__(self, rows, cols):
        if rows < 3 or cols < 3:
            raise ValueError(f"Grid must be at least 3x3, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols

        self.previous = np.empty((rows, cols), dtype=np.float64)
        self.current = np.empty((rows, cols), dtype=np.float64)

    @classmethod
    def allocate(cls, rows, cols):
        return cls(rows, cols)

    @property
    def shape(self):
        return self.rows, self.cols

    @property
    def boundary_count(self):
        """Number of perimeter cells, corners counted once."""
        return 2 * self.rows + 2 * self.cols - 4

    @property
    def interior_count(self):
        return (self.rows - 2) * (self.cols - 2)

    def get_boundary_mask(self):
        """
        Get boolean mask for boundary cells.

        Returns
        -------
        ndarray
            Boolean array where True indicates boundary cells
        """
        mask = np.zeros((self.rows, self.cols), dtype=bool)
        mask[0, :] = True   # North
        mask[-1, :] = True  # South
        mask[:, 0] = True   # West
        mask[:, -1] = True  # East
        return mask

    def copy_current_into_previous(self, team):
        """
        Snapshot ``current`` into ``previous`` for the whole grid.

        Parameters
        ----------
        team : ThreadTeam
            Thread team that copies disjoint row ranges; returns only once
            every row is copied.
        """
        team.parallel_for(kernels.copy_rows, 0, self.rows, self.current, self.previous)
