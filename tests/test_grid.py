"""
Unit tests for the grid module.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest
from heatplate.grid import Grid
from heatplate.parallel import ThreadTeam


def test_grid_creation():
    """Test basic grid allocation."""
    grid = Grid.allocate(5, 7)

    assert grid.rows == 5
    assert grid.cols == 7
    assert grid.shape == (5, 7)
    assert grid.current.shape == (5, 7)
    assert grid.previous.shape == (5, 7)
    assert grid.current.dtype == np.float64
    assert grid.current.flags['C_CONTIGUOUS']
    assert grid.current is not grid.previous

    print("✓ test_grid_creation passed")


@pytest.mark.parametrize("rows, cols", [(2, 5), (5, 2), (0, 0), (1, 1)])
def test_grid_too_small(rows, cols):
    """Test that grids without an interior are rejected."""
    with pytest.raises(ValueError):
        Grid(rows, cols)


def test_counts():
    """Test boundary and interior cell counts."""
    grid = Grid(5, 7)

    assert grid.boundary_count == 2 * 5 + 2 * 7 - 4
    assert grid.interior_count == 3 * 5
    assert grid.boundary_count + grid.interior_count == 5 * 7

    print("✓ test_counts passed")


def test_boundary_mask():
    """Test boundary mask generation."""
    grid = Grid(5, 6)
    mask = grid.get_boundary_mask()

    assert np.all(mask[0, :])   # North
    assert np.all(mask[-1, :])  # South
    assert np.all(mask[:, 0])   # West
    assert np.all(mask[:, -1])  # East
    assert not np.any(mask[1:-1, 1:-1])
    assert mask.sum() == grid.boundary_count

    print("✓ test_boundary_mask passed")


@pytest.mark.parametrize("num_threads", [1, 3, 16])
def test_copy_current_into_previous(num_threads):
    """Test that the snapshot copies every cell, boundary included."""
    grid = Grid(11, 9)
    rng = np.random.default_rng(0)
    grid.current[:] = rng.random((11, 9))
    grid.previous[:] = -1.0

    with ThreadTeam(num_threads) as team:
        grid.copy_current_into_previous(team)

    assert np.array_equal(grid.previous, grid.current)
    assert not np.shares_memory(grid.previous, grid.current)


if __name__ == "__main__":
    print("Running grid tests...")
    print("-" * 60)

    test_grid_creation()
    test_counts()
    test_boundary_mask()

    print("-" * 60)
    print("All grid tests passed!")
