"""
Unit tests for the Jacobi plate solver.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest
from heatplate import JacobiSolver, PlateConfig, ConvergenceTracker, ThreadTeam


def test_single_interior_cell():
    """Test the 3x3 plate with the reference edge temperatures."""
    solver = JacobiSolver(rows=3, cols=3, tolerance=1e-3, num_threads=2, verbose=False)
    fields, time_series, info = solver.solve()

    # Seed is the boundary mean 62.5; the first sweep moves the cell to
    # (0 + 100 + 100 + 100) / 4 and the second changes nothing.
    assert info.boundary_mean == 62.5
    assert fields.temperature[1, 1] == 75.0
    assert time_series.residual == [12.5, 0.0]
    assert info.iterations == 2
    assert info.converged
    assert info.final_residual == 0.0

    print("✓ test_single_interior_cell passed")


@pytest.mark.parametrize("tolerance", [0.0, 1e-12, 1e-3, 10.0])
def test_constant_boundary_converges_in_one_sweep(tolerance):
    """Test that a uniform boundary is a fixed point after seeding."""
    value = 50.0
    solver = JacobiSolver(rows=6, cols=9, north=value, south=value, east=value, west=value,
                          tolerance=tolerance, num_threads=3, verbose=False)
    fields, time_series, info = solver.solve()

    assert info.boundary_mean == value
    assert np.all(fields.temperature == value)
    assert time_series.residual == [0.0]
    assert info.iterations == 1
    assert info.converged

    print("✓ test_constant_boundary_converges_in_one_sweep passed")


def test_boundary_invariance():
    """Test that the boundary keeps its initial values after many sweeps."""
    solver = JacobiSolver(rows=20, cols=15, num_threads=4, max_iterations=25, verbose=False)
    fields, _, info = solver.solve()
    T = fields.temperature

    assert info.iterations == 25
    assert np.all(T[0, :] == 0.0)
    assert np.all(T[-1, :] == 100.0)
    assert np.all(T[1:-1, 0] == 100.0)
    assert np.all(T[1:-1, -1] == 100.0)

    print("✓ test_boundary_invariance passed")


def test_reference_plate_converges():
    """Test convergence of a small plate with the reference edges."""
    solver = JacobiSolver(rows=24, cols=24, tolerance=1e-3, num_threads=4, verbose=False)
    fields, time_series, info = solver.solve()
    T = fields.temperature

    assert info.converged
    assert info.final_residual <= 1e-3
    assert all(r > 1e-3 for r in time_series.residual[:-1])
    assert all(r >= 0.0 for r in time_series.residual)
    assert len(time_series.residual) == info.iterations
    assert len(time_series.elapsed) == info.iterations

    # Interior lies between the coldest and hottest edge and is colder
    # near the north edge than near the south edge
    interior = T[1:-1, 1:-1]
    assert interior.min() > 0.0
    assert interior.max() < 100.0
    assert T[1, 12] < T[-2, 12]

    # Left-right symmetry of the problem
    assert np.allclose(T, T[:, ::-1])

    print("✓ test_reference_plate_converges passed")


def test_stencil_residual_is_small_at_convergence():
    """Test that the converged field nearly satisfies the discrete Laplace equation."""
    solver = JacobiSolver(rows=16, cols=12, tolerance=1e-6, num_threads=2, verbose=False)
    fields, _, _ = solver.solve()
    T = fields.temperature

    average = (T[:-2, 1:-1] + T[2:, 1:-1] + T[1:-1, :-2] + T[1:-1, 2:]) / 4.0
    assert np.max(np.abs(average - T[1:-1, 1:-1])) <= 1e-6 + 1e-12


def test_sweep_matches_vectorised_jacobi():
    """Test one parallel sweep against a numpy five-point update."""
    solver = JacobiSolver(rows=13, cols=10, num_threads=3, verbose=False)
    rng = np.random.default_rng(7)
    solver.grid.current[:] = rng.random((13, 10))
    start = solver.grid.current.copy()

    with ThreadTeam(3) as team:
        solver.sweep(team)

    expected = start.copy()
    expected[1:-1, 1:-1] = (start[:-2, 1:-1] + start[2:, 1:-1] + start[1:-1, :-2] + start[1:-1, 2:]) / 4.0
    assert np.array_equal(solver.grid.previous, start)
    assert np.allclose(solver.grid.current, expected, rtol=0.0, atol=1e-15)


def test_idempotence_at_convergence():
    """Test that one more sweep after convergence stays within tolerance."""
    tolerance = 1e-3
    solver = JacobiSolver(rows=18, cols=14, tolerance=tolerance, num_threads=2, verbose=False)
    _, _, info = solver.solve()
    assert info.converged

    with ThreadTeam(2) as team:
        solver.sweep(team)
        diff = ConvergenceTracker.measure(solver.grid, team)

    assert diff <= tolerance


def test_determinism_across_thread_counts():
    """Test that the converged field is bit-identical for any thread count."""
    results = []
    for num_threads in (1, 2, 3, 5, 8):
        solver = JacobiSolver(rows=21, cols=30, north=12.5, south=87.25, east=40.0, west=65.5,
                              tolerance=1e-4, num_threads=num_threads, verbose=False)
        fields, time_series, info = solver.solve()
        results.append((fields.temperature, time_series.residual, info.iterations, info.boundary_mean))

    reference = results[0]
    for temperature, residual, iterations, mean in results[1:]:
        assert np.array_equal(temperature, reference[0])
        assert residual == reference[1]
        assert iterations == reference[2]
        assert mean == reference[3]

    print("✓ test_determinism_across_thread_counts passed")


def test_max_iterations_stops_unconverged():
    """Test the optional iteration limit on an unreachable tolerance."""
    solver = JacobiSolver(rows=30, cols=30, tolerance=0.0, max_iterations=7, num_threads=2, verbose=False)
    _, time_series, info = solver.solve()

    assert info.iterations == 7
    assert not info.converged
    assert info.final_residual > 0.0
    assert len(time_series.residual) == 7


def test_config_object_and_kwargs():
    config = PlateConfig(rows=5, cols=6, num_threads=1, verbose=False)
    solver = JacobiSolver(config)

    assert solver.config is config
    assert solver.shape == (5, 6)

    with pytest.raises(ValueError):
        JacobiSolver(config, rows=7)


def test_results_before_solve():
    solver = JacobiSolver(rows=4, cols=4, num_threads=1, verbose=False)
    with pytest.raises(RuntimeError):
        solver.get_temperature_field()


def test_solve_stores_results():
    solver = JacobiSolver(rows=5, cols=7, num_threads=2, verbose=False)
    fields, time_series, info = solver.solve()

    assert solver.fields is fields
    assert solver.time_series is time_series
    assert solver.metadata is info
    assert solver.get_temperature_field() is fields.temperature
    assert fields.temperature.shape == (5, 7)
    assert np.array_equal(fields.x, np.arange(7))
    assert np.array_equal(fields.y, np.arange(5))
    assert fields.boundary.dtype == bool
    assert np.array_equal(fields.boundary, solver.grid.get_boundary_mask())
    assert set(np.unique(fields.temperature[fields.boundary])) == {0.0, 100.0}
    assert info.rows == 5 and info.cols == 7
    assert info.num_threads == 2
    assert info.wall_time >= 0.0



def test_info_convergence_fields_are_optional():
    """Test that metadata before a solve carries None for unset results."""
    import typing
    from heatplate.datastructures import Info
    hints = typing.get_type_hints(Info)
    info = Info(rows=3, cols=3, tolerance=1e-3, north=0.0, south=100.0,
                east=100.0, west=100.0, num_threads=1)

    assert hints['boundary_mean'] == typing.Optional[float]
    assert hints['final_residual'] == typing.Optional[float]
    assert info.boundary_mean is None and info.final_residual is None


if __name__ == "__main__":
    print("Running Jacobi solver tests...")
    print("-" * 60)

    test_single_interior_cell()
    test_boundary_invariance()
    test_reference_plate_converges()
    test_determinism_across_thread_counts()

    print("-" * 60)
    print("All Jacobi solver tests passed!")
