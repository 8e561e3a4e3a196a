"""
Example: Steady-state temperature of a plate with one cold edge.

This example solves:
    ∇²T = 0      on the plate interior
    T = 0        on the north edge
    T = 100      on the south, east and west edges

and compares the result with the separable series solution of the
continuous problem.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import matplotlib.pyplot as plt
from heatplate import JacobiSolver
from utils import history_frame
from utils.plotting import plot_temperature, plot_temperature_3d, plot_convergence


def series_solution(rows, cols, n_terms=199):
    """Continuous solution 100 - u, where u solves the plate with the
    north edge at 100 and the other edges at 0."""
    y = np.arange(rows)[:, None] / (rows - 1)   # 0 at north, 1 at south
    x = np.arange(cols)[None, :] / (cols - 1)
    H = (rows - 1) / (cols - 1)

    u = np.zeros((rows, cols))
    for n in range(1, n_terms + 1, 2):
        k = n * np.pi
        u += (400.0 / k) * np.sin(k * x) * np.sinh(k * H * (1 - y)) / np.sinh(k * H)
    return 100.0 - u


def main():
    # Problem parameters
    rows, cols = 101, 101

    print("Solving steady-state heat plate...")
    print(f"Grid size: {rows} × {cols}")

    solver = JacobiSolver(rows=rows, cols=cols, tolerance=1e-4)
    fields, time_series, info = solver.solve()

    # Compare the interior with the series solution
    T_exact = series_solution(rows, cols)
    error = np.abs(fields.temperature - T_exact)[1:-1, 1:-1]
    print(f"\nMax |T - T_series| (interior): {error.max():.4f}")
    print(f"Mean |T - T_series| (interior): {error.mean():.4f}")

    df = history_frame(time_series, info)
    print(f"\nSweeps: {len(df)}, final change: {df['residual'].iloc[-1]:.3e}")

    # Visualization
    plot_temperature(fields, title="Plate temperature")
    plot_temperature_3d(fields, title="Plate temperature (3D)")
    plot_convergence(time_series, tolerance=info.tolerance)
    plt.show()


if __name__ == "__main__":
    main()
