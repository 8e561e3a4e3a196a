"""
Example: Wall-clock time of the Jacobi sweep for different thread counts.

Demonstrates that the converged field does not depend on the number of
threads while the time spent in the iterative phase does.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import matplotlib.pyplot as plt
from heatplate import JacobiSolver
from utils import compare_runs


def main():
    rows, cols = 300, 300
    thread_counts = [1, 2, 4, 8]

    print("Thread scaling study...")
    runs = []
    for n in thread_counts:
        solver = JacobiSolver(rows=rows, cols=cols, tolerance=1e-2, num_threads=n, verbose=False)
        runs.append(solver.solve())

    reference = runs[0][0].temperature
    print("\nScaling Results:")
    print("-" * 60)
    print(f"{'threads':>8} {'sweeps':>8} {'time [s]':>12} {'speedup':>10} {'identical':>10}")
    print("-" * 60)
    t1 = runs[0][2].wall_time
    for fields, _, info in runs:
        same = np.array_equal(fields.temperature, reference)
        print(f"{info.num_threads:8d} {info.iterations:8d} {info.wall_time:12.3f} "
              f"{t1 / info.wall_time:10.2f} {str(same):>10}")

    df = compare_runs(runs, labels=[f"{n} threads" for n in thread_counts])
    fig, ax = plt.subplots(figsize=(10, 6))
    for label, group in df.groupby('run'):
        ax.plot(group['iteration'], group['elapsed'], label=label)
    ax.set_xlabel('Iteration')
    ax.set_ylabel('Elapsed [s]')
    ax.legend()
    plt.show()


if __name__ == "__main__":
    main()
