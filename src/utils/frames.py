"""pandas views of solver results.

This module turns the result dataclasses of a solver run into DataFrames
for analysis and plotting. Nothing is written to disk.
"""

from dataclasses import asdict
from typing import List, Sequence, Tuple
import numpy as np
import pandas as pd


def history_frame(time_series, metadata=None) -> pd.DataFrame:
    """Convergence history as a DataFrame.

    Parameters
    ----------
    time_series : TimeSeries
        Residual and elapsed-time history of a run.
    metadata : Info, optional
        Run metadata broadcast to every row as extra columns.

    Returns
    -------
    pd.DataFrame
        DataFrame with columns:
        - iteration: Sweep number (1, 2, 3, ...)
        - residual: Max-difference of the sweep
        - elapsed: Seconds since the iterative phase started
        - All metadata fields as additional columns

    Examples
    --------
    >>> fields, ts, info = JacobiSolver(rows=50, cols=50, verbose=False).solve()
    >>> df = history_frame(ts, info)
    >>> sns.lineplot(data=df, x="iteration", y="residual")
    """
    residual = np.asarray(time_series.residual, dtype=float)
    df = pd.DataFrame({
        'iteration': np.arange(1, len(residual) + 1),
        'residual': residual,
        'elapsed': np.asarray(time_series.elapsed, dtype=float),
    })

    if metadata is not None:
        for key, value in asdict(metadata).items():
            df[key] = value

    return df


def fields_frame(fields) -> pd.DataFrame:
    """Temperature field in long format, one row per cell.

    Returns
    -------
    pd.DataFrame
        DataFrame with columns ``row``, ``col``, ``temperature`` and, when
        the fields carry a boundary mask, ``boundary``.
    """
    cols, rows = np.meshgrid(fields.x, fields.y)
    df = pd.DataFrame({
        'row': rows.ravel(),
        'col': cols.ravel(),
        'temperature': fields.temperature.ravel(),
    })
    if fields.boundary is not None:
        df['boundary'] = fields.boundary.ravel()
    return df


def compare_runs(runs: Sequence[Tuple], labels: List[str] = None) -> pd.DataFrame:
    """Stack the histories of several runs for comparison.

    Parameters
    ----------
    runs : sequence of (Fields, TimeSeries, Info)
        Results as returned by ``JacobiSolver.solve()``.
    labels : list of str, optional
        Labels for each run. If None, uses ``"<rows>x<cols>, <n> threads"``.

    Returns
    -------
    pd.DataFrame
        Combined DataFrame with 'run' column for distinguishing runs.
    """
    if labels is None:
        labels = [f"{info.rows}x{info.cols}, {info.num_threads} threads" for _, _, info in runs]

    dfs = []
    for (_, time_series, info), label in zip(runs, labels):
        df = history_frame(time_series, info)
        df['run'] = label
        dfs.append(df)

    return pd.concat(dfs, ignore_index=True)
