"""Plotting utilities for heat plate results.

This module provides helpers for:
- Contour and surface plots of the temperature field
- Convergence history plots

Applies the seaborn-v0_8 matplotlib style on import when available.
"""

from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np


def _apply_styles():
    """Apply the seaborn-v0_8 matplotlib style."""
    try:
        plt.style.use("seaborn-v0_8")
    except OSError:
        # Fallback if seaborn style not available
        pass


# Apply styles when module is imported
_apply_styles()


def plot_temperature(fields, title="Temperature", figsize=(10, 8), cmap='inferno'):
    """
    Plot the temperature field as a filled contour plot.

    Row 0 (the north edge) is drawn at the top of the plot.

    Parameters
    ----------
    fields : Fields
        Solver fields with ``temperature``, ``x`` and ``y``
    title : str, optional
        Plot title
    figsize : tuple, optional
        Figure size
    cmap : str, optional
        Colormap name

    Returns
    -------
    Figure, Axes
        Matplotlib figure and axes objects
    """
    fig, ax = plt.subplots(figsize=figsize)

    X, Y = np.meshgrid(fields.x, fields.y)
    contour = ax.contourf(X, Y, fields.temperature, levels=20, cmap=cmap)
    ax.contour(X, Y, fields.temperature, levels=10, colors='k', linewidths=0.5, alpha=0.3)
    ax.invert_yaxis()

    ax.set_xlabel('column')
    ax.set_ylabel('row')
    ax.set_title(title)
    ax.set_aspect('equal')

    cbar = fig.colorbar(contour, ax=ax)
    cbar.set_label('T')

    plt.tight_layout()
    return fig, ax


def plot_temperature_3d(fields, title="Temperature", figsize=(12, 9), cmap='inferno'):
    """
    Plot the temperature field as a 3D surface.

    Returns
    -------
    Figure, Axes
        Matplotlib figure and axes objects
    """
    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(111, projection='3d')

    X, Y = np.meshgrid(fields.x, fields.y)
    surf = ax.plot_surface(X, Y, fields.temperature, cmap=cmap,
                           linewidth=0, antialiased=True, alpha=0.9)

    ax.set_xlabel('column')
    ax.set_ylabel('row')
    ax.set_zlabel('T')
    ax.set_title(title)

    fig.colorbar(surf, ax=ax, shrink=0.5)

    plt.tight_layout()
    return fig, ax


def plot_convergence(time_series, tolerance: Optional[float] = None, figsize=(10, 6)):
    """
    Plot the max-difference of every sweep on a log scale.

    Parameters
    ----------
    time_series : TimeSeries
        Solver history
    tolerance : float, optional
        Draw the tolerance as a horizontal reference line
    figsize : tuple, optional
        Figure size

    Returns
    -------
    Figure, Axes
        Matplotlib figure and axes objects
    """
    fig, ax = plt.subplots(figsize=figsize)

    residual = np.asarray(time_series.residual)
    iterations = np.arange(1, len(residual) + 1)

    # Sweeps with zero change cannot be drawn on a log axis
    positive = residual > 0
    ax.semilogy(iterations[positive], residual[positive], 'b-', linewidth=2, label='max change')

    if tolerance is not None and tolerance > 0:
        ax.axhline(tolerance, linestyle='--', color='gray', alpha=0.7, label='tolerance')

    ax.set_xlabel('Iteration', fontsize=12)
    ax.set_ylabel('Max change', fontsize=12)
    ax.set_title('Convergence History', fontsize=14)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig, ax
