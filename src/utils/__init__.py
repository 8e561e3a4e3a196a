"""Utility modules for plotting and result analysis."""

from pathlib import Path
from . import plotting
from .frames import (
    history_frame,
    fields_frame,
    compare_runs,
)

__all__ = [
    "plotting",
    "get_project_root",
    "history_frame",
    "fields_frame",
    "compare_runs",
]


def get_project_root() -> Path:
    """Get project root directory.

    Returns
    -------
    Path
        Project root directory (contains pyproject.toml).
    """
    # Start from this file and search upward for pyproject.toml
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    # Fallback: assume standard structure
    return Path(__file__).resolve().parent.parent.parent
