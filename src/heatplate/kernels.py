"""Row-range kernels for the Jacobi sweep.

Every kernel works on a half-open index range ``[start, stop)`` of a
C-contiguous float64 field (rows, or columns for the edge kernels) so that
a thread team can hand disjoint ranges to its workers. The kernels are
compiled with ``nogil=True`` and release the GIL while they run, so the
worker threads of :class:`heatplate.parallel.ThreadTeam` execute them
concurrently.
"""

from numba import njit


@njit(cache=True, nogil=True)
def fill_row_span(field, row, value, start, stop):
    """Set ``field[row, start:stop]`` to ``value``."""
    for j in range(start, stop):
        field[row, j] = value


@njit(cache=True, nogil=True)
def fill_column_span(field, col, value, start, stop):
    """Set ``field[start:stop, col]`` to ``value``."""
    for i in range(start, stop):
        field[i, col] = value


@njit(cache=True, nogil=True)
def sum_row_span(field, row, start, stop):
    total = 0.0
    for j in range(start, stop):
        total += field[row, j]
    return total


@njit(cache=True, nogil=True)
def sum_column_span(field, col, start, stop):
    total = 0.0
    for i in range(start, stop):
        total += field[i, col]
    return total


@njit(cache=True, nogil=True)
def fill_interior_rows(field, value, start, stop):
    """Set the interior columns of rows ``[start, stop)`` to ``value``."""
    ncols = field.shape[1]
    for i in range(start, stop):
        for j in range(1, ncols - 1):
            field[i, j] = value


@njit(cache=True, nogil=True)
def copy_rows(source, target, start, stop):
    """Copy every column of rows ``[start, stop)`` from source to target."""
    ncols = source.shape[1]
    for i in range(start, stop):
        for j in range(ncols):
            target[i, j] = source[i, j]


@njit(cache=True, nogil=True)
def stencil_rows(previous, current, start, stop):
    """Five-point Jacobi update of the interior cells in rows ``[start, stop)``.

    Reads only ``previous`` and writes only ``current``; boundary columns
    are excluded from the update range.
    """
    ncols = current.shape[1]
    for i in range(start, stop):
        for j in range(1, ncols - 1):
            current[i, j] = (previous[i - 1, j] + previous[i + 1, j]
                             + previous[i, j - 1] + previous[i, j + 1]) / 4.0


@njit(cache=True, nogil=True)
def max_difference_rows(current, previous, start, stop):
    """Largest ``|current - previous|`` over interior cells of rows ``[start, stop)``."""
    ncols = current.shape[1]
    my_diff = 0.0
    for i in range(start, stop):
        for j in range(1, ncols - 1):
            diff = abs(current[i, j] - previous[i, j])
            if my_diff < diff:
                my_diff = diff
    return my_diff
