"""
Two-dimensional arrays as plain nested tuples.

A grid is a sequence of rows and every row is its own sequence of cells, so rows
may differ in length. All operations are free functions: grid-producing ones
return a fresh tuple of tuples and never touch their input. Coordinates are
(x, y), where y selects the row and x the column inside that row.

Three kinds of operation live here:
1. Builders and transforms that apply a 1D operation to every row (map, filter, ...)
2. Queries that flatten the grid row by row and then reduce it (foldl, any, ...)
3. Cell access that indexes the row, then the column (get, set, update)

Coordinates outside the grid are never an error: get returns None and
set/update return the input grid itself, untouched.
"""

from __future__ import annotations

import builtins
import logging
from functools import reduce
from itertools import chain
from typing import Callable, Iterable, Iterator, Sequence

from grid_types import Grid2D, T, U

logger = logging.getLogger(__name__)

__all__ = [
    "GridLike",
    "all",
    "any",
    "filter",
    "filter_map",
    "find_first",
    "find_last",
    "flatten",
    "foldl",
    "foldr",
    "from_rows",
    "get",
    "height",
    "indexed_cells",
    "indexed_map",
    "initialize",
    "is_rectangular",
    "map",
    "maximum",
    "member",
    "minimum",
    "repeat",
    "set",
    "size",
    "to_lists",
    "update",
    "width",
]

GridLike = Sequence[Sequence[T]]


# =============================================================================
# Conversion and Shape
# =============================================================================


def from_rows(rows: GridLike[T]) -> Grid2D[T]:
    """
    Normalise nested sequences into the tuple-of-tuples grid form.

    Rows that are already tuples are reused as-is.
    """
    return tuple(tuple(row) for row in rows)


def to_lists(grid: GridLike[T]) -> list[list[T]]:
    """Return a mutable nested-list copy of the grid."""
    return [list(row) for row in grid]


def height(grid: GridLike[T]) -> int:
    """Number of rows."""
    return len(grid)


def width(y: int, grid: GridLike[T]) -> int | None:
    """Length of row y, or None if the grid has no such row."""
    if 0 <= y < len(grid):
        return len(grid[y])
    return None


def is_rectangular(grid: GridLike[T]) -> bool:
    """True when every row has the same length (always true with no rows)."""
    return len({len(row) for row in grid}) <= 1


def _cells(grid: GridLike[T]) -> Iterator[T]:
    # Row 0 left to right, then row 1, ...
    return chain.from_iterable(grid)


def flatten(grid: GridLike[T]) -> tuple[T, ...]:
    """Concatenate the rows in order into a single tuple."""
    return tuple(_cells(grid))


def indexed_cells(grid: GridLike[T]) -> Iterator[tuple[int, int, T]]:
    """Yield (x, y, cell) for every cell in row-major order."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            yield (x, y, cell)


# =============================================================================
# Construction
# =============================================================================


def initialize(width: int, height: int, fn: Callable[[int, int], T]) -> Grid2D[T]:
    """
    Build a rectangular grid by calling fn(x, y) for every cell.

    fn is called in row-major order: all of row 0, then all of row 1, and so on.

    Args:
        width: Number of cells in each row
        height: Number of rows
        fn: Function producing the value for cell (x, y)

    Returns:
        The new grid; a grid with no rows if either dimension is negative
    """
    if width < 0 or height < 0:
        return ()
    return tuple(tuple(fn(x, y) for x in range(width)) for y in range(height))


def repeat(width: int, height: int, value: T) -> Grid2D[T]:
    """
    Build a rectangular grid with every cell set to value.

    The value is not copied: a mutable value ends up shared by every cell.
    """
    if width < 0 or height < 0:
        return ()
    row = (value,) * width
    return (row,) * height


# =============================================================================
# Element-wise Transforms
# =============================================================================


def map(fn: Callable[[T], U], grid: GridLike[T]) -> Grid2D[U]:
    """Apply fn to every cell, keeping the shape of each row."""
    return tuple(tuple(fn(cell) for cell in row) for row in grid)


def indexed_map(fn: Callable[[int, int, T], U], grid: GridLike[T]) -> Grid2D[U]:
    """Apply fn(x, y, cell) to every cell, keeping the shape of each row."""
    return tuple(
        tuple(fn(x, y, cell) for x, cell in enumerate(row))
        for y, row in enumerate(grid)
    )


def filter(predicate: Callable[[T], bool], grid: GridLike[T]) -> Grid2D[T]:
    """
    Keep only the cells satisfying predicate.

    Rows keep their relative order and are never dropped: a row with no
    passing cells becomes an empty row.
    """
    return tuple(tuple(cell for cell in row if predicate(cell)) for row in grid)


def filter_map(fn: Callable[[T], U | None], grid: GridLike[T]) -> Grid2D[U]:
    """
    Transform every cell with fn, discarding cells for which fn returns None.

    Same row rules as filter: the row count never changes.
    """
    return tuple(
        tuple(value for value in (fn(cell) for cell in row) if value is not None)
        for row in grid
    )


# =============================================================================
# Aggregate Queries
# =============================================================================


def foldl(fn: Callable[[T, U], U], initial: U, grid: GridLike[T]) -> U:
    """
    Reduce the flattened grid from the first cell to the last.

    fn receives (cell, accumulator), so foldl(lambda c, acc: [c] + acc, [], g)
    reverses the cells.
    """
    return _fold(fn, initial, _cells(grid))


def foldr(fn: Callable[[T, U], U], initial: U, grid: GridLike[T]) -> U:
    """
    Reduce the flattened grid from the last cell to the first.

    The last cell of the last row is combined with initial first. fn receives
    (cell, accumulator), so foldr(operator.sub, 0, [[1, 2], [3, 4]]) is
    1 - (2 - (3 - (4 - 0))) == -2.
    """
    return _fold(fn, initial, reversed(flatten(grid)))


def _fold(fn: Callable[[T, U], U], initial: U, cells: Iterable[T]) -> U:
    return reduce(lambda acc, cell: fn(cell, acc), cells, initial)


def find_first(predicate: Callable[[T], bool], grid: GridLike[T]) -> T | None:
    """First cell in row-major order satisfying predicate, or None."""
    return next((cell for cell in _cells(grid) if predicate(cell)), None)


def find_last(predicate: Callable[[T], bool], grid: GridLike[T]) -> T | None:
    """Last cell in row-major order satisfying predicate, or None."""
    return next((cell for cell in reversed(flatten(grid)) if predicate(cell)), None)


def member(value: T, grid: GridLike[T]) -> bool:
    """True if any cell equals value."""
    return builtins.any(cell == value for cell in _cells(grid))


def any(predicate: Callable[[T], bool], grid: GridLike[T]) -> bool:
    """True if some cell satisfies predicate. False for a grid with no cells."""
    return builtins.any(predicate(cell) for cell in _cells(grid))


def all(predicate: Callable[[T], bool], grid: GridLike[T]) -> bool:
    """True if every cell satisfies predicate. True for a grid with no cells."""
    return builtins.all(predicate(cell) for cell in _cells(grid))


def minimum(grid: GridLike[T]) -> T | None:
    """Smallest cell, or None if the grid has no cells."""
    return builtins.min(_cells(grid), default=None)


def maximum(grid: GridLike[T]) -> T | None:
    """Largest cell, or None if the grid has no cells."""
    return builtins.max(_cells(grid), default=None)


def size(grid: GridLike[T]) -> int:
    """Total number of cells across all rows."""
    return sum(len(row) for row in grid)


# =============================================================================
# Cell Access
# =============================================================================


def _in_range(x: int, y: int, grid: GridLike[T]) -> bool:
    # Negative indices are outside the grid, not counted from the end
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def get(x: int, y: int, grid: GridLike[T]) -> T | None:
    """
    Get the cell in column x of row y.

    Args:
        x: Column index within row y
        y: Row index
        grid: The grid to read

    Returns:
        The cell, or None if row y does not exist or is shorter than x + 1
    """
    if _in_range(x, y, grid):
        return grid[y][x]
    return None


def set(x: int, y: int, value: T, grid: GridLike[T]) -> GridLike[T]:
    """
    Return a copy of the grid with cell (x, y) replaced by value.

    Out-of-range coordinates return the input grid itself.
    """
    return update(x, y, lambda _: value, grid)


def update(x: int, y: int, fn: Callable[[T], T], grid: GridLike[T]) -> GridLike[T]:
    """
    Return a copy of the grid with cell (x, y) replaced by fn(cell).

    Only row y is rebuilt; every other row is shared with the input. When
    (x, y) is outside the grid the input itself is returned, as given, and fn
    is not called.

    Args:
        x: Column index within row y
        y: Row index
        fn: Function from the current cell value to the new one
        grid: The grid to update (not modified)

    Returns:
        New grid with the updated cell, or grid itself when (x, y) is outside it
    """
    if not _in_range(x, y, grid):
        logger.debug("update: (%d, %d) is outside the grid, nothing changed", x, y)
        return grid

    rows = from_rows(grid)

    # Convert the target row to a mutable structure
    new_row = list(rows[y])
    new_row[x] = fn(new_row[x])

    # Splice it back in as an immutable tuple
    return rows[:y] + (tuple(new_row),) + rows[y + 1 :]
