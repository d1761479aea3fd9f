"""
Grid parsing utilities for grid2d.

Provides three parsing formats:
1. Standard format with whitespace-separated cells
2. Concise format with single-character cells
3. Named multi-grid format, one concise grid per line
"""

from __future__ import annotations

import logging
from typing import Callable

import grid2d
from grid_types import Grid2D, T

__all__ = ["parse_grid", "parse_grid_concise", "parse_grids"]

logger = logging.getLogger(__name__)


def _convert_cell(
    convert: Callable[[str], T],
    cell_str: str,
    row_idx: int,
    col_idx: int,
    row_str: str,
) -> T:
    """Run convert on one cell, reporting where the cell came from on failure."""
    try:
        return convert(cell_str)
    except (ValueError, TypeError) as e:
        raise ValueError(
            f"Invalid cell string: '{cell_str}'\n"
            f"  Row {row_idx}: \"{row_str}\"\n"
            f"  Position: column {col_idx}\n"
            f"  Conversion failed: {e}"
        ) from e


def _log_parsed(label: str, grid: Grid2D[T]) -> None:
    logger.debug(
        "%s: %d rows, %d cells, rectangular=%s",
        label,
        grid2d.height(grid),
        grid2d.size(grid),
        grid2d.is_rectangular(grid),
    )


def parse_grid(definition: str, convert: Callable[[str], T] = str) -> Grid2D[T]:
    """
    Parse a grid from a compact string format.

    Format:
    - Rows separated by |
    - Cells separated by whitespace (any run of spaces counts as one separator)
    - Each cell's text is passed through convert
    - Rows may have different lengths; they are kept as written
    - A row with no cells (e.g. "1 2||3") is an empty row
    - An empty or all-whitespace definition is a grid with no rows

    Example:
        parse_grid("1 2 3|4 5|", int)
        Creates: ((1, 2, 3), (4, 5), ())

    Args:
        definition: The grid text
        convert: Function turning each cell string into a cell value (default str)

    Returns:
        The parsed grid

    Raises:
        ValueError: If convert rejects a cell
    """
    if not definition.strip():
        return ()

    rows: list[tuple[T, ...]] = []
    for row_idx, row_str in enumerate(definition.split("|")):
        cells = [
            _convert_cell(convert, cell_str, row_idx, col_idx, row_str)
            for col_idx, cell_str in enumerate(row_str.split())
        ]
        rows.append(tuple(cells))

    grid = tuple(rows)
    _log_parsed("parse_grid", grid)
    return grid


def _parse_concise_rows(
    grid_def: str, convert: Callable[[str], T], grid_name: str | None = None
) -> Grid2D[T]:
    location = f" in grid '{grid_name}'" if grid_name is not None else ""
    rows: list[tuple[T, ...]] = []

    for row_idx, row_str in enumerate(grid_def.split("|")):
        cells: list[T] = []

        # Each character is a cell
        for col_idx, char in enumerate(row_str):
            if char.isspace():
                raise ValueError(
                    f"Whitespace inside a row{location}\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Concise grids use exactly one character per cell"
                )
            cells.append(_convert_cell(convert, char, row_idx, col_idx, row_str))

        rows.append(tuple(cells))

    return tuple(rows)


def parse_grid_concise(definition: str, convert: Callable[[str], T] = str) -> Grid2D[T]:
    """
    Parse a grid where every character is a cell.

    Format:
    - Rows separated by |
    - One character per cell, no separators
    - Leading and trailing whitespace of the whole definition is ignored
    - Whitespace inside the definition is an error

    Example:
        parse_grid_concise("123|45", int)
        Creates: ((1, 2, 3), (4, 5))

    Args:
        definition: The grid text
        convert: Function turning each character into a cell value (default str)

    Returns:
        The parsed grid

    Raises:
        ValueError: If a row contains whitespace or convert rejects a cell
    """
    stripped = definition.strip()
    if not stripped:
        return ()

    grid = _parse_concise_rows(stripped, convert)
    _log_parsed("parse_grid_concise", grid)
    return grid


def parse_grids(definition: str, convert: Callable[[str], T] = str) -> dict[str, Grid2D[T]]:
    """
    Parse several named grids from a concise multi-line format.

    Format:
    - One grid per line: "name: grid_definition"
    - Grid definitions use the concise format (one character per cell)
    - Blank lines are ignored
    - Grid names must be unique

    Example:
        \"\"\"
        board: 12_3|4
        mask: 10|01
        \"\"\"

        Creates:
        - "board": (("1", "2", "_", "3"), ("4",))
        - "mask": (("1", "0"), ("0", "1"))

    Args:
        definition: Multi-line string with one grid per line
        convert: Function turning each character into a cell value (default str)

    Returns:
        Dict mapping grid name to grid, in definition order

    Raises:
        ValueError: If a line is malformed, a name repeats, or a cell is invalid
    """
    grids: dict[str, Grid2D[T]] = {}
    lines = [line.strip() for line in definition.strip().split("\n") if line.strip()]

    for line_idx, line in enumerate(lines):
        if ":" not in line:
            raise ValueError(
                f"Invalid grid definition on line {line_idx + 1}: '{line}'\n"
                f"  Expected format: 'name: grid_definition'"
            )

        grid_name, grid_def = (part.strip() for part in line.split(":", 1))

        if not grid_name:
            raise ValueError(f"Empty grid name on line {line_idx + 1}: '{line}'")

        if grid_name in grids:
            raise ValueError(
                f"Duplicate grid name '{grid_name}' on line {line_idx + 1}\n"
                f"  Grid names must be unique"
            )

        grid = _parse_concise_rows(grid_def, convert, grid_name) if grid_def else ()
        _log_parsed(f"parse_grids[{grid_name}]", grid)
        grids[grid_name] = grid

    return grids
