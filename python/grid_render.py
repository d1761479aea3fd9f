"""
ASCII rendering for grid2d grids.

Provides two rendering approaches:
1. Single grid rendering - a boxed character display with optional title and highlight
2. Flow rendering - several named grids laid out side by side, wrapping at the terminal width
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Sequence

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Position, RenderStyle

__all__ = ["PALETTE", "render_grid", "render_grids_flow"]

logger = logging.getLogger(__name__)

# Colours handed out to grids in flow layout, cycling when exhausted
PALETTE: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def _plain(s: str) -> str:
    return s


def _cell_text(cell: object, cell_width: int, style: RenderStyle) -> str:
    """Centre the cell's text in cell_width characters, truncating long values."""
    text = style.empty_marker if cell is None else str(cell)
    return text[:cell_width].center(cell_width)


def _max_width(grid: Sequence[Sequence[object]]) -> int:
    return max((len(row) for row in grid), default=0)


def render_grid(
    grid: Sequence[Sequence[object]],
    title: str | None = None,
    cell_width: int = 3,
    highlight: Position | None = None,
    colorize: Callable[[str], str] | None = None,
    style: RenderStyle = RenderStyle(),
) -> list[str]:
    """
    Render a single grid as a boxed character display.

    Rows shorter than the widest row are padded with the first character of
    style.missing_marker so the border stays rectangular; cells holding None
    show style.empty_marker.

    Args:
        grid: The grid to render
        title: Optional title centred in the top border (dropped if it does not fit)
        cell_width: Characters per cell (default 3)
        highlight: Optional position to draw in white-on-black
        colorize: Optional colouriser for borders and cells (default: no colour)
        style: Characters used for empty and missing cells

    Returns:
        List of strings representing the rendered grid lines
    """
    if colorize is None:
        colorize = _plain

    cols = _max_width(grid)
    border_width = 2  # left and right borders
    grid_width = cols * cell_width + border_width

    lines: list[str] = []

    # Top border with title
    title_line = "┌" + "─" * (grid_width - 2) + "┐"
    label = f" {title} " if title and style.show_title else ""
    if label and len(label) <= grid_width - 2:
        title_start = (grid_width - len(label)) // 2
        title_line = (
            "┌" +
            "─" * (title_start - 1) +
            label +
            "─" * (grid_width - title_start - len(label) - 1) +
            "┐"
        )
    lines.append(colorize(title_line))

    # Grid rows
    for y, row in enumerate(grid):
        line_parts = [colorize("│")]

        for x in range(cols):
            if x >= len(row):
                line_parts.append((style.missing_marker[:1] or " ") * cell_width)
                continue

            content = _cell_text(row[x], cell_width, style)
            if highlight is not None and highlight == Position(x, y):
                content = chalk.bgWhite.black(content)
            else:
                content = colorize(content)
            line_parts.append(content)

        line_parts.append(colorize("│"))
        lines.append("".join(line_parts))

    # Bottom border
    lines.append(colorize("└" + "─" * (grid_width - 2) + "┘"))

    return lines


def render_grids_flow(
    grids: Mapping[str, Sequence[Sequence[object]]],
    terminal_width: int = 120,
    cell_width: int = 3,
    style: RenderStyle = RenderStyle(),
) -> str:
    """
    Render several named grids in flow layout (multiple grids per line).

    Each grid gets its own colour from PALETTE, assigned in sorted name order.

    Args:
        grids: Mapping of grid name to grid
        terminal_width: Maximum width for layout (default 120)
        cell_width: Characters per cell (default 3)
        style: Characters used for empty and missing cells

    Returns:
        Rendered string with all grids in flow layout
    """
    names = sorted(grids.keys())
    grid_colors: dict[str, Callable[[str], str]] = {
        name: PALETTE[i % len(PALETTE)] for i, name in enumerate(names)
    }

    rendered: dict[str, list[str]] = {}
    # Visible widths; the rendered strings carry ANSI codes so len() overcounts
    widths: dict[str, int] = {}
    for name in names:
        grid = grids[name]
        rendered[name] = render_grid(
            grid, name, cell_width, colorize=grid_colors[name], style=style
        )
        widths[name] = _max_width(grid) * cell_width + 2

    output_lines: list[str] = []
    grid_spacing = 2  # spaces between grids
    flow_lines = 0

    current_names: list[str] = []
    current_width = 0

    for name in names:
        needed_width = widths[name]
        if current_names:
            needed_width += grid_spacing

        if current_names and current_width + needed_width > terminal_width:
            _flush_grid_row(current_names, rendered, widths, output_lines, grid_spacing)
            flow_lines += 1
            current_names = []
            current_width = 0
            needed_width = widths[name]

        current_names.append(name)
        current_width += needed_width

    if current_names:
        _flush_grid_row(current_names, rendered, widths, output_lines, grid_spacing)
        flow_lines += 1

    logger.info(
        "render_grids_flow: %d grids on %d lines (terminal_width=%d)",
        len(names),
        flow_lines,
        terminal_width,
    )
    return "\n".join(output_lines)


def _flush_grid_row(
    row_names: list[str],
    rendered: dict[str, list[str]],
    widths: dict[str, int],
    output_lines: list[str],
    grid_spacing: int,
) -> None:
    """Append one line of side-by-side grids to output_lines."""
    max_height = max(len(rendered[name]) for name in row_names)

    for line_idx in range(max_height):
        line_parts = []
        for name in row_names:
            grid_lines = rendered[name]
            if line_idx < len(grid_lines):
                line_parts.append(grid_lines[line_idx])
            else:
                line_parts.append(" " * widths[name])
        output_lines.append((" " * grid_spacing).join(line_parts))

    # Blank line between lines of grids
    output_lines.append("")
