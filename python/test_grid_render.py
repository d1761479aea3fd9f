"""Tests for grid_render module."""

import logging
import re

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_render import render_grid, render_grids_flow
from grid_types import Position, RenderStyle

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI.sub("", text)


class TestRenderGrid:
    """Tests for rendering a single grid."""

    def test_rectangular_grid(self) -> None:
        """Render a 2x2 grid with a title."""
        lines = render_grid([[1, 2], [3, 4]], "t")
        assert lines == [
            "┌─ t ──┐",
            "│ 1  2 │",
            "│ 3  4 │",
            "└──────┘",
        ]

    def test_jagged_rows_padded(self) -> None:
        """Short rows are padded with the missing marker."""
        lines = render_grid([[1, 2], [3], []])
        assert lines == [
            "┌──────┐",
            "│ 1  2 │",
            "│ 3    │",
            "│      │",
            "└──────┘",
        ]

    def test_custom_style(self) -> None:
        """RenderStyle controls the markers and title."""
        style = RenderStyle(empty_marker="?", missing_marker="#", show_title=False)
        lines = render_grid([[None, 1], [2]], "hidden", cell_width=1, style=style)
        assert lines == ["┌──┐", "│?1│", "│2#│", "└──┘"]

    def test_missing_marker_one_character(self) -> None:
        """Only the first character of a long missing marker pads short rows."""
        style = RenderStyle(missing_marker="ab")
        lines = render_grid([[1, 2], [3]], style=style)
        assert lines[2] == "│ 3 aaa│"
        assert len(lines[2]) == len(lines[0])

    def test_none_cell(self) -> None:
        """Cells holding None show the empty marker."""
        assert render_grid([[None]])[1] == "│ _ │"

    def test_long_values_truncated(self) -> None:
        """Values wider than cell_width are cut."""
        assert render_grid([["hello"]])[1] == "│hel│"

    def test_title_too_long_dropped(self) -> None:
        """A title that does not fit leaves a plain border."""
        assert render_grid([[1]], "a long title")[0] == "┌───┐"

    def test_empty_grid(self) -> None:
        """A grid with no rows renders as an empty box."""
        assert render_grid([]) == ["┌┐", "└┘"]

    def test_highlight(self) -> None:
        """The highlighted cell is drawn white-on-black."""
        plain = render_grid([[1, 2]])
        highlighted = render_grid([[1, 2]], highlight=Position(1, 0))
        assert highlighted[1] == "│ 1 " + chalk.bgWhite.black(" 2 ") + "│"
        assert strip_ansi(highlighted[1]) == plain[1]

    def test_highlight_outside_grid_ignored(self) -> None:
        """Highlighting a missing cell changes nothing."""
        assert render_grid([[1, 2], [3]], highlight=Position(1, 1)) == render_grid([[1, 2], [3]])

    def test_colorize(self) -> None:
        """The colouriser is applied to borders and cells."""
        lines = render_grid([[1]], colorize=lambda s: s.replace("1", "X"))
        assert lines[1] == "│ X │"


class TestRenderGridsFlow:
    """Tests for flow layout of several grids."""

    def test_side_by_side(self) -> None:
        """Grids that fit share a line."""
        output = render_grids_flow({"b": [[2]], "a": [[1]]}, terminal_width=12)
        assert strip_ansi(output).split("\n") == [
            "┌ a ┐  ┌ b ┐",
            "│ 1 │  │ 2 │",
            "└───┘  └───┘",
            "",
        ]

    def test_wraps(self) -> None:
        """Grids that do not fit start a new line."""
        output = render_grids_flow({"a": [[1]], "b": [[2]]}, terminal_width=11)
        assert strip_ansi(output).split("\n") == [
            "┌ a ┐",
            "│ 1 │",
            "└───┘",
            "",
            "┌ b ┐",
            "│ 2 │",
            "└───┘",
            "",
        ]

    def test_different_heights(self) -> None:
        """Shorter grids are padded with blank lines."""
        output = render_grids_flow({"a": [[1], [3]], "b": [[2]]})
        lines = strip_ansi(output).split("\n")
        assert lines[3] == "└───┘  " + " " * 5

    def test_logs_layout(self, caplog) -> None:
        """The layout decision is logged at INFO."""
        with caplog.at_level(logging.INFO, logger="grid_render"):
            render_grids_flow({"a": [[1]], "b": [[2]]}, terminal_width=11)
        assert "2 grids on 2 lines" in caplog.text
