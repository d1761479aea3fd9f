"""
Interactive board editor for grid2d.
Display a board and edit its cells with keyboard commands.
"""

import logging
import operator

import readchar, sys
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

import grid2d
from grid_parser import parse_grid
from grid_render import render_grid
from grid_types import Direction, Grid2D, Position

logger = logging.getLogger(__name__)

MOVE_KEYS = {
    "w": Direction.N,
    "s": Direction.S,
    "a": Direction.W,
    "d": Direction.E,
}


class BoardEditor:
    """Interactive editor for a board of integers."""

    def __init__(self, board: Grid2D[int]) -> None:
        self.board = board
        self.original_board = board  # Keep the original state for reset
        self.cursor = Position(0, 0)
        self.console = Console()
        self.status_message = "Ready"

    @property
    def current_value(self) -> int | None:
        """Value under the cursor, or None if the cursor is off the board."""
        return grid2d.get(self.cursor.x, self.cursor.y, self.board)

    def statistics(self) -> dict[str, object]:
        """Summary of the board computed with the grid queries."""
        return {
            "cells": grid2d.size(self.board),
            "sum": grid2d.foldl(operator.add, 0, self.board),
            "min": grid2d.minimum(self.board),
            "max": grid2d.maximum(self.board),
            "any zero": grid2d.any(lambda n: n == 0, self.board),
            "all zero": grid2d.all(lambda n: n == 0, self.board),
        }

    def generate_display(self) -> Panel:
        """Generate the current display with board, statistics and status."""
        board_text = "\n".join(render_grid(self.board, "board", highlight=self.cursor))

        status = Text()
        status.append("Cursor: ", style="bold")
        status.append(f"({self.cursor.x}, {self.cursor.y})\n")
        status.append("Current Cell: ", style="bold")
        status.append(f"{self.current_value}\n\n")

        # Convert ANSI-colored board text to Rich Text properly
        status.append(Text.from_ansi(board_text))
        status.append("\n\n")

        for name, value in self.statistics().items():
            status.append(f"{name}: ", style="bold")
            status.append(f"{value}  ")
        status.append("\n\n")

        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Move cursor\n")
        status.append("  0-9 - Set cell\n")
        status.append("  +/- - Increment / decrement cell\n")
        status.append("  F - Fill board with current cell\n")
        status.append("  R - Reset to original board\n")
        status.append("  Q - Quit\n\n")

        # Status line at the bottom
        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="grid2d Board Editor", border_style="green", width=80)

    def move(self, direction: Direction) -> None:
        """Move the cursor, refusing moves onto positions with no cell."""
        target = self.cursor.step(direction)
        if grid2d.get(target.x, target.y, self.board) is None:
            self.status_message = f"✗ No cell {direction.value} of ({self.cursor.x}, {self.cursor.y})"
            return
        self.cursor = target
        self.status_message = f"✓ Moved {direction.value} to ({target.x}, {target.y})"

    def set_value(self, value: int) -> None:
        """Set the cell under the cursor."""
        self.board = grid2d.set(self.cursor.x, self.cursor.y, value, self.board)
        self.status_message = f"✓ Set ({self.cursor.x}, {self.cursor.y}) to {value}"

    def adjust(self, delta: int) -> None:
        """Add delta to the cell under the cursor."""
        self.board = grid2d.update(
            self.cursor.x, self.cursor.y, lambda n: n + delta, self.board
        )
        self.status_message = f"✓ Cell is now {self.current_value}"

    def fill(self) -> None:
        """Replace the board with a rectangle filled with the current value."""
        value = self.current_value
        if value is None:
            self.status_message = "✗ Nothing to fill with"
            return
        widest = max((len(row) for row in self.board), default=0)
        self.board = grid2d.repeat(widest, grid2d.height(self.board), value)
        self.status_message = f"✓ Filled board with {value}"

    def reset_board(self) -> None:
        """Reset the board to its original state."""
        self.board = self.original_board
        self.cursor = Position(0, 0)
        self.status_message = "Board reset to original state"

    def handle_key(self, key: str) -> bool:
        """Apply one key press. Returns False when the editor should stop."""
        key = key.lower()
        if key == "q":
            self.status_message = "Quitting..."
            return False
        elif key == "r":
            self.reset_board()
        elif key in MOVE_KEYS:
            self.move(MOVE_KEYS[key])
        elif key.isdigit():
            self.set_value(int(key))
        elif key == "+":
            self.adjust(1)
        elif key == "-":
            self.adjust(-1)
        elif key == "f":
            self.fill()
        else:
            self.status_message = f"Unknown key: {repr(key)}"
        return True

    def run(self) -> None:
        """Run the interactive editor."""
        if self.current_value is None:
            print("ERROR: Board has no cell at (0, 0)!")
            return

        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    if not self.handle_key(readchar.readkey()):
                        live.update(self.generate_display())
                        break

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    checker = "1 0 1 0 1|0 1 0 1 0|1 0 1 0 1|0 1 0 1 0",
    stairs = "1|2 2|3 3 3|4 4 4 4",
    blank = "0 0 0|0 0 0|0 0 0",
)


def main(board: Grid2D[int]) -> None:
    """Run the editor on the given board."""
    editor = BoardEditor(board)
    editor.run()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render the initial state
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        print('Running from IDE - rendering initial state')
        print()

        board = parse_grid(LAYOUTS['stairs'], int)
        print("\n".join(render_grid(board, "stairs", highlight=Position(0, 0))))
        logger.info("statistics: %s", BoardEditor(board).statistics())
    else:
        main(parse_grid(LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else 'checker'], int))
