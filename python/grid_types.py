"""
Shared type definitions for the grid2d library.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Direction(Enum):
    """Cardinal direction for cursor movement."""

    N = "N"  # Up (decreasing y)
    S = "S"  # Down (increasing y)
    E = "E"  # Right (increasing x)
    W = "W"  # Left (decreasing x)


# =============================================================================
# Grid Definition Types
# =============================================================================


Grid2D = tuple[tuple[T, ...], ...]
"""A sequence of rows, each an independently sized tuple of cells."""


@dataclass(frozen=True)
class Position:
    """A cell coordinate: x is the column, y is the row."""

    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        """Return the neighbouring position in the given direction."""
        match direction:
            case Direction.N:
                return Position(self.x, self.y - 1)
            case Direction.S:
                return Position(self.x, self.y + 1)
            case Direction.E:
                return Position(self.x + 1, self.y)
            case Direction.W:
                return Position(self.x - 1, self.y)
        raise ValueError(f"Unknown direction: {direction}")


@dataclass(frozen=True)
class RenderStyle:
    """Characters used when drawing a grid."""

    empty_marker: str = "_"  # Shown for cells holding None
    missing_marker: str = " "  # Shown where a shorter row has no cell; first character only
    show_title: bool = True
