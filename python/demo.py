"""
Demonstration scripts for the grid2d library.
"""

import logging
import operator
import sys

import grid2d
from grid_parser import parse_grid, parse_grids
from grid_render import render_grid, render_grids_flow
from grid_types import Position


def show(title: str, grid: grid2d.GridLike, highlight: Position | None = None) -> None:
    """Print a titled, boxed grid."""
    print("\n".join(render_grid(grid, title, highlight=highlight)))
    print()


def construction_demo() -> None:
    """Demonstrate building grids."""
    print("=== Construction ===")
    coords = grid2d.initialize(3, 2, lambda x, y: f"{x}{y}")
    show("initialize", coords)

    show("repeat", grid2d.repeat(4, 2, "."))

    # Negative dimensions give a grid with no rows
    show("negative", grid2d.initialize(-1, 3, lambda x, y: 0))


def transform_demo() -> None:
    """Demonstrate element-wise transforms on a jagged grid."""
    print("=== Transforms ===")
    grid = parse_grid("1 2 3|4 5|6 7 8 9", int)
    show("input", grid)
    show("map x10", grid2d.map(lambda n: n * 10, grid))
    show("indexed_map x+y", grid2d.indexed_map(lambda x, y, n: x + y, grid))
    show("filter even", grid2d.filter(lambda n: n % 2 == 0, grid))
    show(
        "filter_map odd^2",
        grid2d.filter_map(lambda n: n * n if n % 2 else None, grid),
    )


def query_demo() -> None:
    """Demonstrate flattened queries."""
    print("=== Queries ===")
    grid = parse_grid("3 1 4|1 5|9 2 6 5", int)
    show("input", grid)
    print(f"size:       {grid2d.size(grid)}")
    print(f"foldl +:    {grid2d.foldl(operator.add, 0, grid)}")
    print(f"foldr -:    {grid2d.foldr(operator.sub, 0, grid)}")
    print(f"find_first >4: {grid2d.find_first(lambda n: n > 4, grid)}")
    print(f"find_last >4:  {grid2d.find_last(lambda n: n > 4, grid)}")
    print(f"member 9:   {grid2d.member(9, grid)}")
    print(f"any >8:     {grid2d.any(lambda n: n > 8, grid)}")
    print(f"all >0:     {grid2d.all(lambda n: n > 0, grid)}")
    print(f"min / max:  {grid2d.minimum(grid)} / {grid2d.maximum(grid)}")
    print(f"min of [[]]: {grid2d.minimum([[]])}")
    print()


def cell_demo() -> None:
    """Demonstrate coordinate-addressed access."""
    print("=== Cell access ===")
    board = grid2d.repeat(3, 3, 0)
    board = grid2d.set(1, 1, 5, board)
    board = grid2d.update(1, 1, lambda n: n + 1, board)
    show("set + update", board, highlight=Position(1, 1))

    print(f"get (1, 1):  {grid2d.get(1, 1, board)}")
    print(f"get (3, 0):  {grid2d.get(3, 0, board)}")
    print(f"get (-1, 0): {grid2d.get(-1, 0, board)}")
    unchanged = grid2d.set(7, 7, 9, board)
    print(f"set (7, 7) unchanged: {unchanged == board}")
    print()


def flow_demo() -> None:
    """Demonstrate rendering several named grids side by side."""
    print("=== Flow layout ===")
    grids = parse_grids(
        """
        board: 1_2|3|456
        mask: 10|01
        wide: 123456789
        """
    )
    print(render_grids_flow(grids, terminal_width=40))


if __name__ == "__main__":
    level = logging.DEBUG if "--verbose" in sys.argv else logging.INFO
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')
    construction_demo()
    transform_demo()
    query_demo()
    cell_demo()
    flow_demo()
