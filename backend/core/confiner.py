# core/confiner.py
from typing import Tuple

from maze.geometry import Direction
from maze.maze import Maze

Point = Tuple[float, float]


def clamp_delta(dx: float, dy: float, max_move: float) -> Point:
    """Bound a per-step move so the ball never skips over a wall."""
    dx = max(-max_move, min(max_move, dx))
    dy = max(-max_move, min(max_move, dy))
    return dx, dy


def confine(maze: Maze, cell_width: float, radius: float, x: float, y: float) -> Point:
    """
    Restrict a candidate ball centre (pixels) to the open part of its cell.

    Walls are infinitely thin; the centre is kept `radius` away from each
    standing wall. Each axis is checked only against the wall on the side of
    the cell centre the point is on, so the step must be small compared to
    the cell (see `clamp_delta`).
    """
    cell = maze.get_cell(x / cell_width, y / cell_width)

    if x > cell.center_x * cell_width:
        wall = cell.wall(Direction.RIGHT)
        if wall.present and x > wall.x * cell_width - radius:
            x = wall.x * cell_width - radius
    else:
        wall = cell.wall(Direction.LEFT)
        if wall.present and x < wall.x * cell_width + radius:
            x = wall.x * cell_width + radius

    if y > cell.center_y * cell_width:
        wall = cell.wall(Direction.BOTTOM)
        if wall.present and y > wall.y * cell_width - radius:
            y = wall.y * cell_width - radius
    else:
        wall = cell.wall(Direction.TOP)
        if wall.present and y < wall.y * cell_width + radius:
            y = wall.y * cell_width + radius

    return x, y
