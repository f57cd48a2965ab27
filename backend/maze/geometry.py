"""Index math shared by cells, walls and the generator.

Walls are stored in ``2h + 1`` rows. Even rows hold the ``w`` horizontal walls
above a cell-row (row ``2h`` holds the ones below the last row), odd rows hold
the ``w + 1`` vertical walls beside a cell-row.
"""

from enum import Enum
from typing import Tuple

from .maze_errors import InvalidDirectionError

Index = Tuple[int, int]


class Direction(Enum):
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3

    @property
    def opposite(self) -> "Direction":
        return Direction((self.value + 2) % 4)


class WallOrientation(Enum):
    HORIZONTAL = 0
    VERTICAL = 1


def wall_index(x: int, y: int, direction: Direction) -> Index:
    """Storage index of the wall on the given side of cell (x, y)."""
    if direction == Direction.TOP:
        return x, y * 2
    if direction == Direction.RIGHT:
        return x + 1, y * 2 + 1
    if direction == Direction.BOTTOM:
        return x, y * 2 + 2
    if direction == Direction.LEFT:
        return x, y * 2 + 1
    raise InvalidDirectionError(f"wall_index: bad direction {direction!r}")


def neighbour_index(x: int, y: int, direction: Direction) -> Index:
    """Coordinates of the cell across the given side of cell (x, y)."""
    if direction == Direction.TOP:
        return x, y - 1
    if direction == Direction.RIGHT:
        return x + 1, y
    if direction == Direction.BOTTOM:
        return x, y + 1
    if direction == Direction.LEFT:
        return x - 1, y
    raise InvalidDirectionError(f"neighbour_index: bad direction {direction!r}")


def wall_orientation_for_row(wy: int) -> WallOrientation:
    return WallOrientation.VERTICAL if wy & 1 else WallOrientation.HORIZONTAL


def wall_row_length(wy: int, width: int) -> int:
    if wall_orientation_for_row(wy) == WallOrientation.VERTICAL:
        return width + 1
    return width
