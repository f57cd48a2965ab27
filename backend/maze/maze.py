import math
from typing import Any, Dict, Iterator, List

from .cell import Cell
from .geometry import Direction, WallOrientation, wall_row_length
from .maze_errors import OutOfRangeError
from .wall import Wall


class Maze:
    """
    Rectangular maze of `width` x `height` cells.

    Walls live in a jagged array of 2 * height + 1 rows (see `maze.geometry`).
    A new maze has every wall present.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Maze must be at least 1x1, got {width}x{height}")

        self.width = width
        self.height = height

        self.walls: List[List[Wall]] = []
        for y in range(height):
            self.walls.append([Wall(x, y, WallOrientation.HORIZONTAL) for x in range(width)])
            self.walls.append([Wall(x, y, WallOrientation.VERTICAL) for x in range(width + 1)])
        self.walls.append([Wall(x, height, WallOrientation.HORIZONTAL) for x in range(width)])

        self.cells: List[List[Cell]] = [
            [Cell(x, y, self) for x in range(width)]
            for y in range(height)
        ]

    # ------------------------
    # Lookups
    # ------------------------

    def get_cell(self, x: float, y: float) -> Cell:
        """Cell containing (x, y). Continuous coordinates are floored."""
        cx = math.floor(x)
        cy = math.floor(y)
        if not (0 <= cx < self.width and 0 <= cy < self.height):
            raise OutOfRangeError(f"Cell ({x},{y}) is outside {self.width}x{self.height} maze")
        return self.cells[cy][cx]

    def get_wall(self, wx: int, wy: int) -> Wall:
        if not 0 <= wy < len(self.walls):
            raise OutOfRangeError(f"Wall row {wy} is outside maze")
        if not 0 <= wx < wall_row_length(wy, self.width):
            raise OutOfRangeError(f"Wall ({wx},{wy}) is outside maze")
        return self.walls[wy][wx]

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def iter_walls(self) -> Iterator[Wall]:
        for row in self.walls:
            yield from row

    def wall_between(self, a: Cell, b: Cell) -> Wall:
        for direction in Direction:
            if a.neighbour(direction) is b:
                return a.wall(direction)
        raise ValueError(f"{a} and {b} are not adjacent")

    def open_neighbours(self, cell: Cell) -> List[Cell]:
        """Neighbours reachable from `cell` through an absent wall."""
        result = []
        for direction in Direction:
            other = cell.neighbour(direction)
            if other is not None and not cell.wall(direction).present:
                result.append(other)
        return result

    # ------------------------
    # Mutation
    # ------------------------

    def reset(self) -> None:
        """Put every wall back. Cells and walls are reused."""
        for wall in self.iter_walls():
            wall.present = True

    # ------------------------
    # Serialization
    # ------------------------

    def serialize(self) -> str:
        """
        Text dump, three characters per cell:

            .__.__.
            |  .__|
            |__|__|
        """
        lines = []
        top = ""
        for x in range(self.width):
            top += "."
            top += "__" if self.get_wall(x, 0).present else "  "
        lines.append(top + ".")

        for y in range(1, self.height + 1):
            row = ""
            for x in range(self.width):
                row += "|" if self.get_wall(x, y * 2 - 1).present else "."
                row += "__" if self.get_wall(x, y * 2).present else "  "
            row += "|" if self.get_wall(self.width, y * 2 - 1).present else "."
            lines.append(row)

        return "".join(line + "\n" for line in lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "walls": [wall.to_dict() for wall in self.iter_walls()],
        }

    def __str__(self) -> str:
        return self.serialize()
