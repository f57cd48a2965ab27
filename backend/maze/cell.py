from typing import TYPE_CHECKING, List, Optional

from .geometry import Direction, neighbour_index, wall_index
from .maze_errors import InvalidDirectionError

if TYPE_CHECKING:
    from .maze import Maze
    from .wall import Wall


class Cell:
    def __init__(self, x: int, y: int, maze: "Maze"):
        self.x = x
        self.y = y
        self.maze = maze

    @property
    def center_x(self) -> float:
        return self.x + 0.5

    @property
    def center_y(self) -> float:
        return self.y + 0.5

    def has_neighbour(self, direction: Direction) -> bool:
        if direction == Direction.TOP:
            return self.y != 0
        if direction == Direction.RIGHT:
            return self.x != self.maze.width - 1
        if direction == Direction.BOTTOM:
            return self.y != self.maze.height - 1
        if direction == Direction.LEFT:
            return self.x != 0
        raise InvalidDirectionError(f"has_neighbour: bad direction {direction!r}")

    def wall(self, direction: Direction) -> "Wall":
        wx, wy = wall_index(self.x, self.y, direction)
        return self.maze.get_wall(wx, wy)

    def neighbour(self, direction: Direction) -> Optional["Cell"]:
        """Cell across the given side, or None on the grid edge."""
        if not self.has_neighbour(direction):
            return None
        nx, ny = neighbour_index(self.x, self.y, direction)
        return self.maze.get_cell(nx, ny)

    @property
    def walls(self) -> List["Wall"]:
        # Indexed by Direction.value
        return [self.wall(d) for d in Direction]

    @property
    def neighbours(self) -> List[Optional["Cell"]]:
        return [self.neighbour(d) for d in Direction]

    def __repr__(self) -> str:
        return f"Cell({self.x}, {self.y})"
