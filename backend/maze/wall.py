from typing import Any, Dict, Tuple

from .geometry import WallOrientation


class Wall:
    """
    A removable barrier along one cell edge.

    `x`, `y` are geometric coordinates in cell units: a horizontal wall runs
    from (x, y) to (x + 1, y), a vertical one from (x, y) to (x, y + 1).
    Only `present` ever changes after construction.
    """

    def __init__(self, x: int, y: int, orientation: WallOrientation, present: bool = True):
        self.x = x
        self.y = y
        self.orientation = orientation
        self.present = present

    @property
    def end_x(self) -> int:
        if self.orientation == WallOrientation.HORIZONTAL:
            return self.x + 1
        return self.x

    @property
    def end_y(self) -> int:
        if self.orientation == WallOrientation.HORIZONTAL:
            return self.y
        return self.y + 1

    @property
    def index(self) -> Tuple[int, int]:
        """Position of this wall in the maze's jagged storage."""
        if self.orientation == WallOrientation.HORIZONTAL:
            return self.x, self.y * 2
        return self.x, self.y * 2 + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "orientation": self.orientation.name,
            "present": self.present,
        }

    def __repr__(self) -> str:
        return f"Wall({self.x}, {self.y}, {self.orientation.name}, present={self.present})"
