from collections import deque
from dataclasses import dataclass
from typing import List, Optional

from .maze import Maze


@dataclass
class ValidationIssue:
    message: str
    x: Optional[int] = None
    y: Optional[int] = None


class MazeValidator:
    @staticmethod
    def validate_connectivity(maze: Maze) -> List[ValidationIssue]:
        """
        Checks that every cell can be reached from (0, 0) through open walls.
        Returns a list of ValidationIssue, one per unreachable cell.
        """
        issues: List[ValidationIssue] = []

        start = maze.get_cell(0, 0)
        visited = {(start.x, start.y)}
        queue = deque([start])

        while queue:
            cell = queue.popleft()
            for other in maze.open_neighbours(cell):
                if (other.x, other.y) in visited:
                    continue
                visited.add((other.x, other.y))
                queue.append(other)

        for cell in maze.iter_cells():
            if (cell.x, cell.y) not in visited:
                issues.append(ValidationIssue(
                    message=f"Cell ({cell.x},{cell.y}) is not reachable from (0,0)",
                    x=cell.x, y=cell.y
                ))

        return issues

    @staticmethod
    def validate_structure(maze: Maze) -> List[ValidationIssue]:
        """
        Checks the outer boundary is closed and the carved walls form a tree
        (exactly width * height - 1 passages).
        """
        issues: List[ValidationIssue] = []

        carved = 0
        for wall in maze.iter_walls():
            if wall.present:
                continue

            on_boundary = (
                (wall.y == 0 and wall.end_y == 0) or
                (wall.y == maze.height and wall.end_y == maze.height) or
                (wall.x == 0 and wall.end_x == 0) or
                (wall.x == maze.width and wall.end_x == maze.width)
            )
            if on_boundary:
                issues.append(ValidationIssue(
                    message=f"Boundary wall at ({wall.x},{wall.y}) is open",
                    x=wall.x, y=wall.y
                ))
            else:
                carved += 1

        expected = maze.width * maze.height - 1
        if carved != expected:
            issues.append(ValidationIssue(
                message=f"Maze has {carved} passages, expected {expected}"
            ))

        return issues
