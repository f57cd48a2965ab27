import logging
import random
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from maze.cell import Cell
from maze.geometry import Direction
from maze.maze import Maze

from .rules import GeneratorRules

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    river_limit: int
    seeds: int = 0            # cells taken off the work queue
    carved: int = 0           # walls removed
    visits: int = 0           # cells marked visited
    # carve steps of the longest chain grown from each seed, in seed order
    run_depths: List[int] = field(default_factory=list)

    @property
    def longest_run(self) -> int:
        return max(self.run_depths, default=0)


class MazeGenerator:
    """
    Depth-limited DFS carving, chained breadth-first through a work queue.

    1. Carve a random depth-first path from a seed cell, backtracking as usual,
       but never deeper than `river_limit` steps from the seed.
    2. Cells reached at the depth limit go onto the work queue.
    3. Pick a random queued cell and repeat until the queue is empty.

    Plain DFS leaves many tiny dead ends next to an easy main path; the limit
    makes every branch long while keeping the maze bushy.
    See http://www.astrolog.org/labyrnth/algrithm.htm
    """

    def __init__(self, maze: Maze, rng: Optional[Any] = None):
        self.maze = maze
        # Anything with randrange(); the random module itself by default
        self._rng = rng if rng is not None else random
        self.visited: List[List[bool]] = [
            [False for _ in range(maze.width)]
            for _ in range(maze.height)
        ]
        self.queue: List[Cell] = []

    def _reset(self):
        for row in self.visited:
            for x in range(len(row)):
                row[x] = False
        self.queue = []

    def is_visited(self, cell: Cell) -> bool:
        return self.visited[cell.y][cell.x]

    def _mark_visited(self, cell: Cell, report: GenerationReport):
        self.visited[cell.y][cell.x] = True
        report.visits += 1

    def available_directions(self, cell: Cell) -> List[Direction]:
        result = []
        for direction in Direction:
            other = cell.neighbour(direction)
            if other is not None and not self.is_visited(other):
                result.append(direction)
        return result

    def _take_from_queue(self) -> Cell:
        # Order in the queue carries no meaning, so swap-remove
        n = self._rng.randrange(len(self.queue))
        self.queue[n], self.queue[-1] = self.queue[-1], self.queue[n]
        return self.queue.pop()

    def generate(self, river_factor: float = 0.1) -> GenerationReport:
        """
        Carve passages into the maze, which should have all walls present.

        river_factor: 0..1, max corridor length as a share of the cell count.
        """
        rules = GeneratorRules(river_factor=river_factor)
        limit = rules.river_limit(self.maze.width, self.maze.height)
        report = GenerationReport(river_limit=limit)

        self._reset()
        start = self.maze.get_cell(0, 0)
        self._mark_visited(start, report)
        self.queue.append(start)

        while self.queue:
            seed = self._take_from_queue()
            report.seeds += 1
            report.run_depths.append(self._carve(seed, limit, report))

        logger.debug(
            "Generated %dx%d maze: river_limit=%d seeds=%d carved=%d",
            self.maze.width, self.maze.height, limit, report.seeds, report.carved,
        )
        return report

    def _carve(self, seed: Cell, budget: int, report: GenerationReport) -> int:
        """
        Depth-first carve from `seed` with an explicit stack of (cell, remaining).

        A frame with budget left keeps picking random unvisited neighbours
        until it has none; a frame with no budget is queued instead.
        Returns the deepest carve step reached.
        """
        deepest = 0
        stack: List[Tuple[Cell, int]] = [(seed, budget)]

        while stack:
            cell, remaining = stack[-1]

            if remaining <= 0:
                stack.pop()
                self.queue.append(cell)
                continue

            directions = self.available_directions(cell)
            if not directions:
                stack.pop()
                continue

            direction = directions[self._rng.randrange(len(directions))]
            cell.wall(direction).present = False
            report.carved += 1

            nxt = cell.neighbour(direction)
            self._mark_visited(nxt, report)
            stack.append((nxt, remaining - 1))
            deepest = max(deepest, budget - remaining + 1)

        return deepest
