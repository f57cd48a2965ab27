# core/game_session.py
import logging
import random
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from generator.maze_generator import GenerationReport, MazeGenerator
from generator.rules import GeneratorRules
from maze.cell import Cell
from maze.maze import Maze
from maze.maze_validator import MazeValidator, ValidationIssue

from .confiner import clamp_delta, confine

logger = logging.getLogger(__name__)

# Keeps the per-step move below the ball radius
MOVE_MARGIN = 2


@dataclass
class GameConfig:
    width: int = 20
    height: int = 20
    cell_width: float = 20        # pixels per cell
    ball_radius: float = 8        # pixels
    river_factor: float = 0.1
    seed: Optional[int] = None    # fixed seed for reproducible mazes

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError("Maze must be at least 1x1")
        if self.cell_width <= 0:
            raise ValueError("cell_width must be positive")
        if self.ball_radius <= MOVE_MARGIN:
            raise ValueError(f"ball_radius must be greater than {MOVE_MARGIN}")
        if self.ball_radius * 2 > self.cell_width:
            raise ValueError("Ball does not fit in a cell")
        # Fail on a bad river factor at config time, not at first restart
        GeneratorRules(river_factor=self.river_factor)

    @property
    def max_move(self) -> float:
        return self.ball_radius - MOVE_MARGIN


@dataclass
class StepResult:
    x: float
    y: float
    cell: Tuple[int, int]
    won: bool = False
    wins: int = 0
    # Maze the session restarted into, taken under the same lock as the move
    maze: Optional[Dict[str, Any]] = None
    text: Optional[str] = None


class GameSession:
    """
    One player's maze and ball.

    Responsibilities:
    - Own the Maze and regenerate it on restart
    - Bound the raw input delta and confine the ball against walls
    - Detect reaching the last cell and start a new maze

    restart() and step() hold the same lock, so a step never sees a maze
    that is half generated.
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self.maze = Maze(config.width, config.height)
        self._generator = MazeGenerator(self.maze, rng=random.Random(config.seed))
        self._lock = threading.Lock()

        self.ball_x: float = 0.0
        self.ball_y: float = 0.0
        self.wins: int = 0
        self.generations: int = 0
        self.last_report: Optional[GenerationReport] = None

        self.restart()

    # -------------------------------------------------
    # Lifecycle
    # -------------------------------------------------

    def restart(self) -> GenerationReport:
        with self._lock:
            return self._restart_locked()

    def _restart_locked(self) -> GenerationReport:
        self.maze.reset()
        report = self._generator.generate(self.config.river_factor)
        self.generations += 1
        self.last_report = report

        start = self.maze.get_cell(0, 0)
        self.ball_x = start.center_x * self.config.cell_width
        self.ball_y = start.center_y * self.config.cell_width

        logger.info(
            "Maze %dx%d generated (#%d, seeds=%d)",
            self.maze.width, self.maze.height, self.generations, report.seeds,
        )
        return report

    # -------------------------------------------------
    # Movement
    # -------------------------------------------------

    def step(self, dx: float, dy: float) -> StepResult:
        with self._lock:
            dx, dy = clamp_delta(dx, dy, self.config.max_move)
            x, y = confine(
                self.maze,
                self.config.cell_width,
                self.config.ball_radius,
                self.ball_x + dx,
                self.ball_y + dy,
            )
            self.ball_x, self.ball_y = x, y

            cell = self._ball_cell_locked()
            result = StepResult(x=x, y=y, cell=(cell.x, cell.y))

            if self._is_goal(cell):
                self.wins += 1
                logger.info("Goal reached at (%d,%d); wins=%d", cell.x, cell.y, self.wins)
                result.won = True
                self._restart_locked()
                result.maze = self.maze.to_dict()
                result.text = self.maze.serialize()

            result.wins = self.wins
            return result

    def _is_goal(self, cell: Cell) -> bool:
        return cell.x == self.maze.width - 1 and cell.y == self.maze.height - 1

    def _ball_cell_locked(self) -> Cell:
        cw = self.config.cell_width
        return self.maze.get_cell(self.ball_x / cw, self.ball_y / cw)

    # -------------------------------------------------
    # Read access
    # -------------------------------------------------

    def ball_cell(self) -> Cell:
        with self._lock:
            return self._ball_cell_locked()

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            cell = self._ball_cell_locked()
            return {
                "maze": self.maze.to_dict(),
                "text": self.maze.serialize(),
                "ball": {"x": self.ball_x, "y": self.ball_y, "radius": self.config.ball_radius},
                "cell": [cell.x, cell.y],
                "cell_width": self.config.cell_width,
                "wins": self.wins,
                "generations": self.generations,
            }

    def validate_maze(self) -> Tuple[List[ValidationIssue], List[ValidationIssue]]:
        """Connectivity and structure issues of the current maze."""
        with self._lock:
            return (
                MazeValidator.validate_connectivity(self.maze),
                MazeValidator.validate_structure(self.maze),
            )
