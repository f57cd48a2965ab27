import argparse
import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from generator.maze_generator import MazeGenerator
from maze.maze import Maze
from maze.maze_validator import MazeValidator


def run_once(args):
    maze = Maze(args.width, args.height)
    generator = MazeGenerator(maze, rng=random.Random(args.seed))
    report = generator.generate(args.river_factor)

    print("Maze Layout:")
    print(maze.serialize(), end="")

    print(f"\nriver_limit={report.river_limit} seeds={report.seeds} carved={report.carved}")
    print(f"longest_run={report.longest_run} runs={report.run_depths[:20]}{' ...' if len(report.run_depths) > 20 else ''}")

    issues = MazeValidator.validate_connectivity(maze) + MazeValidator.validate_structure(maze)
    for issue in issues:
        print(f"ISSUE: {issue.message}")
    return not issues


def main():
    parser = argparse.ArgumentParser(description="Generate and print a maze with its generation stats")
    parser.add_argument("--width", type=int, default=20)
    parser.add_argument("--height", type=int, default=20)
    parser.add_argument("--river-factor", type=float, default=0.1)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    ok = run_once(args)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
