"""
Rush Hour Solver - Entry Point

Loads a puzzle file, runs a search strategy on a worker thread and prints
the step-by-step solution.

Example:
    python main.py puzzles/example.txt
    python main.py puzzles/example.txt --strategy idastar --heuristic h2
    python main.py puzzles/example.txt --compare
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from PyQt5.QtCore import QCoreApplication, Qt

from rushhour.puzzle import (
    PuzzleFormatError,
    format_comparison,
    format_solution,
    load_puzzle,
    save_debug_image,
    save_solution_frames,
    write_solution,
)
from rushhour.settings import load_settings, save_settings
from rushhour.solver import BoardState, Solution, get_heuristic_names, get_strategy_info, get_strategy_names
from rushhour.solver_worker import SearchWorker


logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1
EXIT_BAD_PUZZLE = 2
EXIT_BAD_CONFIG = 2


def setup_logging(level: int = logging.INFO):
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Command line controller.

    Owns the settings and runs each search on a SearchWorker, so Ctrl+C
    cancels the search instead of killing the process.
    """

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.settings = load_settings()

        # CLI flags override saved settings
        self.strategy_name = args.strategy or self.settings.get("strategy_name", "astar")
        self.heuristic_name = args.heuristic or self.settings.get("heuristic_name", "h1")
        self.timeout_sec = args.timeout if args.timeout is not None else self.settings.get("timeout_sec")
        self.debug_mode = args.debug or self.settings.get("debug_enabled", False)
        self.output_dir = Path(self.settings.get("output_dir", "output"))

        if args.debug:
            logging.getLogger().setLevel(logging.DEBUG)

    def run(self) -> int:
        """
        Load the puzzle and solve it.

        Returns:
            Exit code
        """
        if not self._check_names():
            return EXIT_BAD_CONFIG

        if self.args.save_defaults:
            self._save_defaults()

        try:
            board = load_puzzle(self.args.puzzle)
        except PuzzleFormatError as e:
            logger.error(f"Invalid puzzle: {e}")
            return EXIT_BAD_PUZZLE
        except OSError as e:
            logger.error(f"Cannot read puzzle: {e}")
            return EXIT_BAD_PUZZLE

        if self.args.compare:
            return self._run_comparison(board)
        return self._run_single(board)

    def _check_names(self) -> bool:
        """Reject strategy or heuristic names from config.json that are not registered."""
        if str(self.strategy_name).lower() not in get_strategy_names():
            logger.error(f"Unknown strategy '{self.strategy_name}' in settings. "
                         f"Available: {', '.join(get_strategy_names())}")
            return False
        if str(self.heuristic_name).lower() not in get_heuristic_names():
            logger.error(f"Unknown heuristic '{self.heuristic_name}' in settings. "
                         f"Available: {', '.join(get_heuristic_names())}")
            return False
        return True

    def _run_single(self, board: BoardState) -> int:
        solution = self._solve(board, self.strategy_name, self.heuristic_name)
        if solution is None:
            return EXIT_NO_SOLUTION

        if self.args.output:
            write_solution(solution, self.args.output, initial=board)
        else:
            print(format_solution(solution, initial=board))

        if self.debug_mode:
            save_debug_image(board, caption="Initial")
            save_solution_frames(solution, self.output_dir / "frames")

        return EXIT_SOLVED if solution.is_solved else EXIT_NO_SOLUTION

    def _run_comparison(self, board: BoardState) -> int:
        solutions: List[Solution] = []
        for info in get_strategy_info():
            heuristics = get_heuristic_names() if info["uses_heuristic"] else [self.heuristic_name]
            for heuristic in heuristics:
                solution = self._solve(board, info["name"], heuristic)
                if solution is not None:
                    solutions.append(solution)

        table = format_comparison(solutions)
        if self.args.output:
            output = Path(self.args.output)
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(table, encoding='utf-8')
            logger.info(f"Comparison written to {output}")
        else:
            print(table)

        solved = any(solution.is_solved for solution in solutions)
        return EXIT_SOLVED if solved else EXIT_NO_SOLUTION

    def _solve(self, board: BoardState, strategy_name: str, heuristic: str) -> Optional[Solution]:
        """
        Run one search on a worker thread and wait for it.

        Returns:
            Solution, or None if the worker reported an error
        """
        worker = SearchWorker(board, strategy_name, heuristic=heuristic, timeout_sec=self.timeout_sec)

        # Direct connections run in the worker thread; no event loop needed
        worker.status_changed.connect(lambda status: logger.debug(f"Worker: {status}"), Qt.DirectConnection)
        worker.progress.connect(self._on_progress, Qt.DirectConnection)
        worker.error_occurred.connect(self._on_error, Qt.DirectConnection)

        worker.start()
        try:
            while not worker.wait(100):
                pass
        except KeyboardInterrupt:
            logger.warning("Interrupted, cancelling search")
            worker.request_stop()
            worker.wait()

        return worker.solution

    def _on_progress(self, nodes_expanded: int, message: str):
        logger.info(f"Expanded {nodes_expanded} nodes ({message})")

    def _on_error(self, error_msg: str):
        logger.error(f"Worker error: {error_msg}")

    def _save_defaults(self):
        """Store the effective run options as the new defaults."""
        self.settings["strategy_name"] = self.strategy_name
        self.settings["heuristic_name"] = self.heuristic_name
        self.settings["timeout_sec"] = self.timeout_sec
        self.settings["debug_enabled"] = self.debug_mode
        save_settings(self.settings)
        logger.info("Defaults saved")


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Rush Hour Solver - find the moves that free the primary piece"
    )
    parser.add_argument(
        "puzzle",
        help="Puzzle text file"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Search strategy (default: from config.json, else astar)"
    )
    parser.add_argument(
        "--heuristic", "-H",
        choices=get_heuristic_names(),
        help="Heuristic for gbfs, astar and idastar (default: from config.json, else h1)"
    )
    parser.add_argument(
        "--compare", "-c",
        action="store_true",
        help="Run every strategy/heuristic combination and print a comparison table"
    )
    parser.add_argument(
        "--output", "-o",
        help="Write the solution (or comparison table) to this file instead of stdout"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        help="Stop a search after this many seconds"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging and save board images for each step"
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Store the strategy, heuristic, timeout and debug options in config.json"
    )
    return parser.parse_args(argv)


def main():
    """Initialize and run the Rush Hour solver."""
    args = parse_args()
    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    app = QCoreApplication.instance() or QCoreApplication(sys.argv)

    application = Application(args)
    sys.exit(application.run())


if __name__ == "__main__":
    main()
