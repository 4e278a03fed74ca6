"""
Solver Worker Module for Rush Hour Solver

Provides a background QThread worker that runs one search off the caller's
thread. Communicates through Qt signals for thread-safe status updates.
"""

import logging
from typing import Optional

from PyQt5.QtCore import QThread, pyqtSignal

from rushhour.solver import BoardState, Solution, SolutionContext, create_strategy


# Configure module logger
logger = logging.getLogger(__name__)


class SearchWorker(QThread):
    """
    Background worker thread for a single search.

    Signals:
        status_changed(str): Emitted when worker status changes
        progress(int, str): Nodes expanded so far and a strategy message
        solution_ready(object): Emitted with the Solution once the run ends
        error_occurred(str): Emitted when the search raises

    Example:
        worker = SearchWorker(board, "astar", heuristic="h1")
        worker.solution_ready.connect(show_solution)
        worker.start()
        # ...
        worker.request_stop()
        worker.wait()
    """

    # Signals for UI updates (thread-safe)
    status_changed = pyqtSignal(str)
    progress = pyqtSignal(int, str)
    solution_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(str)

    def __init__(self, board: BoardState, strategy_name: str = "astar",
                 heuristic: str = "h1", timeout_sec: Optional[float] = None,
                 progress_interval: int = 5000):
        """
        Initialize the search worker.

        Args:
            board: Validated initial state
            strategy_name: Registered strategy name
            heuristic: Heuristic name for informed strategies
            timeout_sec: Optional time limit in seconds
            progress_interval: Expansions between progress signals

        Raises:
            ValueError: If the strategy or heuristic name is unknown
        """
        super().__init__()
        self.board = board
        self.strategy = create_strategy(strategy_name, heuristic=heuristic)
        self.context = SolutionContext(
            timeout_sec=timeout_sec,
            progress_callback=self.progress.emit,
            progress_interval=progress_interval,
        )
        self.solution: Optional[Solution] = None

    def run(self):
        """
        Run the search. Called when thread starts.

        Emits solution_ready with the result, or error_occurred if the
        search raised.
        """
        label = self.strategy.name
        if self.strategy.heuristic_name:
            label += f" ({self.strategy.heuristic_name})"

        logger.info(f"Search worker started: {label}")
        self.status_changed.emit(f"Searching with {label}")

        try:
            self.solution = self.strategy.solve(self.board, self.context)
        except Exception as e:
            logger.exception("Error in search worker")
            self.status_changed.emit("Failed")
            self.error_occurred.emit(str(e))
            return

        if self.solution.is_solved:
            self.status_changed.emit(f"Solved in {self.solution.move_count} moves")
        elif self.solution.was_cancelled:
            self.status_changed.emit("Cancelled")
        else:
            self.status_changed.emit("No solution")

        self.solution_ready.emit(self.solution)
        logger.info("Search worker stopped")

    def request_stop(self):
        """
        Request the search to stop.

        The strategy notices between expansions and returns a cancelled
        Solution. Use wait() after calling this to block until stopped.
        """
        logger.info("Stop requested")
        self.context.cancel()

    def is_cancelled(self) -> bool:
        return self.context.is_cancelled()
