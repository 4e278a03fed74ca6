"""
Base Strategy Module - Abstract base class for search strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

from .board import BoardState
from .context import SolutionContext
from .heuristics import DEFAULT_HEURISTIC, get_heuristic
from .node import SearchNode
from .solution import Solution, SolutionMetrics, build_solution

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses implement _search() and define name and description class
    attributes. A strategy keeps no state between runs, so one instance
    can serve several solve() calls; each call owns its own frontier,
    explored set and nodes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
        uses_heuristic: False for strategies that ignore the heuristic
        optimal: True if shortest solutions are guaranteed given an
            admissible heuristic
    """
    name: str = "base"
    description: str = "Base strategy"
    uses_heuristic: bool = True
    optimal: bool = False

    def __init__(self, heuristic: str = DEFAULT_HEURISTIC):
        """
        Args:
            heuristic: Heuristic name ("h1" or "h2"); ignored when
                uses_heuristic is False
        """
        self.heuristic_info = get_heuristic(heuristic)
        self.heuristic = self.heuristic_info.function

    @property
    def heuristic_name(self) -> str:
        return self.heuristic_info.name if self.uses_heuristic else ""

    @property
    def is_optimal(self) -> bool:
        """True if solutions from this configuration are guaranteed shortest."""
        if not self.optimal:
            return False
        return not self.uses_heuristic or self.heuristic_info.admissible

    def solve(self, board: BoardState, context: Optional[SolutionContext] = None) -> Solution:
        """
        Search for a move sequence that frees the primary piece.

        Args:
            board: Validated initial state
            context: Optional cancellation/progress hooks

        Returns:
            Solution; is_solved is False when the search space is exhausted
            or the context cancelled the run. Metrics are always filled in.
        """
        if context is None:
            context = SolutionContext()
        context.start_time = time.perf_counter()

        metrics = SolutionMetrics(strategy_name=self.name, heuristic_name=self.heuristic_name)
        logger.info(f"Running {self.name}"
                    + (f" with {self.heuristic_name}" if self.heuristic_name else "")
                    + f" on {board.rows}x{board.cols} board, {len(board.pieces)} pieces")

        goal = self._search(board, context, metrics)
        metrics.computation_time_ms = (time.perf_counter() - context.start_time) * 1000

        if goal is None:
            cancelled = context.is_cancelled()
            if cancelled:
                logger.warning(f"{self.name} cancelled after {metrics.nodes_expanded} nodes "
                               f"({metrics.computation_time_ms:.1f}ms)")
            else:
                logger.info(f"{self.name} found no solution after {metrics.nodes_expanded} nodes")
            return Solution(was_cancelled=cancelled, metrics=metrics)

        solution = build_solution(goal, metrics)
        logger.info(f"{self.name} solved in {solution.move_count} moves, "
                    f"{metrics.nodes_expanded} nodes, {metrics.computation_time_ms:.1f}ms")
        return solution

    @abstractmethod
    def _search(self, board: BoardState, context: SolutionContext,
                metrics: SolutionMetrics) -> Optional[SearchNode]:
        """
        Run the search.

        Must check context.is_cancelled() between expansion steps and
        return None once it is true. Counters go into metrics.

        Returns:
            Goal node, or None if no goal was reached
        """
        pass

    def _root(self, board: BoardState) -> SearchNode:
        h = self.heuristic(board) if self.uses_heuristic else 0
        return SearchNode(state=board, h=h)
