"""
Greedy Best-First Search Strategy - Follows the heuristic only.
"""

from typing import Optional, Set

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..factory import register_strategy
from ..frontier import PriorityFrontier
from ..node import SearchNode
from ..solution import SolutionMetrics


@register_strategy
class GreedyBestFirstStrategy(SolverStrategy):
    """
    Greedy best-first search ordered by h alone.

    A state is queued once: states already explored or waiting in the
    frontier are never re-added, even through a cheaper path. Usually
    fast, with no guarantee that the solution is shortest.
    """
    name = "gbfs"
    description = "Greedy Best-First Search (GBFS) - fast, not optimal"

    def _search(self, board: BoardState, context: SolutionContext,
                metrics: SolutionMetrics) -> Optional[SearchNode]:
        frontier = PriorityFrontier(lambda node: (node.h,))
        frontier.push(self._root(board))
        explored: Set[BoardState] = set()

        while frontier:
            if context.is_cancelled():
                return None

            node = frontier.pop()
            metrics.nodes_expanded += 1
            context.report_progress(metrics.nodes_expanded, f"h={node.h}")

            if node.state.is_goal():
                return node

            explored.add(node.state)

            for move, state in node.state.successors():
                metrics.nodes_generated += 1
                if state in explored or state in frontier:
                    continue
                frontier.push(SearchNode(state, node, node.g + 1, self.heuristic(state), move))

            metrics.max_frontier_size = max(metrics.max_frontier_size, len(frontier))

        return None
