"""
Uniform Cost Search Strategy - Expands states in order of path cost.
"""

import logging
from typing import Optional, Set

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..factory import register_strategy
from ..frontier import PriorityFrontier
from ..node import SearchNode
from ..solution import SolutionMetrics

logger = logging.getLogger(__name__)


@register_strategy
class UniformCostStrategy(SolverStrategy):
    """
    Uniform cost search over the unit-cost move graph.

    Every slide costs 1, so this expands states level by level like
    breadth-first search and always returns a shortest solution. The
    heuristic argument is accepted for a uniform constructor and ignored.
    """
    name = "ucs"
    description = "Uniform Cost Search (UCS) - optimal, ignores heuristics"
    uses_heuristic = False
    optimal = True

    def _search(self, board: BoardState, context: SolutionContext,
                metrics: SolutionMetrics) -> Optional[SearchNode]:
        frontier = PriorityFrontier(lambda node: (node.g,))
        frontier.push(self._root(board))
        explored: Set[BoardState] = set()

        while frontier:
            if context.is_cancelled():
                return None

            node = frontier.pop()
            metrics.nodes_expanded += 1
            context.report_progress(metrics.nodes_expanded, f"g={node.g}")

            if node.state.is_goal():
                return node

            explored.add(node.state)

            for move, state in node.state.successors():
                metrics.nodes_generated += 1
                if state in explored:
                    continue

                g = node.g + 1
                queued = frontier.get(state)
                if queued is None or g < queued.g:
                    frontier.push(SearchNode(state, node, g, 0, move))

            metrics.max_frontier_size = max(metrics.max_frontier_size, len(frontier))

        logger.debug(f"UCS exhausted {len(explored)} states")
        return None
