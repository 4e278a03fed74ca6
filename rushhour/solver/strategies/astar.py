"""
A* Strategy - Best-first search on f = g + h.
"""

from typing import Dict, Optional, Set

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..factory import register_strategy
from ..frontier import PriorityFrontier
from ..node import SearchNode
from ..solution import SolutionMetrics


@register_strategy
class AStarStrategy(SolverStrategy):
    """
    A* search ordered by f, preferring lower h on ties.

    Keeps an explored set and the best known g of every frontier state; a
    strictly cheaper path to a queued state replaces its frontier node.
    Explored states are not reopened. With an admissible heuristic (h1)
    the solution is shortest; with h2 it may not be.
    """
    name = "astar"
    description = "A* Search - optimal with admissible heuristic"
    optimal = True

    def _search(self, board: BoardState, context: SolutionContext,
                metrics: SolutionMetrics) -> Optional[SearchNode]:
        frontier = PriorityFrontier(lambda node: (node.f, node.h))
        frontier.push(self._root(board))
        best_g: Dict[BoardState, int] = {board: 0}
        explored: Set[BoardState] = set()

        while frontier:
            if context.is_cancelled():
                return None

            node = frontier.pop()
            del best_g[node.state]
            metrics.nodes_expanded += 1
            context.report_progress(metrics.nodes_expanded, f"f={node.f}")

            if node.state.is_goal():
                return node

            explored.add(node.state)

            for move, state in node.state.successors():
                metrics.nodes_generated += 1
                if state in explored:
                    continue

                g = node.g + 1
                known = best_g.get(state)
                if known is not None and g >= known:
                    continue

                frontier.push(SearchNode(state, node, g, self.heuristic(state), move))
                best_g[state] = g

            metrics.max_frontier_size = max(metrics.max_frontier_size, len(frontier))

        return None
