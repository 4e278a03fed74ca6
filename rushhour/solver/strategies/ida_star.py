"""
IDA* Strategy - Iterative deepening on the f-value threshold.

Memory stays proportional to the solution depth: instead of a frontier and
an explored set, each iteration runs a depth-first search that only keeps
the current path. The same state can therefore be expanded again through a
different path, within one iteration and across iterations.
"""

import logging
import math
from typing import Optional, Set

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..factory import register_strategy
from ..node import SearchNode
from ..solution import SolutionMetrics

logger = logging.getLogger(__name__)


@register_strategy
class IDAStarStrategy(SolverStrategy):
    """
    Iterative deepening A*.

    Algorithm:
        1. Threshold starts at h(initial)
        2. Depth-first search from the root, pruning nodes whose f exceeds
           the threshold and remembering the smallest pruned f
        3. If no goal was found, raise the threshold to that smallest f
           and repeat; fail once nothing was pruned

    Children are tried in order of f so a goal within the threshold is
    found sooner. Cycles are cut with the states on the current path.
    """
    name = "idastar"
    description = "Iterative Deepening A* (IDA*) - optimal, low memory"
    optimal = True

    def _search(self, board: BoardState, context: SolutionContext,
                metrics: SolutionMetrics) -> Optional[SearchNode]:
        root = self._root(board)
        threshold = root.f

        while True:
            metrics.iterations += 1
            metrics.threshold = threshold
            logger.debug(f"IDA* iteration {metrics.iterations}, threshold={threshold}")

            next_threshold = math.inf
            on_path: Set[BoardState] = {board}

            def descend(node: SearchNode) -> Optional[SearchNode]:
                nonlocal next_threshold

                metrics.nodes_expanded += 1
                context.report_progress(metrics.nodes_expanded, f"threshold={threshold}")

                if node.f > threshold:
                    next_threshold = min(next_threshold, node.f)
                    return None
                if node.state.is_goal():
                    return node
                if context.is_cancelled():
                    return None

                children = []
                for move, state in node.state.successors():
                    metrics.nodes_generated += 1
                    if state in on_path:
                        continue
                    children.append(SearchNode(state, node, node.g + 1, self.heuristic(state), move))
                children.sort(key=lambda child: child.f)

                for child in children:
                    on_path.add(child.state)
                    found = descend(child)
                    on_path.discard(child.state)
                    if found is not None:
                        return found
                    if context.is_cancelled():
                        return None
                return None

            goal = descend(root)
            if goal is not None:
                return goal
            if context.is_cancelled() or next_threshold == math.inf:
                return None
            threshold = int(next_threshold)
