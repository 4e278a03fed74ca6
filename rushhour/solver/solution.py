"""
Solution Module - Result of a search and the path rebuilt from a goal node.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import BoardState
from .move import Move, UnrecognizedMoveError, infer_move
from .node import SearchNode


@dataclass
class SolutionMetrics:
    """
    Performance metrics for a search run.

    Attributes:
        computation_time_ms: Wall-clock search time in milliseconds
        nodes_expanded: Nodes taken off the frontier (IDA*: nodes visited)
        nodes_generated: Successor states produced
        max_frontier_size: Largest frontier seen (0 for IDA*)
        iterations: Deepening iterations (IDA* only)
        threshold: Final f-threshold (IDA* only)
        strategy_name: Name of strategy that ran
        heuristic_name: Heuristic used, empty when the strategy uses none
    """
    computation_time_ms: float = 0.0
    nodes_expanded: int = 0
    nodes_generated: int = 0
    max_frontier_size: int = 0
    iterations: int = 0
    threshold: Optional[int] = None
    strategy_name: str = ""
    heuristic_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        states: Board states from the initial state to the goal (inclusive)
        moves: Moves between consecutive states (len(states) - 1)
        is_solved: True if a goal state was reached
        was_cancelled: True if the caller stopped the search early
        metrics: Performance statistics, filled in on every outcome
    """
    states: List[BoardState] = field(default_factory=list)
    moves: List[Move] = field(default_factory=list)
    is_solved: bool = False
    was_cancelled: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def labels(self) -> List[str]:
        """Move labels such as 'B-down', in order."""
        return [move.label for move in self.moves]

    @property
    def initial_state(self) -> Optional[BoardState]:
        return self.states[0] if self.states else None

    @property
    def final_state(self) -> Optional[BoardState]:
        return self.states[-1] if self.states else None

    def exit_step(self) -> Optional[Tuple[Move, BoardState]]:
        """
        Closing slide of the primary piece off the board.

        Not part of the move list: the search stops as soon as the lane is
        clear. Presentation code appends it as the final EXIT step.
        """
        if not self.is_solved:
            return None
        return self.final_state.exit_successor()

    def get_board_after_move(self, index: int) -> BoardState:
        """
        Get board state after executing move at index.

        Raises:
            IndexError: If index out of range
        """
        return self.states[index + 1]


def build_solution(goal: SearchNode, metrics: SolutionMetrics) -> Solution:
    """
    Rebuild the path from the root to a goal node.

    Each recorded move is checked against the move inferred from the two
    states it connects, so a generator bug surfaces here instead of as a
    mislabeled solution.

    Args:
        goal: Goal node returned by a strategy
        metrics: Metrics of the run

    Returns:
        Solved Solution

    Raises:
        UnrecognizedMoveError: If a step cannot be attributed to its move
    """
    nodes = list(goal.path())
    nodes.reverse()

    states = [node.state for node in nodes]
    moves = []
    for previous, node in zip(nodes, nodes[1:]):
        inferred = infer_move(previous.state, node.state)
        if node.move is None or inferred != node.move:
            raise UnrecognizedMoveError(
                f"Step {len(moves) + 1} recorded as {node.move} but the states show {inferred.describe()}"
            )
        moves.append(node.move)

    return Solution(states=states, moves=moves, is_solved=True, metrics=metrics)
