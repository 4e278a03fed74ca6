"""
Heuristics Module - Estimates of the moves left before the primary piece can exit.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from .board import BoardState, EMPTY_CELL


def lane_blockers(board: BoardState) -> int:
    """
    H1: number of distinct pieces standing in the exit lane.

    This counts slides still needed, not cells between the primary piece
    and the exit. A cell count would overestimate: one long slide covers
    several cells, and the primary piece may stop short of the exit once
    the lane is clear.

    Every piece standing in the exit lane has to slide out of it at least
    once, so the number of distinct lane pieces never overestimates the
    moves left. One move changes the count by at most one, which keeps the
    estimate consistent as well.

    Args:
        board: State to evaluate

    Returns:
        0 for a goal state, otherwise the number of lane blockers
    """
    if board.is_goal():
        return 0

    lane = board.exit_lane()
    if lane is None:
        # Unreachable for loaded puzzles: the loader rejects misaligned exits
        return board.cross_axis_offset() + 1

    blockers = {board.grid[r][c] for r, c in lane if board.grid[r][c] != EMPTY_CELL}
    return len(blockers)


def blocking_count(board: BoardState) -> int:
    """
    H2: blocking cells weighted twice, plus the lane length.

    Not admissible: the doubled weight and the flat penalty for a misaligned
    exit can overestimate, so optimal strategies guided by it may return
    longer solutions.

    Args:
        board: State to evaluate

    Returns:
        0 for a goal state, otherwise 2 * occupied lane cells + lane length
    """
    if board.is_goal():
        return 0

    lane = board.exit_lane()
    if lane is None:
        # Count the primary piece itself as the one blocker
        return 2 + board.cross_axis_offset()

    occupied = sum(1 for r, c in lane if board.grid[r][c] != EMPTY_CELL)
    return 2 * occupied + len(lane)


@dataclass(frozen=True)
class HeuristicInfo:
    """
    Registered heuristic.

    Attributes:
        name: Short identifier ("h1", "h2")
        description: Human-readable description
        function: Evaluator taking a BoardState
        admissible: True if it never overestimates
    """
    name: str
    description: str
    function: Callable[[BoardState], int]
    admissible: bool


HEURISTICS: Dict[str, HeuristicInfo] = {
    "h1": HeuristicInfo("h1", "Distinct pieces blocking the exit lane (H1)", lane_blockers, True),
    "h2": HeuristicInfo("h2", "Blocking cells + distance (H2)", blocking_count, False),
}

DEFAULT_HEURISTIC = "h1"


def get_heuristic(name: str) -> HeuristicInfo:
    """
    Look up a heuristic by name.

    Raises:
        ValueError: If the name is not registered
    """
    key = name.lower()
    if key not in HEURISTICS:
        available = ", ".join(HEURISTICS.keys())
        raise ValueError(f"Unknown heuristic: {name}. Available: {available}")
    return HEURISTICS[key]


def get_heuristic_names() -> List[str]:
    return list(HEURISTICS.keys())
