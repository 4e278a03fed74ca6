"""
Solver Package - State-space search for Rush Hour sliding-block puzzles.

This package provides the board model, the move generator, two heuristics
and a pluggable strategy framework (UCS, GBFS, A*, IDA*). Strategies are
selected at runtime by name.

Public API:
    - BoardState: Immutable board representation and move generator
    - Move, Direction: A single slide of one piece
    - infer_move(): Attribute a state transition to a move
    - SearchNode: State plus path cost and back-reference
    - Solution: Result of a search
    - SolutionMetrics: Performance statistics
    - SolutionContext: Cancellation and progress hooks
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata
    - HEURISTICS, get_heuristic(): Heuristic registry

Usage:
    from rushhour.solver import create_strategy
    from rushhour.puzzle import load_puzzle

    board = load_puzzle("puzzles/example.txt")

    strategy = create_strategy("astar", heuristic="h1")
    solution = strategy.solve(board)

    if solution.is_solved:
        for move in solution.moves:
            print(move.describe())
"""

# Core data structures
from .board import BoardState, PRIMARY_PIECE, EMPTY_CELL, EXIT_MARKER
from .move import (
    Direction,
    Move,
    infer_move,
    IllegalMoveError,
    UnrecognizedMoveError,
)
from .node import SearchNode
from .frontier import PriorityFrontier
from .solution import Solution, SolutionMetrics, build_solution
from .context import SolutionContext
from .heuristics import (
    HEURISTICS,
    DEFAULT_HEURISTIC,
    blocking_count,
    lane_blockers,
    get_heuristic,
    get_heuristic_names,
)

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "BoardState",
    "PRIMARY_PIECE",
    "EMPTY_CELL",
    "EXIT_MARKER",
    "Direction",
    "Move",
    "infer_move",
    "IllegalMoveError",
    "UnrecognizedMoveError",
    "SearchNode",
    "PriorityFrontier",
    "Solution",
    "SolutionMetrics",
    "build_solution",
    "SolutionContext",
    # Heuristics
    "HEURISTICS",
    "DEFAULT_HEURISTIC",
    "blocking_count",
    "lane_blockers",
    "get_heuristic",
    "get_heuristic_names",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]
