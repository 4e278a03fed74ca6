"""
Puzzle Module for Rush Hour Solver

Reading puzzle files, writing solutions and rendering debug images.

Usage:
    from rushhour.puzzle import load_puzzle, format_solution

    board = load_puzzle("puzzles/example.txt")
    print(format_solution(solution))

Text input (tests, other front ends):
    board = parse_puzzle("6 6\\n11\\nAAB..F\\n...")
"""

# Public API - Loading
from .loader import (
    MAX_DIMENSION,
    MAX_PIECES,
    PuzzleFormatError,
    describe_board,
    load_puzzle,
    parse_puzzle,
    validate_board,
)

# Public API - Output
from .writer import (
    format_board,
    format_comparison,
    format_metrics,
    format_puzzle,
    format_solution,
    write_solution,
)

# Debug utilities
from .debug import DEBUG_DIR, render_board, save_debug_image, save_solution_frames

__all__ = [
    # Loading
    "MAX_DIMENSION",
    "MAX_PIECES",
    "PuzzleFormatError",
    "describe_board",
    "load_puzzle",
    "parse_puzzle",
    "validate_board",
    # Output
    "format_board",
    "format_comparison",
    "format_metrics",
    "format_puzzle",
    "format_solution",
    "write_solution",
    # Debug
    "DEBUG_DIR",
    "render_board",
    "save_debug_image",
    "save_solution_frames",
]
