"""
Puzzle Loader

Reads puzzle text files into a validated BoardState.

File format:
    6 6
    11
    AAB..F
    ..BCDF
    GPPCDFK
    GH.III
    GHJ...
    LLJMM.

The first line holds the grid size, the second the number of pieces other
than the primary piece. The exit 'K' sits outside the grid: after a row
(right), before a row (left, other rows may then start with one space), or
on its own line above (top) or below (bottom) the grid, at the exit column.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..solver.board import BoardState, EMPTY_CELL, EXIT_MARKER, PRIMARY_PIECE

logger = logging.getLogger(__name__)

# Validation limits
MAX_DIMENSION = 20
MAX_PIECES = 50


class PuzzleFormatError(ValueError):
    """Raised for malformed or invalid puzzle definitions."""


def load_puzzle(path: Union[str, Path]) -> BoardState:
    """
    Load and validate a puzzle file.

    Args:
        path: Path to the puzzle text file

    Returns:
        Initial BoardState

    Raises:
        PuzzleFormatError: If the file content is invalid
        OSError: If the file cannot be read
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()

    board = parse_puzzle(text)
    logger.info(f"Loaded {path.name}: {board.rows}x{board.cols}, "
                f"{len(board.pieces) - 1} pieces, exit at {board.exit}")
    return board


def parse_puzzle(text: str) -> BoardState:
    """
    Parse and validate puzzle text.

    Args:
        text: Full puzzle definition

    Returns:
        Initial BoardState

    Raises:
        PuzzleFormatError: If the definition is invalid
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    if len(lines) < 2:
        raise PuzzleFormatError("Expected a size line and a piece count line")

    rows, cols = _parse_size(lines[0])
    piece_count = _parse_piece_count(lines[1])

    grid, exit = _parse_grid(lines[2:], rows, cols)
    board = BoardState.from_rows(grid, exit)
    validate_board(board)

    found = len(board.pieces) - 1
    if found != piece_count:
        logger.warning(f"Header declares {piece_count} pieces, board has {found}")

    return board


def _parse_size(line: str) -> Tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise PuzzleFormatError(f"First line must contain two integers (rows cols), got '{line}'")
    try:
        rows, cols = int(parts[0]), int(parts[1])
    except ValueError:
        raise PuzzleFormatError(f"Invalid board size: '{line}'") from None

    if not (1 <= rows <= MAX_DIMENSION and 1 <= cols <= MAX_DIMENSION):
        raise PuzzleFormatError(f"Board size must be between 1 and {MAX_DIMENSION}, got {rows}x{cols}")
    return rows, cols


def _parse_piece_count(line: str) -> int:
    try:
        count = int(line.strip())
    except ValueError:
        raise PuzzleFormatError(f"Invalid piece count: '{line}'") from None

    if not 0 <= count <= MAX_PIECES:
        raise PuzzleFormatError(f"Piece count must be between 0 and {MAX_PIECES}, got {count}")
    return count


def _parse_grid(lines: List[str], rows: int, cols: int) -> Tuple[List[str], Tuple[int, int]]:
    """
    Split the board lines into grid rows and the exit position.

    Returns:
        (row strings, exit coordinate)
    """
    exits: List[Tuple[int, int]] = []

    start = 0
    if lines and lines[0].strip() == EXIT_MARKER:
        exits.append((-1, lines[0].index(EXIT_MARKER)))
        start = 1

    body = lines[start:start + rows]
    if len(body) < rows:
        raise PuzzleFormatError(f"Expected {rows} board rows, found {len(body)}")

    trailing = [line for line in lines[start + rows:] if line.strip()]
    if len(trailing) == 1 and trailing[0].strip() == EXIT_MARKER:
        exits.append((rows, trailing[0].index(EXIT_MARKER)))
    elif trailing:
        raise PuzzleFormatError(f"Unexpected content after the board: '{trailing[0]}'")

    left_layout = any(line.startswith(EXIT_MARKER) for line in body)
    grid = []
    for r, raw in enumerate(body):
        line = raw.rstrip()
        if left_layout and line.startswith(EXIT_MARKER):
            exits.append((r, -1))
            line = line[1:]
        elif left_layout and line.startswith(" "):
            line = line[1:]
        elif len(line) == cols + 1 and line.endswith(EXIT_MARKER):
            exits.append((r, cols))
            line = line[:-1]

        if len(line) != cols:
            raise PuzzleFormatError(f"Row {r + 1} has incorrect length. Expected {cols}, got {len(line)}")
        grid.append(line)

    if left_layout and any(exit[0] == -1 or exit[0] == rows for exit in exits):
        raise PuzzleFormatError("Left exit layout cannot be combined with a top or bottom exit")

    if not exits:
        raise PuzzleFormatError("No exit 'K' found outside the board border")
    if len(exits) > 1:
        raise PuzzleFormatError(f"Found {len(exits)} exits, expected exactly one")

    return grid, exits[0]


def validate_board(board: BoardState) -> None:
    """
    Check the puzzle invariants the search relies on.

    Raises:
        PuzzleFormatError: On the first violated rule
    """
    for r, row in enumerate(board.grid):
        for c, marker in enumerate(row):
            if marker == EXIT_MARKER:
                raise PuzzleFormatError(f"Exit 'K' found inside the board at ({r}, {c})")
            if marker.isspace():
                raise PuzzleFormatError(f"Blank cell at ({r}, {c}); use '{EMPTY_CELL}' for empty cells")

    if PRIMARY_PIECE not in board.pieces:
        raise PuzzleFormatError(f"No primary piece '{PRIMARY_PIECE}' found in the board")

    others = len(board.pieces) - 1
    if others > MAX_PIECES:
        raise PuzzleFormatError(f"Board holds {others} pieces besides '{PRIMARY_PIECE}', limit is {MAX_PIECES}")

    for piece, cells in board.pieces.items():
        if len(cells) < 2:
            raise PuzzleFormatError(f"Piece '{piece}' must occupy at least 2 cells")
        if not is_straight_segment(cells):
            raise PuzzleFormatError(f"Piece '{piece}' must form a continuous horizontal or vertical line")

    exit_row, exit_col = board.exit
    on_border = (
        (exit_col in (-1, board.cols) and 0 <= exit_row < board.rows)
        or (exit_row in (-1, board.rows) and 0 <= exit_col < board.cols)
    )
    if not on_border:
        raise PuzzleFormatError(f"Exit must be just outside the board edge, found at {board.exit}")

    primary = board.primary_cells
    if board.is_horizontal(PRIMARY_PIECE):
        if exit_row != primary[0][0] or exit_col not in (-1, board.cols):
            raise PuzzleFormatError("Primary piece is horizontal but the exit is not at an end of its row")
    elif exit_col != primary[0][1] or exit_row not in (-1, board.rows):
        raise PuzzleFormatError("Primary piece is vertical but the exit is not at an end of its column")


def is_straight_segment(cells: Tuple[Tuple[int, int], ...]) -> bool:
    """
    Check that cells form one contiguous horizontal or vertical line.

    Args:
        cells: Footprint sorted row-major

    Returns:
        True if valid, False otherwise
    """
    if len(cells) < 2:
        return False

    row0, col0 = cells[0]
    horizontal = all(cell == (row0, col0 + i) for i, cell in enumerate(cells))
    vertical = all(cell == (row0 + i, col0) for i, cell in enumerate(cells))
    return horizontal or vertical


def describe_board(board: BoardState) -> Dict[str, Optional[object]]:
    """
    Summary of a loaded puzzle for logging and display.

    Returns:
        Dict with size, piece count, primary cells and exit
    """
    return {
        "size": f"{board.rows}x{board.cols}",
        "pieces": len(board.pieces) - 1,
        "primary": list(board.primary_cells),
        "exit": board.exit,
    }
