"""
Board Debug Images

Functions for rendering boards to PNG and managing debug output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from ..solver.board import BoardState, PRIMARY_PIECE
from ..solver.solution import Solution

logger = logging.getLogger(__name__)


# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

CELL_SIZE = 40
BACKGROUND = "#f5f5f5"
GRID_COLOR = "#bdbdbd"
PRIMARY_COLOR = "#d32f2f"
EXIT_COLOR = "#4CAF50"
HIGHLIGHT_COLOR = "#FFC107"

PIECE_COLORS = [
    "#1976D2", "#388E3C", "#7B1FA2", "#F57C00", "#0097A7",
    "#5D4037", "#C2185B", "#455A64", "#AFB42B", "#512DA8",
]


def piece_color(piece: str) -> str:
    """Stable fill color for a piece marker."""
    if piece == PRIMARY_PIECE:
        return PRIMARY_COLOR
    return PIECE_COLORS[ord(piece) % len(PIECE_COLORS)]


def render_board(board: BoardState, moved_piece: Optional[str] = None,
                 caption: str = "") -> Image.Image:
    """
    Draw a board with a one-cell margin so the exit is visible.

    Args:
        board: State to draw
        moved_piece: Piece to outline, usually the one that just moved
        caption: Text drawn in the top margin

    Returns:
        PIL Image
    """
    width = (board.cols + 2) * CELL_SIZE
    height = (board.rows + 2) * CELL_SIZE
    image = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)

    try:
        font = ImageFont.truetype("arial.ttf", 16)
    except OSError:
        font = ImageFont.load_default()

    def cell_box(row: int, col: int) -> Tuple[int, int, int, int]:
        x = (col + 1) * CELL_SIZE
        y = (row + 1) * CELL_SIZE
        return x, y, x + CELL_SIZE - 1, y + CELL_SIZE - 1

    for r in range(board.rows):
        for c in range(board.cols):
            draw.rectangle(cell_box(r, c), outline=GRID_COLOR)

    exit_box = cell_box(*board.exit)
    draw.rectangle(exit_box, fill=EXIT_COLOR)
    draw.text((exit_box[0] + 12, exit_box[1] + 10), "K", fill="white", font=font)

    for piece, cells in board.pieces.items():
        color = piece_color(piece)
        outline = HIGHLIGHT_COLOR if piece == moved_piece else color
        for r, c in cells:
            x0, y0, x1, y1 = cell_box(r, c)
            draw.rectangle((x0 + 2, y0 + 2, x1 - 2, y1 - 2), fill=color, outline=outline, width=3)
            draw.text((x0 + 14, y0 + 10), piece, fill="white", font=font)

    if caption:
        draw.text((4, 4), caption, fill="black", font=font)

    return image


def save_debug_image(board: BoardState, path: Optional[Union[str, Path]] = None,
                     moved_piece: Optional[str] = None, caption: str = "") -> Path:
    """
    Save a rendered board.

    Without a path the image goes to DEBUG_DIR with a timestamped name, and
    only the most recent MAX_DEBUG_IMAGES images there are kept.

    Args:
        board: State to draw
        path: Output file path (optional)
        moved_piece: Piece to outline
        caption: Text drawn above the board

    Returns:
        Path written
    """
    if path is None:
        DEBUG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        path = DEBUG_DIR / f"debug_{timestamp}.png"
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    render_board(board, moved_piece, caption).save(path, "PNG")
    logger.debug(f"Saved board image {path}")

    _cleanup_debug_images()
    return path


def save_solution_frames(solution: Solution, directory: Union[str, Path]) -> List[Path]:
    """
    Save one image per step of a solved run, exit step included.

    Files are named step_000.png (initial board), step_001.png, ...

    Returns:
        Paths written, in step order
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    if not solution.is_solved:
        return []

    frames = [(solution.initial_state, None, "Initial")]
    for index, move in enumerate(solution.moves):
        frames.append((solution.get_board_after_move(index), move.piece, move.describe()))

    exit_step = solution.exit_step()
    if exit_step is not None:
        move, state = exit_step
        frames.append((state, None, f"EXIT {move.describe()}"))

    paths = []
    for n, (state, moved, caption) in enumerate(frames):
        path = directory / f"step_{n:03d}.png"
        render_board(state, moved, f"{n}: {caption}").save(path, "PNG")
        paths.append(path)

    logger.info(f"Saved {len(paths)} solution frames to {directory}")
    return paths


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError:
            logger.debug(f"Could not remove {old_file}")
