"""
Move Module - A single slide of one piece along its axis.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .board import BoardState


class UnrecognizedMoveError(RuntimeError):
    """Raised when a state transition cannot be attributed to a single slide."""


class IllegalMoveError(ValueError):
    """Raised when a move is replayed on a state where it is not legal."""


class Direction(Enum):
    """Cardinal slide direction, valued by its (row, col) delta."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def is_horizontal(self) -> bool:
        return self.value[0] == 0


@dataclass(frozen=True)
class Move:
    """
    One slide of a piece.

    Attributes:
        piece: Marker of the piece that slides
        direction: Direction of the slide
        distance: Number of cells travelled (>= 1)
        exits: True if the primary piece leaves the board through the exit
    """
    piece: str
    direction: Direction
    distance: int = 1
    exits: bool = False

    @property
    def label(self) -> str:
        """Short label such as 'B-down'."""
        return f"{self.piece}-{self.direction.label}"

    def describe(self) -> str:
        """Label with distance, e.g. 'B-down (2 cells)' or 'P-right (exit)'."""
        if self.exits:
            return f"{self.label} (exit)"
        unit = "cell" if self.distance == 1 else "cells"
        return f"{self.label} ({self.distance} {unit})"

    def __str__(self) -> str:
        return self.label


def infer_move(before: 'BoardState', after: 'BoardState') -> Move:
    """
    Work out which slide turns one state into the other.

    Args:
        before: State before the move
        after: State after the move

    Returns:
        The Move that was made

    Raises:
        UnrecognizedMoveError: If the change is not exactly one piece sliding
            along its own axis (or the primary piece leaving the board)
    """
    if set(after.pieces) - set(before.pieces):
        raise UnrecognizedMoveError(
            f"Pieces appeared between states: {sorted(set(after.pieces) - set(before.pieces))}"
        )

    changed = [piece for piece, cells in before.pieces.items()
               if after.pieces.get(piece) != cells]
    if len(changed) != 1:
        raise UnrecognizedMoveError(
            f"Expected exactly one piece to move, found {len(changed)}: {sorted(changed)}"
        )

    piece = changed[0]
    old_cells = before.pieces[piece]
    new_cells = after.pieces.get(piece)

    if new_cells is None:
        return _infer_exit(before, piece)

    if len(new_cells) != len(old_cells):
        raise UnrecognizedMoveError(
            f"Piece '{piece}' changed size from {len(old_cells)} to {len(new_cells)}"
        )

    dr = new_cells[0][0] - old_cells[0][0]
    dc = new_cells[0][1] - old_cells[0][1]
    shifted = tuple((r + dr, c + dc) for r, c in old_cells)
    if shifted != new_cells or (dr != 0 and dc != 0):
        raise UnrecognizedMoveError(f"Piece '{piece}' did not slide as a rigid segment")

    horizontal = before.is_horizontal(piece)
    if horizontal and dr == 0:
        direction = Direction.RIGHT if dc > 0 else Direction.LEFT
        return Move(piece, direction, abs(dc))
    if not horizontal and dc == 0:
        direction = Direction.DOWN if dr > 0 else Direction.UP
        return Move(piece, direction, abs(dr))

    raise UnrecognizedMoveError(f"Piece '{piece}' moved across its own axis")


def _infer_exit(before: 'BoardState', piece: str) -> Move:
    """Attribute the disappearance of a piece to an exit slide."""
    if piece != before.primary_piece:
        raise UnrecognizedMoveError(f"Non-primary piece '{piece}' left the board")

    direction = before.exit_direction()
    lane = before.exit_lane()
    if direction is None or lane is None:
        raise UnrecognizedMoveError("Primary piece left the board away from the exit")
    if not before.is_goal():
        raise UnrecognizedMoveError("Primary piece left the board through a blocked lane")

    return Move(piece, direction, len(lane) + 1, exits=True)
