"""
Board State Module - Immutable board representation for Rush Hour puzzles.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .move import Direction, IllegalMoveError, Move

Cell = Tuple[int, int]

PRIMARY_PIECE = "P"
EMPTY_CELL = "."
EXIT_MARKER = "K"


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state representation.

    Uses tuple-of-tuples for hashability and immutability. Each cell holds
    a one-character marker: '.' for empty, 'P' for the primary piece, or the
    marker of another piece.

    Two states are equal when their grids are identical; the exit and the
    piece map are metadata and do not take part in equality or hashing.

    Attributes:
        grid: Tuple of row tuples holding cell markers
        exit: (row, col) of the exit, one step outside the grid
        pieces: Piece marker -> footprint cells sorted row-major
    """
    grid: Tuple[Tuple[str, ...], ...]
    exit: Cell
    pieces: Dict[str, Tuple[Cell, ...]] = field(default_factory=dict)

    primary_piece = PRIMARY_PIECE

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]], exit: Cell) -> 'BoardState':
        """
        Create BoardState from row strings (or lists of markers).

        Args:
            rows: Board rows, e.g. ["AAB...", "..BCD."]
            exit: (row, col) of the exit outside the grid

        Returns:
            BoardState instance with piece footprints indexed
        """
        grid = tuple(tuple(row) for row in rows)
        pieces: Dict[str, List[Cell]] = {}
        for r, row in enumerate(grid):
            for c, marker in enumerate(row):
                if marker != EMPTY_CELL:
                    pieces.setdefault(marker, []).append((r, c))

        return cls(
            grid=grid,
            exit=tuple(exit),
            pieces={marker: tuple(cells) for marker, cells in pieces.items()},
        )

    @property
    def rows(self) -> int:
        """Get number of rows in board."""
        return len(self.grid)

    @property
    def cols(self) -> int:
        """Get number of columns in board."""
        return len(self.grid[0]) if self.rows > 0 else 0

    @property
    def exit_row(self) -> int:
        return self.exit[0]

    @property
    def exit_col(self) -> int:
        return self.exit[1]

    @property
    def primary_cells(self) -> Tuple[Cell, ...]:
        """Footprint of the primary piece, empty once it has left the board."""
        return self.pieces.get(PRIMARY_PIECE, ())

    @property
    def has_primary(self) -> bool:
        return bool(self.primary_cells)

    def get_cell(self, row: int, col: int) -> Optional[str]:
        """
        Get the marker at a cell position.

        Returns:
            Cell marker, or None if the position is outside the grid
        """
        if self.in_bounds(row, col):
            return self.grid[row][col]
        return None

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_empty(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.grid[row][col] == EMPTY_CELL

    def is_horizontal(self, piece: str) -> bool:
        """Orientation of a piece, read from its first two footprint cells."""
        cells = self.pieces[piece]
        return len(cells) > 1 and cells[0][0] == cells[1][0]

    # ------------------------------------------------------------------
    # Exit geometry
    # ------------------------------------------------------------------

    def exit_direction(self) -> Optional[Direction]:
        """
        Direction the primary piece has to slide to reach the exit.

        Returns:
            Direction, or None if the primary piece is gone or the exit
            is not on its row (horizontal) or column (vertical)
        """
        cells = self.primary_cells
        if len(cells) < 2:
            return None

        exit_row, exit_col = self.exit
        if self.is_horizontal(PRIMARY_PIECE):
            if exit_row != cells[0][0]:
                return None
            if exit_col > cells[-1][1]:
                return Direction.RIGHT
            if exit_col < cells[0][1]:
                return Direction.LEFT
        else:
            if exit_col != cells[0][1]:
                return None
            if exit_row > cells[-1][0]:
                return Direction.DOWN
            if exit_row < cells[0][0]:
                return Direction.UP
        return None

    def exit_lane(self) -> Optional[List[Cell]]:
        """
        Cells strictly between the primary piece and the exit.

        Returns:
            Lane cells ordered outward from the piece (empty when the piece
            is flush against the exit edge), or None if not aligned
        """
        direction = self.exit_direction()
        if direction is None:
            return None

        dr, dc = direction.delta
        r, c = self._extreme(self.primary_cells, direction)
        lane = []
        r, c = r + dr, c + dc
        while (r, c) != self.exit:
            lane.append((r, c))
            r, c = r + dr, c + dc
        return lane

    def cross_axis_offset(self) -> int:
        """Distance between the exit and the primary piece's line of travel."""
        cells = self.primary_cells
        if not cells:
            return 0
        if self.is_horizontal(PRIMARY_PIECE):
            return abs(self.exit_row - cells[0][0])
        return abs(self.exit_col - cells[0][1])

    def is_goal(self) -> bool:
        """
        Check whether the primary piece can slide straight out.

        A state is solved when the primary piece has left the grid, or when
        the exit is aligned with it and every lane cell is empty.
        """
        if not self.has_primary:
            return True
        lane = self.exit_lane()
        if lane is None:
            return False
        return all(self.grid[r][c] == EMPTY_CELL for r, c in lane)

    # ------------------------------------------------------------------
    # Successor generation
    # ------------------------------------------------------------------

    def successors(self) -> List[Tuple[Move, 'BoardState']]:
        """
        Generate every state reachable with a single slide.

        Pieces are visited in marker order; horizontal pieces try left then
        right, vertical pieces up then down, and each direction yields the
        1-cell slide first.

        Returns:
            List of (move, resulting state) pairs
        """
        result = []
        for piece in sorted(self.pieces):
            if len(self.pieces[piece]) < 2:
                continue
            if self.is_horizontal(piece):
                directions = (Direction.LEFT, Direction.RIGHT)
            else:
                directions = (Direction.UP, Direction.DOWN)
            for direction in directions:
                result.extend(self._slides(piece, direction))
        return result

    def _slides(self, piece: str, direction: Direction) -> Iterator[Tuple[Move, 'BoardState']]:
        """Yield slides of increasing length until blocked or out of the grid."""
        cells = self.pieces[piece]
        dr, dc = direction.delta
        lead_r, lead_c = self._extreme(cells, direction)

        step = 1
        while True:
            target = (lead_r + dr * step, lead_c + dc * step)

            if piece == PRIMARY_PIECE and target == self.exit:
                yield Move(piece, direction, step, exits=True), self._without(piece)
                return

            if not self.is_empty(*target):
                return

            yield Move(piece, direction, step), self._shifted(piece, dr * step, dc * step)
            step += 1

    @staticmethod
    def _extreme(cells: Sequence[Cell], direction: Direction) -> Cell:
        dr, dc = direction.delta
        return max(cells, key=lambda cell: cell[0] * dr + cell[1] * dc)

    def _shifted(self, piece: str, dr: int, dc: int) -> 'BoardState':
        """Copy of this state with one piece moved by (dr, dc)."""
        old_cells = self.pieces[piece]
        new_cells = tuple((r + dr, c + dc) for r, c in old_cells)

        new_grid = [list(row) for row in self.grid]
        for r, c in old_cells:
            new_grid[r][c] = EMPTY_CELL
        for r, c in new_cells:
            new_grid[r][c] = piece

        pieces = dict(self.pieces)
        pieces[piece] = new_cells
        return BoardState(
            grid=tuple(tuple(row) for row in new_grid),
            exit=self.exit,
            pieces=pieces,
        )

    def _without(self, piece: str) -> 'BoardState':
        """Copy of this state with a piece's whole footprint removed."""
        new_grid = [list(row) for row in self.grid]
        for r, c in self.pieces[piece]:
            new_grid[r][c] = EMPTY_CELL

        pieces = {marker: cells for marker, cells in self.pieces.items() if marker != piece}
        return BoardState(
            grid=tuple(tuple(row) for row in new_grid),
            exit=self.exit,
            pieces=pieces,
        )

    def apply_move(self, move: Move) -> 'BoardState':
        """
        Apply a move to create a new board state.

        The move is replayed through the successor generator, so only legal
        slides are accepted. Original board is unchanged.

        Args:
            move: Move to apply

        Returns:
            New BoardState after the slide

        Raises:
            IllegalMoveError: If the move is not legal in this state
        """
        if move.piece not in self.pieces or len(self.pieces[move.piece]) < 2:
            raise IllegalMoveError(f"No movable piece '{move.piece}' on the board")
        if move.direction.is_horizontal != self.is_horizontal(move.piece):
            raise IllegalMoveError(f"Piece '{move.piece}' cannot move {move.direction.label}")

        for candidate, state in self._slides(move.piece, move.direction):
            if candidate == move:
                return state
        raise IllegalMoveError(f"Move {move.describe()} is blocked")

    def exit_successor(self) -> Optional[Tuple[Move, 'BoardState']]:
        """
        The final slide that takes the primary piece off the board.

        Returns:
            (exit move, state without the primary piece) when the lane is
            clear, otherwise None
        """
        direction = self.exit_direction()
        if direction is None or not self.is_goal():
            return None
        for move, state in self._slides(PRIMARY_PIECE, direction):
            if move.exits:
                return move, state
        return None

    # ------------------------------------------------------------------
    # Comparison and conversion
    # ------------------------------------------------------------------

    def diff(self, other: 'BoardState') -> List[Cell]:
        """
        Find cells that differ between this board and another.

        Args:
            other: Another BoardState to compare against

        Returns:
            List of (row, col) tuples where cells differ
        """
        if not isinstance(other, BoardState):
            raise TypeError("Can only diff against another BoardState")

        differences = []
        for r in range(self.rows):
            for c in range(self.cols):
                if self.grid[r][c] != other.grid[r][c]:
                    differences.append((r, c))
        return differences

    def to_rows(self) -> List[str]:
        """Rows as plain strings."""
        return ["".join(row) for row in self.grid]

    def __hash__(self):
        """Enable using BoardState as dict key or in sets."""
        return hash(self.grid)

    def __eq__(self, other):
        """Enable board equality comparison."""
        if not isinstance(other, BoardState):
            return False
        return self.grid == other.grid

    def __str__(self) -> str:
        return "\n".join(self.to_rows())
