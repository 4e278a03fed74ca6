"""
Solution Writer

Text rendering of boards, solutions and strategy comparisons. Boards are
printed in the same layout the loader reads, with the exit marker outside
the grid.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..solver.board import BoardState, EXIT_MARKER
from ..solver.solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


def format_board(board: BoardState) -> List[str]:
    """
    Render the grid with the exit marker in loader layout.

    Args:
        board: State to render; the primary piece may be gone

    Returns:
        Lines of text, without the size and piece count header
    """
    rows = board.to_rows()
    exit_row, exit_col = board.exit

    if exit_col == board.cols:
        return [row + EXIT_MARKER if r == exit_row else row for r, row in enumerate(rows)]
    if exit_col == -1:
        return [EXIT_MARKER + row if r == exit_row else " " + row for r, row in enumerate(rows)]

    exit_line = " " * exit_col + EXIT_MARKER
    if exit_row == -1:
        return [exit_line] + rows
    return rows + [exit_line]


def format_puzzle(board: BoardState) -> str:
    """
    Render a complete puzzle file, header included.

    The piece count excludes the primary piece.
    """
    others = sum(1 for piece in board.pieces if piece != board.primary_piece)
    lines = [f"{board.rows} {board.cols}", str(others)] + format_board(board)
    return "\n".join(lines) + "\n"


def format_metrics(metrics: SolutionMetrics) -> List[str]:
    """Summary lines for a run's metrics."""
    strategy = metrics.strategy_name
    if metrics.heuristic_name:
        strategy += f" ({metrics.heuristic_name})"

    lines = [
        f"Strategy: {strategy}",
        f"Nodes expanded: {metrics.nodes_expanded}",
        f"Nodes generated: {metrics.nodes_generated}",
    ]
    if metrics.iterations:
        lines.append(f"Iterations: {metrics.iterations}, final threshold: {metrics.threshold}")
    else:
        lines.append(f"Max frontier size: {metrics.max_frontier_size}")
    lines.append(f"Time: {metrics.computation_time_ms:.2f} ms")
    return lines


def format_solution(solution: Solution, initial: Optional[BoardState] = None) -> str:
    """
    Render a solution as numbered steps, each followed by its board.

    A solved run ends with the exit step, showing the board after the
    primary piece has left.

    Args:
        solution: Result of a search
        initial: Board to show when the search failed (optional)

    Returns:
        Printable text
    """
    lines = format_metrics(solution.metrics)

    if not solution.is_solved:
        lines.append("")
        lines.append("Search cancelled." if solution.was_cancelled else "No solution found.")
        if initial is not None:
            lines.append("")
            lines.append("Initial board:")
            lines.extend(format_board(initial))
        return "\n".join(lines) + "\n"

    exit_step = solution.exit_step()
    total = solution.move_count + (1 if exit_step else 0)
    lines.append(f"Moves: {solution.move_count} (+1 exit)" if exit_step
                 else f"Moves: {solution.move_count}")
    lines.append("")
    lines.append("Initial board:")
    lines.extend(format_board(solution.initial_state))

    for index, move in enumerate(solution.moves):
        lines.append("")
        lines.append(f"Step {index + 1}/{total}: {move.describe()}")
        lines.extend(format_board(solution.get_board_after_move(index)))

    if exit_step is not None:
        move, state = exit_step
        lines.append("")
        lines.append(f"Step {total}/{total}: EXIT {move.describe()}")
        lines.extend(format_board(state))

    return "\n".join(lines) + "\n"


def write_solution(solution: Solution, path: Union[str, Path], initial: Optional[BoardState] = None) -> Path:
    """
    Write a formatted solution to a text file.

    Parent directories are created as needed.

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(format_solution(solution, initial))
    logger.info(f"Solution written to {path}")
    return path


def format_comparison(solutions: Sequence[Solution]) -> str:
    """
    Tabulate several runs on the same puzzle.

    Args:
        solutions: Results of different strategy/heuristic combinations

    Returns:
        Fixed-width table, one row per run. "Shortest" marks solved runs
        that match the best length in the table.
    """
    header = ("Strategy", "Heuristic", "Solved", "Moves", "Expanded", "Generated", "Time (ms)", "Shortest")
    lengths = [solution.move_count for solution in solutions if solution.is_solved]
    best = min(lengths) if lengths else None

    rows = [header]
    for solution in solutions:
        metrics = solution.metrics
        if solution.is_solved:
            shortest = "yes" if solution.move_count == best else "no"
        else:
            shortest = "-"
        rows.append((
            metrics.strategy_name,
            metrics.heuristic_name or "-",
            "yes" if solution.is_solved else ("cancelled" if solution.was_cancelled else "no"),
            str(solution.move_count) if solution.is_solved else "-",
            str(metrics.nodes_expanded),
            str(metrics.nodes_generated),
            f"{metrics.computation_time_ms:.2f}",
            shortest,
        ))

    widths = [max(len(row[i]) for row in rows) for i in range(len(header))]
    lines = []
    for n, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
        if n == 0:
            lines.append("  ".join("-" * width for width in widths))
    return "\n".join(lines) + "\n"
