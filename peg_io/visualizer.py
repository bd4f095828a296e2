"""
peg_io/visualizer.py

Визуализация доски и решений.
"""

from typing import List, Optional, Sequence

from core.board import Board, Move
from core.utils import PEG, HOLE


def _cell(board: Board, row: int, col: int) -> str:
    return PEG if board.has_peg(row, col) else HOLE


def _group(board: Board, row: int, cols: range) -> str:
    """Клетки строки через пробел, с пробелом в конце."""
    return ''.join(f"{_cell(board, row, c)} " for c in cols)


def render_board(board: Board) -> str:
    """
    Рисует доску ASCII-схемой фиксированного вида.

        +-------+
        | O O O |
    +---+ O O O +---+
    | O O O O O O O |
    | O O O   O O O |
    | O O O O O O O |
    +---+ O O O +---+
        | O O O |
        +-------+

    Args:
        board: доска

    Returns:
        Строка без завершающего перевода строки
    """
    middle = range(2, 5)
    lines = [
        "    +-------+",
        "    | " + _group(board, 0, middle) + "|",
        "+---+ " + _group(board, 1, middle) + "+---+",
    ]
    for r in middle:
        lines.append("| " + _group(board, r, range(7)) + "|")
    lines.append("+---+ " + _group(board, 5, middle) + "+---+")
    lines.append("    | " + _group(board, 6, middle) + "|")
    lines.append("    +-------+")
    return "\n".join(lines)


def format_move(move: Move) -> str:
    """Ход в нотации 'C4 → E4'."""
    return str(Move(*move))


def format_solution(moves: Optional[Sequence[str]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов в нотации или None

    Returns:
        Форматированная строка
    """
    if not moves:
        return "❌ Решение не найдено"

    lines = [f"✅ Найдено решение за {len(moves)} ходов:"]
    for i, move in enumerate(moves, 1):
        lines.append(f"  {i:2}. {move}")

    return "\n".join(lines)


def format_board_sequence(boards: Sequence[Board]) -> List[str]:
    """Рисует каждый снимок последовательности."""
    return [render_board(board) for board in boards]
