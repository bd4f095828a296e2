"""
solutions/verify.py

Проверка и воспроизведение решений на Board.
"""

from typing import List, Optional, Sequence

from core.board import Board, Move
from core.utils import pos_to_index


def replay(board: Board, moves: Sequence[Move]) -> Optional[List[Board]]:
    """
    Воспроизводит ходы на копиях доски.

    Каждый ход должен входить в список допустимых ходов текущего снимка.
    Исходная доска не меняется.

    Returns:
        Последовательность снимков (len(moves) + 1) или None,
        если какой-то ход недопустим.
    """
    boards = [board.clone()]
    for move in moves:
        current = boards[-1]
        # Заново вычисляем ходы: у снимка из стека поиска список может быть урезан
        legal = Board(current.cells).moves
        if Move(*move) not in legal:
            return None
        boards.append(current.apply_move(move))
    return boards


def verify_solution(board: Board, moves: Sequence[Move]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход допустим в своей позиции;
    - после всех ходов остаётся ровно один колышек.
    Пустое решение корректно, только если на доске уже один колышек.
    """
    boards = replay(board, moves)
    if boards is None:
        return False
    return boards[-1].peg_count() == 1


def parse_move(text: str) -> Move:
    """'C4 → E4' (или 'C4-E4') → Move."""
    separator = '→' if '→' in text else '-'
    source, target = (part.strip() for part in text.split(separator, 1))
    from_row, from_col = pos_to_index(source)
    to_row, to_col = pos_to_index(target)
    return Move(from_row, from_col, to_row, to_col)
