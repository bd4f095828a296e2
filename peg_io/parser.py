"""
peg_io/parser.py

Парсинг входных данных.
"""

import re
from typing import List, Tuple

from core.utils import BOARD_SIZE, is_playable, pos_to_index
from utils.error_handling import InvalidBoardError, validate_grid

_POSITION_RE = re.compile(r'^[A-Za-z]\d+$')


def _parse_cell(text: str) -> Tuple[int, int]:
    """Нотация → (row, col) в пределах сетки 7x7, без проверки углов."""
    text = text.strip()
    if not _POSITION_RE.match(text):
        raise InvalidBoardError(f"Неверная позиция: {text!r}")
    row, col = pos_to_index(text)
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise InvalidBoardError(f"Клетка {text} вне сетки {BOARD_SIZE}x{BOARD_SIZE}")
    return row, col


def parse_position(text: str) -> Tuple[int, int]:
    """
    Шахматная нотация клетки → (row, col).

    Raises:
        InvalidBoardError: если нотация некорректна или клетка недоступна
    """
    row, col = _parse_cell(text)
    if not is_playable(row, col):
        raise InvalidBoardError(f"Клетка {text.strip()} вне доски")
    return row, col


def parse_input(text: str) -> List[List[bool]]:
    """
    Парсит текстовый формат описания позиции.

    Формат: size=7x7 pegs=C1,D1,... [empty=D4]
    Клетки, не перечисленные в pegs, пусты; empty принимается для
    совместимости и только проверяется.

    Args:
        text: строка с описанием

    Returns:
        Сетка 7x7 (True = колышек)

    Raises:
        InvalidBoardError: при неверном формате, размере или клетках
    """
    size_match = re.search(r'size=(\d+)x(\d+)', text)
    pegs_match = re.search(r'pegs=([\w,]*)', text)
    empty_match = re.search(r'empty=([\w,]+)', text)

    if not size_match or not pegs_match:
        raise InvalidBoardError(
            "Неверный формат. Ожидается: size=7x7 pegs=A1,A2,... empty=D4"
        )

    rows, cols = int(size_match.group(1)), int(size_match.group(2))
    if rows != BOARD_SIZE or cols != BOARD_SIZE:
        raise InvalidBoardError(
            f"Поддерживается только доска {BOARD_SIZE}x{BOARD_SIZE}, получено {rows}x{cols}"
        )

    grid = [[False] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    for pos in pegs_match.group(1).split(','):
        if not pos.strip():
            continue
        row, col = _parse_cell(pos)
        grid[row][col] = True

    # Колышки в вырезанных углах отсекает валидатор формы
    validate_grid(grid)

    if empty_match:
        for pos in empty_match.group(1).split(','):
            if not pos.strip():
                continue
            row, col = parse_position(pos)
            if grid[row][col]:
                raise InvalidBoardError(f"Клетка {pos.strip()} указана и в pegs, и в empty")

    return grid
