"""
core/utils.py

Общие утилиты и константы английской доски.
"""

from typing import List, Sequence, Tuple

# Размер доски и центр
BOARD_SIZE = 7
CENTER = (3, 3)

# Направления движения: вверх, вниз, влево, вправо.
# Порядок определяет порядок ходов и, значит, найденное решение.
DIRECTIONS: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]

# Символы для отображения
PEG = 'O'       # Колышек
HOLE = ' '      # Пустое или недоступное место


def is_playable(row: int, col: int) -> bool:
    """Клетка существует на крестообразной доске."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        return False
    in_corner_rows = row < 2 or row > 4
    in_corner_cols = col < 2 or col > 4
    return not (in_corner_rows and in_corner_cols)


def playable_positions() -> List[Tuple[int, int]]:
    """Все 33 клетки доски в порядке строк."""
    return [
        (r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if is_playable(r, c)
    ]


# Доступные клетки для быстрых проверок в генерации ходов
PLAYABLE = frozenset(playable_positions())


def is_shape_correct(grid: Sequence[Sequence[bool]]) -> bool:
    """
    Проверяет форму сетки: ровно 7x7 и ни одного колышка в углах.
    """
    if grid is None or len(grid) != BOARD_SIZE:
        return False
    for row in grid:
        if row is None or len(row) != BOARD_SIZE:
            return False
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if not is_playable(r, c) and grid[r][c]:
                return False
    return True


def index_to_pos(row: int, col: int) -> str:
    """Индекс (row, col) → шахматная нотация (A1, B2, ...)."""
    return f"{chr(col + ord('A'))}{row + 1}"


def pos_to_index(pos: str) -> Tuple[int, int]:
    """Шахматная нотация → индекс."""
    col = ord(pos[0].upper()) - ord('A')
    row = int(pos[1:]) - 1
    return row, col


def grid_to_str(grid: Sequence[Sequence[bool]]) -> str:
    """Преобразует сетку в строку для ключей кэша."""
    return ''.join(''.join('1' if cell else '0' for cell in row) for row in grid)
