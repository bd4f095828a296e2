"""
tests/helpers.py

Построение сеток для тестов.
"""

from typing import Iterable, List, Tuple


def grid_with_pegs(pegs: Iterable[Tuple[int, int]]) -> List[List[bool]]:
    """Пустая сетка 7x7 с колышками в указанных клетках."""
    grid = [[False] * 7 for _ in range(7)]
    for r, c in pegs:
        grid[r][c] = True
    return grid


def default_grid() -> List[List[bool]]:
    """Стандартная стартовая позиция: всё занято, кроме центра."""
    corners = {0, 1, 5, 6}
    grid = [
        [not (r in corners and c in corners) for c in range(7)]
        for r in range(7)
    ]
    grid[3][3] = False
    return grid
