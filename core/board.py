"""
core/board.py

Представление английской доски (крест из 33 клеток) через сетку 7x7.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

from .utils import (
    BOARD_SIZE, CENTER, DIRECTIONS, PLAYABLE,
    is_playable, is_shape_correct, index_to_pos
)

Grid = Tuple[Tuple[bool, ...], ...]


class Move(NamedTuple):
    """Прыжок (from_row, from_col) → (to_row, to_col)."""
    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @property
    def jumped(self) -> Tuple[int, int]:
        """Клетка, через которую прыгает колышек."""
        return (self.from_row + self.to_row) // 2, (self.from_col + self.to_col) // 2

    def __str__(self) -> str:
        return (
            f"{index_to_pos(self.from_row, self.from_col)} → "
            f"{index_to_pos(self.to_row, self.to_col)}"
        )


def _complete_grid() -> List[List[bool]]:
    """Сетка, где заняты все доступные клетки."""
    return [[is_playable(r, c) for c in range(BOARD_SIZE)] for r in range(BOARD_SIZE)]


class Board:
    """
    Изменяемая доска со списком допустимых ходов.

    Каждая доска владеет собственной сеткой: сетка копируется при
    создании из внешних данных, при clone() и при отдаче наружу,
    поэтому снимки в стеке поиска никогда не разделяют память.

    Список ходов пересчитывается целиком после каждой мутации
    (через _commit) и никогда не бывает устаревшим.
    """
    __slots__ = ('_cells', '_moves')

    def __init__(self, grid: Optional[Sequence[Sequence[bool]]] = None):
        self._cells = _complete_grid()
        self._cells[CENTER[0]][CENTER[1]] = False
        self._moves: List[Move] = []
        if grid is None:
            self._commit()
        else:
            self.set_cells(grid)

    @classmethod
    def with_empty(cls, row: int, col: int) -> 'Board':
        """
        Полная доска с пустой клеткой (row, col).

        Если клетка недоступна, ничего не убирается: на доске 33 колышка.
        """
        board = cls()
        board._cells = _complete_grid()
        if is_playable(row, col):
            board._cells[row][col] = False
        board._commit()
        return board

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[bool]]) -> 'Board':
        """Создаёт доску из сетки 7x7 (при неверной форме — стандартная доска)."""
        return cls(grid)

    # -- мутации ------------------------------------------------------------

    def set_cells(self, grid: Sequence[Sequence[bool]]) -> bool:
        """
        Заменяет сетку целиком, если у неё правильная форма.

        Returns:
            True если сетка принята. При отказе прежнее состояние
            сохраняется, ходы всё равно пересчитываются.
        """
        accepted = is_shape_correct(grid)
        if accepted:
            self._cells = [[bool(cell) for cell in row] for row in grid]
        self._commit()
        return accepted

    def set_peg(self, row: int, col: int) -> None:
        self.overwrite_peg(row, col, True)

    def remove_peg(self, row: int, col: int) -> None:
        self.overwrite_peg(row, col, False)

    def overwrite_peg(self, row: int, col: int, value: bool) -> None:
        """Записывает значение в клетку; недоступные клетки игнорируются."""
        if is_playable(row, col):
            self._cells[row][col] = bool(value)
        self._commit()

    def jump(self, move: Move) -> None:
        """Выполняет прыжок на этой доске: одна фиксация на весь ход."""
        move = Move(*move)
        jumped_row, jumped_col = move.jumped
        self._write(move.to_row, move.to_col, True)
        self._write(move.from_row, move.from_col, False)
        self._write(jumped_row, jumped_col, False)
        self._commit()

    def apply_move(self, move: Move) -> 'Board':
        """Возвращает новую доску после хода; текущая не меняется."""
        board = self.clone()
        board.jump(move)
        return board

    def remove_move(self, index: int) -> None:
        """Удаляет ход по индексу; индекс вне диапазона игнорируется."""
        if 0 <= index < len(self._moves):
            del self._moves[index]

    # -- запросы ------------------------------------------------------------

    def has_peg(self, row: int, col: int) -> bool:
        """Есть ли колышек; False и для недоступных клеток."""
        if is_playable(row, col):
            return self._cells[row][col]
        return False

    def peg_count(self) -> int:
        """Количество колышков (обход всех 49 клеток)."""
        # Недоступные клетки всегда False и счёт не увеличивают
        return sum(row.count(True) for row in self._cells)

    @property
    def moves(self) -> List[Move]:
        """Копия текущего списка допустимых ходов."""
        return list(self._moves)

    @property
    def cells(self) -> Grid:
        """Неизменяемая копия сетки."""
        return tuple(tuple(row) for row in self._cells)

    def clone(self) -> 'Board':
        """Независимая копия: сетка и текущий (возможно, урезанный) список ходов."""
        board = Board.__new__(Board)
        board._cells = [list(row) for row in self._cells]
        board._moves = list(self._moves)
        return board

    # -- внутреннее ---------------------------------------------------------

    def _write(self, row: int, col: int, value: bool) -> None:
        if is_playable(row, col):
            self._cells[row][col] = value

    def _commit(self) -> None:
        """Полностью пересчитывает список ходов по сетке."""
        self._moves = self._calculate_moves()

    def _calculate_moves(self) -> List[Move]:
        cells = self._cells
        moves = []
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                if not cells[r][c]:
                    continue
                for dr, dc in DIRECTIONS:
                    r1, c1 = r + dr, c + dc
                    r2, c2 = r + 2 * dr, c + 2 * dc
                    if (
                        (r2, c2) in PLAYABLE and
                        cells[r1][c1] and
                        not cells[r2][c2]
                    ):
                        moves.append(Move(r, c, r2, c2))
        return moves

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self.cells)

    def __repr__(self) -> str:
        return f"Board({self.peg_count()} pegs, {len(self._moves)} moves)"

    def __str__(self) -> str:
        from peg_io.visualizer import render_board
        return render_board(self)
