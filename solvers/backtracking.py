"""
solvers/backtracking.py

DFS с явным стеком снимков доски и откатом.

Всегда пробуется первый оставшийся ход вершины. При тупике вершина
снимается, а ход, который к ней привёл, вычёркивается из нового
верхнего снимка — поэтому неудачная ветка не повторяется.
"""

import time
from typing import List, Optional

from .base import BaseSolver, SearchState, SolveResult, SolverStats
from core.board import Board, Move
from utils.logging import get_logger


class BacktrackingSolver(BaseSolver):
    """
    Поиск в глубину без мемоизации и эвристик.

    Особенности:
    - Стек полных независимых снимков (clone на каждом шаге)
    - Детерминированный порядок ходов доски
    - Счётчик всех шагов поиска (продвижения + откаты)
    """

    def __init__(self, verbose: bool = False, progress_every: int = 100_000):
        super().__init__(verbose=verbose)
        self.progress_every = progress_every
        self.state = SearchState.SEARCHING

    def solve(self, board: Optional[Board] = None) -> SolveResult:
        self.stats = SolverStats()
        self.state = SearchState.SEARCHING

        start = board.clone() if board is not None else Board()
        stack: List[Board] = [start]
        path: List[Move] = []

        self._log(f"Starting backtracking search (pegs={start.peg_count()})")
        started_at = time.time()

        while self.state is SearchState.SEARCHING:
            self.state = self._step(stack, path)

        self.stats.time_elapsed = time.time() - started_at

        if self.state is SearchState.SOLVED:
            self.stats.solution_length = len(path)
            self._log(f"Solution found: {len(path)} moves")
        else:
            self._log("Search space exhausted")
        self._log(f"Stats: {self.stats}")

        return SolveResult(
            state=self.state,
            boards=stack,
            moves=path,
            operations=self.stats.operations,
            stats=self.stats,
        )

    def _step(self, stack: List[Board], path: List[Move]) -> SearchState:
        """Один шаг автомата: победа, продвижение или откат."""
        top = stack[-1]
        if top.peg_count() == 1:
            return SearchState.SOLVED

        moves = top.moves
        if moves:
            # Продвижение: копия вершины + первый ход
            move = moves[0]
            stack.append(top.apply_move(move))
            path.append(move)
            self.stats.advances += 1
            self.stats.max_depth = max(self.stats.max_depth, len(path))
        else:
            if len(stack) == 1:
                return SearchState.EXHAUSTED
            # Откат: снимаем тупик и вычёркиваем ход, который к нему привёл
            stack.pop()
            path.pop()
            stack[-1].remove_move(0)
            self.stats.backtracks += 1

        if self.progress_every and self.stats.operations % self.progress_every == 0:
            get_logger().debug(
                f"[{self.__class__.__name__}] {self.stats.operations} operations, "
                f"depth {len(path)}"
            )
        return SearchState.SEARCHING
