"""
solvers/base.py

Базовый класс решателя, статистика и результат поиска.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from core.board import Board, Move
from utils.logging import get_logger


class SearchState(Enum):
    """Состояние поиска."""
    SEARCHING = 'searching'
    SOLVED = 'solved'
    EXHAUSTED = 'exhausted'


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    advances: int = 0
    backtracks: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    @property
    def operations(self) -> int:
        """Все шаги поиска: продвижения и откаты."""
        return self.advances + self.backtracks

    def __str__(self) -> str:
        return (
            f"Operations: {self.operations}, "
            f"Advances: {self.advances}, "
            f"Backtracks: {self.backtracks}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


@dataclass
class SolveResult:
    """
    Итог поиска.

    boards — стек снимков от начальной позиции до вершины,
    moves — ходы, приведшие к каждому снимку после первого.
    При SOLVED len(boards) == len(moves) + 1.
    """
    state: SearchState
    boards: List[Board] = field(default_factory=list)
    moves: List[Move] = field(default_factory=list)
    operations: int = 0
    stats: SolverStats = field(default_factory=SolverStats)

    @property
    def solved(self) -> bool:
        return self.state is SearchState.SOLVED

    @property
    def final_board(self) -> Optional[Board]:
        return self.boards[-1] if self.boards else None


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Наследники реализуют метод solve().
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def solve(self, board: Optional[Board] = None) -> SolveResult:
        """
        Решает головоломку.

        Args:
            board: начальная позиция (по умолчанию — стандартная)

        Returns:
            SolveResult с состоянием SOLVED или EXHAUSTED
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет сообщение в лог, если verbose=True."""
        if self.verbose:
            get_logger().info(f"[{self.__class__.__name__}] {message}")
