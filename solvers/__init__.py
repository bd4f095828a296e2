"""
solvers - Решатели Peg Solitaire

Экспортирует:
- BacktrackingSolver: поиск в глубину со стеком снимков и откатом
- SearchState, SolveResult, SolverStats: состояние и итог поиска
"""

from .base import BaseSolver, SearchState, SolveResult, SolverStats
from .backtracking import BacktrackingSolver

__all__ = [
    'BaseSolver',
    'BacktrackingSolver',
    'SearchState',
    'SolveResult',
    'SolverStats',
]
