"""
solutions - Проверка и воспроизведение решений.
"""

from .verify import replay, verify_solution, parse_move

__all__ = [
    'replay',
    'verify_solution',
    'parse_move',
]
