"""
utils/error_handling.py

Обработка ошибок внешних слоёв (ввод, кэш, CLI).
Ядро (Board, решатель) исключений не бросает.
"""

from typing import Any, Callable, Sequence
from functools import wraps

from core.utils import BOARD_SIZE, is_playable
from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение проекта."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной доски."""
    pass


class CacheError(SolverError):
    """Ошибка кэширования."""
    pass


def handle_errors(default_return: Any = None, log_error: bool = True):
    """
    Декоратор: перехватывает ошибки, логирует и возвращает default_return.

    Args:
        default_return: значение по умолчанию при ошибке
        log_error: логировать ли ошибку
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SolverError as e:
                if log_error:
                    get_logger().error(f"{func.__name__}: {e}")
                return default_return
            except Exception as e:
                if log_error:
                    get_logger().error(
                        f"{func.__name__}: Неожиданная ошибка: {e}",
                        exc_info=True
                    )
                return default_return
        return wrapper
    return decorator


def validate_grid(grid: Sequence[Sequence[bool]]) -> bool:
    """
    Валидирует сетку доски.

    Returns:
        True если сетка валидна

    Raises:
        InvalidBoardError: если форма не 7x7 или колышек стоит в углу
    """
    if grid is None:
        raise InvalidBoardError("Сетка не может быть None")

    if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
        raise InvalidBoardError(f"Сетка должна быть размером {BOARD_SIZE}x{BOARD_SIZE}")

    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if grid[r][c] and not is_playable(r, c):
                raise InvalidBoardError(f"Колышек в недоступной клетке ({r}, {c})")

    return True
