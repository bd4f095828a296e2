"""
peg_io/cache.py

Кэширование решений на диск.
"""

import json
import os
from typing import Any, Dict, List, Optional, Sequence

from core.utils import grid_to_str
from utils.error_handling import CacheError

CACHE_FILE = "solutions_cache.json"


def load_solutions() -> Dict[str, Dict[str, Any]]:
    """Загружает все решения из кэша."""
    if not os.path.exists(CACHE_FILE):
        return {}

    try:
        with open(CACHE_FILE, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (json.JSONDecodeError, IOError):
        return {}


def save_solutions(solutions: Dict[str, Dict[str, Any]]) -> None:
    """Сохраняет все решения в кэш."""
    try:
        with open(CACHE_FILE, 'w', encoding='utf-8') as f:
            json.dump(solutions, f, indent=2, ensure_ascii=False)
    except IOError as e:
        raise CacheError(f"Не удалось записать {CACHE_FILE}: {e}") from e


def get_cached_solution(grid: Sequence[Sequence[bool]]) -> Optional[Dict[str, Any]]:
    """
    Получает решение из кэша.

    Args:
        grid: начальная позиция

    Returns:
        {'moves': [...], 'operations': N} или None
    """
    db = load_solutions()
    return db.get(grid_to_str(grid))


def save_solution(grid: Sequence[Sequence[bool]], moves: List[str], operations: int) -> None:
    """
    Сохраняет решение в кэш.

    Args:
        grid: начальная позиция
        moves: список ходов в нотации
        operations: число шагов поиска
    """
    db = load_solutions()
    db[grid_to_str(grid)] = {'moves': list(moves), 'operations': operations}
    save_solutions(db)
