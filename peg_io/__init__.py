"""
peg_io - Ввод/вывод для Peg Solitaire

Экспортирует:
- Парсинг входных данных
- Визуализация доски
- Кэширование решений
"""

from .parser import parse_input, parse_position
from .visualizer import render_board, format_move, format_solution, format_board_sequence
from .cache import load_solutions, save_solution, get_cached_solution

__all__ = [
    'parse_input',
    'parse_position',
    'render_board',
    'format_move',
    'format_solution',
    'format_board_sequence',
    'load_solutions',
    'save_solution',
    'get_cached_solution'
]
