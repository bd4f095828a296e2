"""
core - Ядро Peg Solitaire

Доска, ходы и геометрия английского креста.
"""

from .board import Board, Move
from .utils import (
    BOARD_SIZE, CENTER, DIRECTIONS, PLAYABLE, PEG, HOLE,
    is_playable, is_shape_correct, playable_positions,
    index_to_pos, pos_to_index, grid_to_str
)

__all__ = [
    'Board', 'Move',
    'BOARD_SIZE', 'CENTER', 'DIRECTIONS', 'PLAYABLE', 'PEG', 'HOLE',
    'is_playable', 'is_shape_correct', 'playable_positions',
    'index_to_pos', 'pos_to_index', 'grid_to_str'
]
