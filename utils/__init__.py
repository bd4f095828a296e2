"""
utils - Инфраструктура: логирование и обработка ошибок.
"""

from .logging import SolverLogger, get_logger, setup_file_logging
from .error_handling import (
    SolverError, InvalidBoardError, CacheError, handle_errors, validate_grid
)

__all__ = [
    'SolverLogger', 'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidBoardError', 'CacheError', 'handle_errors', 'validate_grid',
]
