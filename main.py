#!/usr/bin/env python3
"""
main.py

Точка входа для решателя английского Peg Solitaire.

Использование:
    python main.py                                 # стандартная доска, пустой центр
    python main.py --empty C4                      # другая пустая клетка
    python main.py "size=7x7 pegs=C3,D3,D4 empty=E3"  # своя позиция
    python main.py --quiet                         # без печати снимков
"""

import sys
import argparse
import logging
from typing import List, Optional

from core.board import Board
from peg_io import (
    parse_input, parse_position, render_board,
    format_move, format_solution, format_board_sequence
)
from peg_io.cache import save_solution, get_cached_solution
from solutions.verify import replay, parse_move
from solvers import BacktrackingSolver
from utils.error_handling import SolverError, handle_errors
from utils.logging import get_logger, setup_file_logging


@handle_errors(default_return=None)
def load_cached(board: Board) -> Optional[dict]:
    """Ищет решение в кэше и воспроизводит его."""
    entry = get_cached_solution(board.cells)
    if entry is None:
        return None
    moves = [parse_move(text) for text in entry['moves']]
    boards = replay(board, moves)
    if boards is None or boards[-1].peg_count() != 1:
        get_logger().warning("Кэшированное решение некорректно, запускаем поиск")
        return None
    return {'boards': boards, 'moves': moves, 'operations': entry['operations']}


@handle_errors(default_return=False)
def store_in_cache(board: Board, moves: List[str], operations: int) -> bool:
    """Ошибка кэширования не должна ломать основной сценарий."""
    save_solution(board.cells, moves, operations)
    return True


def build_board(args) -> Board:
    """Начальная доска по аргументам командной строки."""
    if args.input:
        return Board.from_grid(parse_input(args.input))
    if args.empty:
        row, col = parse_position(args.empty)
        return Board.with_empty(row, col)
    return Board()


def run(args) -> int:
    logger = get_logger()

    board = build_board(args)
    print(f"\nНачальная позиция ({board.peg_count()} колышков):")
    print(render_board(board))

    solution = None if args.no_cache else load_cached(board)
    if solution is not None:
        logger.info("Решение взято из кэша")
    else:
        solver = BacktrackingSolver(verbose=args.verbose)
        result = solver.solve(board)
        if not result.solved:
            print("\n❌ Решение не найдено: пространство поиска исчерпано")
            print(f"Выполнено операций: {result.operations}")
            return 1
        solution = {
            'boards': result.boards,
            'moves': result.moves,
            'operations': result.operations,
        }
        if not args.no_cache:
            store_in_cache(
                board, [format_move(m) for m in result.moves], result.operations
            )

    print("\nSolution Found!")
    print(f"Выполнено операций: {solution['operations']}")
    print(f"\n{format_solution([format_move(m) for m in solution['moves']])}")

    if not args.quiet:
        for diagram in format_board_sequence(solution['boards']):
            print(diagram)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='English Peg Solitaire Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                  # пустой центр D4
  python main.py --empty C4       # пустая клетка C4
  python main.py --quiet -v       # только итог, с логом поиска
        """
    )
    parser.add_argument(
        'input', nargs='?',
        help='Позиция в формате: size=7x7 pegs=C1,D1,... empty=D4'
    )
    parser.add_argument(
        '--empty', '-e',
        help='Пустая клетка стартовой позиции (например, D4)'
    )
    parser.add_argument(
        '--quiet', '-q', action='store_true',
        help='Не печатать последовательность досок'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог поиска'
    )
    parser.add_argument(
        '--log-file',
        help='Дублировать лог в файл'
    )
    parser.add_argument(
        '--no-cache', action='store_true',
        help='Не читать и не писать кэш решений'
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    get_logger().set_level(level)
    if args.log_file:
        setup_file_logging(args.log_file, level)

    print("=" * 50)
    print("🎯 English Peg Solitaire Solver")
    print("=" * 50)

    try:
        return run(args)
    except SolverError as e:
        get_logger().error(f"Ошибка: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
