"""
tests/test_verify_and_cache.py

Тесты для:
- verify_solution / replay (проверка решений на Board)
- peg_io.cache (кэширование решений)
- main (CLI на быстрой позиции)
"""

from core.board import Board, Move
from core.utils import grid_to_str
from peg_io import cache as cache_module
from peg_io.cache import load_solutions, get_cached_solution, save_solution
from solutions.verify import verify_solution, replay, parse_move
from tests.helpers import grid_with_pegs

import main


def _make_simple_board() -> Board:
    """
    Простая позиция с выигрышным ходом C4 → E4 через D4.
    """
    return Board(grid_with_pegs([(3, 2), (3, 3)]))


def test_verify_solution_valid():
    """Корректная последовательность ходов должна проходить проверку."""
    board = _make_simple_board()
    assert verify_solution(board, [Move(3, 2, 3, 4)]) is True


def test_verify_solution_invalid_move():
    """Ход не из списка допустимых отклоняется."""
    board = _make_simple_board()
    assert verify_solution(board, [Move(3, 2, 3, 2)]) is False
    assert verify_solution(board, [Move(3, 2, 3, 0)]) is False


def test_verify_solution_not_finished():
    """Пустое решение допустимо, только если уже один колышек."""
    assert verify_solution(_make_simple_board(), []) is False
    assert verify_solution(Board(grid_with_pegs([(3, 3)])), []) is True


def test_verify_ignores_trimmed_moves():
    """Урезанный список ходов снимка не мешает проверке."""
    board = _make_simple_board()
    board.remove_move(0)
    assert verify_solution(board, [Move(3, 2, 3, 4)]) is True


def test_replay_sequence():
    board = Board()
    moves = [Move(1, 3, 3, 3), Move(2, 1, 2, 3)]

    boards = replay(board, moves)

    assert boards is not None
    assert [b.peg_count() for b in boards] == [32, 31, 30]
    assert board.peg_count() == 32


def test_parse_move():
    assert parse_move("C4 → E4") == Move(3, 2, 3, 4)
    assert parse_move("B4-D4") == Move(3, 1, 3, 3)


def test_cache_roundtrip(tmp_path, monkeypatch):
    """save_solution / get_cached_solution используют grid_to_str как ключ."""
    cache_file = tmp_path / "solutions_cache_test.json"
    monkeypatch.setattr(cache_module, "CACHE_FILE", str(cache_file), raising=True)

    board = _make_simple_board()
    assert get_cached_solution(board.cells) is None

    save_solution(board.cells, ["C4 → E4"], 1)

    db = load_solutions()
    key = grid_to_str(board.cells)
    assert key in db
    assert db[key] == {'moves': ["C4 → E4"], 'operations': 1}
    assert get_cached_solution(board.cells) == db[key]


def test_cache_corrupted_file(tmp_path, monkeypatch):
    cache_file = tmp_path / "broken.json"
    cache_file.write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(cache_module, "CACHE_FILE", str(cache_file), raising=True)

    assert load_solutions() == {}


def test_main_solves_position(tmp_path, monkeypatch, capsys):
    """CLI печатает число операций и все снимки, потом берёт решение из кэша."""
    monkeypatch.setattr(cache_module, "CACHE_FILE", str(tmp_path / "cache.json"), raising=True)

    assert main.main(["size=7x7 pegs=C4,E4,F4 empty=D4"]) == 0
    out = capsys.readouterr().out
    assert "Solution Found!" in out
    assert "Выполнено операций: 4" in out
    assert out.count("+-------+") == 2 * (1 + 3), "Начальная позиция и три снимка"

    assert main.main(["size=7x7 pegs=C4,E4,F4 empty=D4", "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "Выполнено операций: 4" in out
    assert out.count("+-------+") == 2


def test_main_exhausted(tmp_path, monkeypatch, capsys):
    """CLI отличает исчерпание поиска от решения."""
    monkeypatch.setattr(cache_module, "CACHE_FILE", str(tmp_path / "cache.json"), raising=True)

    assert main.main(["size=7x7 pegs=C1,E7", "--no-cache"]) == 1
    out = capsys.readouterr().out
    assert "исчерпано" in out
    assert not (tmp_path / "cache.json").exists()


def test_main_invalid_input(capsys):
    assert main.main(["size=5x5 pegs=A1", "--no-cache"]) == 1
