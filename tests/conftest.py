import sys, os

import pytest

# Корень репозитория в sys.path для импорта core/solvers/peg_io
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False,
        help="запускать долгие тесты (полный поиск на английской доске)"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: долгий тест, нужен --runslow")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="нужен --runslow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
