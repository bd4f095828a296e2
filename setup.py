"""
setup.py

Установка решателя английского Peg Solitaire.

Использование:
    pip install -e .
    pip install -e .[test]
"""

from setuptools import setup

setup(
    name="peg_solitaire",
    version="1.0.0",
    description="Backtracking solver for English Peg Solitaire",
    packages=["core", "solvers", "solutions", "peg_io", "utils"],
    py_modules=["main"],
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "peg-solitaire=main:main",
        ],
    },
    zip_safe=False,
)
