"""
conftest.py

Общие фикстуры pytest. Лежит в корне, чтобы плоские пакеты
(core, solvers, ...) импортировались без установки.
"""

import pytest

from core.geometry import STANDARD_VACANCY, build_board
from core.position import initial_position


@pytest.fixture(scope="session")
def board():
    """Стандартная доска: 5 рядов, 15 лунок."""
    return build_board(5)


@pytest.fixture(scope="session")
def start(board):
    """Полная доска без колышка в лунке 12."""
    return initial_position(board, STANDARD_VACANCY)


@pytest.fixture(scope="session")
def small_board():
    """Доска из 3 рядов (6 лунок) для быстрых сценариев."""
    return build_board(3)


@pytest.fixture(scope="session")
def reference_text():
    """Решение для 5 рядов и вакансии 12 при фиксированном порядке перебора."""
    return "\n".join([
        "2, 0 -> 4, 2",
        "0, 0 -> 2, 0",
        "1, 1 -> 3, 1",
        "3, 0 -> 1, 0",
        "3, 3 -> 1, 1",
        "4, 2 -> 2, 0",
        "1, 0 -> 3, 0",
        "4, 0 -> 2, 0",
        "4, 3 -> 2, 1",
        "1, 1 -> 3, 1",
        "2, 0 -> 4, 2",
        "4, 1 -> 4, 3",
        "4, 4 -> 4, 2",
    ])
