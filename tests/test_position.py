"""
tests/test_position.py

Тесты битовой позиции.
"""

import pytest

from core.position import Position, initial_position, popcount
from utils.error_handling import InvalidBoardError


@pytest.mark.parametrize("vacancy", range(15))
def test_initial_position_single_vacancy(board, vacancy):
    """Тест: ровно одна пустая лунка, остальные заняты."""
    position = initial_position(board, vacancy)

    assert position.peg_count() == board.total - 1
    empty = [h.index for h in board.holes if position.is_empty(h)]
    assert empty == [vacancy]
    assert position.pegs >> board.total == 0


@pytest.mark.parametrize("vacancy", [-1, 15, 100])
def test_initial_position_out_of_range(board, vacancy):
    """Тест: вакансия вне доски отклоняется, а не заворачивается."""
    with pytest.raises(InvalidBoardError):
        initial_position(board, vacancy)


def test_position_rejects_high_bits():
    with pytest.raises(InvalidBoardError):
        Position(1 << 15, 15)
    with pytest.raises(InvalidBoardError):
        Position(-1, 15)


def test_position_value_semantics(start):
    """Тест: позиции — значения; toggle не меняет исходную."""
    same = Position(start.pegs, start.size)
    assert same == start
    assert hash(same) == hash(start)

    other = start.toggle(0b111)
    assert other != start
    assert start.peg_count() == 14
    assert other.toggle(0b111) == start


def test_occupied_indices(small_board):
    position = Position(0b100101, small_board.total)
    assert list(position.occupied_indices()) == [0, 2, 5]
    assert position.peg_count() == 3


def test_full_position(board):
    full = Position.full(board)
    assert full.peg_count() == 15
    assert not full.is_solved()


def test_popcount():
    assert popcount(0) == 0
    assert popcount(0x7fff) == 15
    assert popcount(1 << 40) == 1
