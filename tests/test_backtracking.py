"""
tests/test_backtracking.py

Тесты перебора с возвратом.
"""

import logging

import pytest

from core.position import Position, initial_position
from peg_io.visualizer import moves_to_string
from solutions.verify import replay, verify_solution
from solvers import BacktrackingSolver, solve
from utils.error_handling import InvalidBoardError, SearchTimeoutError


@pytest.fixture(scope="module")
def standard_solution(board, start):
    return solve(start, board)


def test_standard_board_solved(board, start, standard_solution):
    """Тест: 15 лунок, вакансия 12 — решение из 13 ходов (14 колышков - 1)."""
    assert board.total == 15
    assert standard_solution is not None, "Решение должно быть найдено"
    assert len(standard_solution) == start.peg_count() - 1 == 13
    assert verify_solution(board, start, standard_solution), "Решение должно быть корректным"


def test_reference_solution_text(board, start, standard_solution, reference_text):
    """Тест: порядок перебора даёт ровно это решение для вакансии 12."""
    assert moves_to_string(standard_solution) == reference_text
    assert moves_to_string(solve(start, board, use_memo=True)) == reference_text


def test_peg_count_drops_by_one(start, standard_solution):
    """Тест: после k ходов на доске 14 - k колышков, в конце один."""
    positions = replay(start, standard_solution)

    for moves_applied, position in enumerate(positions):
        assert position.peg_count() == 14 - moves_applied
    assert positions[-1].peg_count() == 1


def test_solution_is_immutable_sequence(standard_solution):
    assert isinstance(standard_solution, tuple)


def test_solve_is_deterministic(board, start, standard_solution):
    """Тест: повторный вызов даёт то же решение."""
    assert solve(start, board) == standard_solution


def test_memo_keeps_first_solution(board, start, standard_solution):
    """Тест: мемоизация тупиков не меняет найденное решение."""
    solver = BacktrackingSolver(use_memo=True)
    assert solver.solve(start, board) == standard_solution
    assert solver.stats.solution_length == 13


@pytest.mark.parametrize("vacancy", range(15))
def test_every_vacancy_solution_is_valid(board, vacancy):
    """Тест: любое найденное решение корректно; None — только если решения нет."""
    position = initial_position(board, vacancy)
    result = solve(position, board, use_memo=True)
    if result is not None:
        assert len(result) == 13
        assert verify_solution(board, position, result)


def test_one_move_position(small_board):
    """Тест: (0,0) прыгает вниз через (1,0) в (2,0)."""
    position = Position(0b11, small_board.total)
    result = solve(position, small_board)

    assert result is not None
    assert len(result) == 1
    move = result[0]
    assert (move.start.index, move.middle.index, move.destination.index) == (0, 1, 3)


def test_already_solved(board):
    """Тест: один колышек — пустое решение."""
    result = solve(Position(1 << 7, board.total), board)
    assert result == ()


def test_unsolvable_returns_none(small_board):
    """Тест: ходов нет — None, а не исключение."""
    position = Position((1 << 0) | (1 << 5), small_board.total)
    assert solve(position, small_board) is None


def test_zero_pegs_rejected(board):
    with pytest.raises(InvalidBoardError):
        solve(Position(0, board.total), board)


def test_position_from_other_board_rejected(board, small_board):
    with pytest.raises(InvalidBoardError):
        solve(Position(0b11, small_board.total), board)


def test_timeout_raises(board, start):
    """Тест: истёкший срок — отдельная ошибка, не "решения нет"."""
    solver = BacktrackingSolver(timeout=-1.0)
    with pytest.raises(SearchTimeoutError):
        solver.solve(start, board)


def test_stats(board, start):
    solver = BacktrackingSolver()
    result = solver.solve(start, board)

    assert result is not None
    assert solver.stats.nodes_visited > 13
    assert solver.stats.max_depth == 13
    assert solver.stats.solution_length == len(result)
    assert solver.stats.nodes_pruned == 0, "Без мемоизации ничего не отсекается"
    assert solver.stats.time_elapsed >= 0


def test_verbose_logging(small_board, caplog):
    solver = BacktrackingSolver(verbose=True)
    with caplog.at_level(logging.INFO, logger="triangle_solitaire"):
        solver.solve(Position(0b11, small_board.total), small_board)

    assert "Solution found: 1 moves" in caplog.text
