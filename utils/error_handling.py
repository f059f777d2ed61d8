"""
utils/error_handling.py

Иерархия исключений и проверки входных данных.

"Решение не найдено" исключением не является: solve() возвращает None.
"""

from typing import Any, TYPE_CHECKING

from .logging import get_logger

if TYPE_CHECKING:
    from core.geometry import TriangleBoard
    from core.position import Position


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidBoardError(SolverError):
    """Невалидная геометрия или позиция (rows < 2, вакансия вне доски, 0 колышков)."""
    pass


class IllegalMoveError(SolverError):
    """Ход применён к позиции, для которой он не был сгенерирован."""
    pass


class SearchTimeoutError(SolverError):
    """Поиск не уложился в отведённое время."""
    pass


def validate_position(position: 'Position', board: 'TriangleBoard') -> bool:
    """
    Валидирует позицию относительно доски.

    Raises:
        InvalidBoardError: если позиция шире доски или на ней нет колышков
    """
    if position is None:
        raise InvalidBoardError("Позиция не может быть None")

    if position.size != board.total:
        raise InvalidBoardError(
            f"Позиция рассчитана на {position.size} лунок, а на доске их {board.total}"
        )

    if position.pegs & ~board.full_mask:
        raise InvalidBoardError("Позиция содержит колышки вне доски")

    if position.peg_count() < 1:
        raise InvalidBoardError("Позиция должна содержать хотя бы один колышек")

    return True


def safe_solve(solver, position: 'Position', board: 'TriangleBoard', default: Any = None):
    """
    Выполняет solver.solve, превращая SolverError в default.

    Используется там, где один сбой не должен останавливать пакетный прогон.
    Прочие исключения пробрасываются как есть.
    """
    try:
        return solver.solve(position, board)
    except SolverError as e:
        get_logger().error(f"Ошибка решателя {solver.__class__.__name__}: {e}")
        return default
