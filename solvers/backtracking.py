"""
solvers/backtracking.py

Перебор с возвратом, ограниченный по глубине.

Глубина = число колышков - 1: каждый ход снимает ровно один колышек,
так что решение найдено, когда оставшаяся глубина стала нулевой.
"""

import time
from typing import Optional, Set

from .base import BaseSolver, SolverStats, Solution
from core.geometry import TriangleBoard
from core.moves import enumerate_moves
from core.position import Position
from utils.error_handling import SearchTimeoutError, validate_position


class BacktrackingSolver(BaseSolver):
    """
    DFS решатель.

    Особенности:
    - Ходы перебираются в фиксированном порядке enumerate_moves
    - Первая ветвь, дошедшая до одного колышка, побеждает
    - Опциональная мемоизация тупиковых позиций (use_memo)
    - Опциональный таймаут, проверяемый между попытками ходов

    Мемоизация запоминает только неудачи, поэтому найденное решение
    совпадает с решением без неё.
    """

    def __init__(self, use_memo: bool = False, timeout: Optional[float] = None,
                 verbose: bool = False):
        """
        Args:
            use_memo: запоминать позиции, из которых решения нет
            timeout: предел времени в секундах (None — без ограничения)
            verbose: выводить отладочную информацию
        """
        super().__init__(verbose=verbose)
        self.use_memo = use_memo
        self.timeout = timeout
        self.memo: Set[int] = set()
        self._board: Optional[TriangleBoard] = None
        self._deadline: Optional[float] = None

    def solve(self, position: Position, board: TriangleBoard) -> Optional[Solution]:
        """
        Ищет последовательность ходов до одного колышка.

        Returns:
            Кортеж ходов длины peg_count - 1 или None, если решения нет

        Raises:
            InvalidBoardError: позиция не подходит к доске или пуста
            SearchTimeoutError: превышен timeout
        """
        validate_position(position, board)

        self.stats = SolverStats()
        self.memo.clear()
        self._board = board
        start_time = time.monotonic()
        self._deadline = start_time + self.timeout if self.timeout is not None else None

        depth = position.peg_count() - 1
        self._log(f"Starting backtracking (pegs={position.peg_count()}, memo={self.use_memo})")

        try:
            result = self._search(depth, position, 0)
        finally:
            self.stats.time_elapsed = time.monotonic() - start_time
            self._board = None

        if result is not None:
            self.stats.solution_length = len(result)
            self._log(f"Solution found: {len(result)} moves")
        else:
            self._log("No solution found")
        self._log(f"Stats: {self.stats}")
        return result

    def _search(self, depth: int, position: Position, level: int) -> Optional[Solution]:
        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, level)

        if depth == 0:
            return ()

        if self.use_memo and position.pegs in self.memo:
            self.stats.nodes_pruned += 1
            return None

        for move in enumerate_moves(position, self._board):
            self._check_deadline()
            tail = self._search(depth - 1, move.apply(position), level + 1)
            if tail is not None:
                return (move,) + tail

        if self.use_memo:
            self.memo.add(position.pegs)
        return None

    def _check_deadline(self) -> None:
        if self._deadline is not None and time.monotonic() > self._deadline:
            raise SearchTimeoutError(
                f"Поиск превысил {self.timeout}s ({self.stats.nodes_visited} узлов)"
            )


def solve(position: Position, board: TriangleBoard, use_memo: bool = False,
          timeout: Optional[float] = None, verbose: bool = False) -> Optional[Solution]:
    """Решает позицию перебором с возвратом. None — решения нет."""
    return BacktrackingSolver(use_memo=use_memo, timeout=timeout, verbose=verbose).solve(position, board)
