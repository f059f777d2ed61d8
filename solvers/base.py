"""
solvers/base.py

Базовый класс для всех решателей.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple
from dataclasses import dataclass

from core.geometry import TriangleBoard
from core.moves import Move
from core.position import Position
from utils.logging import get_logger

# Решение — неизменяемая последовательность ходов; None — "решения нет"
Solution = Tuple[Move, ...]


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели наследуют от него и реализуют метод solve().
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def solve(self, position: Position, board: TriangleBoard) -> Optional[Solution]:
        """
        Решает головоломку.

        Args:
            position: начальная позиция
            board: геометрия доски

        Returns:
            Кортеж ходов или None, если решения нет
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог, если verbose=True."""
        if self.verbose:
            get_logger().info(f"[{self.__class__.__name__}] {message}")
