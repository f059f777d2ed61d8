"""
core/position.py

Позиция — битовая маска занятых лунок.
Для стандартной доски (15 лунок) хватает 15 бит.
"""

from typing import Iterator

from utils.error_handling import InvalidBoardError
from .geometry import Hole, TriangleBoard


def popcount(x: int) -> int:
    """Количество установленных битов (popcount процессора, Python 3.10+)."""
    return x.bit_count()


class Position:
    """
    Иммутабельное состояние доски: бит i установлен ⇔ в лунке i есть колышек.

    size — число лунок доски; биты выше size всегда нулевые.
    """
    __slots__ = ('pegs', 'size', '_count')

    def __init__(self, pegs: int, size: int):
        if size < 1:
            raise InvalidBoardError(f"Размер позиции должен быть положительным, получено: {size}")
        if pegs < 0 or pegs >> size:
            raise InvalidBoardError(f"Маска {pegs:#x} не помещается в {size} бит")
        self.pegs = pegs
        self.size = size
        self._count = popcount(pegs)

    @classmethod
    def full(cls, board: TriangleBoard) -> 'Position':
        """Все лунки заняты."""
        return cls(board.full_mask, board.total)

    def peg_count(self) -> int:
        return self._count

    def has_peg(self, hole: Hole) -> bool:
        return bool(self.pegs & (1 << hole.index))

    def is_empty(self, hole: Hole) -> bool:
        return not self.pegs & (1 << hole.index)

    def is_solved(self) -> bool:
        return self._count == 1

    def occupied_indices(self) -> Iterator[int]:
        """Индексы занятых лунок по возрастанию."""
        for i in range(self.size):
            if self.pegs >> i & 1:
                yield i

    def toggle(self, mask: int) -> 'Position':
        """Новая позиция с инвертированными битами mask."""
        return Position(self.pegs ^ mask, self.size)

    def __hash__(self) -> int:
        return hash((self.pegs, self.size))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Position) and self.pegs == other.pegs and self.size == other.size

    def __repr__(self) -> str:
        return f"Position({self.pegs:#0{self.size + 2}b}, {self._count} pegs)"


def initial_position(board: TriangleBoard, vacancy: int) -> Position:
    """
    Полная доска без одного колышка.

    Raises:
        InvalidBoardError: если vacancy вне [0, board.total)
    """
    if not isinstance(vacancy, int) or not 0 <= vacancy < board.total:
        raise InvalidBoardError(f"Пустая лунка {vacancy!r} вне диапазона [0, {board.total})")
    return Position(board.full_mask ^ (1 << vacancy), board.total)
