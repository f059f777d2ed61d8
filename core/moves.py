"""
core/moves.py

Ход (прыжок через соседний колышек) и генерация допустимых ходов.
"""

from typing import Iterator, List

from utils.error_handling import IllegalMoveError
from .geometry import Hole, TriangleBoard
from .position import Position


class Move:
    """
    Прыжок start → destination через middle.

    Применение — XOR трёх битов. Это корректно только когда start и middle
    заняты, а destination пуст; apply() проверяет это условие.
    """
    __slots__ = ('start', 'middle', 'destination', 'mask')

    def __init__(self, start: Hole, middle: Hole, destination: Hole):
        if len({start.index, middle.index, destination.index}) != 3:
            raise IllegalMoveError(f"Лунки хода должны различаться: {start}, {middle}, {destination}")
        self.start = start
        self.middle = middle
        self.destination = destination
        self.mask = (1 << start.index) | (1 << middle.index) | (1 << destination.index)

    def is_legal(self, position: Position) -> bool:
        """Можно ли сделать этот ход из position."""
        return (
            self.destination.index < position.size and
            position.has_peg(self.start) and
            position.has_peg(self.middle) and
            position.is_empty(self.destination)
        )

    def apply(self, position: Position) -> Position:
        """Возвращает новую позицию после хода."""
        if not self.is_legal(position):
            raise IllegalMoveError(f"Ход {self!r} недопустим в позиции {position!r}")
        return position.toggle(self.mask)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Move) and
            self.start == other.start and
            self.middle == other.middle and
            self.destination == other.destination
        )

    def __hash__(self) -> int:
        return hash((self.start, self.middle, self.destination))

    def __repr__(self) -> str:
        return f"Move({self.start.index} -> {self.destination.index} over {self.middle.index})"


def enumerate_moves(position: Position, board: TriangleBoard) -> Iterator[Move]:
    """
    Лениво генерирует допустимые ходы.

    Порядок фиксирован: лунки построчно слева направо, затем направления
    в порядке geometry.DIRECTIONS.
    """
    for start in board.holes:
        if position.is_empty(start):
            continue
        for middle, destination in board.jumps_from(start):
            if position.is_empty(middle):
                continue
            if position.has_peg(destination):
                continue
            yield Move(start, middle, destination)


def legal_moves(position: Position, board: TriangleBoard) -> List[Move]:
    """Все допустимые ходы списком."""
    return list(enumerate_moves(position, board))


def has_moves(position: Position, board: TriangleBoard) -> bool:
    """Есть ли хоть один ход (проверка тупика)."""
    return next(enumerate_moves(position, board), None) is not None
