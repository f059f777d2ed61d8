"""
solutions/verify.py

Проверка решений: воспроизводит ходы на начальной позиции.
"""

from typing import List, Sequence

from core.geometry import AXES, Hole, TriangleBoard
from core.moves import Move
from core.position import Position


def _is_jump(board: TriangleBoard, move: Move) -> bool:
    """Три лунки лежат на доске подряд вдоль одной из осей."""
    start, middle, destination = move.start, move.middle, move.destination
    for hole in (start, middle, destination):
        if not board.contains(hole.row, hole.col) or board.hole(hole.row, hole.col) != hole:
            return False
    dr, dc = middle.row - start.row, middle.col - start.col
    if (dr, dc) not in AXES:
        return False
    return destination.row - middle.row == dr and destination.col - middle.col == dc


def replay(start: Position, moves: Sequence[Move]) -> List[Position]:
    """
    Применяет ходы по очереди.

    Returns:
        Все позиции, начиная со start (длина len(moves) + 1)

    Raises:
        IllegalMoveError: если какой-то ход недопустим
    """
    positions = [start]
    for move in moves:
        positions.append(move.apply(positions[-1]))
    return positions


def verify_solution(board: TriangleBoard, start: Position, moves: Sequence[Move]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход — прыжок через соседнюю лунку вдоль оси доски;
    - start и middle заняты, destination пуст в текущей позиции;
    - каждый ход снимает ровно один колышек;
    - в конце остаётся ровно один колышек.
    """
    if start.size != board.total:
        return False

    position = start
    for move in moves:
        if not _is_jump(board, move) or not move.is_legal(position):
            return False
        after = position.toggle(move.mask)
        if after.peg_count() != position.peg_count() - 1:
            return False
        position = after

    return position.peg_count() == 1


def final_hole(board: TriangleBoard, start: Position, moves: Sequence[Move]) -> Hole:
    """Лунка, в которой остался последний колышек."""
    last = replay(start, moves)[-1]
    if not last.is_solved():
        raise ValueError(f"После {len(moves)} ходов осталось {last.peg_count()} колышков")
    return board.hole_at(last.pegs.bit_length() - 1)
