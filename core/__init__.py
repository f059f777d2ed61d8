"""
core - Ядро треугольного Peg Solitaire

Геометрия доски, битовые позиции и генерация ходов.
"""

from .geometry import (
    Hole, Direction, TriangleBoard, DIRECTIONS, AXES,
    STANDARD_ROWS, STANDARD_VACANCY,
    build_board, directions_at
)
from .position import Position, initial_position, popcount
from .moves import Move, enumerate_moves, legal_moves, has_moves

__all__ = [
    'Hole', 'Direction', 'TriangleBoard', 'DIRECTIONS', 'AXES',
    'STANDARD_ROWS', 'STANDARD_VACANCY',
    'build_board', 'directions_at',
    'Position', 'initial_position', 'popcount',
    'Move', 'enumerate_moves', 'legal_moves', 'has_moves',
]
