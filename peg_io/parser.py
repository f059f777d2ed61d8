"""
peg_io/parser.py

Разбор текстового формата решения обратно в ходы.
"""

import re
from typing import List

from core.geometry import AXES, TriangleBoard
from core.moves import Move
from core.position import Position

MOVE_RE = re.compile(r'^\s*(\d+)\s*,\s*(\d+)\s*->\s*(\d+)\s*,\s*(\d+)\s*$')


def parse_moves(text: str, board: TriangleBoard, start: Position) -> List[Move]:
    """
    Парсит строки вида "2, 0 -> 0, 0" и восстанавливает ходы.

    Промежуточная лунка вычисляется как середина между start и destination;
    каждый ход применяется к текущей позиции.

    Raises:
        ValueError: строка не в формате или это не прыжок через одну лунку
        InvalidBoardError: координаты вне доски
        IllegalMoveError: ход недопустим в текущей позиции
    """
    moves = []
    position = start

    for line_no, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        match = MOVE_RE.match(line)
        if not match:
            raise ValueError(f"Строка {line_no}: ожидается 'row, col -> row, col', получено {line!r}")

        r1, c1, r2, c2 = (int(g) for g in match.groups())
        dr, dc = r2 - r1, c2 - c1
        if dr % 2 or dc % 2 or (dr // 2, dc // 2) not in AXES:
            raise ValueError(f"Строка {line_no}: {line.strip()!r} не прыжок через одну лунку")

        middle = board.hole(r1 + dr // 2, c1 + dc // 2)
        move = Move(board.hole(r1, c1), middle, board.hole(r2, c2))
        position = move.apply(position)
        moves.append(move)

    return moves
