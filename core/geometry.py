"""
core/geometry.py

Геометрия треугольной доски: лунки, их индексы и таблица направлений.
"""

from typing import Iterator, List, NamedTuple, Tuple

from utils.error_handling import InvalidBoardError

# Стандартная головоломка: 5 рядов, 15 лунок, пустая лунка 12
STANDARD_ROWS = 5
STANDARD_VACANCY = 12

MIN_ROWS = 2


class Hole(NamedTuple):
    """Одна лунка доски. index — номер бита в маске позиции."""
    row: int
    col: int
    index: int


class Direction(NamedTuple):
    name: str
    row_delta: int
    col_delta: int


# Порядок важен: он определяет, какое решение будет найдено первым
LEFT = Direction('left', 0, -1)
RIGHT = Direction('right', 0, 1)
UP = Direction('up', -1, 0)
UP_LEFT = Direction('up-left', -1, -1)
DOWN = Direction('down', 1, 0)
DOWN_RIGHT = Direction('down-right', 1, 1)

DIRECTIONS: Tuple[Direction, ...] = (LEFT, RIGHT, UP, UP_LEFT, DOWN, DOWN_RIGHT)

# (Δrow, Δcol) всех осей; таблица замкнута относительно смены знака
AXES = frozenset((d.row_delta, d.col_delta) for d in DIRECTIONS)


def directions_at(row: int, col: int, rows: int) -> List[Direction]:
    """
    Направления прыжка, допустимые из лунки (row, col).

    Для "up" условие строже геометрически необходимого: из лунки
    с col == row - 2 вверх не прыгают. От этого набора условий зависит,
    какое решение находится первым.
    """
    result = []
    if col > 1:
        result.append(LEFT)
    if col + 2 <= row:
        result.append(RIGHT)
    if row > 1 and col < row - 2:
        result.append(UP)
    if row > 1 and col > 1:
        result.append(UP_LEFT)
    if row < rows - 2:
        result.append(DOWN)
        result.append(DOWN_RIGHT)
    return result


class TriangleBoard:
    """
    Иммутабельная треугольная доска из rows рядов.

    Ряд r содержит r + 1 лунок; лунки нумеруются построчно, слева направо.
    """
    __slots__ = ('rows', 'grid', 'holes', 'total', 'full_mask', '_jumps')

    def __init__(self, rows: int):
        if not isinstance(rows, int) or rows < MIN_ROWS:
            raise InvalidBoardError(f"Треугольная доска требует не менее {MIN_ROWS} рядов, получено: {rows!r}")

        grid = []
        index = 0
        for row in range(rows):
            this_row = []
            for col in range(row + 1):
                this_row.append(Hole(row, col, index))
                index += 1
            grid.append(tuple(this_row))

        self.rows = rows
        self.grid: Tuple[Tuple[Hole, ...], ...] = tuple(grid)
        self.holes: Tuple[Hole, ...] = tuple(h for r in self.grid for h in r)
        self.total = index
        self.full_mask = (1 << index) - 1
        # Для каждой лунки: список (middle, destination) в порядке DIRECTIONS
        self._jumps = tuple(self._compute_jumps(h) for h in self.holes)

    def _compute_jumps(self, start: Hole) -> Tuple[Tuple[Hole, Hole], ...]:
        jumps = []
        for d in directions_at(start.row, start.col, self.rows):
            middle = self.hole(start.row + d.row_delta, start.col + d.col_delta)
            destination = self.hole(middle.row + d.row_delta, middle.col + d.col_delta)
            jumps.append((middle, destination))
        return tuple(jumps)

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col <= row

    def hole(self, row: int, col: int) -> Hole:
        """Лунка по координатам (row, col)."""
        if not self.contains(row, col):
            raise InvalidBoardError(f"Лунки ({row}, {col}) нет на доске из {self.rows} рядов")
        return self.grid[row][col]

    def hole_at(self, index: int) -> Hole:
        """Лунка по индексу."""
        if not 0 <= index < self.total:
            raise InvalidBoardError(f"Индекс лунки {index} вне диапазона [0, {self.total})")
        return self.holes[index]

    def jumps_from(self, start: Hole) -> Tuple[Tuple[Hole, Hole], ...]:
        """Пары (middle, destination) для всех направлений, допустимых из start."""
        return self._jumps[start.index]

    def __iter__(self) -> Iterator[Tuple[Hole, ...]]:
        return iter(self.grid)

    def __len__(self) -> int:
        return self.total

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TriangleBoard) and self.rows == other.rows

    def __hash__(self) -> int:
        return hash(('TriangleBoard', self.rows))

    def __repr__(self) -> str:
        return f"TriangleBoard(rows={self.rows}, holes={self.total})"


def build_board(rows: int = STANDARD_ROWS) -> TriangleBoard:
    """Строит треугольную доску; для стандартной головоломки rows=5."""
    return TriangleBoard(rows)
