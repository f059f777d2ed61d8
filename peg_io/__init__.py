"""
peg_io - Ввод/вывод для треугольного Peg Solitaire

Экспортирует:
- Текстовый формат решения (одна строка на ход)
- Разбор этого формата обратно в ходы
"""

from .visualizer import move_to_string, moves_to_string, format_solution
from .parser import parse_moves

__all__ = [
    'move_to_string',
    'moves_to_string',
    'format_solution',
    'parse_moves',
]
