"""
peg_io/visualizer.py

Текстовое представление решений.
"""

from typing import Optional, Sequence

from core.moves import Move


def move_to_string(move: Move) -> str:
    """Ход в формате "row, col -> row, col"."""
    return f"{move.start.row}, {move.start.col} -> {move.destination.row}, {move.destination.col}"


def moves_to_string(moves: Sequence[Move]) -> str:
    """
    Одна строка на ход, в порядке ходов.

    Этот же формат печатает main.py; его удобно сравнивать построчно.
    """
    return "\n".join(move_to_string(move) for move in moves)


def format_solution(moves: Optional[Sequence[Move]]) -> str:
    """
    Форматирует решение для вывода в консоль.

    Args:
        moves: список ходов или None

    Returns:
        Форматированная строка
    """
    if moves is None:
        return "❌ Решение не найдено"

    if not moves:
        return "✅ Позиция уже решена: остался один колышек"

    lines = [f"✅ Найдено решение за {len(moves)} ходов:"]
    for i, move in enumerate(moves, 1):
        lines.append(f"  {i:2}. {move_to_string(move)}")

    return "\n".join(lines)
