"""
solutions - Проверка найденных решений.
"""

from .verify import verify_solution, replay, final_hole

__all__ = [
    'verify_solution',
    'replay',
    'final_hole',
]
