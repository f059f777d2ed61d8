"""
solvers - Решатели треугольного Peg Solitaire

Экспортирует:
- BacktrackingSolver / solve: перебор с возвратом (опционально с мемоизацией)
- solve_all_vacancies: параллельный перебор всех начальных вакансий
"""

from .base import BaseSolver, SolverStats, Solution
from .backtracking import BacktrackingSolver, solve
from .parallel import solve_all_vacancies

__all__ = [
    'BaseSolver',
    'SolverStats',
    'Solution',
    'BacktrackingSolver',
    'solve',
    'solve_all_vacancies',
]
