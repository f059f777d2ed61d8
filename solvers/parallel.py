"""
solvers/parallel.py

Параллельный перебор всех начальных пустых лунок.

Каждая вакансия — независимая задача: доска и позиция пересобираются
в процессе-работнике из целых чисел, общих изменяемых данных нет.
"""

from typing import Dict, Optional, Tuple
from concurrent.futures import ProcessPoolExecutor, as_completed
import multiprocessing

from .backtracking import BacktrackingSolver
from .base import Solution
from core.geometry import TriangleBoard, build_board
from core.position import initial_position
from utils.error_handling import safe_solve
from utils.logging import get_logger


def _solve_vacancy(args: Tuple[int, int, bool]) -> Tuple[int, Optional[Solution]]:
    """Решает одну вакансию (для запуска в отдельном процессе). SolverError логируется и даёт None."""
    rows, vacancy, use_memo = args
    board = build_board(rows)
    solver = BacktrackingSolver(use_memo=use_memo)
    return vacancy, safe_solve(solver, initial_position(board, vacancy), board)


def solve_all_vacancies(board: TriangleBoard, workers: Optional[int] = None,
                        use_memo: bool = True, verbose: bool = False) -> Dict[int, Optional[Solution]]:
    """
    Решает головоломку для каждой начальной пустой лунки.

    Args:
        board: геометрия доски
        workers: число процессов (по умолчанию — число CPU)
        use_memo: мемоизация тупиков внутри каждой задачи
        verbose: логировать прогресс

    Returns:
        {индекс вакансии: решение или None}, по возрастанию индекса
    """
    workers = workers or multiprocessing.cpu_count()
    tasks = [(board.rows, vacancy, use_memo) for vacancy in range(board.total)]
    logger = get_logger()
    if verbose:
        logger.info(f"[solve_all_vacancies] rows={board.rows}, tasks={len(tasks)}, workers={workers}")

    results: Dict[int, Optional[Solution]] = {}
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_solve_vacancy, task) for task in tasks]
        for future in as_completed(futures):
            vacancy, solution = future.result()
            results[vacancy] = solution
            if verbose:
                status = f"{len(solution)} moves" if solution is not None else "no solution"
                logger.info(f"[solve_all_vacancies] vacancy {vacancy}: {status}")

    return {vacancy: results[vacancy] for vacancy in sorted(results)}
