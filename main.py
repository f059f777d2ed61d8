#!/usr/bin/env python3
"""
main.py

Точка входа для решателя треугольного Peg Solitaire.

Использование:
    python main.py                      # 5 рядов, пустая лунка 12
    python main.py --vacancy 0          # другая начальная вакансия
    python main.py --rows 6 --memo      # доска побольше, с мемоизацией
    python main.py --all                # все вакансии параллельно
"""

import sys
import argparse
import logging

from core.geometry import STANDARD_ROWS, STANDARD_VACANCY, build_board
from core.position import initial_position
from peg_io.visualizer import format_solution, moves_to_string
from solutions.verify import verify_solution
from solvers import BacktrackingSolver, solve_all_vacancies
from utils.error_handling import InvalidBoardError, SearchTimeoutError
from utils.logging import get_logger

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Triangle Peg Solitaire Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                  # стандартная доска, вакансия 12
  python main.py --vacancy 3      # вакансия 3
  python main.py --all --memo     # все вакансии
        """
    )
    parser.add_argument(
        '--rows', '-r', type=int, default=STANDARD_ROWS,
        help=f'Число рядов (default: {STANDARD_ROWS})'
    )
    parser.add_argument(
        '--vacancy', '-v', type=int, default=STANDARD_VACANCY,
        help=f'Индекс пустой лунки (default: {STANDARD_VACANCY})'
    )
    parser.add_argument(
        '--memo', action='store_true',
        help='Запоминать тупиковые позиции'
    )
    parser.add_argument(
        '--timeout', type=float, default=None,
        help='Предел времени поиска в секундах'
    )
    parser.add_argument(
        '--all', action='store_true',
        help='Решить для каждой начальной вакансии (параллельно)'
    )
    parser.add_argument(
        '--workers', type=int, default=None,
        help='Число процессов для --all (default: число CPU)'
    )
    parser.add_argument(
        '--verbose', action='store_true',
        help='Подробный лог решателя'
    )
    return parser


def run_single(board, vacancy: int, use_memo: bool, timeout, verbose: bool) -> int:
    position = initial_position(board, vacancy)
    solver = BacktrackingSolver(use_memo=use_memo, timeout=timeout, verbose=verbose)
    solution = solver.solve(position, board)

    if solution is None:
        print(format_solution(None))
        return EXIT_NO_SOLUTION

    if not verify_solution(board, position, solution):
        get_logger().error("Найденное решение не прошло проверку")
        return EXIT_NO_SOLUTION

    print(moves_to_string(solution))
    if verbose:
        get_logger().info(f"{len(solution)} moves, {solver.stats}")
    return EXIT_OK


def run_all(board, workers, use_memo: bool, verbose: bool) -> int:
    results = solve_all_vacancies(board, workers=workers, use_memo=use_memo, verbose=verbose)
    solved = 0
    for vacancy, solution in results.items():
        hole = board.hole_at(vacancy)
        print(f"# vacancy {vacancy} ({hole.row}, {hole.col})")
        if solution is None:
            print(format_solution(None))
        else:
            solved += 1
            print(moves_to_string(solution))
    print(f"# solved {solved}/{len(results)}")
    return EXIT_OK if solved else EXIT_NO_SOLUTION


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.all and args.timeout is not None:
        parser.error("--timeout не поддерживается вместе с --all")
    if args.verbose:
        get_logger().set_level(logging.DEBUG)

    try:
        board = build_board(args.rows)
        if args.all:
            return run_all(board, args.workers, args.memo, args.verbose)
        return run_single(board, args.vacancy, args.memo, args.timeout, args.verbose)
    except InvalidBoardError as e:
        print(f"❌ Ошибка: {e}", file=sys.stderr)
        return EXIT_INVALID
    except SearchTimeoutError as e:
        print(f"⏱ {e}", file=sys.stderr)
        return EXIT_NO_SOLUTION


if __name__ == "__main__":
    sys.exit(main())
