"""
utils/logging.py

Централизованная система логирования решателя.
"""

import logging
import sys
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class SolverLogger:
    """Логгер для решателей."""

    def __init__(self, name: str = "triangle_solitaire", level: int = logging.INFO):
        """
        Инициализирует логгер.

        Args:
            name: имя логгера
            level: уровень логирования
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Избегаем дублирования handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(console_handler)

    def set_level(self, level: int):
        """Меняет уровень логгера и всех его handlers."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)


# Глобальный логгер
_default_logger: Optional[SolverLogger] = None


def get_logger(name: str = "triangle_solitaire", level: int = logging.INFO) -> SolverLogger:
    """
    Возвращает глобальный логгер или создаёт новый.

    Args:
        name: имя логгера
        level: уровень логирования (учитывается только при первом вызове)

    Returns:
        SolverLogger
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = SolverLogger(name, level)
    return _default_logger


def setup_file_logging(log_file: str = "triangle_solitaire.log", level: int = logging.INFO) -> logging.FileHandler:
    """
    Дополнительно пишет лог в файл.

    Args:
        log_file: путь к файлу лога
        level: уровень логирования

    Returns:
        Добавленный FileHandler (чтобы его можно было снять)
    """
    logger = get_logger()
    # Уровень логгера мог быть сброшен (NOTSET наследует WARNING от root)
    if logger.logger.getEffectiveLevel() > level:
        logger.logger.setLevel(level)

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.logger.addHandler(file_handler)
    return file_handler
