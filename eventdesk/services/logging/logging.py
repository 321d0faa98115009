import logging
from typing import Optional


def get_logger(logger_name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """
    Создает и настраивает логгер для приложения.

    Если уровень не передан, он берется из настройки LOG_LEVEL.

    Args:
        logger_name: Имя логгера
        level: Уровень логирования

    Returns:
        logging.Logger: Настроенный логгер
    """
    if level is None:
        from eventdesk.database.config import get_settings
        level = logging.getLevelName(get_settings().LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(level)

        # Вывод в консоль
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)

    return logger
