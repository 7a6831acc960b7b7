import logging
from datetime import datetime
from pathlib import Path

from . import config

_LOGGERS = {}


def get_logger(name: str) -> logging.Logger:
    """
    Logger con nombre (p.ej. golftour.scorecards), cacheado por nombre.
    Consola siempre; fichero por arranque solo si GOLFTOUR_LOG_DIR está definido.
    """
    if name in _LOGGERS:
        return _LOGGERS[name]

    logger = logging.getLogger(name)
    logger.setLevel(config.LOG_LEVEL)

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if config.LOG_DIR:
        log_dir = Path(config.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        file_handler = logging.FileHandler(log_dir / f"golftour-{timestamp}.log", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    _LOGGERS[name] = logger

    return logger
