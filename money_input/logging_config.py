from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Attach a stderr handler (plus an optional file) to the money_input logger, 示例：--verbose -> DEBUG."""
    logger = logging.getLogger("money_input")
    logger.setLevel(level)
    logger.handlers.clear()  # repeated calls replace handlers instead of stacking them

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
