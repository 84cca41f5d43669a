import logging
import os
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Chuyển log của stdlib logging (uvicorn, sqlalchemy) sang Loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = None) -> None:
    """
    Cấu hình Loguru: một sink stderr theo LOG_LEVEL

    Args:
        level: Log level, mặc định lấy từ env LOG_LEVEL
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT, colorize=True, backtrace=False)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Tune noise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger.info("Logging configured (level={})", level)
