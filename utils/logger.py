import os
import sys

from loguru import logger

from config.settings import LOG_LEVEL, LOG_FILE

_initialized = False

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def init_logger(level: str = None, log_file: str = None):
    """初始化 loguru：控制台 + 可选文件输出，整个 session 只执行一次"""
    global _initialized
    if _initialized:
        return

    logger.remove()  # 去掉默认 handler
    level = level or LOG_LEVEL
    logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=True)

    log_file = log_file or LOG_FILE
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        logger.add(log_file, format=LOG_FORMAT, level=level, rotation="10 MB", retention="7 days",
                   encoding="utf-8")

    _initialized = True
    logger.debug("logger initialized")
