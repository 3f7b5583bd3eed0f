"""loguru 日志配置。"""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(level: str = "INFO") -> None:
    """移除 loguru 默认 handler，按给定级别输出到 stderr，并开启本包日志。"""

    logger.remove()
    logger.enable("newsapi_cli")
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


__all__ = ["setup_logging"]
