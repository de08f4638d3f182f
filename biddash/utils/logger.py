"""
Logging utilities
로깅 유틸리티
"""

import os
import sys
from pathlib import Path

from loguru import logger as loguru_logger

_configured = False


def setup_logger(level: str = "INFO", log_dir: str = "logs"):
    """로거 설정"""
    global _configured

    # 기존 핸들러 제거
    loguru_logger.remove()
    loguru_logger.configure(extra={"name": "biddash"})

    # 콘솔 출력
    loguru_logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True
    )

    # 파일 출력
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    loguru_logger.add(
        os.path.join(log_dir, "biddash_{time:YYYY-MM-DD}.log"),
        rotation="1 day",
        retention="30 days",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]} - {message}",
        compression="zip"
    )

    _configured = True
    return loguru_logger


def get_logger(name: str):
    """로거 인스턴스 반환"""
    if not _configured:
        setup_logger(os.getenv("LOG_LEVEL", "INFO"), os.getenv("LOG_DIR", "logs"))
    return loguru_logger.bind(name=name)
