"""
로거(Logger) 모듈

- 포맷: 시간 | 레벨 | 모듈 | 메시지
- 레벨은 settings.LOG_LEVEL (.env로 DEBUG 전환 가능)
"""

import logging

from backend.app.core.config import settings


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger  # 이미 설정되어 있으면 중복 설정 방지

    level = logging.getLevelName(str(settings.LOG_LEVEL).upper())
    logger.setLevel(level if isinstance(level, int) else logging.INFO)

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
