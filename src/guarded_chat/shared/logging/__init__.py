"""
목적: 로깅 모듈 공개 API를 제공한다.
설명: 로거 구현과 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/shared/logging/logger.py, src/guarded_chat/shared/logging/models.py
"""

from guarded_chat.shared.logging.logger import (
    InMemoryLogRepository,
    InMemoryLogger,
    LogRepository,
    Logger,
    create_default_logger,
)
from guarded_chat.shared.logging.models import LogContext, LogLevel, LogRecord

__all__ = [
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogRepository",
    "InMemoryLogger",
    "create_default_logger",
]
