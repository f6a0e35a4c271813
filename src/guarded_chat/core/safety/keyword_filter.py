"""
목적: 키워드 기반 1차 안전성 필터를 제공한다.
설명: 외부 호출 없이 동기적으로 구조 검증(길이/첨부 정책)과 주제 패턴 스캔을 수행한다.
      어떤 입력에도 예외를 던지지 않고 SafetyCheckResult로만 결과를 표현한다.
디자인 패턴: 순수 함수형 필터
참조: src/guarded_chat/core/safety/patterns.py, src/guarded_chat/core/chat/graphs/chat_graph.py
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from guarded_chat.core.safety.models import (
    BlockedTopic,
    CheckSource,
    SafetyCheckResult,
    SafetyConfig,
)
from guarded_chat.core.safety.patterns import matches_topic
from guarded_chat.shared.chat.models import ChatRole, FilePart, ImagePart, Message, TextPart
from guarded_chat.shared.logging import Logger, create_default_logger


def decoded_size(data: str) -> int:
    """base64 문자열을 디코딩하지 않고 원본 바이트 크기를 계산한다."""

    compact = "".join(data.split())
    padding = len(compact) - len(compact.rstrip("="))
    return max(len(compact) * 3 // 4 - padding, 0)


class KeywordPreFilter:
    """키워드 1차 필터.

    Args:
        logger: 차단 이벤트를 기록할 로거.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("KeywordPreFilter")

    def check_input(self, messages: Sequence[Message], config: SafetyConfig) -> SafetyCheckResult:
        """입력 메시지 전체를 구조 검증한 뒤 user 메시지 텍스트만 주제 스캔한다."""

        violation = self._validate_structure(messages, config)
        if violation is not None:
            self._logger.info(
                f"입력 구조 검증 차단: {violation.reason}",
                metadata={"event": "keyword.input.structure", "reason": violation.reason},
            )
            return violation

        texts = [message.text_content() for message in messages if message.role == ChatRole.USER]
        return self._scan(texts, config.blocked_topics, direction="input")

    def check_output(self, message: Message, config: SafetyConfig) -> SafetyCheckResult:
        """모델이 생성한 단일 메시지의 텍스트를 주제 스캔한다."""

        return self._scan([message.text_content()], config.blocked_topics, direction="output")

    def _scan(
        self,
        texts: Iterable[str],
        blocked_topics: Sequence[BlockedTopic],
        direction: str,
    ) -> SafetyCheckResult:
        # 메시지 경계를 넘어선 일치를 막기 위해 메시지별로 검사한 뒤 합친다.
        hits: set[BlockedTopic] = set()
        for text in texts:
            if not text:
                continue
            hits.update(topic for topic in blocked_topics if matches_topic(text, topic))

        flagged = [topic for topic in blocked_topics if topic in hits]
        if not flagged:
            return SafetyCheckResult.passed(CheckSource.KEYWORD)

        reason = "Content flagged for: " + ", ".join(topic.value for topic in flagged)
        self._logger.info(
            f"키워드 필터 차단({direction}): {reason}",
            metadata={
                "event": f"keyword.{direction}.flagged",
                "flagged_topics": [topic.value for topic in flagged],
            },
        )
        return SafetyCheckResult.blocked(CheckSource.KEYWORD, reason, flagged)

    def _validate_structure(
        self,
        messages: Sequence[Message],
        config: SafetyConfig,
    ) -> Optional[SafetyCheckResult]:
        for message in messages:
            for part in message.content:
                reason = self._part_violation(part, config)
                if reason is not None:
                    return SafetyCheckResult.blocked(CheckSource.KEYWORD, reason)
        return None

    def _part_violation(self, part: object, config: SafetyConfig) -> Optional[str]:
        if isinstance(part, TextPart):
            if len(part.text) > config.max_input_length:
                return f"Input text exceeds maximum length of {config.max_input_length} characters"
            return None
        if isinstance(part, ImagePart):
            if not config.allow_image_input:
                return "Image input is not allowed by current safety configuration"
            return None
        if isinstance(part, FilePart):
            if not config.allow_file_upload:
                return "File upload is not allowed by current safety configuration"
            if part.mime_type not in config.allowed_file_mime_types:
                return f"File type {part.mime_type} is not in the allowed list"
            if decoded_size(part.data) > config.max_file_size_bytes:
                return f"File size exceeds maximum of {config.max_file_size_bytes} bytes"
        return None
