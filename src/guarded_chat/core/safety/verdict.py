"""
목적: judge 모델의 판정 문자열 파서를 제공한다.
설명: 마크다운 코드 펜스를 제거하고 `{safe, flaggedTopics, reason}` JSON을 검증한다.
      `safe`는 엄격한 불리언이어야 하고, 나머지 필드는 형식이 어긋나면 빈 값으로 취급한다.
      JSON이 아니거나 `safe`가 불리언이 아니면 VerdictParseError를 던지며, 안전 여부를 추측하지 않는다.
디자인 패턴: 파서 함수
참조: src/guarded_chat/core/safety/semantic_classifier.py
"""

from __future__ import annotations

import json
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from guarded_chat.core.safety.models import BlockedTopic

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```\s*$")
_TOPIC_SEPARATORS = re.compile(r"[\s\-]+")


class VerdictParseError(ValueError):
    """judge 응답을 판정으로 해석할 수 없을 때 발생한다."""


class JudgeVerdict(BaseModel):
    """judge 모델 판정 모델."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    safe: StrictBool
    flagged_topics: list[str] = Field(default_factory=list, alias="flaggedTopics")
    reason: Optional[str] = None

    @field_validator("flagged_topics", mode="before")
    @classmethod
    def _coerce_topics(cls, value: object) -> list[str]:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]

    @field_validator("reason", mode="before")
    @classmethod
    def _coerce_reason(cls, value: object) -> Optional[str]:
        return value if isinstance(value, str) else None

    def blocked_topics(self) -> list[BlockedTopic]:
        """알려진 차단 주제로 정규화한 목록을 반환한다. 알 수 없는 값은 버린다."""

        known = {topic.value for topic in BlockedTopic}
        topics: list[BlockedTopic] = []
        for raw in self.flagged_topics:
            normalized = _TOPIC_SEPARATORS.sub("_", str(raw).strip().lower())
            if normalized in known and BlockedTopic(normalized) not in topics:
                topics.append(BlockedTopic(normalized))
        return topics


def strip_code_fence(raw: str) -> str:
    """앞뒤 마크다운 코드 펜스를 제거한다."""

    cleaned = str(raw or "").strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", cleaned))
    return cleaned.strip()


def parse_verdict(raw: str) -> JudgeVerdict:
    """judge 원문 응답을 판정 모델로 변환한다."""

    cleaned = strip_code_fence(raw)
    if not cleaned:
        raise VerdictParseError("judge 응답이 비어 있습니다.")
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as error:
        raise VerdictParseError(f"judge 응답이 JSON이 아닙니다: {error}") from error
    if not isinstance(payload, dict):
        raise VerdictParseError("judge 응답이 JSON 객체가 아닙니다.")
    try:
        return JudgeVerdict.model_validate(payload)
    except ValidationError as error:
        raise VerdictParseError(f"judge 응답 형식이 올바르지 않습니다: {error}") from error


__all__ = ["JudgeVerdict", "VerdictParseError", "parse_verdict", "strip_code_fence"]
