"""
목적: 안전성 정책과 판정 결과 모델을 정의한다.
설명: 엄격도/차단 주제 열거형, 안전성 설정과 호출자 부분 설정, 단일 계층 판정 결과를 불변 모델로 제공한다.
디자인 패턴: 값 객체(Value Object)
참조: src/guarded_chat/core/safety/config_merger.py, src/guarded_chat/core/safety/keyword_filter.py
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field, PositiveInt, field_validator

from guarded_chat.shared.chat.models import DomainModel, ModelSpec


class SafetyLevel(str, Enum):
    """정책 엄격도. strict가 moderate보다 강하다."""

    MODERATE = "moderate"
    STRICT = "strict"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]


_LEVEL_RANK = {SafetyLevel.MODERATE: 0, SafetyLevel.STRICT: 1}


class BlockedTopic(str, Enum):
    """차단 가능한 주제 범주."""

    VIOLENCE = "violence"
    SEXUAL_CONTENT = "sexual_content"
    SELF_HARM = "self_harm"
    HATE_SPEECH = "hate_speech"
    DRUGS_ALCOHOL = "drugs_alcohol"
    PROFANITY = "profanity"
    PERSONAL_INFORMATION = "personal_information"
    DANGEROUS_ACTIVITIES = "dangerous_activities"
    ACADEMIC_DISHONESTY = "academic_dishonesty"

    @property
    def label(self) -> str:
        """판정 프롬프트에 사용하는 사람이 읽는 표기(`self harm`)."""

        return self.value.replace("_", " ")


class CheckSource(str, Enum):
    """판정을 내린 안전성 계층."""

    KEYWORD = "keyword"
    SEMANTIC = "semantic"


def _dedupe_topics(topics: list[BlockedTopic]) -> list[BlockedTopic]:
    seen: set[BlockedTopic] = set()
    ordered: list[BlockedTopic] = []
    for topic in topics:
        if topic not in seen:
            seen.add(topic)
            ordered.append(topic)
    return ordered


class SemanticSafetyConfig(DomainModel):
    """semantic 안전성 계층 설정(외부 표기 `llmSafety`).

    Args:
        enabled: 계층 활성화 여부.
        model: judge 모델 지정.
        custom_prompt: `{{CONTENT}}`, `{{BLOCKED_TOPICS}}` 자리표시자를 갖는 판정 프롬프트 템플릿.
    """

    enabled: bool = True
    model: ModelSpec
    custom_prompt: Optional[str] = None


class SemanticSafetyOverride(DomainModel):
    """호출자가 전달하는 semantic 계층 부분 설정."""

    enabled: Optional[bool] = None
    model: Optional[ModelSpec] = None
    custom_prompt: Optional[str] = Field(default=None, min_length=10)


class SafetyConfig(DomainModel):
    """요청 1건에 적용되는 완전한 안전성 설정."""

    level: SafetyLevel
    blocked_topics: list[BlockedTopic]
    max_input_length: PositiveInt
    max_output_tokens: PositiveInt
    allow_image_input: bool
    allow_file_upload: bool
    allowed_file_mime_types: list[str]
    max_file_size_bytes: PositiveInt
    system_prompt_prefix: str
    llm_safety: SemanticSafetyConfig

    @field_validator("blocked_topics")
    @classmethod
    def _unique_topics(cls, value: list[BlockedTopic]) -> list[BlockedTopic]:
        return _dedupe_topics(value)


class SafetyConfigOverride(DomainModel):
    """호출자가 전달하는 부분 안전성 설정. 모든 필드가 선택이다."""

    level: Optional[SafetyLevel] = None
    blocked_topics: Optional[list[BlockedTopic]] = None
    max_input_length: Optional[PositiveInt] = None
    max_output_tokens: Optional[PositiveInt] = None
    allow_image_input: Optional[bool] = None
    allow_file_upload: Optional[bool] = None
    allowed_file_mime_types: Optional[list[str]] = None
    max_file_size_bytes: Optional[PositiveInt] = None
    system_prompt_prefix: Optional[str] = None
    llm_safety: Optional[SemanticSafetyOverride] = None


class SafetyCheckResult(DomainModel):
    """단일 안전성 계층의 판정 결과."""

    safe: bool
    flagged_topics: list[BlockedTopic] = Field(default_factory=list)
    reason: Optional[str] = None
    source: Optional[CheckSource] = None

    @classmethod
    def passed(cls, source: CheckSource) -> "SafetyCheckResult":
        return cls(safe=True, source=source)

    @classmethod
    def blocked(
        cls,
        source: CheckSource,
        reason: str,
        flagged_topics: Optional[list[BlockedTopic]] = None,
    ) -> "SafetyCheckResult":
        return cls(
            safe=False,
            flagged_topics=list(flagged_topics or []),
            reason=reason,
            source=source,
        )
