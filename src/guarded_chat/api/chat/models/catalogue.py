"""
목적: 모델 카탈로그/안전성 설정 조회 API 모델을 정의한다.
설명: `GET /api/models`, `GET /api/safety-config` 응답과 공통 에러 본문 모델을 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/guarded_chat/api/chat/routers/models.py, src/guarded_chat/api/chat/routers/safety_config.py
"""

from __future__ import annotations

from guarded_chat.core.chat.const import ModelCatalogueEntry
from guarded_chat.core.safety.models import SafetyConfig
from guarded_chat.shared.chat.models import DomainModel


class ModelListResponse(DomainModel):
    """모델 카탈로그 응답 모델."""

    models: list[ModelCatalogueEntry]


class SafetyConfigNotes(DomainModel):
    """호출자 부분 설정 병합 정책 안내."""

    override_policy: str = (
        "Callers may tighten constraints (e.g. lower maxInputLength, add blockedTopics) "
        "but cannot weaken them beyond the platform defaults."
    )
    blocked_topics_merge: str = (
        "Custom blockedTopics are unioned with defaults - you can add topics but not remove them."
    )
    system_prompt_prefix_merge: str = (
        "Custom systemPromptPrefix is appended to the default, not replacing it."
    )


class SafetyConfigResponse(DomainModel):
    """플랫폼 기본 안전성 설정 응답 모델."""

    defaults: SafetyConfig
    notes: SafetyConfigNotes = SafetyConfigNotes()


class ErrorBody(DomainModel):
    """에러 응답 본문(`detail`) 모델."""

    code: str
    message: str


class ErrorResponse(DomainModel):
    """에러 응답 모델. FastAPI `HTTPException` 형태를 따른다."""

    detail: ErrorBody
