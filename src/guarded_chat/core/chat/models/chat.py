"""
목적: 대화 요청/응답 모델을 정의한다.
설명: 요청 1건의 입력(메시지, 모델 지정, 부분 안전성 설정, 온도)과 응답(최종 메시지, 사용량, 안전성 메타데이터)을 제공한다.
디자인 패턴: DTO 패턴
참조: src/guarded_chat/core/chat/graphs/chat_graph.py, src/guarded_chat/api/chat/routers/chat.py
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from guarded_chat.core.chat.const import find_catalogue_entry
from guarded_chat.core.safety.models import BlockedTopic, CheckSource, SafetyConfigOverride
from guarded_chat.shared.chat.models import DomainModel, Message, ModelSpec, TokenUsage


class ChatRequest(DomainModel):
    """대화 요청 모델."""

    conversation_id: Optional[str] = None
    model: ModelSpec
    messages: list[Message] = Field(min_length=1)
    safety_config: Optional[SafetyConfigOverride] = None
    temperature: Optional[float] = Field(default=None, ge=0, le=1)

    @field_validator("model")
    @classmethod
    def _known_model(cls, value: ModelSpec) -> ModelSpec:
        if find_catalogue_entry(value) is None:
            raise ValueError(
                f"unsupported model: {value.provider.value}/{value.model_id}"
            )
        return value


class SafetyMeta(DomainModel):
    """응답에 포함되는 안전성 메타데이터."""

    input_check_passed: bool
    output_check_passed: bool
    flagged_topics: list[BlockedTopic] = Field(default_factory=list)
    layers_run: list[CheckSource] = Field(default_factory=list)
    flagged_by: Optional[CheckSource] = None


class ChatResponse(DomainModel):
    """대화 응답 모델."""

    conversation_id: str
    model: ModelSpec
    message: Message
    usage: Optional[TokenUsage] = None
    safety_meta: SafetyMeta
