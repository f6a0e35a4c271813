"""
목적: Chat LangGraph 상태 타입을 정의한다.
설명: 요청 1건이 안전성 단계를 거치며 누적하는 상태 구조와 단계 열거형을 제공한다.
디자인 패턴: 상태 객체(State Object)
참조: src/guarded_chat/core/chat/graphs/chat_graph.py
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from typing_extensions import NotRequired, TypedDict

from guarded_chat.core.chat.models import ChatRequest
from guarded_chat.core.safety.models import BlockedTopic, CheckSource, SafetyConfig
from guarded_chat.core.safety.refusal import RefusalPhase
from guarded_chat.shared.chat.models import ProviderResponse
from guarded_chat.shared.exceptions import BaseAppException


class ChatStage(str, Enum):
    """오케스트레이션 단계. REJECTED/REFUSED/COMPLETED는 종료 단계다."""

    VALIDATED = "validated"
    CONFIG_MERGED = "config_merged"
    INPUT_KEYWORD_CHECKED = "input_keyword_checked"
    INPUT_SEMANTIC_CHECKED = "input_semantic_checked"
    MODEL_INVOKED = "model_invoked"
    OUTPUT_KEYWORD_CHECKED = "output_keyword_checked"
    OUTPUT_SEMANTIC_CHECKED = "output_semantic_checked"
    COMPLETED = "completed"
    REJECTED = "rejected"
    REFUSED = "refused"


class ChatGraphState(TypedDict):
    """LangGraph 대화 상태 타입."""

    request: ChatRequest
    conversation_id: str
    stage: ChatStage
    layers_run: list[CheckSource]
    config: NotRequired[SafetyConfig]
    provider_response: NotRequired[ProviderResponse]
    flagged_topics: NotRequired[list[BlockedTopic]]
    flagged_by: NotRequired[Optional[CheckSource]]
    refusal_phase: NotRequired[RefusalPhase]
    rejection: NotRequired[BaseAppException]
