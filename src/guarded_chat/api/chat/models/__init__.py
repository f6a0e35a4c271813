"""
목적: Chat API 모델 공개 API를 제공한다.
설명: 대화 요청/응답과 조회 응답 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/api/chat/models/catalogue.py, src/guarded_chat/core/chat/models/chat.py
"""

from guarded_chat.api.chat.models.catalogue import (
    ErrorBody,
    ErrorResponse,
    ModelListResponse,
    SafetyConfigNotes,
    SafetyConfigResponse,
)
from guarded_chat.core.chat.models import ChatRequest, ChatResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorBody",
    "ErrorResponse",
    "ModelListResponse",
    "SafetyConfigNotes",
    "SafetyConfigResponse",
]
