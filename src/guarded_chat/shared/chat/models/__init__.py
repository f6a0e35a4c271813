"""
목적: 대화 값 객체 공개 API를 제공한다.
설명: 메시지/콘텐츠 파트/모델 지정/사용량 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/shared/chat/models/messages.py
"""

from guarded_chat.shared.chat.models.base import DomainModel
from guarded_chat.shared.chat.models.messages import (
    ChatRole,
    ContentPart,
    FilePart,
    ImagePart,
    Message,
    ModelSpec,
    ProviderName,
    ProviderResponse,
    TextPart,
    TokenUsage,
)

__all__ = [
    "DomainModel",
    "ChatRole",
    "ContentPart",
    "FilePart",
    "ImagePart",
    "Message",
    "ModelSpec",
    "ProviderName",
    "ProviderResponse",
    "TextPart",
    "TokenUsage",
]
