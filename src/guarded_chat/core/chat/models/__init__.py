"""
목적: Chat 요청/응답 모델 공개 API를 제공한다.
설명: 대화 요청, 응답, 안전성 메타데이터 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/core/chat/models/chat.py
"""

from guarded_chat.core.chat.models.chat import ChatRequest, ChatResponse, SafetyMeta

__all__ = ["ChatRequest", "ChatResponse", "SafetyMeta"]
