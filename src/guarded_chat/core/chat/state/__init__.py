"""
목적: Chat 상태 모델 공개 API를 제공한다.
설명: 그래프 상태 타입과 단계 열거형을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/core/chat/state/graph_state.py
"""

from guarded_chat.core.chat.state.graph_state import ChatGraphState, ChatStage

__all__ = ["ChatGraphState", "ChatStage"]
