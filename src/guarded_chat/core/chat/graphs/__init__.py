"""
목적: Chat 그래프 공개 API를 제공한다.
설명: 안전성 오케스트레이터를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/core/chat/graphs/chat_graph.py
"""

from guarded_chat.core.chat.graphs.chat_graph import ChatOrchestrator

__all__ = ["ChatOrchestrator"]
