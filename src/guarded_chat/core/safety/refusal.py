"""
목적: 출력 차단 시 대체 응답 메시지를 합성한다.
설명: 탐지 단계별 고정 문구로 assistant 메시지를 만든다. 차단된 원문은 절대 포함하지 않는다.
디자인 패턴: Enum 상수 객체
참조: src/guarded_chat/core/chat/graphs/chat_graph.py
"""

from __future__ import annotations

from enum import Enum

from guarded_chat.shared.chat.models import Message


class RefusalPhase(str, Enum):
    """대체 응답이 필요한 탐지 단계."""

    OUTPUT_KEYWORD = "output_keyword"
    OUTPUT_SEMANTIC = "output_semantic"
    SEMANTIC_CHECK_FAILED = "semantic_check_failed"


class RefusalMessage(str, Enum):
    """탐지 단계별 사용자 안내 메시지."""

    BLOCKED = (
        "I'm sorry, but I can't provide that information. "
        "Let me know if there's something else I can help you with for your studies!"
    )
    VERIFICATION_FAILED = (
        "I'm sorry, but I wasn't able to double-check my answer for safety just now. "
        "Please try asking again, or ask me something else about your studies!"
    )


_PHASE_MESSAGES = {
    RefusalPhase.OUTPUT_KEYWORD: RefusalMessage.BLOCKED,
    RefusalPhase.OUTPUT_SEMANTIC: RefusalMessage.BLOCKED,
    RefusalPhase.SEMANTIC_CHECK_FAILED: RefusalMessage.VERIFICATION_FAILED,
}


class RefusalSynthesizer:
    """탐지 단계에 맞는 고정 대체 메시지를 생성한다."""

    def synthesize(self, phase: RefusalPhase) -> Message:
        return Message.assistant_text(_PHASE_MESSAGES[RefusalPhase(phase)].value)
