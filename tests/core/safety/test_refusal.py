"""
목적: 대체 응답 합성기를 검증한다.
설명: 탐지 단계별 고정 문구가 assistant 메시지로 생성되는지 확인한다.
디자인 패턴: 단위 테스트
참조: src/guarded_chat/core/safety/refusal.py
"""

from __future__ import annotations

import pytest

from guarded_chat.core.safety import RefusalMessage, RefusalPhase, RefusalSynthesizer
from guarded_chat.shared.chat.models import ChatRole


@pytest.mark.parametrize(
    ("phase", "expected"),
    [
        (RefusalPhase.OUTPUT_KEYWORD, RefusalMessage.BLOCKED),
        (RefusalPhase.OUTPUT_SEMANTIC, RefusalMessage.BLOCKED),
        (RefusalPhase.SEMANTIC_CHECK_FAILED, RefusalMessage.VERIFICATION_FAILED),
    ],
)
def test_synthesize_returns_fixed_assistant_message(phase, expected) -> None:
    message = RefusalSynthesizer().synthesize(phase)

    assert message.role == ChatRole.ASSISTANT
    assert message.text_content() == expected.value


def test_blocked_message_keeps_student_friendly_text() -> None:
    assert RefusalMessage.BLOCKED.value.startswith("I'm sorry, but I can't provide that information.")
