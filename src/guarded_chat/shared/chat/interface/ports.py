"""
목적: 외부 모델 호출 협력자 포트를 정의한다.
설명: 대상 모델 호출(ChatProviderPort)과 judge 모델 호출(JudgePort) 계약을 Protocol로 제공한다.
디자인 패턴: 포트-어댑터(Port/Protocol)
참조: src/guarded_chat/integrations/llm/provider.py, src/guarded_chat/integrations/llm/judge.py
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from guarded_chat.shared.chat.models import Message, ModelSpec, ProviderResponse

if TYPE_CHECKING:
    from guarded_chat.core.safety.models import SafetyConfig


class ChatProviderPort(Protocol):
    """대상 모델 호출 포트."""

    async def chat(
        self,
        messages: Sequence[Message],
        model: ModelSpec,
        config: "SafetyConfig",
        temperature: float | None = None,
    ) -> ProviderResponse:
        """검증된 메시지로 대상 모델을 호출해 응답 메시지를 반환한다."""


class JudgePort(Protocol):
    """안전성 판정 모델 호출 포트. 자유 형식 텍스트를 반환한다."""

    async def evaluate(self, prompt: str, model: ModelSpec) -> str:
        """판정 프롬프트를 judge 모델에 전달하고 원문 응답을 반환한다."""
