"""
목적: 안전성 판정 모델 어댑터를 검증한다.
설명: 고정 시스템 프롬프트와 판정 프롬프트 전달, 생성 옵션, 원문 텍스트 반환을 확인한다.
디자인 패턴: 포트-어댑터 테스트
참조: src/guarded_chat/integrations/llm/judge.py
"""

from __future__ import annotations

from typing import Any

import pytest
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.outputs import ChatGeneration, ChatResult
from pydantic import Field

from guarded_chat.core.safety.prompts import JUDGE_SYSTEM_PROMPT
from guarded_chat.integrations.llm import LangChainJudgeDispatcher
from guarded_chat.integrations.llm.judge import JUDGE_MAX_TOKENS, JUDGE_TEMPERATURE
from guarded_chat.shared.chat.models import ModelSpec, ProviderName
from guarded_chat.shared.exceptions import BaseAppException


class _RecordingChatModel(BaseChatModel):
    """받은 메시지를 기록하고 고정 응답을 돌려주는 채팅 모델."""

    reply: str = '{"safe": true, "flaggedTopics": [], "reason": null}'
    received: list[list[BaseMessage]] = Field(default_factory=list)

    @property
    def _llm_type(self) -> str:
        return "recording"

    def _generate(self, messages: list[BaseMessage], stop=None, run_manager=None, **kwargs: Any) -> ChatResult:
        self.received.append(list(messages))
        return ChatResult(generations=[ChatGeneration(message=AIMessage(content=self.reply))])


@pytest.mark.asyncio
async def test_evaluate_sends_fixed_system_prompt(memory_logger) -> None:
    model = _RecordingChatModel()
    calls: list[tuple] = []

    def builder(provider, model_id, max_tokens, temperature):
        calls.append((provider, model_id, max_tokens, temperature))
        return model

    dispatcher = LangChainJudgeDispatcher(builder=builder, logger=memory_logger)
    judge_model = ModelSpec(provider=ProviderName.CLAUDE, model_id="claude-haiku-4-20250414")

    raw = await dispatcher.evaluate("Evaluate this", judge_model)

    assert raw == model.reply
    assert calls == [(ProviderName.CLAUDE, "claude-haiku-4-20250414", JUDGE_MAX_TOKENS, JUDGE_TEMPERATURE)]
    sent = model.received[0]
    assert isinstance(sent[0], SystemMessage)
    assert sent[0].content == JUDGE_SYSTEM_PROMPT
    assert isinstance(sent[1], HumanMessage)
    assert sent[1].content == "Evaluate this"


@pytest.mark.asyncio
async def test_default_builder_requires_judge_api_key(memory_logger) -> None:
    dispatcher = LangChainJudgeDispatcher(environ={}, logger=memory_logger)

    with pytest.raises(BaseAppException) as captured:
        await dispatcher.evaluate("Evaluate this", ModelSpec(provider=ProviderName.GPT, model_id="gpt-4o-mini"))

    assert captured.value.code == "LLM_API_KEY_MISSING"
