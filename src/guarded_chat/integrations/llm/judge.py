"""
목적: 안전성 판정 모델 호출 어댑터를 제공한다.
설명: judge 모델 지정의 제공자로 채팅 모델을 만들고, 고정 분류기 시스템 프롬프트와 함께
      max_tokens=256, temperature=0으로 호출해 원문 텍스트를 반환한다.
디자인 패턴: 포트-어댑터
참조: src/guarded_chat/shared/chat/interface/ports.py, src/guarded_chat/core/safety/semantic_classifier.py
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from guarded_chat.core.safety.prompts import JUDGE_SYSTEM_PROMPT
from guarded_chat.integrations.llm.client import LLMClient
from guarded_chat.integrations.llm.messages import extract_text
from guarded_chat.integrations.llm.models import build_chat_model
from guarded_chat.shared.chat.models import ModelSpec, ProviderName
from guarded_chat.shared.logging import Logger, create_default_logger

JUDGE_MAX_TOKENS = 256
JUDGE_TEMPERATURE = 0.0

JudgeModelBuilder = Callable[[ProviderName, str, int, Optional[float]], BaseChatModel]


class LangChainJudgeDispatcher:
    """judge 모델 호출 어댑터.

    Args:
        builder: (제공자, 모델 식별자, 최대 토큰, 온도)로 채팅 모델을 만드는 함수.
        environ: API 키를 읽을 환경 변수 사전.
        logger: 로거.
    """

    def __init__(
        self,
        builder: Optional[JudgeModelBuilder] = None,
        environ: Optional[Mapping[str, str]] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._environ = environ
        self._builder = builder or self._default_builder
        self._logger = logger or create_default_logger("LangChainJudgeDispatcher")

    async def evaluate(self, prompt: str, model: ModelSpec) -> str:
        chat_model = self._builder(model.provider, model.model_id, JUDGE_MAX_TOKENS, JUDGE_TEMPERATURE)
        client = LLMClient(
            model=chat_model,
            name=f"judge:{model.provider.value}:{model.model_id}",
            logger=self._logger,
        )
        response = await client.ainvoke(
            [SystemMessage(content=JUDGE_SYSTEM_PROMPT), HumanMessage(content=prompt)]
        )
        return extract_text(response)

    def _default_builder(
        self,
        provider: ProviderName,
        model_id: str,
        max_tokens: int,
        temperature: Optional[float],
    ) -> BaseChatModel:
        return build_chat_model(provider, model_id, max_tokens, temperature, environ=self._environ)
