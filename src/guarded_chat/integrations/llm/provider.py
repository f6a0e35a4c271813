"""
목적: 대상 모델 호출 어댑터와 제공자 레지스트리를 제공한다.
설명: LangChainChatProvider는 요청마다 제공자 모델을 생성해 LLMClient 프록시로 호출한다.
      ProviderRegistry는 기동 시 만든 제공자 키 -> 어댑터 룩업 테이블로 호출을 분기한다.
디자인 패턴: 포트-어댑터, 룩업 테이블 디스패치
참조: src/guarded_chat/shared/chat/interface/ports.py, src/guarded_chat/integrations/llm/client.py
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Optional

from guarded_chat.integrations.llm.client import LLMClient
from guarded_chat.integrations.llm.messages import extract_text, to_langchain_messages, to_token_usage
from guarded_chat.integrations.llm.models import ChatModelFactory, vendor_factory
from guarded_chat.shared.chat.interface import ChatProviderPort
from guarded_chat.shared.chat.models import Message, ModelSpec, ProviderName, ProviderResponse
from guarded_chat.shared.exceptions import BaseAppException, ExceptionDetail
from guarded_chat.shared.logging import Logger, create_default_logger

if TYPE_CHECKING:
    from guarded_chat.core.safety.models import SafetyConfig


class LangChainChatProvider:
    """LangChain 채팅 모델 기반 대상 모델 어댑터.

    Args:
        factory: 모델 식별자/최대 토큰/온도로 채팅 모델을 만드는 팩토리.
        logger: LLMClient 호출 로그를 기록할 로거.
    """

    def __init__(self, factory: ChatModelFactory, logger: Optional[Logger] = None) -> None:
        self._factory = factory
        self._logger = logger or create_default_logger("LangChainChatProvider")

    async def chat(
        self,
        messages: Sequence[Message],
        model: ModelSpec,
        config: "SafetyConfig",
        temperature: float | None = None,
    ) -> ProviderResponse:
        chat_model = self._factory(model.model_id, config.max_output_tokens, temperature)
        client = LLMClient(
            model=chat_model,
            name=f"{model.provider.value}:{model.model_id}",
            logger=self._logger,
        )
        result = await client.ainvoke(to_langchain_messages(messages, config.system_prompt_prefix))
        text = extract_text(result)
        if not text.strip():
            detail = ExceptionDetail(
                code="EMPTY_MODEL_RESPONSE",
                cause=f"{model.model_id} returned an empty response",
            )
            raise BaseAppException("모델 응답이 비어 있습니다.", detail)
        return ProviderResponse(message=Message.assistant_text(text), usage=to_token_usage(result))


class ProviderRegistry:
    """제공자 키 -> 대상 모델 어댑터 룩업 테이블.

    자신도 ChatProviderPort이며, `model.provider`로 등록된 어댑터를 골라 호출한다.
    """

    def __init__(self, providers: Mapping[ProviderName, ChatProviderPort]) -> None:
        self._providers = MappingProxyType(dict(providers))

    @property
    def providers(self) -> Mapping[ProviderName, ChatProviderPort]:
        return self._providers

    def get(self, provider: ProviderName) -> ChatProviderPort:
        """등록된 어댑터를 반환한다.

        Raises:
            BaseAppException: 등록되지 않은 제공자인 경우(PROVIDER_NOT_REGISTERED).
        """

        adapter = self._providers.get(provider)
        if adapter is None:
            detail = ExceptionDetail(
                code="PROVIDER_NOT_REGISTERED",
                cause=f"Provider {ProviderName(provider).value} is not registered",
            )
            raise BaseAppException("등록되지 않은 모델 제공자입니다.", detail)
        return adapter

    async def chat(
        self,
        messages: Sequence[Message],
        model: ModelSpec,
        config: "SafetyConfig",
        temperature: float | None = None,
    ) -> ProviderResponse:
        return await self.get(model.provider).chat(messages, model, config, temperature)


def build_default_registry(
    environ: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
) -> ProviderRegistry:
    """모든 제공자에 대해 LangChain 어댑터를 등록한 레지스트리를 만든다."""

    return ProviderRegistry(
        {
            provider: LangChainChatProvider(vendor_factory(provider, environ), logger=logger)
            for provider in ProviderName
        }
    )
