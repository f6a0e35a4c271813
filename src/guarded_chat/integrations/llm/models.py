"""
목적: 제공자별 LangChain 채팅 모델 팩토리를 제공한다.
설명: gpt/claude/gemini 제공자 키를 ChatOpenAI/ChatAnthropic/ChatGoogleGenerativeAI 생성 함수로 매핑한다.
      API 키가 없으면 LLM_API_KEY_MISSING 예외를 던진다.
디자인 패턴: 팩토리 + 룩업 테이블
참조: src/guarded_chat/integrations/llm/provider.py, src/guarded_chat/integrations/llm/judge.py
"""

from __future__ import annotations

import os
from typing import Callable, Mapping, Optional, Protocol

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI
from pydantic import SecretStr

from guarded_chat.shared.chat.models import ProviderName
from guarded_chat.shared.exceptions import BaseAppException, ExceptionDetail

API_KEY_ENV: Mapping[ProviderName, str] = {
    ProviderName.GPT: "OPENAI_API_KEY",
    ProviderName.CLAUDE: "ANTHROPIC_API_KEY",
    ProviderName.GEMINI: "GEMINI_API_KEY",
}


class ChatModelFactory(Protocol):
    """모델 식별자와 생성 옵션으로 채팅 모델을 만드는 호출 규약."""

    def __call__(
        self,
        model_id: str,
        max_tokens: int,
        temperature: Optional[float] = None,
    ) -> BaseChatModel: ...


def _build_openai(model_id: str, api_key: str, max_tokens: int, temperature: Optional[float]) -> BaseChatModel:
    kwargs: dict[str, object] = {"model": model_id, "api_key": SecretStr(api_key), "max_tokens": max_tokens}
    if temperature is not None:
        kwargs["temperature"] = temperature
    return ChatOpenAI(**kwargs)


def _build_anthropic(model_id: str, api_key: str, max_tokens: int, temperature: Optional[float]) -> BaseChatModel:
    kwargs: dict[str, object] = {"model": model_id, "api_key": SecretStr(api_key), "max_tokens": max_tokens}
    if temperature is not None:
        kwargs["temperature"] = temperature
    return ChatAnthropic(**kwargs)


def _build_gemini(model_id: str, api_key: str, max_tokens: int, temperature: Optional[float]) -> BaseChatModel:
    kwargs: dict[str, object] = {
        "model": model_id,
        "google_api_key": SecretStr(api_key),
        "max_output_tokens": max_tokens,
    }
    if temperature is not None:
        kwargs["temperature"] = temperature
    return ChatGoogleGenerativeAI(**kwargs)


_VENDOR_BUILDERS: Mapping[ProviderName, Callable[[str, str, int, Optional[float]], BaseChatModel]] = {
    ProviderName.GPT: _build_openai,
    ProviderName.CLAUDE: _build_anthropic,
    ProviderName.GEMINI: _build_gemini,
}


def build_chat_model(
    provider: ProviderName,
    model_id: str,
    max_tokens: int,
    temperature: Optional[float] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> BaseChatModel:
    """제공자 키에 맞는 LangChain 채팅 모델을 생성한다.

    Raises:
        BaseAppException: API 키가 없거나(LLM_API_KEY_MISSING) 제공자가 지원되지 않는 경우.
    """

    env = os.environ if environ is None else environ
    provider = ProviderName(provider)
    env_key = API_KEY_ENV[provider]
    api_key = (env.get(env_key) or "").strip()
    if not api_key:
        detail = ExceptionDetail(
            code="LLM_API_KEY_MISSING",
            cause=f"{env_key} is required for {provider.value} models",
            hint=f".env 또는 환경 변수에 {env_key}를 설정하세요.",
        )
        raise BaseAppException(f"{env_key} 환경 변수가 설정되지 않았습니다.", detail)
    return _VENDOR_BUILDERS[provider](model_id, api_key, max_tokens, temperature)


def vendor_factory(
    provider: ProviderName,
    environ: Optional[Mapping[str, str]] = None,
) -> ChatModelFactory:
    """제공자를 고정한 ChatModelFactory를 반환한다."""

    def factory(model_id: str, max_tokens: int, temperature: Optional[float] = None) -> BaseChatModel:
        return build_chat_model(provider, model_id, max_tokens, temperature, environ=environ)

    return factory
