"""
목적: LLM 통합 모듈 공개 API를 제공한다.
설명: LLM 클라이언트, 제공자 모델 팩토리, 대상 모델/판정 모델 어댑터를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/integrations/llm/client.py, src/guarded_chat/integrations/llm/provider.py, src/guarded_chat/integrations/llm/judge.py
"""

from .client import LLMClient
from .judge import LangChainJudgeDispatcher
from .models import API_KEY_ENV, ChatModelFactory, build_chat_model, vendor_factory
from .provider import LangChainChatProvider, ProviderRegistry, build_default_registry

__all__ = [
    "API_KEY_ENV",
    "ChatModelFactory",
    "LLMClient",
    "LangChainChatProvider",
    "LangChainJudgeDispatcher",
    "ProviderRegistry",
    "build_chat_model",
    "build_default_registry",
    "vendor_factory",
]
