"""
목적: LangChain BaseChatModel 기반 LLM 클라이언트를 제공한다.
설명: 기존 메서드(invoke/ainvoke)를 유지하면서 호출 시작/성공/실패 로깅과 예외 코드화를 통합한다.
디자인 패턴: 프록시, 데코레이터
참조: src/guarded_chat/shared/logging, src/guarded_chat/shared/exceptions, src/guarded_chat/integrations/llm/provider.py
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Sequence

from pydantic import ConfigDict, PrivateAttr

from langchain_core.callbacks import (
    AsyncCallbackManagerForLLMRun,
    CallbackManagerForLLMRun,
)
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.outputs import ChatResult

from guarded_chat.shared.exceptions import BaseAppException, ExceptionDetail
from guarded_chat.shared.logging import (
    InMemoryLogger,
    LogContext,
    LogLevel,
    LogRepository,
    Logger,
    create_default_logger,
)


class LLMClient(BaseChatModel):
    """로깅/예외 처리를 포함한 LLM 클라이언트 래퍼이다."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _model: BaseChatModel = PrivateAttr()
    _logger: Logger = PrivateAttr()
    _name: str = PrivateAttr()
    _log_payload: bool = PrivateAttr(default=False)
    _context_provider: Optional[Callable[[], LogContext]] = PrivateAttr(default=None)

    def __init__(
        self,
        model: BaseChatModel,
        name: str = "llm-client",
        logger: Optional[Logger] = None,
        log_repository: Optional[LogRepository] = None,
        log_payload: bool = False,
        context_provider: Optional[Callable[[], LogContext]] = None,
    ) -> None:
        super().__init__()
        self._model = model
        self._name = name
        self._log_payload = log_payload
        self._context_provider = context_provider
        self._logger = self._build_logger(name, logger, log_repository)

    @property
    def wrapped_model(self) -> BaseChatModel:
        """감싼 원본 모델을 반환한다."""

        return self._model

    @property
    def _llm_type(self) -> str:
        base_type = getattr(self._model, "_llm_type", None)
        if base_type:
            return f"logged-{base_type}"
        return "logged-chat-model"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: CallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        start = time.monotonic()
        self._log_start("invoke", messages, stop, kwargs)
        try:
            result = self._model._generate(
                messages,
                stop=stop,
                run_manager=run_manager,
                **kwargs,
            )
        except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 캡처
            self._log_error("invoke", error, start)
            detail = ExceptionDetail(code="LLM_INVOKE_ERROR", cause=str(error))
            raise BaseAppException("LLM 호출에 실패했습니다.", detail, error) from error
        self._log_success("invoke", start, result)
        return result

    async def _agenerate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: AsyncCallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        start = time.monotonic()
        self._log_start("ainvoke", messages, stop, kwargs)
        try:
            result = await self._model._agenerate(
                messages,
                stop=stop,
                run_manager=run_manager,
                **kwargs,
            )
        except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 캡처
            self._log_error("ainvoke", error, start)
            detail = ExceptionDetail(code="LLM_AINVOKE_ERROR", cause=str(error))
            raise BaseAppException("LLM 비동기 호출에 실패했습니다.", detail, error) from error
        self._log_success("ainvoke", start, result)
        return result

    def _build_logger(
        self,
        name: str,
        logger: Optional[Logger],
        repository: Optional[LogRepository],
    ) -> Logger:
        if logger is not None:
            return logger
        if repository is not None:
            return InMemoryLogger(name=name, repository=repository)
        return create_default_logger(name)

    def _log_start(
        self,
        action: str,
        messages: Sequence[BaseMessage],
        stop: Optional[Sequence[str]],
        kwargs: dict,
    ) -> None:
        metadata = self._base_metadata(action)
        metadata.update(
            {
                "message_count": len(messages),
                "stop": bool(stop),
                "kwargs": list(kwargs.keys()),
            }
        )
        if self._log_payload:
            metadata["messages"] = [message.model_dump(mode="json") for message in messages]
        self._logger.log(
            LogLevel.INFO,
            f"LLM {action} 호출 시작",
            context=self._get_context(),
            metadata=metadata,
        )

    def _log_success(self, action: str, start: float, result: ChatResult) -> None:
        metadata = self._base_metadata(action)
        metadata.update(
            {
                "duration_ms": int((time.monotonic() - start) * 1000),
                "success": True,
            }
        )
        usage = extract_usage_metadata(result)
        if usage:
            metadata["usage_metadata"] = usage
        self._logger.log(
            LogLevel.INFO,
            f"LLM {action} 호출 성공",
            context=self._get_context(),
            metadata=metadata,
        )

    def _log_error(self, action: str, error: Exception, start: float) -> None:
        metadata = self._base_metadata(action)
        metadata.update(
            {
                "duration_ms": int((time.monotonic() - start) * 1000),
                "error_type": type(error).__name__,
                "success": False,
            }
        )
        self._logger.log(
            LogLevel.ERROR,
            f"LLM {action} 호출 실패: {error}",
            context=self._get_context(),
            metadata=metadata,
        )

    def _base_metadata(self, action: str) -> dict:
        llm_type = getattr(self._model, "_llm_type", None)
        return {
            "action": action,
            "model_name": self._name,
            "llm_type": llm_type,
            "provider": llm_type,
        }

    def _get_context(self) -> Optional[LogContext]:
        if not self._context_provider:
            return None
        try:
            return self._context_provider()
        except Exception:  # noqa: BLE001 - 로깅 실패 방지
            return None


def extract_usage_metadata(result: Optional[ChatResult]) -> Optional[dict]:
    """ChatResult에서 usage_metadata 사전을 찾아 반환한다."""

    if result is None:
        return None
    llm_output = getattr(result, "llm_output", None)
    if isinstance(llm_output, dict):
        usage = llm_output.get("usage_metadata")
        if isinstance(usage, dict):
            return usage
    for generation in getattr(result, "generations", []):
        message = getattr(generation, "message", None)
        usage = getattr(message, "usage_metadata", None)
        if isinstance(usage, dict):
            return usage
        response_metadata = getattr(message, "response_metadata", None)
        if isinstance(response_metadata, dict):
            usage = response_metadata.get("usage_metadata")
            if isinstance(usage, dict):
                return usage
    return None
