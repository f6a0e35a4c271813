"""
목적: Chat API 서비스 레이어를 제공한다.
설명: 프로세스 설정으로 기본 안전성 설정, 제공자 레지스트리, judge 어댑터, 오케스트레이터를 1회 조립하고
      라우터 요청을 오케스트레이터에 연결한다.
디자인 패턴: 서비스 레이어
참조: src/guarded_chat/core/chat/graphs/chat_graph.py, src/guarded_chat/api/chat/routers/chat.py
"""

from __future__ import annotations

from typing import Optional

from guarded_chat.api.chat.models import ModelListResponse, SafetyConfigResponse
from guarded_chat.core.chat.const import MODEL_CATALOGUE
from guarded_chat.core.chat.graphs import ChatOrchestrator
from guarded_chat.core.chat.models import ChatRequest, ChatResponse
from guarded_chat.core.safety import (
    SafetyConfig,
    SafetyConfigMerger,
    SemanticSafetyClassifier,
    platform_safety_config,
)
from guarded_chat.integrations.llm import LangChainJudgeDispatcher, build_default_registry
from guarded_chat.shared.config import GatewaySettings
from guarded_chat.shared.logging import Logger, create_default_logger


class ChatGatewayService:
    """Chat API 전용 서비스.

    Args:
        orchestrator: 오케스트레이터. 없으면 설정으로 기본 구성을 조립한다.
        settings: 프로세스 설정. 없으면 환경 변수에서 읽는다.
        logger: 로거.
    """

    def __init__(
        self,
        orchestrator: Optional[ChatOrchestrator] = None,
        settings: Optional[GatewaySettings] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._logger = logger or create_default_logger("ChatGatewayService")
        self._settings = settings or GatewaySettings.from_env()
        self._orchestrator = orchestrator or self._build_orchestrator()
        self._logger.info(
            "Chat 게이트웨이 서비스 초기화 완료",
            metadata={
                "semantic_enabled": self.defaults.llm_safety.enabled,
                "judge_model": self.defaults.llm_safety.model.model_id,
            },
        )

    @property
    def defaults(self) -> SafetyConfig:
        """플랫폼 기본 안전성 설정을 반환한다."""

        return self._orchestrator.merger.defaults

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """대화 요청 1건을 처리한다."""

        return await self._orchestrator.run(request)

    def list_models(self) -> ModelListResponse:
        return ModelListResponse(models=list(MODEL_CATALOGUE))

    def safety_config(self) -> SafetyConfigResponse:
        return SafetyConfigResponse(defaults=self.defaults)

    def close(self) -> None:
        """서비스 종료를 기록한다. 요청 간 공유 리소스는 없다."""

        self._logger.info("Chat 게이트웨이 서비스 종료")

    def _build_orchestrator(self) -> ChatOrchestrator:
        settings = self._settings
        classifier = SemanticSafetyClassifier(
            judge=LangChainJudgeDispatcher(logger=self._logger),
            timeout_seconds=settings.judge_timeout_seconds,
            logger=self._logger,
        )
        return ChatOrchestrator(
            provider=build_default_registry(logger=self._logger),
            classifier=classifier,
            merger=SafetyConfigMerger(platform_safety_config(settings)),
            provider_timeout_seconds=settings.provider_timeout_seconds,
            logger=self._logger,
        )
