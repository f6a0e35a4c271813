"""
목적: 안전성 단계를 감싼 대화 오케스트레이션 그래프를 제공한다.
설명: 설정 병합 -> 입력 키워드 -> 입력 semantic -> 모델 호출 -> 출력 키워드 -> 출력 semantic -> 완료 순서의
      LangGraph StateGraph를 조립한다. 입력 단계 차단과 호출 실패는 REJECTED(예외)로,
      출력 단계 차단은 REFUSED(고정 대체 메시지를 담은 정상 응답)로 끝난다.
디자인 패턴: 상태 머신(StateGraph) + 포트 주입
참조: src/guarded_chat/core/chat/state/graph_state.py, src/guarded_chat/core/safety, src/guarded_chat/shared/chat/interface/ports.py
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional
from uuid import uuid4

from langgraph.graph import END, StateGraph

from guarded_chat.core.chat.models import ChatRequest, ChatResponse, SafetyMeta
from guarded_chat.core.chat.state import ChatGraphState, ChatStage
from guarded_chat.core.safety.config_merger import SafetyConfigMerger
from guarded_chat.core.safety.keyword_filter import KeywordPreFilter
from guarded_chat.core.safety.models import CheckSource
from guarded_chat.core.safety.refusal import RefusalPhase, RefusalSynthesizer
from guarded_chat.core.safety.semantic_classifier import SemanticSafetyClassifier
from guarded_chat.shared.chat.interface import ChatProviderPort
from guarded_chat.shared.chat.models import ChatRole
from guarded_chat.shared.exceptions import BaseAppException, ErrorCode, ExceptionDetail
from guarded_chat.shared.logging import LogContext, Logger, create_default_logger

_INPUT_REJECTED_FALLBACK = "Your message was flagged by our safety filters. Please rephrase."

# 분기 키
_ROUTE_REJECTED = "rejected"
_ROUTE_SEMANTIC = "semantic"
_ROUTE_NEXT = "next"
_ROUTE_REFUSE = "refuse"


def _append_layer(layers: list[CheckSource], layer: CheckSource) -> list[CheckSource]:
    if layer in layers:
        return list(layers)
    return [*layers, layer]


class ChatOrchestrator:
    """요청 1건을 안전성 단계 순서대로 실행하는 오케스트레이터.

    Args:
        provider: 대상 모델 호출 포트.
        classifier: semantic 안전성 분류기.
        merger: 기본 설정을 바인딩한 설정 병합기.
        keyword_filter: 키워드 1차 필터.
        refusal: 대체 응답 합성기.
        provider_timeout_seconds: 대상 모델 호출 1회 제한 시간(초).
        logger: 로거.
    """

    def __init__(
        self,
        provider: ChatProviderPort,
        classifier: SemanticSafetyClassifier,
        merger: Optional[SafetyConfigMerger] = None,
        keyword_filter: Optional[KeywordPreFilter] = None,
        refusal: Optional[RefusalSynthesizer] = None,
        provider_timeout_seconds: float = 60.0,
        logger: Optional[Logger] = None,
    ) -> None:
        self._provider = provider
        self._classifier = classifier
        self._merger = merger or SafetyConfigMerger()
        self._logger = logger or create_default_logger("ChatOrchestrator")
        self._keyword_filter = keyword_filter or KeywordPreFilter(logger=self._logger)
        self._refusal = refusal or RefusalSynthesizer()
        self._provider_timeout_seconds = provider_timeout_seconds
        self._graph = self._build_graph().compile()

    @property
    def merger(self) -> SafetyConfigMerger:
        return self._merger

    async def run(self, request: ChatRequest) -> ChatResponse:
        """요청을 실행해 응답을 반환한다.

        Raises:
            BaseAppException: REJECTED로 끝난 경우. `detail.code`가 에러 코드다.
        """

        initial: ChatGraphState = {
            "request": request,
            "conversation_id": request.conversation_id or str(uuid4()),
            "stage": ChatStage.VALIDATED,
            "layers_run": [],
        }
        final_state: dict[str, Any] = await self._graph.ainvoke(initial)

        rejection = final_state.get("rejection")
        if rejection is not None:
            raise rejection
        if final_state["stage"] == ChatStage.REFUSED:
            return self._refused_response(final_state)
        return self._completed_response(final_state)

    def _build_graph(self) -> StateGraph:
        # 그래프 선언
        builder = StateGraph(ChatGraphState)
        # 노드 추가
        builder.add_node("merge_config", self._merge_config)
        builder.add_node("input_keyword", self._input_keyword)
        builder.add_node("input_semantic", self._input_semantic)
        builder.add_node("invoke_model", self._invoke_model)
        builder.add_node("output_keyword", self._output_keyword)
        builder.add_node("output_semantic", self._output_semantic)
        builder.add_node("refuse", self._refuse)
        builder.add_node("complete", self._complete)
        # 진입점 설정
        builder.set_entry_point("merge_config")
        # 엣지 설정
        builder.add_edge("merge_config", "input_keyword")
        builder.add_conditional_edges(
            "input_keyword",
            self._route_after_input_keyword,
            {
                _ROUTE_REJECTED: END,
                _ROUTE_SEMANTIC: "input_semantic",
                _ROUTE_NEXT: "invoke_model",
            },
        )
        builder.add_conditional_edges(
            "input_semantic",
            self._route_on_rejection,
            {_ROUTE_REJECTED: END, _ROUTE_NEXT: "invoke_model"},
        )
        builder.add_conditional_edges(
            "invoke_model",
            self._route_on_rejection,
            {_ROUTE_REJECTED: END, _ROUTE_NEXT: "output_keyword"},
        )
        builder.add_conditional_edges(
            "output_keyword",
            self._route_after_output_keyword,
            {
                _ROUTE_REFUSE: "refuse",
                _ROUTE_SEMANTIC: "output_semantic",
                _ROUTE_NEXT: "complete",
            },
        )
        builder.add_conditional_edges(
            "output_semantic",
            self._route_after_output_semantic,
            {_ROUTE_REFUSE: "refuse", _ROUTE_NEXT: "complete"},
        )
        builder.add_edge("refuse", END)
        builder.add_edge("complete", END)
        return builder

    # --- 노드 ---------------------------------------------------------------

    async def _merge_config(self, state: ChatGraphState) -> dict[str, Any]:
        config = self._merger.merge(state["request"].safety_config)
        self._log(state).debug(
            "안전성 설정 병합 완료",
            metadata={
                "event": "stage.config_merged",
                "blocked_topics": len(config.blocked_topics),
                "semantic_enabled": config.llm_safety.enabled,
            },
        )
        return {"config": config, "stage": ChatStage.CONFIG_MERGED}

    async def _input_keyword(self, state: ChatGraphState) -> dict[str, Any]:
        layers = _append_layer(state["layers_run"], CheckSource.KEYWORD)
        result = self._keyword_filter.check_input(state["request"].messages, state["config"])
        if result.safe:
            return {"stage": ChatStage.INPUT_KEYWORD_CHECKED, "layers_run": layers}
        return self._reject(
            state,
            ErrorCode.INPUT_SAFETY_VIOLATION,
            result.reason or _INPUT_REJECTED_FALLBACK,
            layers_run=layers,
            metadata={
                "layer": CheckSource.KEYWORD.value,
                "flagged_topics": [topic.value for topic in result.flagged_topics],
            },
        )

    async def _input_semantic(self, state: ChatGraphState) -> dict[str, Any]:
        layers = _append_layer(state["layers_run"], CheckSource.SEMANTIC)
        text = "\n".join(
            message.describe_content()
            for message in state["request"].messages
            if message.role == ChatRole.USER
        )
        try:
            result = await self._classifier.classify(text, state["config"])
        except BaseAppException as error:
            self._log(state).error(
                f"입력 semantic 평가 실패: {error.detail.cause}",
                metadata={"event": "stage.rejected", "code": error.code},
            )
            return {"stage": ChatStage.REJECTED, "layers_run": layers, "rejection": error}
        if result.safe:
            return {"stage": ChatStage.INPUT_SEMANTIC_CHECKED, "layers_run": layers}
        return self._reject(
            state,
            ErrorCode.INPUT_SAFETY_VIOLATION,
            result.reason or _INPUT_REJECTED_FALLBACK,
            layers_run=layers,
            metadata={
                "layer": CheckSource.SEMANTIC.value,
                "flagged_topics": [topic.value for topic in result.flagged_topics],
            },
        )

    async def _invoke_model(self, state: ChatGraphState) -> dict[str, Any]:
        request = state["request"]
        try:
            response = await asyncio.wait_for(
                self._provider.chat(
                    request.messages,
                    request.model,
                    state["config"],
                    request.temperature,
                ),
                timeout=self._provider_timeout_seconds,
            )
        except asyncio.TimeoutError as error:
            return self._reject(
                state,
                ErrorCode.PROVIDER_ERROR,
                f"Model provider timed out after {self._provider_timeout_seconds:g} seconds",
                original=error,
            )
        except BaseAppException as error:
            return self._reject(
                state,
                ErrorCode.PROVIDER_ERROR,
                error.detail.cause or error.message,
                original=error,
            )
        except Exception as error:  # noqa: BLE001 - 외부 제공자 오류를 코드화
            return self._reject(
                state,
                ErrorCode.PROVIDER_ERROR,
                str(error) or "Unknown provider error",
                original=error,
            )
        self._log(state).info(
            "대상 모델 호출 완료",
            metadata={"event": "stage.model_invoked", "model_id": request.model.model_id},
        )
        return {"stage": ChatStage.MODEL_INVOKED, "provider_response": response}

    async def _output_keyword(self, state: ChatGraphState) -> dict[str, Any]:
        layers = _append_layer(state["layers_run"], CheckSource.KEYWORD)
        message = state["provider_response"].message
        result = self._keyword_filter.check_output(message, state["config"])
        if result.safe:
            return {"stage": ChatStage.OUTPUT_KEYWORD_CHECKED, "layers_run": layers}
        return {
            "stage": ChatStage.OUTPUT_KEYWORD_CHECKED,
            "layers_run": layers,
            "flagged_topics": list(result.flagged_topics),
            "flagged_by": CheckSource.KEYWORD,
            "refusal_phase": RefusalPhase.OUTPUT_KEYWORD,
        }

    async def _output_semantic(self, state: ChatGraphState) -> dict[str, Any]:
        layers = _append_layer(state["layers_run"], CheckSource.SEMANTIC)
        text = state["provider_response"].message.text_content()
        try:
            result = await self._classifier.classify(text, state["config"])
        except BaseAppException as error:
            # 이미 생성된 출력은 검증할 수 없으면 내보내지 않는다.
            self._log(state).error(
                f"출력 semantic 평가 실패: {error.detail.cause}",
                metadata={"event": "stage.output_semantic.failed", "code": error.code},
            )
            return {
                "stage": ChatStage.OUTPUT_SEMANTIC_CHECKED,
                "layers_run": layers,
                "flagged_topics": [],
                "flagged_by": CheckSource.SEMANTIC,
                "refusal_phase": RefusalPhase.SEMANTIC_CHECK_FAILED,
            }
        if result.safe:
            return {"stage": ChatStage.OUTPUT_SEMANTIC_CHECKED, "layers_run": layers}
        return {
            "stage": ChatStage.OUTPUT_SEMANTIC_CHECKED,
            "layers_run": layers,
            "flagged_topics": list(result.flagged_topics),
            "flagged_by": CheckSource.SEMANTIC,
            "refusal_phase": RefusalPhase.OUTPUT_SEMANTIC,
        }

    async def _refuse(self, state: ChatGraphState) -> dict[str, Any]:
        self._log(state).warning(
            "출력 차단: 대체 응답으로 교체",
            metadata={
                "event": "stage.refused",
                "phase": state["refusal_phase"].value,
                "flagged_by": state["flagged_by"].value if state.get("flagged_by") else None,
                "flagged_topics": [topic.value for topic in state.get("flagged_topics", [])],
            },
        )
        return {"stage": ChatStage.REFUSED}

    async def _complete(self, state: ChatGraphState) -> dict[str, Any]:
        self._log(state).info(
            "대화 요청 완료",
            metadata={
                "event": "stage.completed",
                "layers_run": [layer.value for layer in state["layers_run"]],
            },
        )
        return {"stage": ChatStage.COMPLETED}

    # --- 분기 ---------------------------------------------------------------

    def _route_on_rejection(self, state: ChatGraphState) -> str:
        if state["stage"] == ChatStage.REJECTED:
            return _ROUTE_REJECTED
        return _ROUTE_NEXT

    def _route_after_input_keyword(self, state: ChatGraphState) -> str:
        if state["stage"] == ChatStage.REJECTED:
            return _ROUTE_REJECTED
        if state["config"].llm_safety.enabled:
            return _ROUTE_SEMANTIC
        return _ROUTE_NEXT

    def _route_after_output_keyword(self, state: ChatGraphState) -> str:
        if state.get("refusal_phase") is not None:
            return _ROUTE_REFUSE
        if state["config"].llm_safety.enabled:
            return _ROUTE_SEMANTIC
        return _ROUTE_NEXT

    def _route_after_output_semantic(self, state: ChatGraphState) -> str:
        if state.get("refusal_phase") is not None:
            return _ROUTE_REFUSE
        return _ROUTE_NEXT

    # --- 보조 ---------------------------------------------------------------

    def _reject(
        self,
        state: ChatGraphState,
        code: ErrorCode,
        message: str,
        layers_run: Optional[list[CheckSource]] = None,
        original: Optional[Exception] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        detail = ExceptionDetail(
            code=code.value,
            cause=message,
            metadata={"conversation_id": state["conversation_id"], **(metadata or {})},
        )
        self._log(state).warning(
            f"요청 거부({code.value}): {message}",
            metadata={"event": "stage.rejected", "code": code.value},
        )
        update: dict[str, Any] = {
            "stage": ChatStage.REJECTED,
            "rejection": BaseAppException(message, detail, original),
        }
        if layers_run is not None:
            update["layers_run"] = layers_run
        return update

    def _log(self, state: ChatGraphState) -> Logger:
        return self._logger.with_context(
            LogContext(
                conversation_id=state["conversation_id"],
                provider=state["request"].model.provider.value,
                tags={"stage": ChatStage(state["stage"]).value},
            )
        )

    def _completed_response(self, state: dict[str, Any]) -> ChatResponse:
        provider_response = state["provider_response"]
        return ChatResponse(
            conversation_id=state["conversation_id"],
            model=state["request"].model,
            message=provider_response.message,
            usage=provider_response.usage,
            safety_meta=SafetyMeta(
                input_check_passed=True,
                output_check_passed=True,
                flagged_topics=[],
                layers_run=list(state["layers_run"]),
            ),
        )

    def _refused_response(self, state: dict[str, Any]) -> ChatResponse:
        return ChatResponse(
            conversation_id=state["conversation_id"],
            model=state["request"].model,
            message=self._refusal.synthesize(state["refusal_phase"]),
            safety_meta=SafetyMeta(
                input_check_passed=True,
                output_check_passed=False,
                flagged_topics=list(state.get("flagged_topics", [])),
                layers_run=list(state["layers_run"]),
                flagged_by=state.get("flagged_by"),
            ),
        )
