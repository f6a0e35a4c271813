"""
목적: judge 모델 기반 semantic 안전성 분류기를 제공한다.
설명: 판정 프롬프트를 조립해 JudgePort로 전달하고 JSON 판정을 해석한다.
      해석할 수 없는 판정은 unsafe로 처리하고(fail-closed) ERROR 로그를 남긴다.
      judge 호출 자체의 실패/시간 초과는 SAFETY_CHECK_ERROR 예외로 구분해 올린다.
디자인 패턴: 전략 주입(포트) + 파서
참조: src/guarded_chat/core/safety/verdict.py, src/guarded_chat/shared/chat/interface/ports.py
"""

from __future__ import annotations

import asyncio
import time
from typing import Optional

from guarded_chat.core.safety.models import (
    BlockedTopic,
    CheckSource,
    SafetyCheckResult,
    SafetyConfig,
)
from guarded_chat.core.safety.prompts import (
    BLOCKED_TOPICS_PLACEHOLDER,
    CONTENT_PLACEHOLDER,
    SEMANTIC_SAFETY_PROMPT,
)
from guarded_chat.core.safety.verdict import VerdictParseError, parse_verdict
from guarded_chat.shared.chat.interface import JudgePort
from guarded_chat.shared.exceptions import BaseAppException, ErrorCode, ExceptionDetail
from guarded_chat.shared.logging import Logger, create_default_logger

UNPARSEABLE_VERDICT_REASON = "Safety evaluation returned an unparseable verdict"
DEFAULT_UNSAFE_REASON = "Content flagged by semantic safety evaluation"
SAFETY_CHECK_FAILED_MESSAGE = (
    "We couldn't verify that this message is safe right now. Please try again in a moment."
)


def build_semantic_prompt(
    template: str,
    content: str,
    blocked_topics: list[BlockedTopic],
) -> str:
    """템플릿에 차단 주제 목록과 평가 대상 콘텐츠를 채운다.

    주제 목록을 먼저 치환해 콘텐츠 안의 자리표시자 문자열이 다시 치환되지 않게 한다.
    """

    topic_list = "\n".join(f"- {topic.label}" for topic in blocked_topics)
    return template.replace(BLOCKED_TOPICS_PLACEHOLDER, topic_list).replace(
        CONTENT_PLACEHOLDER, content
    )


class SemanticSafetyClassifier:
    """judge 모델 기반 semantic 분류기.

    Args:
        judge: judge 모델 호출 포트.
        timeout_seconds: judge 호출 1회 제한 시간(초).
        logger: 로거.
    """

    def __init__(
        self,
        judge: JudgePort,
        timeout_seconds: float = 15.0,
        logger: Optional[Logger] = None,
    ) -> None:
        self._judge = judge
        self._timeout_seconds = timeout_seconds
        self._logger = logger or create_default_logger("SemanticSafetyClassifier")

    async def classify(self, text: str, config: SafetyConfig) -> SafetyCheckResult:
        """텍스트를 judge 모델로 평가한다.

        Args:
            text: 평가 대상 텍스트.
            config: 병합된 안전성 설정.

        Returns:
            semantic 계층 판정 결과.

        Raises:
            BaseAppException: judge 호출이 실패하거나 시간 초과된 경우(SAFETY_CHECK_ERROR).
        """

        semantic = config.llm_safety
        if not semantic.enabled or not text.strip():
            return SafetyCheckResult.passed(CheckSource.SEMANTIC)

        template = semantic.custom_prompt or SEMANTIC_SAFETY_PROMPT
        prompt = build_semantic_prompt(template, text, config.blocked_topics)
        raw = await self._call_judge(prompt, config)

        try:
            verdict = parse_verdict(raw)
        except VerdictParseError as error:
            self._logger.error(
                f"semantic 판정 해석 실패: {error}",
                metadata={
                    "event": "semantic.verdict.unparseable",
                    "judge_provider": semantic.model.provider.value,
                    "judge_model": semantic.model.model_id,
                    "raw_length": len(raw or ""),
                },
            )
            return SafetyCheckResult.blocked(CheckSource.SEMANTIC, UNPARSEABLE_VERDICT_REASON)

        if verdict.safe:
            return SafetyCheckResult.passed(CheckSource.SEMANTIC)

        topics = verdict.blocked_topics()
        self._logger.info(
            "semantic 판정 차단",
            metadata={
                "event": "semantic.flagged",
                "flagged_topics": [topic.value for topic in topics],
            },
        )
        return SafetyCheckResult.blocked(
            CheckSource.SEMANTIC,
            verdict.reason or DEFAULT_UNSAFE_REASON,
            topics,
        )

    async def _call_judge(self, prompt: str, config: SafetyConfig) -> str:
        model = config.llm_safety.model
        start = time.monotonic()
        try:
            return await asyncio.wait_for(
                self._judge.evaluate(prompt, model),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as error:
            raise self._check_error(
                f"judge 호출 시간 초과({self._timeout_seconds}s)", error, start, model.model_id
            ) from error
        except Exception as error:  # noqa: BLE001 - 외부 judge 호출 오류를 코드화
            raise self._check_error(f"judge 호출 실패: {error}", error, start, model.model_id) from error

    def _check_error(
        self,
        cause: str,
        error: Exception,
        start: float,
        model_id: str,
    ) -> BaseAppException:
        self._logger.error(
            cause,
            metadata={
                "event": "semantic.judge.failed",
                "judge_model": model_id,
                "error_type": type(error).__name__,
                "duration_ms": int((time.monotonic() - start) * 1000),
            },
        )
        detail = ExceptionDetail(
            code=ErrorCode.SAFETY_CHECK_ERROR.value,
            cause=cause,
            hint="judge 모델 자격 증명과 네트워크 상태를 확인하세요.",
            metadata={"judge_model": model_id},
        )
        return BaseAppException(SAFETY_CHECK_FAILED_MESSAGE, detail, error)
