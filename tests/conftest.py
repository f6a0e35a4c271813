"""
목적: pytest 공통 로깅 훅과 테스트 더블을 제공한다.
설명: 테스트 시작/종료와 결과를 로깅하고, 외부 LLM 호출 없이 게이트웨이를 구성할 수 있도록
      대상 모델/judge 포트 스텁과 인메모리 로거 픽스처를 제공한다.
디자인 패턴: 테스트 훅, 테스트 더블
참조: pyproject.toml, src/guarded_chat/shared/chat/interface/ports.py
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

import pytest
from dotenv import load_dotenv

from guarded_chat.core.safety.models import SafetyConfig
from guarded_chat.shared.chat.models import (
    Message,
    ModelSpec,
    ProviderResponse,
    TokenUsage,
)
from guarded_chat.shared.logging import InMemoryLogger

_LOGGER = logging.getLogger("tests")
_SAFE_VERDICT = '{"safe": true, "flaggedTopics": [], "reason": null}'


def _load_env_files() -> None:
    """프로젝트 루트 `.env`가 있으면 로딩한다. 단위 테스트는 외부 키가 없어도 동작한다."""

    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


_load_env_files()


class StubProvider:
    """고정 응답 또는 예외를 돌려주는 대상 모델 스텁."""

    def __init__(
        self,
        reply: str = "Photosynthesis turns sunlight into food for plants.",
        usage: Optional[TokenUsage] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ) -> None:
        self.reply = reply
        self.usage = usage if usage is not None else TokenUsage(input_tokens=12, output_tokens=9)
        self.error = error
        self.delay = delay
        self.calls: list[dict[str, object]] = []

    async def chat(
        self,
        messages: Sequence[Message],
        model: ModelSpec,
        config: SafetyConfig,
        temperature: Optional[float] = None,
    ) -> ProviderResponse:
        self.calls.append(
            {"messages": list(messages), "model": model, "config": config, "temperature": temperature}
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return ProviderResponse(message=Message.assistant_text(self.reply), usage=self.usage)


class StubJudge:
    """호출 순서대로 준비된 응답(문자열 또는 예외)을 돌려주는 judge 스텁."""

    def __init__(self, *responses: object, delay: float = 0.0) -> None:
        self.responses = list(responses) or [_SAFE_VERDICT]
        self.delay = delay
        self.prompts: list[str] = []
        self.models: list[ModelSpec] = []

    async def evaluate(self, prompt: str, model: ModelSpec) -> str:
        self.prompts.append(prompt)
        self.models.append(model)
        if self.delay:
            await asyncio.sleep(self.delay)
        index = min(len(self.prompts) - 1, len(self.responses) - 1)
        response = self.responses[index]
        if isinstance(response, Exception):
            raise response
        return str(response)


@pytest.fixture
def memory_logger() -> InMemoryLogger:
    """stdout 출력 없이 레코드만 쌓는 로거를 반환한다."""

    return InMemoryLogger(name="test", emit_stdout=False)


@pytest.fixture
def stub_provider_factory():
    """StubProvider 생성자를 반환한다."""

    return StubProvider


@pytest.fixture
def stub_judge_factory():
    """StubJudge 생성자를 반환한다."""

    return StubJudge


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """각 테스트 시작을 로깅한다."""

    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
