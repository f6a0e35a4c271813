"""
목적: 게이트웨이 프로세스 설정을 제공한다.
설명: 외부 호출 타임아웃과 semantic 안전성 계층 기본값을 환경 변수에서 한 번 읽어 불변 모델로 보관한다.
디자인 패턴: 불변 설정 객체
참조: src/guarded_chat/shared/config/runtime_env_loader.py, src/guarded_chat/core/safety/defaults.py
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class GatewaySettings(BaseModel):
    """프로세스 단위 게이트웨이 설정.

    Args:
        provider_timeout_seconds: 대상 모델 호출 1회의 최대 대기 시간(초).
        judge_timeout_seconds: judge 모델 호출 1회의 최대 대기 시간(초).
        semantic_enabled: semantic 안전성 계층 기본 활성화 여부.
        judge_provider: judge 모델 제공자 키.
        judge_model: judge 모델 식별자.
    """

    model_config = ConfigDict(frozen=True)

    provider_timeout_seconds: float = Field(default=60.0, gt=0)
    judge_timeout_seconds: float = Field(default=15.0, gt=0)
    semantic_enabled: bool = True
    judge_provider: str = "gpt"
    judge_model: str = "gpt-4o-mini"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GatewaySettings":
        """환경 변수에서 설정을 읽는다. 값이 없으면 기본값을 사용한다."""

        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        provider_timeout = env.get("CHAT_PROVIDER_TIMEOUT_SECONDS")
        if provider_timeout:
            values["provider_timeout_seconds"] = float(provider_timeout)
        judge_timeout = env.get("SAFETY_JUDGE_TIMEOUT_SECONDS")
        if judge_timeout:
            values["judge_timeout_seconds"] = float(judge_timeout)
        semantic_enabled = _parse_bool(env.get("SAFETY_SEMANTIC_ENABLED"))
        if semantic_enabled is not None:
            values["semantic_enabled"] = semantic_enabled
        judge_provider = (env.get("SAFETY_JUDGE_PROVIDER") or "").strip()
        if judge_provider:
            values["judge_provider"] = judge_provider
        judge_model = (env.get("SAFETY_JUDGE_MODEL") or "").strip()
        if judge_model:
            values["judge_model"] = judge_model
        return cls(**values)


def _parse_bool(raw: Optional[str]) -> Optional[bool]:
    if raw is None:
        return None
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"불리언으로 해석할 수 없는 값입니다: {raw}")
