"""
목적: 게이트웨이 프로세스 설정 로딩을 검증한다.
설명: 환경 변수 기본값/재정의/잘못된 값 처리를 확인한다.
디자인 패턴: 단위 테스트
참조: src/guarded_chat/shared/config/settings.py
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from guarded_chat.shared.config import GatewaySettings


def test_from_env_uses_defaults_when_unset() -> None:
    settings = GatewaySettings.from_env({})

    assert settings.provider_timeout_seconds == 60.0
    assert settings.judge_timeout_seconds == 15.0
    assert settings.semantic_enabled is True
    assert settings.judge_provider == "gpt"
    assert settings.judge_model == "gpt-4o-mini"


def test_from_env_reads_overrides() -> None:
    settings = GatewaySettings.from_env(
        {
            "CHAT_PROVIDER_TIMEOUT_SECONDS": "30",
            "SAFETY_JUDGE_TIMEOUT_SECONDS": "5.5",
            "SAFETY_SEMANTIC_ENABLED": "off",
            "SAFETY_JUDGE_PROVIDER": "claude",
            "SAFETY_JUDGE_MODEL": "claude-haiku-4-20250414",
        }
    )

    assert settings.provider_timeout_seconds == 30.0
    assert settings.judge_timeout_seconds == 5.5
    assert settings.semantic_enabled is False
    assert settings.judge_provider == "claude"
    assert settings.judge_model == "claude-haiku-4-20250414"


def test_from_env_rejects_unparseable_bool() -> None:
    with pytest.raises(ValueError):
        GatewaySettings.from_env({"SAFETY_SEMANTIC_ENABLED": "maybe"})


def test_settings_reject_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        GatewaySettings.from_env({"CHAT_PROVIDER_TIMEOUT_SECONDS": "0"})
