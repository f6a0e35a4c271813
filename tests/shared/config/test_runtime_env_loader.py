"""
목적: 런타임 환경별 `.env` 로더 동작을 검증한다.
설명: 루트 `.env` 로딩, 환경 별칭 정규화, 리소스 파일 선택과 오류 처리를 확인한다.
디자인 패턴: 전략 패턴 테스트
참조: src/guarded_chat/shared/config/runtime_env_loader.py
"""

from __future__ import annotations

import os

import pytest

from guarded_chat.shared.config import RuntimeEnvironmentLoader
from guarded_chat.shared.logging import InMemoryLogger, LogLevel

_ENV_KEYS = ("ENV", "APP_ENV", "GUARDED_CHAT_ENV", "LOADER_TEST_ROOT", "LOADER_TEST_RESOURCE")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # 로더가 os.environ에 직접 쓰는 값도 테스트 종료 시 원복되도록 먼저 기록해 둔다.
    for key in _ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


def _loader(tmp_path, logger=None) -> RuntimeEnvironmentLoader:
    return RuntimeEnvironmentLoader(
        logger=logger or InMemoryLogger(name="loader", emit_stdout=False),
        project_root=tmp_path,
        resources_root=tmp_path / "resources",
    )


def test_load_defaults_to_local_and_reads_root_env(tmp_path) -> None:
    (tmp_path / ".env").write_text("LOADER_TEST_ROOT=root-value\n", encoding="utf-8")

    runtime_env = _loader(tmp_path).load()

    assert runtime_env == "local"
    assert os.environ["ENV"] == "local"
    assert os.environ["LOADER_TEST_ROOT"] == "root-value"


def test_missing_root_env_only_warns(tmp_path) -> None:
    logger = InMemoryLogger(name="loader", emit_stdout=False)

    assert _loader(tmp_path, logger).load() == "local"
    assert any(record.level == LogLevel.WARNING for record in logger.repository.list())


def test_alias_selects_resource_env_file(tmp_path, monkeypatch) -> None:
    resource_dir = tmp_path / "resources" / "prod"
    resource_dir.mkdir(parents=True)
    (resource_dir / ".env").write_text("LOADER_TEST_RESOURCE=prod-value\n", encoding="utf-8")
    monkeypatch.setenv("APP_ENV", "production")

    runtime_env = _loader(tmp_path).load()

    assert runtime_env == "prod"
    assert os.environ["LOADER_TEST_RESOURCE"] == "prod-value"


def test_unknown_env_value_raises(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("ENV", "qa")

    with pytest.raises(ValueError):
        _loader(tmp_path).load()


def test_missing_resource_file_raises(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("GUARDED_CHAT_ENV", "stg")

    with pytest.raises(FileNotFoundError):
        _loader(tmp_path).load()
