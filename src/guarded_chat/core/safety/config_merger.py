"""
목적: 호출자 부분 설정과 플랫폼 기본 설정을 병합한다.
설명: 모든 필드를 단방향(강화만 허용)으로 병합한다. 호출자는 제한을 좁힐 수 있지만 완화할 수 없다.
      병합은 실패하지 않으며 항상 새 SafetyConfig를 반환한다.
디자인 패턴: 순수 함수 + 바인딩 객체
참조: src/guarded_chat/core/safety/defaults.py, src/guarded_chat/core/chat/graphs/chat_graph.py
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, TypeVar

from guarded_chat.core.safety.defaults import DEFAULT_SAFETY_CONFIG
from guarded_chat.core.safety.models import (
    SafetyConfig,
    SafetyConfigOverride,
    SafetyLevel,
    SemanticSafetyConfig,
    SemanticSafetyOverride,
)

_T = TypeVar("_T")


def merge_safety_config(
    overrides: Optional[SafetyConfigOverride],
    defaults: SafetyConfig = DEFAULT_SAFETY_CONFIG,
) -> SafetyConfig:
    """호출자 부분 설정을 기본 설정 위에 강화 방향으로만 병합한다.

    Args:
        overrides: 호출자 부분 설정. None이면 기본 설정을 그대로 반환한다.
        defaults: 플랫폼 기본 설정.

    Returns:
        기본 설정이 금지한 어떤 것도 허용하지 않는 병합 설정.
    """

    if overrides is None:
        return defaults

    return SafetyConfig(
        level=_stronger_level(defaults.level, overrides.level),
        blocked_topics=_union(defaults.blocked_topics, overrides.blocked_topics),
        max_input_length=_minimum(defaults.max_input_length, overrides.max_input_length),
        max_output_tokens=_minimum(defaults.max_output_tokens, overrides.max_output_tokens),
        allow_image_input=_both(defaults.allow_image_input, overrides.allow_image_input),
        allow_file_upload=_both(defaults.allow_file_upload, overrides.allow_file_upload),
        allowed_file_mime_types=_intersection(
            defaults.allowed_file_mime_types, overrides.allowed_file_mime_types
        ),
        max_file_size_bytes=_minimum(defaults.max_file_size_bytes, overrides.max_file_size_bytes),
        system_prompt_prefix=_append_prefix(
            defaults.system_prompt_prefix, overrides.system_prompt_prefix
        ),
        llm_safety=_merge_semantic(defaults.llm_safety, overrides.llm_safety),
    )


class SafetyConfigMerger:
    """기본 설정을 바인딩한 병합기."""

    def __init__(self, defaults: SafetyConfig = DEFAULT_SAFETY_CONFIG) -> None:
        self._defaults = defaults

    @property
    def defaults(self) -> SafetyConfig:
        return self._defaults

    def merge(self, overrides: Optional[SafetyConfigOverride]) -> SafetyConfig:
        return merge_safety_config(overrides, self._defaults)


def _stronger_level(default: SafetyLevel, requested: Optional[SafetyLevel]) -> SafetyLevel:
    if requested is None:
        return default
    return requested if requested.rank >= default.rank else default


def _union(base: Sequence[_T], extra: Optional[Sequence[_T]]) -> list[_T]:
    merged = list(base)
    for item in extra or ():
        if item not in merged:
            merged.append(item)
    return merged


def _minimum(default: int, requested: Optional[int]) -> int:
    if requested is None:
        return default
    return min(default, requested)


def _both(default: bool, requested: Optional[bool]) -> bool:
    if requested is None:
        return default
    return default and requested


def _intersection(base: Sequence[str], requested: Optional[Sequence[str]]) -> list[str]:
    if requested is None:
        return list(base)
    allowed = set(base)
    narrowed: list[str] = []
    for item in requested:
        if item in allowed and item not in narrowed:
            narrowed.append(item)
    return narrowed


def _append_prefix(default: str, extra: Optional[str]) -> str:
    if not extra or not extra.strip():
        return default
    return f"{default} {extra}"


def _merge_semantic(
    default: SemanticSafetyConfig,
    override: Optional[SemanticSafetyOverride],
) -> SemanticSafetyConfig:
    if override is None:
        return default
    return SemanticSafetyConfig(
        enabled=default.enabled if override.enabled is None else override.enabled,
        model=override.model or default.model,
        custom_prompt=override.custom_prompt or default.custom_prompt,
    )
