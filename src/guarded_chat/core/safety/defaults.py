"""
목적: 플랫폼 기본 안전성 설정을 제공한다.
설명: 중학생(10~14세) 대상 기본 정책을 프로세스 전역 읽기 전용 값으로 정의하고,
      기동 시 프로세스 설정으로 judge 모델/활성화 여부를 반영한 기본값을 1회 파생한다.
디자인 패턴: 모듈 상수
참조: src/guarded_chat/core/safety/config_merger.py, src/guarded_chat/shared/config/settings.py
"""

from __future__ import annotations

from guarded_chat.core.safety.models import (
    BlockedTopic,
    SafetyConfig,
    SafetyLevel,
    SemanticSafetyConfig,
)
from guarded_chat.shared.chat.models import ModelSpec, ProviderName
from guarded_chat.shared.config import GatewaySettings

DEFAULT_JUDGE_MODEL = ModelSpec(provider=ProviderName.GPT, model_id="gpt-4o-mini")

DEFAULT_SYSTEM_PROMPT_PREFIX = " ".join(
    [
        "You are a helpful educational assistant for middle school students (ages 10-14).",
        "Always provide age-appropriate, safe, and educational responses.",
        "Never produce content involving violence, sexual themes, self-harm, hate speech, drugs, alcohol, or profanity.",
        "Do not ask for or reveal personal information such as full names, addresses, phone numbers, or school names.",
        "If a student asks about dangerous activities, redirect them to speak with a trusted adult.",
        "Do not help with cheating or academic dishonesty. Guide students toward understanding rather than giving direct answers.",
        "Keep language simple, encouraging, and supportive.",
    ]
)

DEFAULT_SAFETY_CONFIG = SafetyConfig(
    level=SafetyLevel.STRICT,
    blocked_topics=list(BlockedTopic),
    max_input_length=2000,
    max_output_tokens=1024,
    allow_image_input=True,
    allow_file_upload=True,
    allowed_file_mime_types=[
        "application/pdf",
        "text/plain",
        "image/png",
        "image/jpeg",
    ],
    max_file_size_bytes=5 * 1024 * 1024,
    system_prompt_prefix=DEFAULT_SYSTEM_PROMPT_PREFIX,
    llm_safety=SemanticSafetyConfig(enabled=True, model=DEFAULT_JUDGE_MODEL),
)


def platform_safety_config(settings: GatewaySettings | None = None) -> SafetyConfig:
    """프로세스 설정을 반영한 플랫폼 기본 안전성 설정을 반환한다.

    Args:
        settings: 프로세스 설정. 없으면 DEFAULT_SAFETY_CONFIG를 그대로 반환한다.

    Returns:
        기동 시 1회 파생되어 이후 변경되지 않는 기본 설정.
    """

    if settings is None:
        return DEFAULT_SAFETY_CONFIG
    judge_model = ModelSpec(
        provider=ProviderName(settings.judge_provider),
        model_id=settings.judge_model,
    )
    llm_safety = DEFAULT_SAFETY_CONFIG.llm_safety.model_copy(
        update={"enabled": settings.semantic_enabled, "model": judge_model}
    )
    return DEFAULT_SAFETY_CONFIG.model_copy(update={"llm_safety": llm_safety})
