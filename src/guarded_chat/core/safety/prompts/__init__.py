"""
목적: 안전성 프롬프트 공개 API를 제공한다.
설명: semantic 판정 프롬프트와 judge 시스템 프롬프트를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/core/safety/prompts/semantic_prompt.py
"""

from guarded_chat.core.safety.prompts.semantic_prompt import (
    BLOCKED_TOPICS_PLACEHOLDER,
    CONTENT_PLACEHOLDER,
    JUDGE_SYSTEM_PROMPT,
    SEMANTIC_SAFETY_PROMPT,
)

__all__ = [
    "BLOCKED_TOPICS_PLACEHOLDER",
    "CONTENT_PLACEHOLDER",
    "JUDGE_SYSTEM_PROMPT",
    "SEMANTIC_SAFETY_PROMPT",
]
