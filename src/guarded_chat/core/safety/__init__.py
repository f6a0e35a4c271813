"""
목적: 안전성 평가 모듈 공개 API를 제공한다.
설명: 설정 병합기, 키워드 필터, semantic 분류기, 대체 응답 합성기와 관련 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/core/safety/config_merger.py, src/guarded_chat/core/safety/keyword_filter.py, src/guarded_chat/core/safety/semantic_classifier.py, src/guarded_chat/core/safety/refusal.py
"""

from guarded_chat.core.safety.config_merger import SafetyConfigMerger, merge_safety_config
from guarded_chat.core.safety.defaults import (
    DEFAULT_JUDGE_MODEL,
    DEFAULT_SAFETY_CONFIG,
    platform_safety_config,
)
from guarded_chat.core.safety.keyword_filter import KeywordPreFilter
from guarded_chat.core.safety.models import (
    BlockedTopic,
    CheckSource,
    SafetyCheckResult,
    SafetyConfig,
    SafetyConfigOverride,
    SafetyLevel,
    SemanticSafetyConfig,
    SemanticSafetyOverride,
)
from guarded_chat.core.safety.patterns import TOPIC_PATTERNS
from guarded_chat.core.safety.refusal import RefusalMessage, RefusalPhase, RefusalSynthesizer
from guarded_chat.core.safety.semantic_classifier import SemanticSafetyClassifier

__all__ = [
    "BlockedTopic",
    "CheckSource",
    "DEFAULT_JUDGE_MODEL",
    "DEFAULT_SAFETY_CONFIG",
    "KeywordPreFilter",
    "RefusalMessage",
    "RefusalPhase",
    "RefusalSynthesizer",
    "SafetyCheckResult",
    "SafetyConfig",
    "SafetyConfigMerger",
    "SafetyConfigOverride",
    "SafetyLevel",
    "SemanticSafetyClassifier",
    "SemanticSafetyConfig",
    "SemanticSafetyOverride",
    "TOPIC_PATTERNS",
    "merge_safety_config",
    "platform_safety_config",
]
