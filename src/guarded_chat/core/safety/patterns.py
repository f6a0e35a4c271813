"""
목적: 주제별 키워드 탐지 패턴 표를 제공한다.
설명: 차단 주제마다 대소문자 무시 정규식 목록을 모듈 로드 시 1회 컴파일한다.
      교육 맥락의 오탐을 줄이도록 문맥이 있는 구문만 잡는다("kill yourself"는 탐지, 단독 "kill"은 통과).
디자인 패턴: 읽기 전용 테이블
참조: src/guarded_chat/core/safety/keyword_filter.py
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from guarded_chat.core.safety.models import BlockedTopic

_RAW_TOPIC_PATTERNS: dict[BlockedTopic, tuple[str, ...]] = {
    BlockedTopic.VIOLENCE: (
        r"\bkill\s+(you|him|her|them|myself|yourself|someone)\b",
        r"\bschool\s+shoot",
        r"\bbomb\s+threat",
        r"\bhow\s+to\s+(make|build)\s+(a\s+)?(weapon|bomb|gun)",
        r"\btorture\b",
        r"\bmurder\b",
    ),
    BlockedTopic.SEXUAL_CONTENT: (
        r"\bporn",
        r"\bsexual\s+content",
        r"\bnude",
        r"\bexplicit\b",
        r"\bnsfw\b",
    ),
    BlockedTopic.SELF_HARM: (
        r"\bkill\s+(myself|yourself)\b",
        r"\bsuicid",
        r"\bself[- ]?harm",
        r"\bcut\s+myself\b",
        r"\bwant\s+to\s+die\b",
        r"\bend\s+my\s+life\b",
    ),
    BlockedTopic.HATE_SPEECH: (
        r"\bslur",
        r"\bhate\s+(all|every)\s+\w+",
        r"\bracist\b",
        r"\bhomophob",
        r"\btransphob",
        r"\bxenophob",
    ),
    BlockedTopic.DRUGS_ALCOHOL: (
        r"\bhow\s+to\s+(buy|get|make|use)\s+(drugs|weed|cocaine|meth|heroin|alcohol)\b",
        r"\bget\s+(high|drunk|wasted)\b",
        r"\bvaping\b",
    ),
    BlockedTopic.PROFANITY: (
        r"\bf+u+c+k+",
        r"\bs+h+i+t+\b",
        r"\bass+hole",
        r"\bbitch",
        r"\bdamn\b",
        # 마스킹 표기("f***", "sh**")
        r"\bf[*#@$%!]{3,}",
        r"\bsh[*#@$%!]{2,}",
    ),
    BlockedTopic.PERSONAL_INFORMATION: (
        r"\bmy\s+(home\s+)?address\s+is\b",
        r"\bmy\s+phone\s+(number\s+)?is\b",
        r"\bmy\s+social\s+security",
        r"\bmy\s+password\s+is\b",
        r"\bssn\b",
    ),
    BlockedTopic.DANGEROUS_ACTIVITIES: (
        r"\bhow\s+to\s+(make|build)\s+(a\s+)?(fire|explosive|poison)",
        r"\bhow\s+to\s+hack\b",
        r"\bhow\s+to\s+steal\b",
        r"\bhow\s+to\s+pick\s+a\s+lock",
    ),
    BlockedTopic.ACADEMIC_DISHONESTY: (
        r"\bwrite\s+my\s+(entire\s+)?(essay|paper|homework|assignment)\b",
        r"\bdo\s+my\s+homework\b",
        r"\bgive\s+me\s+the\s+answers?\b",
        r"\bcomplete\s+this\s+(test|exam|quiz)\s+for\s+me\b",
    ),
}

TOPIC_PATTERNS: Mapping[BlockedTopic, tuple[re.Pattern[str], ...]] = MappingProxyType(
    {
        topic: tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)
        for topic, patterns in _RAW_TOPIC_PATTERNS.items()
    }
)


def matches_topic(text: str, topic: BlockedTopic) -> bool:
    """텍스트가 해당 주제 패턴 중 하나라도 일치하면 True를 반환한다."""

    return any(pattern.search(text) for pattern in TOPIC_PATTERNS.get(topic, ()))
