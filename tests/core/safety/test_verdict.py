"""
목적: judge 판정 파서를 검증한다.
설명: 코드 펜스 제거, 주제 정규화, 형식 오류 처리를 확인한다.
디자인 패턴: 단위 테스트
참조: src/guarded_chat/core/safety/verdict.py
"""

from __future__ import annotations

import pytest

from guarded_chat.core.safety import BlockedTopic
from guarded_chat.core.safety.verdict import VerdictParseError, parse_verdict, strip_code_fence


def test_strip_code_fence_removes_json_fence() -> None:
    raw = '```json\n{"safe": true}\n```'

    assert strip_code_fence(raw) == '{"safe": true}'
    assert strip_code_fence('  {"safe": false}  ') == '{"safe": false}'


def test_parse_fenced_unsafe_verdict() -> None:
    raw = '```\n{"safe": false, "flaggedTopics": ["Self Harm", "hate-speech", "weather"], "reason": "bad"}\n```'

    verdict = parse_verdict(raw)

    assert verdict.safe is False
    assert verdict.reason == "bad"
    assert verdict.blocked_topics() == [BlockedTopic.SELF_HARM, BlockedTopic.HATE_SPEECH]


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "I think this is fine.",
        "[true]",
        '{"flaggedTopics": []}',
        '{"safe": "yes"}',
    ],
)
def test_parse_rejects_malformed_payloads(raw: str) -> None:
    with pytest.raises(VerdictParseError):
        parse_verdict(raw)


@pytest.mark.parametrize(
    "raw",
    [
        '{"safe": true, "flaggedTopics": null, "reason": null}',
        '{"safe": true, "flaggedTopics": "violence", "reason": 42}',
        '{"safe": true, "flaggedTopics": {"topic": "violence"}}',
    ],
)
def test_parse_tolerates_malformed_optional_fields(raw: str) -> None:
    verdict = parse_verdict(raw)

    assert verdict.safe is True
    assert verdict.flagged_topics == []
    assert verdict.reason is None


def test_parse_drops_non_string_topic_items() -> None:
    verdict = parse_verdict('{"safe": false, "flaggedTopics": ["violence", 7, null], "reason": ["x"]}')

    assert verdict.safe is False
    assert verdict.blocked_topics() == [BlockedTopic.VIOLENCE]
    assert verdict.reason is None
