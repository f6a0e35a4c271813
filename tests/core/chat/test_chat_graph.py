"""
목적: 안전성 대화 오케스트레이션 그래프를 검증한다.
설명: 입력 거부/출력 대체/정상 완료 경로, 단계 순서, 차단 원문 비노출, 제공자 오류 코드화를 스텁 포트로 확인한다.
디자인 패턴: 단위 테스트, 테스트 더블
참조: src/guarded_chat/core/chat/graphs/chat_graph.py
"""

from __future__ import annotations

import pytest

from guarded_chat.core.chat.graphs import ChatOrchestrator
from guarded_chat.core.chat.models import ChatRequest
from guarded_chat.core.safety import (
    BlockedTopic,
    CheckSource,
    RefusalMessage,
    SafetyConfigOverride,
    SemanticSafetyClassifier,
    SemanticSafetyOverride,
)
from guarded_chat.shared.chat.models import ChatRole, Message, ModelSpec, ProviderName, TextPart
from guarded_chat.shared.exceptions import BaseAppException, ErrorCode

_SAFE = '{"safe": true, "flaggedTopics": [], "reason": null}'
_KEYWORD_ONLY = SafetyConfigOverride(llm_safety=SemanticSafetyOverride(enabled=False))


def _request(text: str, safety_config: SafetyConfigOverride | None = None, **kwargs) -> ChatRequest:
    return ChatRequest(
        model=ModelSpec(provider=ProviderName.GPT, model_id="gpt-4o"),
        messages=[Message(role=ChatRole.USER, content=[TextPart(text=text)])],
        safety_config=safety_config,
        **kwargs,
    )


def _orchestrator(provider, judge, memory_logger, **kwargs) -> ChatOrchestrator:
    classifier = SemanticSafetyClassifier(judge, timeout_seconds=1.0, logger=memory_logger)
    return ChatOrchestrator(provider, classifier, logger=memory_logger, **kwargs)


@pytest.mark.asyncio
async def test_safe_request_completes_with_both_layers(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    provider = stub_provider_factory()
    judge = stub_judge_factory(_SAFE, _SAFE)
    orchestrator = _orchestrator(provider, judge, memory_logger)

    response = await orchestrator.run(_request("Explain photosynthesis", conversation_id="conv-7", temperature=0.2))

    assert response.conversation_id == "conv-7"
    assert response.message.text_content() == provider.reply
    assert response.usage is not None and response.usage.output_tokens == 9
    assert response.safety_meta.input_check_passed is True
    assert response.safety_meta.output_check_passed is True
    assert response.safety_meta.layers_run == [CheckSource.KEYWORD, CheckSource.SEMANTIC]
    assert response.safety_meta.flagged_by is None
    assert len(judge.prompts) == 2
    assert provider.calls[0]["temperature"] == 0.2
    assert memory_logger.repository.find_events("stage.completed")


@pytest.mark.asyncio
async def test_missing_conversation_id_is_generated(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    orchestrator = _orchestrator(stub_provider_factory(), stub_judge_factory(), memory_logger)

    response = await orchestrator.run(_request("hello", _KEYWORD_ONLY))

    assert response.conversation_id


@pytest.mark.asyncio
async def test_input_keyword_violation_never_invokes_model(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    provider = stub_provider_factory()
    judge = stub_judge_factory()
    orchestrator = _orchestrator(provider, judge, memory_logger)

    with pytest.raises(BaseAppException) as captured:
        await orchestrator.run(_request("kill yourself", conversation_id="conv-a"))

    error = captured.value
    assert error.code == ErrorCode.INPUT_SAFETY_VIOLATION.value
    assert "self_harm" in error.detail.metadata["flagged_topics"]
    assert error.detail.metadata["layer"] == "keyword"
    assert error.detail.metadata["conversation_id"] == "conv-a"
    assert provider.calls == []
    assert judge.prompts == []


@pytest.mark.asyncio
async def test_output_keyword_violation_is_replaced_with_refusal(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    provider = stub_provider_factory(reply="F*** this homework")
    judge = stub_judge_factory(_SAFE)
    orchestrator = _orchestrator(provider, judge, memory_logger)

    response = await orchestrator.run(_request("Help me with my homework"))

    assert response.safety_meta.output_check_passed is False
    assert response.safety_meta.flagged_by == CheckSource.KEYWORD
    assert response.safety_meta.flagged_topics == [BlockedTopic.PROFANITY]
    assert response.message.text_content() == RefusalMessage.BLOCKED.value
    assert "F***" not in response.model_dump_json()
    assert response.usage is None
    # 출력 키워드 차단 시 출력 semantic 계층은 실행하지 않는다.
    assert len(judge.prompts) == 1


@pytest.mark.asyncio
async def test_lowered_input_limit_rejects_before_topic_scan(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    provider = stub_provider_factory()
    orchestrator = _orchestrator(provider, stub_judge_factory(), memory_logger)
    text = "kill yourself " + "a" * 46

    with pytest.raises(BaseAppException) as captured:
        await orchestrator.run(_request(text, SafetyConfigOverride(max_input_length=50)))

    assert len(text) == 60
    assert captured.value.message == "Input text exceeds maximum length of 50 characters"
    assert captured.value.detail.metadata["flagged_topics"] == []
    assert provider.calls == []


@pytest.mark.asyncio
async def test_judge_transport_error_rejects_input(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    provider = stub_provider_factory()
    orchestrator = _orchestrator(provider, stub_judge_factory(ConnectionError("boom")), memory_logger)

    with pytest.raises(BaseAppException) as captured:
        await orchestrator.run(_request("What is 2 + 2?"))

    assert captured.value.code == ErrorCode.SAFETY_CHECK_ERROR.value
    assert provider.calls == []


@pytest.mark.asyncio
async def test_narrowed_topics_still_block_defaults(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    provider = stub_provider_factory()
    orchestrator = _orchestrator(provider, stub_judge_factory(), memory_logger)
    overrides = SafetyConfigOverride(blocked_topics=[BlockedTopic.VIOLENCE])

    with pytest.raises(BaseAppException) as captured:
        await orchestrator.run(_request("I want to die", overrides))

    assert captured.value.detail.metadata["flagged_topics"] == ["self_harm"]
    assert provider.calls == []


@pytest.mark.asyncio
async def test_input_semantic_violation_rejects(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    provider = stub_provider_factory()
    judge = stub_judge_factory('{"safe": false, "flaggedTopics": ["dangerous activities"], "reason": "Risky"}')
    orchestrator = _orchestrator(provider, judge, memory_logger)

    with pytest.raises(BaseAppException) as captured:
        await orchestrator.run(_request("tell me something tricky"))

    assert captured.value.code == ErrorCode.INPUT_SAFETY_VIOLATION.value
    assert captured.value.message == "Risky"
    assert captured.value.detail.metadata["layer"] == "semantic"
    assert captured.value.detail.metadata["flagged_topics"] == ["dangerous_activities"]
    assert provider.calls == []


@pytest.mark.asyncio
async def test_output_semantic_violation_is_replaced(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    provider = stub_provider_factory(reply="A subtly harmful answer")
    judge = stub_judge_factory(_SAFE, '{"safe": false, "flaggedTopics": ["violence"], "reason": "x"}')
    orchestrator = _orchestrator(provider, judge, memory_logger)

    response = await orchestrator.run(_request("tell me a story"))

    assert response.safety_meta.flagged_by == CheckSource.SEMANTIC
    assert response.safety_meta.flagged_topics == [BlockedTopic.VIOLENCE]
    assert response.message.text_content() == RefusalMessage.BLOCKED.value
    assert "subtly harmful" not in response.model_dump_json()
    assert "A subtly harmful answer" in judge.prompts[1]


@pytest.mark.asyncio
async def test_output_semantic_failure_returns_verification_refusal(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    provider = stub_provider_factory(reply="An unverified answer")
    judge = stub_judge_factory(_SAFE, TimeoutError("judge slow"))
    orchestrator = _orchestrator(provider, judge, memory_logger)

    response = await orchestrator.run(_request("tell me a story"))

    assert response.safety_meta.output_check_passed is False
    assert response.safety_meta.flagged_by == CheckSource.SEMANTIC
    assert response.safety_meta.flagged_topics == []
    assert response.message.text_content() == RefusalMessage.VERIFICATION_FAILED.value
    assert "unverified" not in response.model_dump_json()


@pytest.mark.asyncio
async def test_provider_error_is_coded(stub_provider_factory, stub_judge_factory, memory_logger) -> None:
    provider = stub_provider_factory(error=RuntimeError("upstream 500"))
    orchestrator = _orchestrator(provider, stub_judge_factory(), memory_logger)

    with pytest.raises(BaseAppException) as captured:
        await orchestrator.run(_request("hello", _KEYWORD_ONLY))

    assert captured.value.code == ErrorCode.PROVIDER_ERROR.value
    assert captured.value.message == "upstream 500"
    assert isinstance(captured.value.original, RuntimeError)


@pytest.mark.asyncio
async def test_provider_timeout_is_coded(stub_provider_factory, stub_judge_factory, memory_logger) -> None:
    provider = stub_provider_factory(delay=0.5)
    orchestrator = _orchestrator(
        provider, stub_judge_factory(), memory_logger, provider_timeout_seconds=0.01
    )

    with pytest.raises(BaseAppException) as captured:
        await orchestrator.run(_request("hello", _KEYWORD_ONLY))

    assert captured.value.code == ErrorCode.PROVIDER_ERROR.value
    assert "timed out" in captured.value.message


@pytest.mark.asyncio
async def test_keyword_only_config_skips_semantic_layer(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    judge = stub_judge_factory()
    orchestrator = _orchestrator(stub_provider_factory(), judge, memory_logger)

    response = await orchestrator.run(_request("hello", _KEYWORD_ONLY))

    assert response.safety_meta.layers_run == [CheckSource.KEYWORD]
    assert judge.prompts == []


@pytest.mark.asyncio
async def test_merged_config_reaches_provider(
    stub_provider_factory, stub_judge_factory, memory_logger
) -> None:
    provider = stub_provider_factory()
    orchestrator = _orchestrator(provider, stub_judge_factory(), memory_logger)

    await orchestrator.run(
        _request(
            "hello",
            SafetyConfigOverride(
                max_output_tokens=100,
                system_prompt_prefix="Use short sentences.",
                llm_safety=SemanticSafetyOverride(enabled=False),
            ),
        )
    )

    config = provider.calls[0]["config"]
    assert config.max_output_tokens == 100
    assert config.system_prompt_prefix.endswith(" Use short sentences.")


def test_unknown_model_is_rejected_by_request_model() -> None:
    with pytest.raises(ValueError):
        ChatRequest(
            model=ModelSpec(provider=ProviderName.GPT, model_id="gpt-2"),
            messages=[Message(role=ChatRole.USER, content=[TextPart(text="hi")])],
        )
