"""
목적: 게이트웨이 메시지와 LangChain 메시지 간 변환을 검증한다.
설명: 시스템 프롬프트 배치, 이미지/파일 블록 변환, 응답 텍스트/사용량 추출을 확인한다.
디자인 패턴: 어댑터 테스트
참조: src/guarded_chat/integrations/llm/messages.py
"""

from __future__ import annotations

import base64

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from guarded_chat.integrations.llm.messages import extract_text, to_langchain_messages, to_token_usage
from guarded_chat.shared.chat.models import ChatRole, FilePart, ImagePart, Message, TextPart


def test_prefix_becomes_first_system_message() -> None:
    messages = [
        Message(role=ChatRole.SYSTEM, content=[TextPart(text="Caller rule")]),
        Message(role=ChatRole.USER, content=[TextPart(text="Hi")]),
        Message.assistant_text("Hello!"),
    ]

    converted = to_langchain_messages(messages, "Safety prefix")

    assert isinstance(converted[0], SystemMessage)
    assert converted[0].content == "Safety prefix"
    assert isinstance(converted[1], SystemMessage)
    assert isinstance(converted[2], HumanMessage)
    assert converted[2].content == [{"type": "text", "text": "Hi"}]
    assert isinstance(converted[3], AIMessage)
    assert converted[3].content == "Hello!"


def test_blank_prefix_is_omitted() -> None:
    converted = to_langchain_messages([Message(role=ChatRole.USER, content=[TextPart(text="Hi")])], " ")

    assert len(converted) == 1


def test_attachments_are_converted_to_blocks() -> None:
    notes = base64.b64encode(b"chapter 1 notes").decode()
    message = Message(
        role=ChatRole.USER,
        content=[
            TextPart(text="Summarize"),
            ImagePart(data="aW1n", mime_type="image/png"),
            FilePart(data=notes, mime_type="text/plain", file_name="notes.txt"),
            FilePart(data="cGRm", mime_type="application/pdf", file_name="book.pdf"),
            FilePart(data="anBn", mime_type="image/jpeg", file_name="photo.jpg"),
        ],
    )

    blocks = to_langchain_messages([message])[0].content

    assert blocks[1] == {"type": "image_url", "image_url": {"url": "data:image/png;base64,aW1n"}}
    assert blocks[2] == {"type": "text", "text": "[File: notes.txt]\nchapter 1 notes"}
    assert blocks[3] == {"type": "text", "text": "[File: book.pdf (application/pdf)]"}
    assert blocks[4]["image_url"]["url"].startswith("data:image/jpeg;base64,")


def test_extract_text_and_usage() -> None:
    message = AIMessage(
        content=[{"type": "text", "text": "Part one. "}, {"type": "tool_use", "id": "x"}, "Part two."],
        usage_metadata={"input_tokens": 10, "output_tokens": 4, "total_tokens": 14},
    )

    assert extract_text(message) == "Part one. Part two."
    usage = to_token_usage(message)
    assert usage is not None
    assert (usage.input_tokens, usage.output_tokens) == (10, 4)
    assert to_token_usage(AIMessage(content="x")) is None
