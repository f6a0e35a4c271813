"""
목적: 게이트웨이 메시지와 LangChain 메시지 간 변환을 제공한다.
설명: 안전성 시스템 프롬프트를 첫 SystemMessage로 두고, 이미지는 data URL 블록, 텍스트 파일은 본문 블록,
      그 외 파일은 자리표시 문구로 변환한다. 응답 텍스트와 사용량 추출도 함께 제공한다.
디자인 패턴: 어댑터
참조: src/guarded_chat/integrations/llm/provider.py, src/guarded_chat/shared/chat/models/messages.py
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Sequence
from typing import Any, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from guarded_chat.shared.chat.models import (
    ChatRole,
    FilePart,
    ImagePart,
    Message,
    TextPart,
    TokenUsage,
)


def to_langchain_messages(
    messages: Sequence[Message],
    system_prompt_prefix: str = "",
) -> list[BaseMessage]:
    """게이트웨이 메시지 목록을 LangChain 메시지 목록으로 변환한다."""

    converted: list[BaseMessage] = []
    if system_prompt_prefix.strip():
        converted.append(SystemMessage(content=system_prompt_prefix))
    for message in messages:
        if message.role == ChatRole.SYSTEM:
            converted.append(SystemMessage(content=message.describe_content()))
        elif message.role == ChatRole.ASSISTANT:
            converted.append(AIMessage(content=message.describe_content()))
        else:
            converted.append(HumanMessage(content=_content_blocks(message)))
    return converted


def _content_blocks(message: Message) -> list[dict[str, Any]]:
    blocks: list[dict[str, Any]] = []
    for part in message.content:
        if isinstance(part, TextPart):
            blocks.append({"type": "text", "text": part.text})
        elif isinstance(part, ImagePart):
            blocks.append(_image_block(part.mime_type, part.data))
        elif isinstance(part, FilePart):
            blocks.append(_file_block(part))
    return blocks


def _image_block(mime_type: str, data: str) -> dict[str, Any]:
    return {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{data}"}}


def _file_block(part: FilePart) -> dict[str, Any]:
    if part.mime_type.startswith("image/"):
        return _image_block(part.mime_type, part.data)
    if part.mime_type.startswith("text/"):
        decoded = _decode_text(part.data)
        if decoded is not None:
            return {"type": "text", "text": f"[File: {part.file_name}]\n{decoded}"}
    return {"type": "text", "text": f"[File: {part.file_name} ({part.mime_type})]"}


def _decode_text(data: str) -> Optional[str]:
    try:
        raw = base64.b64decode(data, validate=False)
    except (binascii.Error, ValueError):
        return None
    return raw.decode("utf-8", errors="replace")


def extract_text(message: object) -> str:
    """LangChain 응답 메시지에서 텍스트만 추출한다."""

    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        chunks: list[str] = []
        for item in content:
            if isinstance(item, str):
                chunks.append(item)
                continue
            if isinstance(item, dict) and item.get("type", "text") == "text":
                text = item.get("text")
                if text is not None:
                    chunks.append(str(text))
        return "".join(chunks)
    if isinstance(content, dict):
        text = content.get("text")
        return "" if text is None else str(text)
    return str(content)


def to_token_usage(message: object) -> Optional[TokenUsage]:
    """AIMessage.usage_metadata를 TokenUsage로 변환한다."""

    usage = getattr(message, "usage_metadata", None)
    if not usage:
        return None
    return TokenUsage(
        input_tokens=int(usage.get("input_tokens") or 0),
        output_tokens=int(usage.get("output_tokens") or 0),
    )
