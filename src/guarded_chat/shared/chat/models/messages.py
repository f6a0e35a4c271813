"""
목적: 대화 메시지와 모델 지정 값 객체를 정의한다.
설명: 텍스트/이미지/파일 콘텐츠 파트의 태그 유니언, 메시지, 모델 지정, 토큰 사용량, 제공자 응답을 제공한다.
디자인 패턴: 값 객체(Value Object), 태그 유니언
참조: src/guarded_chat/core/safety/keyword_filter.py, src/guarded_chat/integrations/llm/provider.py
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from guarded_chat.shared.chat.models.base import DomainModel


class ChatRole(str, Enum):
    """대화 메시지 역할 타입."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ProviderName(str, Enum):
    """모델 제공자 식별자."""

    GPT = "gpt"
    CLAUDE = "claude"
    GEMINI = "gemini"


class TextPart(DomainModel):
    """텍스트 콘텐츠 파트."""

    type: Literal["text"] = "text"
    text: str = Field(min_length=1)


class ImagePart(DomainModel):
    """base64 인코딩 이미지 콘텐츠 파트."""

    type: Literal["image"] = "image"
    data: str = Field(min_length=1)
    mime_type: Literal["image/png", "image/jpeg", "image/gif", "image/webp"]


class FilePart(DomainModel):
    """base64 인코딩 파일 콘텐츠 파트."""

    type: Literal["file"] = "file"
    data: str = Field(min_length=1)
    mime_type: str = Field(min_length=1)
    file_name: str = Field(min_length=1)


ContentPart = Annotated[Union[TextPart, ImagePart, FilePart], Field(discriminator="type")]


class Message(DomainModel):
    """대화 메시지. 콘텐츠 파트는 최소 1개 이상이다."""

    role: ChatRole
    content: list[ContentPart] = Field(min_length=1)

    @classmethod
    def assistant_text(cls, text: str) -> "Message":
        """단일 텍스트 파트를 가진 assistant 메시지를 생성한다."""

        return cls(role=ChatRole.ASSISTANT, content=[TextPart(text=text)])

    def text_content(self, separator: str = " ") -> str:
        """텍스트 파트만 이어 붙여 반환한다."""

        return separator.join(part.text for part in self.content if isinstance(part, TextPart))

    def describe_content(self, separator: str = " ") -> str:
        """첨부 파트를 자리표시 문구로 치환해 전체 콘텐츠를 문자열로 표현한다.

        이미지와 파일의 원본 데이터는 포함하지 않는다.
        """

        pieces: list[str] = []
        for part in self.content:
            if isinstance(part, TextPart):
                pieces.append(part.text)
            elif isinstance(part, ImagePart):
                pieces.append(f"[Image: {part.mime_type}]")
            else:
                pieces.append(f"[File: {part.file_name} ({part.mime_type})]")
        return separator.join(pieces)


class ModelSpec(DomainModel):
    """호출 대상 제공자와 구체 모델 식별자."""

    provider: ProviderName
    model_id: str = Field(min_length=1)


class TokenUsage(DomainModel):
    """토큰 사용량 카운터."""

    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)


class ProviderResponse(DomainModel):
    """대상 모델 호출 결과."""

    message: Message
    usage: Optional[TokenUsage] = None
