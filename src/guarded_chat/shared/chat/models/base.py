"""
목적: 도메인 모델 공통 베이스를 제공한다.
설명: 생성 이후 변경 불가(frozen)이며, 파이썬 속성은 snake_case, 외부 표현은 camelCase 별칭을 사용한다.
      알 수 없는 입력 키는 오류 없이 버린다.
디자인 패턴: 값 객체(Value Object)
참조: src/guarded_chat/shared/chat/models/messages.py, src/guarded_chat/core/safety/models.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """불변 camelCase 도메인 모델 베이스."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )

    def to_wire(self) -> dict:
        """외부 노출용 camelCase 사전으로 변환한다."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
