"""
목적: 게이트웨이 공통 예외 모델을 정의한다.
설명: 에러 코드/원인/힌트/메타데이터를 담아 오케스트레이터와 API 계층이 같은 코드 체계를 공유하게 한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/guarded_chat/shared/exceptions/base.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """요청 단위 실패를 호출자에게 노출할 때 사용하는 코드."""

    INVALID_REQUEST = "INVALID_REQUEST"
    INPUT_SAFETY_VIOLATION = "INPUT_SAFETY_VIOLATION"
    SAFETY_CHECK_ERROR = "SAFETY_CHECK_ERROR"
    PROVIDER_ERROR = "PROVIDER_ERROR"


class ExceptionDetail(BaseModel):
    """예외 상세 정보를 담는 모델이다.

    Args:
        code: 시스템 전반에서 일관되게 사용하는 에러 코드.
        cause: 에러의 직접 원인 설명.
        hint: 해결을 위한 힌트.
        metadata: 추가적인 구조화 메타데이터.
    """

    code: str = Field(..., description="에러 코드")
    cause: Optional[str] = Field(default=None, description="에러 원인")
    hint: Optional[str] = Field(default=None, description="해결 힌트")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="추가 메타데이터")
