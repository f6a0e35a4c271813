"""
목적: Chat 라우터 공통 유틸을 제공한다.
설명: 도메인 예외와 요청 스키마 오류를 `{"detail": {"code", "message"}}` 형태의 HTTP 응답으로 변환한다.
디자인 패턴: 유틸리티 모듈
참조: src/guarded_chat/api/chat/routers/chat.py, src/guarded_chat/api/main.py
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from guarded_chat.shared.exceptions import BaseAppException, ErrorCode

_STATUS_BY_CODE = {
    ErrorCode.INVALID_REQUEST.value: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INPUT_SAFETY_VIOLATION.value: 422,
    ErrorCode.SAFETY_CHECK_ERROR.value: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.PROVIDER_ERROR.value: status.HTTP_502_BAD_GATEWAY,
}


def to_http_exception(error: BaseAppException) -> HTTPException:
    """도메인 예외를 HTTP 예외로 변환한다."""

    status_code = _STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=error.to_error_body())


def format_validation_errors(error: RequestValidationError) -> str:
    """스키마 오류 목록을 `경로: 메시지; ...` 문자열로 합친다."""

    parts: list[str] = []
    for item in error.errors():
        location = ".".join(str(piece) for piece in item.get("loc", ()) if piece != "body")
        message = item.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


async def request_validation_handler(request: Request, error: RequestValidationError) -> JSONResponse:
    """요청 스키마 오류를 INVALID_REQUEST(400)로 응답한다."""

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "code": ErrorCode.INVALID_REQUEST.value,
                "message": format_validation_errors(error),
            }
        },
    )
