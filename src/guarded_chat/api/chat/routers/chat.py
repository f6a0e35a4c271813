"""
목적: 대화 처리 라우터를 제공한다.
설명: 입력 검사 → 대상 모델 호출 → 출력 검사 파이프라인을 실행하는 `POST /chat` 엔드포인트를 정의한다.
디자인 패턴: 라우터 패턴
참조: src/guarded_chat/api/chat/services/chat_service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from guarded_chat.api.chat.models import ChatRequest, ChatResponse, ErrorResponse
from guarded_chat.api.chat.routers.common import to_http_exception
from guarded_chat.api.chat.services import ChatGatewayService, get_chat_gateway_service
from guarded_chat.shared.exceptions import BaseAppException

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "요청 형식 오류"},
        422: {"model": ErrorResponse, "description": "입력 안전성 위반"},
        502: {"model": ErrorResponse, "description": "대상 모델 호출 실패"},
        503: {"model": ErrorResponse, "description": "안전성 검사 실패"},
    },
    summary="안전성 검사를 거쳐 대화 응답을 생성합니다.",
)
async def chat(
    request: ChatRequest,
    service: ChatGatewayService = Depends(get_chat_gateway_service),
) -> ChatResponse:
    """대화 요청 1건을 처리한다."""

    try:
        return await service.chat(request)
    except BaseAppException as error:
        raise to_http_exception(error) from error
