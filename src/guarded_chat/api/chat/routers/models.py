"""
목적: 모델 카탈로그 조회 라우터를 제공한다.
설명: 호출 가능한 대상 모델 목록을 반환하는 `GET /models` 엔드포인트를 정의한다.
디자인 패턴: 라우터 패턴
참조: src/guarded_chat/core/chat/const/models.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from guarded_chat.api.chat.models import ModelListResponse
from guarded_chat.api.chat.services import ChatGatewayService, get_chat_gateway_service

router = APIRouter()


@router.get(
    "/models",
    response_model=ModelListResponse,
    response_model_by_alias=True,
    summary="호출 가능한 모델 목록을 조회합니다.",
)
def list_models(
    service: ChatGatewayService = Depends(get_chat_gateway_service),
) -> ModelListResponse:
    return service.list_models()
