"""
목적: 기본 안전성 설정 조회 라우터를 제공한다.
설명: 플랫폼 기본 설정과 병합 정책 안내를 반환하는 `GET /safety-config` 엔드포인트를 정의한다.
디자인 패턴: 라우터 패턴
참조: src/guarded_chat/core/safety/defaults.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from guarded_chat.api.chat.models import SafetyConfigResponse
from guarded_chat.api.chat.services import ChatGatewayService, get_chat_gateway_service

router = APIRouter()


@router.get(
    "/safety-config",
    response_model=SafetyConfigResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    summary="플랫폼 기본 안전성 설정을 조회합니다.",
)
def get_safety_config(
    service: ChatGatewayService = Depends(get_chat_gateway_service),
) -> SafetyConfigResponse:
    """기본 설정과 호출자 부분 설정 병합 정책을 반환한다."""

    return service.safety_config()
