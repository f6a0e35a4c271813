"""
목적: Chat API 라우터 집계를 제공한다.
설명: 엔드포인트별 분리 라우터를 `/api` 접두사의 하나의 라우터로 묶는다.
디자인 패턴: 컴포지트 패턴
참조: src/guarded_chat/api/chat/routers/*.py
"""

from __future__ import annotations

from fastapi import APIRouter

from guarded_chat.api.chat.routers.chat import router as chat_router
from guarded_chat.api.chat.routers.models import router as models_router
from guarded_chat.api.chat.routers.safety_config import router as safety_config_router

router = APIRouter(prefix="/api", tags=["chat"])
router.include_router(chat_router)
router.include_router(models_router)
router.include_router(safety_config_router)
