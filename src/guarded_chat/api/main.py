"""
목적: FastAPI 앱을 최소 구성으로 실행하기 위한 엔트리 포인트 제공
설명: 헬스체크와 안전성 게이트웨이 Chat API를 포함한 실행 엔트리이다.
디자인 패턴: 단일 책임 원칙(SRP)
참조: src/guarded_chat/api/chat/routers/router.py
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse

from guarded_chat.shared.config import RuntimeEnvironmentLoader

# 런타임 환경(local/dev/stg/prod)을 판별해 환경 파일을 로드한다.
RUNTIME_ENV = RuntimeEnvironmentLoader().load()

# NOTE:
# .env 로딩 이후에 라우터/서비스를 import해야, 서비스 조립 시점에 읽는
# 제공자 API 키와 타임아웃 설정이 최신 환경 변수를 반영한다.
from guarded_chat.api.chat.routers import router as chat_router
from guarded_chat.api.chat.routers.common import request_validation_handler
from guarded_chat.api.chat.services import shutdown_chat_gateway_service
from guarded_chat.api.health.routers.server import router as health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 종료 시 Chat 서비스 리소스를 정리한다."""
    try:
        yield
    finally:
        shutdown_chat_gateway_service()


app = FastAPI(title="guarded-chat", lifespan=lifespan)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.include_router(health_router)
app.include_router(chat_router)


@app.get("/", include_in_schema=False)
def redirect_to_docs():
    """기본 접속 시 문서 페이지로 리다이렉트한다."""
    return RedirectResponse(url="/docs")
