"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 런타임 환경 로더와 프로세스 설정 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/shared/config/runtime_env_loader.py, src/guarded_chat/shared/config/settings.py
"""

from guarded_chat.shared.config.runtime_env_loader import RuntimeEnvironmentLoader
from guarded_chat.shared.config.settings import GatewaySettings

__all__ = ["GatewaySettings", "RuntimeEnvironmentLoader"]
