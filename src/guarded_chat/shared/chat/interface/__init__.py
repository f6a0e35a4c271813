"""
목적: 대화 계층 포트 공개 API를 제공한다.
설명: 대상 모델/판정 모델 호출 Protocol을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/shared/chat/interface/ports.py
"""

from guarded_chat.shared.chat.interface.ports import ChatProviderPort, JudgePort

__all__ = ["ChatProviderPort", "JudgePort"]
