"""
목적: 도메인 코어 패키지를 정의한다.
설명: 안전성 평가 파이프라인과 대화 오케스트레이션 그래프를 담는다.
디자인 패턴: 레이어드 아키텍처
참조: src/guarded_chat/core/safety, src/guarded_chat/core/chat
"""
