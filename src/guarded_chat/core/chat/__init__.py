"""
목적: Chat 도메인 패키지를 정의한다.
설명: 요청/응답 모델, 그래프 상태, 모델 카탈로그, 오케스트레이션 그래프를 담는다.
디자인 패턴: 레이어드 아키텍처
참조: src/guarded_chat/core/chat/graphs, src/guarded_chat/core/chat/models
"""
