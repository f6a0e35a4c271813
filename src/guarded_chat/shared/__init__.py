"""
목적: 공용 계층 패키지를 정의한다.
설명: 예외/로깅/설정처럼 도메인과 무관한 공통 구성요소를 담는다.
디자인 패턴: 레이어드 아키텍처
참조: src/guarded_chat/shared/exceptions, src/guarded_chat/shared/logging, src/guarded_chat/shared/config
"""
