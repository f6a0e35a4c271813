"""
목적: 대화 공통 계층 패키지를 정의한다.
설명: 메시지 값 객체와 외부 협력자 포트를 담는다.
디자인 패턴: 레이어드 아키텍처
참조: src/guarded_chat/shared/chat/models, src/guarded_chat/shared/chat/interface
"""
