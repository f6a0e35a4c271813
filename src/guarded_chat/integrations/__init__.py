"""
목적: 외부 시스템 통합 패키지를 정의한다.
설명: LLM 제공자 연동 어댑터를 담는다.
디자인 패턴: 포트-어댑터
참조: src/guarded_chat/integrations/llm
"""
