"""
목적: Chat API 패키지를 정의한다.
설명: 대화 처리/모델 카탈로그/안전성 설정 조회 API 구성 요소를 포함한다.
디자인 패턴: 패키지 모듈
참조: src/guarded_chat/api/chat/routers/router.py
"""
