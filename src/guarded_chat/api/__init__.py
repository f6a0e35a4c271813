"""
목적: API 패키지를 정의한다.
설명: FastAPI 앱과 라우터/서비스 구성 요소를 포함한다.
디자인 패턴: 패키지 모듈
참조: src/guarded_chat/api/main.py
"""
