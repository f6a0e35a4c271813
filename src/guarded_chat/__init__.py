"""
목적: guarded_chat 패키지 루트를 정의한다.
설명: 미성년자 대상 교육용 대화 게이트웨이로, 모든 모델 호출 앞뒤에 안전성 단계를 적용한다.
디자인 패턴: 레이어드 아키텍처
참조: src/guarded_chat/api/main.py
"""

__version__ = "0.1.0"
