"""
목적: Chat 상수 공개 API를 제공한다.
설명: 모델 카탈로그와 조회 함수를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/guarded_chat/core/chat/const/models.py
"""

from guarded_chat.core.chat.const.models import (
    MODEL_CATALOGUE,
    ModelCatalogueEntry,
    find_catalogue_entry,
)

__all__ = ["MODEL_CATALOGUE", "ModelCatalogueEntry", "find_catalogue_entry"]
