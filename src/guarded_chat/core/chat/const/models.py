"""
목적: 호출 가능한 대상 모델 카탈로그를 정의한다.
설명: 제공자/모델 식별자/표시 이름/이미지·파일 지원 여부를 읽기 전용 목록으로 제공한다.
디자인 패턴: 모듈 상수
참조: src/guarded_chat/core/chat/models/chat.py, src/guarded_chat/api/chat/routers/models.py
"""

from __future__ import annotations

from typing import Optional

from guarded_chat.shared.chat.models import DomainModel, ModelSpec, ProviderName


class ModelCatalogueEntry(DomainModel):
    """카탈로그 항목."""

    provider: ProviderName
    model_id: str
    display_name: str
    supports_images: bool
    supports_files: bool

    def matches(self, spec: ModelSpec) -> bool:
        return self.provider == spec.provider and self.model_id == spec.model_id


MODEL_CATALOGUE: tuple[ModelCatalogueEntry, ...] = (
    ModelCatalogueEntry(
        provider=ProviderName.CLAUDE,
        model_id="claude-sonnet-4-20250514",
        display_name="Claude Sonnet 4",
        supports_images=True,
        supports_files=True,
    ),
    ModelCatalogueEntry(
        provider=ProviderName.CLAUDE,
        model_id="claude-haiku-4-20250414",
        display_name="Claude Haiku 4",
        supports_images=True,
        supports_files=True,
    ),
    ModelCatalogueEntry(
        provider=ProviderName.GPT,
        model_id="gpt-4o",
        display_name="GPT-4o",
        supports_images=True,
        supports_files=False,
    ),
    ModelCatalogueEntry(
        provider=ProviderName.GPT,
        model_id="gpt-4o-mini",
        display_name="GPT-4o Mini",
        supports_images=True,
        supports_files=False,
    ),
    ModelCatalogueEntry(
        provider=ProviderName.GEMINI,
        model_id="gemini-2.0-flash",
        display_name="Gemini 2.0 Flash",
        supports_images=True,
        supports_files=True,
    ),
    ModelCatalogueEntry(
        provider=ProviderName.GEMINI,
        model_id="gemini-2.5-pro",
        display_name="Gemini 2.5 Pro",
        supports_images=True,
        supports_files=True,
    ),
)


def find_catalogue_entry(spec: ModelSpec) -> Optional[ModelCatalogueEntry]:
    """모델 지정과 일치하는 카탈로그 항목을 반환한다."""

    for entry in MODEL_CATALOGUE:
        if entry.matches(spec):
            return entry
    return None
