"""Base dialect parser interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ...catalog.schema import CategoryId, Dialect, PromptRecord, SourceConfig
from ..extractors import extract_image_url, extract_source_url


class DialectParser(ABC):
    """Turns one README convention into prompt records."""

    dialect: Dialect
    language: str

    @abstractmethod
    def parse(self, markdown: str, source: SourceConfig) -> list[PromptRecord]:
        """Extract every prompt record from ``markdown``."""
        pass

    def build_record(
        self,
        source: SourceConfig,
        *,
        record_id: str,
        title: str,
        prompt_text: str,
        category: CategoryId,
        body: str,
        description: Optional[str] = None,
    ) -> PromptRecord:
        """Assemble a record, filling attribution and media from ``body``."""
        return PromptRecord(
            id=record_id,
            title=title,
            prompt_text=prompt_text,
            category=category,
            source_repository=source.repository,
            source_url=extract_source_url(body) or source.repository_url,
            language=self.language,
            image_url=extract_image_url(body),
            description=description,
        )
