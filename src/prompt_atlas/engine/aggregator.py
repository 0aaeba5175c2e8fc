"""Collect prompt records from every configured source."""

import asyncio
import logging
from collections import Counter
from typing import Protocol

from ..catalog.schema import PromptRecord, SourceConfig
from ..errors import DocumentFetchError
from .parser import parse_document

logger = logging.getLogger(__name__)


class DocumentFetcher(Protocol):
    """Anything that can return the raw README text of a source."""

    async def fetch_document(self, source: SourceConfig) -> str: ...


class PromptAggregator:
    """Fetches, parses and concatenates prompts across sources.

    A failure for one source is logged and that source contributes no
    records; the remaining sources are unaffected.
    """

    def __init__(self, fetcher: DocumentFetcher, concurrent: bool = True):
        self.fetcher = fetcher
        self.concurrent = concurrent

    async def collect_source(self, source: SourceConfig) -> list[PromptRecord]:
        """Fetch and parse a single source. Errors propagate."""
        markdown = await self.fetcher.fetch_document(source)
        records = parse_document(markdown, source)
        logger.info(f"[SYNC] {source.repository}: {len(records)} prompts")
        return records

    async def collect(self, sources: list[SourceConfig]) -> list[PromptRecord]:
        """Collect from all sources, in declaration order."""
        if self.concurrent:
            batches = await asyncio.gather(*(self._collect_isolated(source) for source in sources))
        else:
            batches = [await self._collect_isolated(source) for source in sources]

        records = [record for batch in batches for record in batch]
        logger.info(f"[SYNC] Collected {len(records)} prompts from {len(sources)} source(s)")
        return records

    async def _collect_isolated(self, source: SourceConfig) -> list[PromptRecord]:
        try:
            return await self.collect_source(source)
        except DocumentFetchError as e:
            logger.error(
                f"[SYNC] Failed to fetch {source.repository} ({source.source_id}): "
                f"status {e.status_code}: {e.message}"
            )
        except Exception:
            logger.exception(f"[SYNC] Failed to collect prompts from {source.repository} ({source.source_id})")
        return []


def summarize(records: list[PromptRecord]) -> dict[str, int]:
    """Count records per category, most common first."""
    counts = Counter(record.category.value for record in records)
    return dict(counts.most_common())
