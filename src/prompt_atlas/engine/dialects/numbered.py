"""Numbered-block README convention.

    ### No. 12: ポスター - Retro Travel Poster

    #### 📖 説明

    A one-line summary.

    ```
    prompt text
    ```

    - **ソース:** [Post](https://x.com/...)
"""

import logging
import re

from ...catalog.schema import CategoryId, Dialect, PromptRecord, SourceConfig
from ..categories import normalize_category
from ..extractors import extract_labeled_description, extract_prompt_body
from .base import DialectParser

logger = logging.getLogger(__name__)

BLOCK_START_PATTERN = re.compile(r"(?=^###[ \t]+No\.[ \t]*\d+[ \t]*[:：])", re.MULTILINE)
BLOCK_HEADER_PATTERN = re.compile(r"^###[ \t]+No\.[ \t]*(\d+)[ \t]*[:：][ \t]*(.*?)[ \t\r]*$", re.MULTILINE)

CATEGORY_SEPARATOR = " - "


class NumberedBlockParser(DialectParser):
    """One "### No. N: Category - Title" block per prompt."""

    dialect = Dialect.NUMBERED
    language = "ja"

    def parse(self, markdown: str, source: SourceConfig) -> list[PromptRecord]:
        records: list[PromptRecord] = []
        occurrences: dict[int, int] = {}

        for block in BLOCK_START_PATTERN.split(markdown):
            header = BLOCK_HEADER_PATTERN.match(block)
            if not header:
                continue

            number = int(header.group(1))
            title, category = self._split_title(header.group(2))
            body = block[header.end():]

            prompt = extract_prompt_body(body)
            if prompt is None:
                logger.debug(f"[PARSER] {source.source_id}: no prompt block in No. {number}")
                continue

            occurrences[number] = occurrences.get(number, 0) + 1
            record_id = f"{source.source_id}-{number}"
            if occurrences[number] > 1:
                record_id = f"{record_id}-{occurrences[number]}"

            records.append(
                self.build_record(
                    source,
                    record_id=record_id,
                    title=title,
                    prompt_text=prompt,
                    category=category,
                    body=body,
                    description=extract_labeled_description(body),
                )
            )

        return records

    @staticmethod
    def _split_title(full_title: str) -> tuple[str, CategoryId]:
        """Split "Category - Title"; without a separator the whole text is the title."""
        full_title = full_title.strip() or "Untitled"
        category_text, separator, title = full_title.partition(CATEGORY_SEPARATOR)
        if not separator or not title.strip():
            return full_title, CategoryId.OTHER
        return title.strip(), normalize_category(category_text)
