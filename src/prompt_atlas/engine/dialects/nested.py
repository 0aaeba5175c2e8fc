"""Nested-heading README convention.

    ## 1. Photorealism & Aesthetics

    ### 1.1. Vintage Film Portrait

    *Recreate the look of 35mm film.*

    **Prompt:**
    ```
    A portrait shot on Kodak Portra 400 ...
    ```

    *Source: [Post](https://x.com/...)*
"""

import logging
import re

from ...catalog.schema import CategoryId, Dialect, PromptRecord, SourceConfig
from ..categories import resolve_nested_category
from ..extractors import extract_emphasis_description, extract_labeled_prompt
from ..segmenter import split_sections
from .base import DialectParser

logger = logging.getLogger(__name__)

# "1.1. Title": the numbering marks a prompt entry and is not kept
PROMPT_TITLE_PATTERN = re.compile(r"^\d+\.\d+\.?[ \t]+(.+)$")


class NestedHeadingParser(DialectParser):
    """Category sections at depth 2, numbered prompt entries at depth 3."""

    dialect = Dialect.NESTED
    language = "en"

    def parse(self, markdown: str, source: SourceConfig) -> list[PromptRecord]:
        records: list[PromptRecord] = []
        category = CategoryId.OTHER
        counter = 1

        for section in split_sections(markdown):
            if section.heading_level == 2:
                category = resolve_nested_category(section.name)
                continue

            title_match = PROMPT_TITLE_PATTERN.match(section.name)
            if not title_match:
                continue

            prompt = extract_labeled_prompt(section.body)
            if prompt is None:
                logger.debug(f"[PARSER] {source.source_id}: no prompt block under '{section.name}'")
                continue

            records.append(
                self.build_record(
                    source,
                    record_id=f"{source.source_id}-{counter}",
                    title=title_match.group(1).strip(),
                    prompt_text=prompt,
                    category=category,
                    body=section.body,
                    description=extract_emphasis_description(section.body),
                )
            )
            counter += 1

        return records
