"""Flat-heading README convention: "## Category" then "### Title" + code block."""

import logging

from ...catalog.schema import CategoryId, Dialect, PromptRecord, SourceConfig
from ..categories import resolve_section_category
from ..extractors import (
    extract_emphasis_description,
    extract_first_line,
    extract_labeled_description,
    extract_prompt_body,
    first_match,
)
from ..segmenter import split_sections, strip_ordinal
from .base import DialectParser

logger = logging.getLogger(__name__)

# Housekeeping headings that never hold prompts (case-insensitive substring)
SKIPPED_HEADINGS = ("resources", "contributing", "license", "acknowledgments", "table of contents")


class FlatHeadingParser(DialectParser):
    """Every depth-3 section with a fenced code block is a prompt."""

    dialect = Dialect.FLAT
    language = "en"

    def parse(self, markdown: str, source: SourceConfig) -> list[PromptRecord]:
        records: list[PromptRecord] = []
        category = CategoryId.OTHER
        section_index = 0
        counter = 1

        for section in split_sections(markdown):
            if section.heading_level == 2:
                section_index += 1
                category = resolve_section_category(section.name)
                continue

            lowered = section.name.lower()
            if any(skipped in lowered for skipped in SKIPPED_HEADINGS):
                continue

            prompt = extract_prompt_body(section.body)
            if prompt is None:
                logger.debug(f"[PARSER] {source.source_id}: no code block under '{section.name}'")
                continue

            description = first_match(
                section.body,
                extract_labeled_description,
                extract_emphasis_description,
                extract_first_line,
            )

            records.append(
                self.build_record(
                    source,
                    record_id=f"{source.source_id}-{section_index}-{counter}",
                    title=strip_ordinal(section.name),
                    prompt_text=prompt,
                    category=category,
                    body=section.body,
                    description=description,
                )
            )
            counter += 1

        return records
