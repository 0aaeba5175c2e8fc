"""Dialect dispatch for README parsing."""

import logging

from ..catalog.schema import Dialect, PromptRecord, SourceConfig
from .dialects import DialectParser, FlatHeadingParser, NestedHeadingParser, NumberedBlockParser

logger = logging.getLogger(__name__)

PARSERS: dict[str, DialectParser] = {
    Dialect.NESTED.value: NestedHeadingParser(),
    Dialect.FLAT.value: FlatHeadingParser(),
    Dialect.NUMBERED.value: NumberedBlockParser(),
}

DEFAULT_DIALECT = Dialect.FLAT


def get_parser(dialect: str | Dialect) -> DialectParser:
    """Return the parser for ``dialect``; unknown dialects get the flat-heading parser."""
    key = dialect.value if isinstance(dialect, Dialect) else str(dialect).strip().lower()
    parser = PARSERS.get(key)
    if parser is None:
        logger.debug(f"[PARSER] Unknown dialect '{dialect}', using '{DEFAULT_DIALECT.value}'")
        parser = PARSERS[DEFAULT_DIALECT.value]
    return parser


def parse_document(markdown: str, source: SourceConfig) -> list[PromptRecord]:
    """Parse one fetched README with the parser selected by ``source.dialect``."""
    parser = get_parser(source.dialect)
    records = parser.parse(markdown, source)
    logger.debug(f"[PARSER] {source.source_id}: {len(records)} prompts ({parser.dialect.value} dialect)")
    return records
