"""Prompt extraction engine."""

from .aggregator import DocumentFetcher, PromptAggregator, summarize
from .categories import normalize_category, resolve_nested_category, resolve_section_category
from .parser import get_parser, parse_document
from .segmenter import DocumentSection, split_sections

__all__ = [
    "DocumentFetcher",
    "DocumentSection",
    "PromptAggregator",
    "get_parser",
    "normalize_category",
    "parse_document",
    "resolve_nested_category",
    "resolve_section_category",
    "split_sections",
    "summarize",
]
