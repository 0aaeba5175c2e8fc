"""Composition helpers for field extractors.

A field extractor is a plain function that takes raw section text and returns
the extracted value, or ``None`` when the field is absent. Extractors never
raise on malformed input.
"""

from collections.abc import Callable
from typing import Optional

FieldExtractor = Callable[[str], Optional[str]]


def first_match(text: str, *extractors: FieldExtractor) -> Optional[str]:
    """Return the first non-empty result of ``extractors`` applied to ``text``."""
    for extractor in extractors:
        value = extractor(text)
        if value:
            return value
    return None
