"""Field extractors for README sections."""

from .attribution import extract_source_url
from .base import FieldExtractor, first_match
from .description import extract_emphasis_description, extract_first_line, extract_labeled_description
from .media import extract_image_url
from .prompt import extract_labeled_prompt, extract_prompt_body

__all__ = [
    "FieldExtractor",
    "extract_emphasis_description",
    "extract_first_line",
    "extract_image_url",
    "extract_labeled_description",
    "extract_labeled_prompt",
    "extract_prompt_body",
    "extract_source_url",
    "first_match",
]
