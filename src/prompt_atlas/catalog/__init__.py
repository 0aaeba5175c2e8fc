"""Category taxonomy, source configuration and prompt records."""

from .schema import CATEGORIES, Category, CategoryId, Dialect, PromptRecord, SourceConfig
from .sources import DEFAULT_SOURCES, load_sources

__all__ = [
    "CATEGORIES",
    "Category",
    "CategoryId",
    "DEFAULT_SOURCES",
    "Dialect",
    "PromptRecord",
    "SourceConfig",
    "load_sources",
]
