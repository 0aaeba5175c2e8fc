"""Tracked README sources."""

import logging

import yaml

from ..config import Settings
from .schema import Dialect, SourceConfig

logger = logging.getLogger(__name__)

DEFAULT_SOURCES: list[SourceConfig] = [
    SourceConfig(
        owner="YouMind-OpenLab",
        repo_name="awesome-nano-banana-pro-prompts",
        branch="main",
        file_path="README_ja-JP.md",
        source_id="youmind",
        dialect=Dialect.NUMBERED.value,
    ),
    SourceConfig(
        owner="ZeroLu",
        repo_name="awesome-nanobanana-pro",
        branch="main",
        file_path="README.md",
        source_id="zerolu",
        dialect=Dialect.NESTED.value,
    ),
]


def load_sources(settings: Settings) -> list[SourceConfig]:
    """Load the source list from ``settings.sources_file`` or fall back to defaults.

    The YAML file holds either a top-level list of source mappings or a
    mapping with a ``sources`` key:

        sources:
          - owner: ZeroLu
            repo_name: awesome-nanobanana-pro
            source_id: zerolu
            dialect: nested

    Raises:
        FileNotFoundError: If the configured file does not exist.
        ValueError: If the file does not contain a list of sources, or two
            entries share a ``source_id``.
        pydantic.ValidationError: If an entry is missing required fields.
    """
    if settings.sources_file is None:
        return list(DEFAULT_SOURCES)

    data = yaml.safe_load(settings.sources_file.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("sources")
    if not isinstance(data, list):
        raise ValueError(f"{settings.sources_file}: expected a list of sources")

    sources = [SourceConfig(**entry) for entry in data]

    seen: set[str] = set()
    for source in sources:
        if source.source_id in seen:
            raise ValueError(f"{settings.sources_file}: duplicate source_id '{source.source_id}'")
        seen.add(source.source_id)

    logger.debug(f"[SYNC] Loaded {len(sources)} sources from {settings.sources_file}")
    return sources
