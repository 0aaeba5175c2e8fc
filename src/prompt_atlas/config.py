"""Configuration management for Prompt Atlas."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PROMPT_ATLAS_",
        extra="ignore",
    )

    # GitHub
    github_raw_base_url: str = "https://raw.githubusercontent.com"
    user_agent: str = "PromptAtlas/1.0"

    # Fetching
    fetch_timeout: float = 30.0
    concurrent_fetch: bool = True

    # Optional YAML file overriding the built-in source list
    sources_file: Optional[Path] = None

    def raw_document_url(self, owner: str, repo_name: str, branch: str, file_path: str) -> str:
        base = self.github_raw_base_url.rstrip("/")
        return f"{base}/{owner}/{repo_name}/{branch}/{file_path.lstrip('/')}"


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
