"""Client for pulling raw README documents from GitHub."""

import logging

import httpx

from .catalog.schema import SourceConfig
from .config import Settings
from .errors import DocumentFetchError

logger = logging.getLogger(__name__)


class GitHubClient:
    """Fetches the raw markdown of a tracked source."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.headers = {
            "Accept": "text/plain",
            "User-Agent": settings.user_agent,
        }

    def document_url(self, source: SourceConfig) -> str:
        return self.settings.raw_document_url(
            source.owner, source.repo_name, source.branch, source.file_path
        )

    async def fetch_document(self, source: SourceConfig) -> str:
        """GET the raw README for ``source``.

        Raises:
            DocumentFetchError: On a non-2xx response (with its status) or a
                transport failure (status 0).
        """
        url = self.document_url(source)
        logger.debug(f"[FETCH] GET {url}")

        try:
            async with httpx.AsyncClient(timeout=self.settings.fetch_timeout, follow_redirects=True) as client:
                resp = await client.get(url, headers=self.headers)
        except httpx.HTTPError as e:
            raise DocumentFetchError(0, f"Request to {url} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise DocumentFetchError(
                resp.status_code,
                f"GitHub README fetch failed: {resp.status_code} {resp.reason_phrase}",
            )

        logger.info(f"[FETCH] {source.repository}/{source.file_path}: {len(resp.text)} chars")
        return resp.text
