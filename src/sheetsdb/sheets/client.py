"""Client for downloading published Google Sheets pages as CSV."""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from ..config import settings
from ..errors import PageFetchError

logger = logging.getLogger(__name__)


def build_page_url(document_id: str, page_name: str, template: Optional[str] = None) -> str:
    """Build the CSV export URL of one page of a document."""
    template = template or settings.sheet_url_template
    return template.format(
        document_id=quote(document_id, safe=""),
        page_name=quote(page_name, safe=""),
    )


class SheetsCsvClient:
    """
    Downloads page text over one shared HTTP connection pool.

    Use as an async context manager so the connection pool is released when
    the import run ends.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.fetch_timeout_seconds
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=transport,
            follow_redirects=True,
        )

    async def __aenter__(self) -> "SheetsCsvClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def fetch(self, url: str) -> str:
        """
        Download a page.

        Args:
            url: Page URL, usually from build_page_url

        Returns:
            The response body as text

        Raises:
            PageFetchError: On malformed URLs, transport errors or non-success status codes
        """
        logger.debug(f"GET {url}")
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PageFetchError(url, f"HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise PageFetchError(url, str(e)) from e

        return response.text
