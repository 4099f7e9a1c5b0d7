"""Page retrieval."""

import logging

import httpx

from analyzers.page import PageData
from config import settings

logger = logging.getLogger(__name__)


class PageFetchError(Exception):
    """The page could not be retrieved at all (DNS, connection, timeout)."""


class PageFetcher:
    """Fetches a page over HTTP and extracts title and meta description."""

    def __init__(self, timeout: float = settings.http_timeout, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, url: str) -> PageData:
        """
        Fetch page data for the URL.

        Error statuses yield empty page data so every factor still runs;
        transport failures raise PageFetchError.
        """
        logger.info(f"Fetching page data for {url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": settings.user_agent},
                transport=self.transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Fetching {url} returned HTTP {e.response.status_code}")
            return PageData(url=url)
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise PageFetchError(f"Failed to fetch {url}: {e}") from e

        page = PageData.from_html(url, response.text)
        logger.info(f"Page data extracted - title: {page.title[:50]!r}")
        return page

    async def __call__(self, url: str) -> PageData:
        return await self.fetch(url)
