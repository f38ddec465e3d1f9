import asyncio
import logging

import httpx

from app.exceptions.custom import HomepageFetchError
from app.schemas.website import PageFetchResult, SourcePage

logger = logging.getLogger(__name__)

HOMEPAGE_TIMEOUT = 15.0
DEEP_PAGE_TIMEOUT = 10.0
USER_AGENT = "Mozilla/5.0"

# Secondary pages tried for every site, in merge order
DEEP_PATHS = ("/about", "/about-us", "/contact", "/contact-us")


def build_deep_urls(base_url: str) -> list[str]:
    base = base_url.removesuffix("/")
    return [base + path for path in DEEP_PATHS]


class WebsiteScraperService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        user_agent: str = USER_AGENT,
        homepage_timeout: float = HOMEPAGE_TIMEOUT,
        deep_page_timeout: float = DEEP_PAGE_TIMEOUT,
    ):
        self._client = client
        self._user_agent = user_agent
        self._homepage_timeout = homepage_timeout
        self._deep_page_timeout = deep_page_timeout

    async def fetch_homepage(self, url: str) -> SourcePage:
        """Fetch the root document. Raises HomepageFetchError on any failure."""
        try:
            html = await self._get(url, self._homepage_timeout)
        except httpx.HTTPStatusError as exc:
            raise HomepageFetchError(
                f"Homepage returned {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise HomepageFetchError(f"Homepage unreachable: {exc!r}") from exc
        return SourcePage(url=url, html=html)

    async def fetch_deep_page_results(self, base_url: str) -> list[PageFetchResult]:
        """Fetch every deep path concurrently; results keep path order."""
        urls = build_deep_urls(base_url)
        return list(await asyncio.gather(*(self._fetch_deep_page(u) for u in urls)))

    async def fetch_deep_pages(self, base_url: str) -> list[SourcePage]:
        results = await self.fetch_deep_page_results(base_url)
        return [r.page for r in results if r.page is not None]

    async def _fetch_deep_page(self, url: str) -> PageFetchResult:
        try:
            html = await self._get(url, self._deep_page_timeout)
        except httpx.TimeoutException:
            reason = "timeout"
        except httpx.HTTPStatusError as exc:
            reason = f"http_{exc.response.status_code}"
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            reason = f"transport: {exc!r}"
        else:
            return PageFetchResult(url=url, page=SourcePage(url=url, html=html))

        logger.debug("Deep page absent: %s (%s)", url, reason)
        return PageFetchResult(url=url, reason=reason)

    async def _get(self, url: str, timeout: float) -> str:
        resp = await self._client.get(
            url,
            follow_redirects=True,
            timeout=timeout,
            headers={"User-Agent": self._user_agent},
        )
        resp.raise_for_status()
        return resp.text
