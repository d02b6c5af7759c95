import logging
import time

import httpx

from travel_search.exceptions.custom import ScrapeTransportError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://api.scraperapi.com"
_TIMEOUT = 30.0
_CACHE_MAX_ENTRIES = 256


class ScraperProxyClient:
    """Fetch JavaScript-rendered pages through the ScraperAPI proxy.

    One GET per call, no retries. With ``cache_ttl`` > 0 successful bodies
    are kept in memory per target URL for that many seconds, at most
    ``cache_max_entries`` of them (oldest evicted first).
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = _TIMEOUT,
        render_js: bool = True,
        cache_ttl: float = 0.0,
        cache_max_entries: int = _CACHE_MAX_ENTRIES,
    ):
        self._client = client
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout
        self._render_js = render_js
        self._cache_ttl = cache_ttl
        self._cache_max_entries = cache_max_entries
        self._cache: dict[str, tuple[float, str]] = {}

    async def scrape(self, url: str) -> str:
        """Return the rendered HTML of ``url``. Raises ScrapeTransportError."""
        cached = self._cache_get(url)
        if cached is not None:
            logger.debug("Proxy cache hit for %s", url)
            return cached

        params = {
            "api_key": self._api_key,
            "url": url,
            "render": "true" if self._render_js else "false",
        }
        try:
            resp = await self._client.get(
                self._api_url, params=params, timeout=self._timeout
            )
            resp.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.error("ScraperAPI timeout for %s", url)
            raise ScrapeTransportError(f"Timed out fetching {url}") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("ScraperAPI error for %s (status=%s)", url, status)
            raise ScrapeTransportError(
                f"Proxy returned {status} for {url}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("ScraperAPI request failed for %s: %s", url, exc)
            raise ScrapeTransportError(f"Request failed for {url}: {exc}") from exc

        html = resp.text
        self._cache_put(url, html)
        return html

    def _cache_get(self, url: str) -> str | None:
        if self._cache_ttl <= 0:
            return None
        entry = self._cache.get(url)
        if entry is None:
            return None
        stored_at, html = entry
        if time.monotonic() - stored_at > self._cache_ttl:
            del self._cache[url]
            return None
        return html

    def _cache_put(self, url: str, html: str) -> None:
        if self._cache_ttl <= 0 or self._cache_max_entries <= 0:
            return

        now = time.monotonic()
        expired = [
            key for key, (stored_at, _) in self._cache.items()
            if now - stored_at > self._cache_ttl
        ]
        for key in expired:
            del self._cache[key]

        # Re-insert so dict order stays oldest-first
        self._cache.pop(url, None)
        while len(self._cache) >= self._cache_max_entries:
            del self._cache[next(iter(self._cache))]
        self._cache[url] = (now, html)
