import asyncio

import aiohttp
from aiohttp import ClientError

from src.config.logger_config import logger
from src.config.settings import DEFAULT_USER_AGENT
from src.scraper.domain.errors import FetchError
from src.scraper.domain.rules import build_fallback_url, build_primary_url


class WikiPageClient:
    """Fetch raw Markdown sources of GitHub / GitLab wiki pages."""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout_seconds: float | None = None,
    ) -> None:
        self.user_agent = user_agent
        self.timeout_seconds = timeout_seconds

    async def fetch_page(
        self,
        session: aiohttp.ClientSession,
        provider: str,
        owner: str,
        repo: str,
        page: str,
    ) -> str:
        # 不支援的 provider 直接失敗，不發出請求
        primary_url = build_primary_url(provider, owner, repo, page)
        headers = {"User-Agent": self.user_agent, "Accept": "text/plain"}

        try:
            status, reason, body = await self._get(session, primary_url, headers)
        except (ClientError, asyncio.TimeoutError) as exc:
            logger.error("Request failed for {}: {}", primary_url, exc)
            raise FetchError(str(exc) or type(exc).__name__) from exc

        if self._is_success(status):
            return body

        fallback_url = build_fallback_url(provider, owner, repo, page)
        if fallback_url is not None:
            logger.warning("HTTP {} for {}. Trying fallback {}", status, primary_url, fallback_url)
            fallback_body = await self._fetch_fallback(session, fallback_url)
            if fallback_body is not None:
                return fallback_body

        logger.error("HTTP {} {} for {}/{}/{}", status, reason, owner, repo, page)
        raise FetchError.from_status(status, reason)

    async def _fetch_fallback(self, session: aiohttp.ClientSession, url: str) -> str | None:
        try:
            status, _, body = await self._get(session, url, {"User-Agent": self.user_agent})
        except (ClientError, asyncio.TimeoutError) as exc:
            logger.warning("Fallback request failed for {}: {}", url, exc)
            return None
        if self._is_success(status):
            return body
        logger.warning("Fallback HTTP {} for {}", status, url)
        return None

    async def _get(
        self,
        session: aiohttp.ClientSession,
        url: str,
        headers: dict[str, str],
    ) -> tuple[int, str | None, str]:
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        logger.debug("GET {}", url)
        async with session.get(url, headers=headers, timeout=timeout) as resp:
            if not self._is_success(resp.status):
                return resp.status, resp.reason, ""
            return resp.status, resp.reason, await resp.text(errors="replace")

    @staticmethod
    def _is_success(status: int) -> bool:
        return 200 <= status < 300
