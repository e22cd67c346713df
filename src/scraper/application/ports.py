from typing import Protocol, runtime_checkable

import aiohttp


@runtime_checkable
class PageFetcherPort(Protocol):
    async def fetch_page(
        self,
        session: aiohttp.ClientSession,
        provider: str,
        owner: str,
        repo: str,
        page: str,
    ) -> str: ...
    """Return the raw Markdown source of one wiki page or raise."""
