from typing import Sequence

import aiohttp

from src.config.logger_config import logger
from src.scraper.application.ports import PageFetcherPort
from src.scraper.domain.extraction import extract_bash_blocks, filter_by_prefix


class SingleFetchWorkflow:
    """Fetch one wiki page and return its filtered bash blocks.

    Errors from the client propagate unchanged; there is no labeling and no
    error aggregation here.
    """

    def __init__(self, client: PageFetcherPort) -> None:
        self.client = client

    async def run(
        self,
        session: aiohttp.ClientSession,
        provider: str,
        owner: str,
        repo: str,
        page: str,
        exclude_prefixes: Sequence[str],
    ) -> str:
        content = await self.client.fetch_page(session, provider, owner, repo, page)
        blocks = filter_by_prefix(extract_bash_blocks(content), exclude_prefixes)
        logger.info("Fetched {}/{}/{}: {} bash blocks", owner, repo, page, len(blocks))
        return "\n".join(blocks)
