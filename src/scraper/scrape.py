from __future__ import annotations

import asyncio
from typing import Sequence

import aiohttp

from src.config.settings import DEFAULT_USER_AGENT
from src.scraper.application.workflows.aggregate_pages import AggregatePagesWorkflow
from src.scraper.application.workflows.single_fetch import SingleFetchWorkflow
from src.scraper.domain.models import AggregateResult, WikiPageConfig
from src.scraper.domain.types import DEFAULT_PAGE, DEFAULT_PROVIDER
from src.scraper.infrastructure.wiki_client import WikiPageClient


def build_session() -> aiohttp.ClientSession:
    connector = aiohttp.TCPConnector(limit=0, ttl_dns_cache=300)
    return aiohttp.ClientSession(connector=connector)


async def run_aggregate_async(
    configs: Sequence[WikiPageConfig],
    exclude_prefixes: Sequence[str] = (),
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout_seconds: float | None = None,
) -> AggregateResult:
    client = WikiPageClient(user_agent=user_agent, timeout_seconds=timeout_seconds)
    workflow = AggregatePagesWorkflow(client=client)
    async with build_session() as session:
        return await workflow.run(session, configs, exclude_prefixes)


def run_aggregate(
    configs: Sequence[WikiPageConfig],
    exclude_prefixes: Sequence[str] = (),
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout_seconds: float | None = None,
) -> AggregateResult:
    return asyncio.run(
        run_aggregate_async(
            configs,
            exclude_prefixes,
            user_agent=user_agent,
            timeout_seconds=timeout_seconds,
        )
    )


async def fetch_single_async(
    owner: str,
    repo: str,
    page: str = DEFAULT_PAGE,
    provider: str = DEFAULT_PROVIDER,
    exclude_prefixes: Sequence[str] = (),
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout_seconds: float | None = None,
) -> str:
    client = WikiPageClient(user_agent=user_agent, timeout_seconds=timeout_seconds)
    workflow = SingleFetchWorkflow(client=client)
    async with build_session() as session:
        return await workflow.run(session, provider, owner, repo, page, exclude_prefixes)


def fetch_single(
    owner: str,
    repo: str,
    page: str = DEFAULT_PAGE,
    provider: str = DEFAULT_PROVIDER,
    exclude_prefixes: Sequence[str] = (),
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout_seconds: float | None = None,
) -> str:
    return asyncio.run(
        fetch_single_async(
            owner,
            repo,
            page,
            provider,
            exclude_prefixes,
            user_agent=user_agent,
            timeout_seconds=timeout_seconds,
        )
    )
