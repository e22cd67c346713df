from typing import AsyncIterator

import aiohttp
from aiohttp import web

from src.config.logger_config import logger
from src.config.settings import ServerSettings
from src.scraper.application.ports import PageFetcherPort
from src.scraper.application.workflows.aggregate_pages import AggregatePagesWorkflow
from src.scraper.application.workflows.single_fetch import SingleFetchWorkflow
from src.scraper.domain.rules import parse_exclude_prefixes, parse_wiki_page_configs
from src.scraper.domain.types import DEFAULT_PAGE, DEFAULT_PROVIDER
from src.scraper.infrastructure.wiki_client import WikiPageClient
from src.scraper.scrape import build_session

SETTINGS_KEY = web.AppKey("settings", ServerSettings)
SESSION_KEY = web.AppKey("session", aiohttp.ClientSession)
AGGREGATE_KEY = web.AppKey("aggregate_workflow", AggregatePagesWorkflow)
SINGLE_FETCH_KEY = web.AppKey("single_fetch_workflow", SingleFetchWorkflow)

MISSING_PARAMS_MESSAGE = "Missing required params: owner, repo"
CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


@web.middleware
async def get_only_middleware(request: web.Request, handler) -> web.StreamResponse:
    # 只處理 GET 請求
    if request.method != "GET":
        return web.Response(status=405, text="Method Not Allowed")
    return await handler(request)


async def handle_bash(request: web.Request) -> web.Response:
    settings = request.app[SETTINGS_KEY]
    try:
        configs = parse_wiki_page_configs(settings.wiki_pages)
        exclude_prefixes = parse_exclude_prefixes(settings.exclude_prefixes)
        result = await request.app[AGGREGATE_KEY].run(request.app[SESSION_KEY], configs, exclude_prefixes)
    except Exception as exc:
        logger.exception("Batch request failed: {}", exc)
        return _error_response(exc)

    return web.Response(
        text=result.text,
        content_type="text/plain",
        charset="utf-8",
        headers={"Cache-Control": f"public, max-age={settings.cache_max_age}", **CORS_HEADERS},
    )


async def handle_fetch(request: web.Request) -> web.Response:
    """Single page lookup, e.g. ``/fetch?type=github&owner=user&repo=repo&page=Home``."""
    params = request.query
    provider = params.get("type") or DEFAULT_PROVIDER
    owner = params.get("owner")
    repo = params.get("repo")
    page = params.get("page") or DEFAULT_PAGE

    if not owner or not repo:
        return web.Response(status=400, text=MISSING_PARAMS_MESSAGE)

    exclude_prefixes = parse_exclude_prefixes(request.app[SETTINGS_KEY].exclude_prefixes)
    try:
        text = await request.app[SINGLE_FETCH_KEY].run(
            request.app[SESSION_KEY],
            provider,
            owner,
            repo,
            page,
            exclude_prefixes,
        )
    except Exception as exc:
        logger.error("Fetch failed for {}/{}/{}: {}", owner, repo, page, exc)
        return _error_response(exc)

    return web.Response(text=text, content_type="text/plain", charset="utf-8", headers=CORS_HEADERS)


async def handle_not_found(request: web.Request) -> web.Response:
    return web.Response(status=404, text="Not Found")


async def client_session_ctx(app: web.Application) -> AsyncIterator[None]:
    app[SESSION_KEY] = build_session()
    yield
    await app[SESSION_KEY].close()


def create_app(settings: ServerSettings, client: PageFetcherPort | None = None) -> web.Application:
    page_client = client or WikiPageClient(
        user_agent=settings.user_agent,
        timeout_seconds=settings.fetch_timeout_seconds,
    )
    app = web.Application(middlewares=[get_only_middleware])
    app[SETTINGS_KEY] = settings
    app[AGGREGATE_KEY] = AggregatePagesWorkflow(client=page_client)
    app[SINGLE_FETCH_KEY] = SingleFetchWorkflow(client=page_client)
    app.cleanup_ctx.append(client_session_ctx)

    app.router.add_get("/", handle_bash)
    app.router.add_get("/bash", handle_bash)
    app.router.add_get("/fetch", handle_fetch)
    app.router.add_route("*", "/{tail:.*}", handle_not_found)
    return app


def _error_response(exc: Exception) -> web.Response:
    return web.Response(status=500, text=f"Error: {exc}", content_type="text/plain")
