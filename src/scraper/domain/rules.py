import json
from typing import Any, Iterable

from src.scraper.domain.errors import ConfigError, UnsupportedProviderError
from src.scraper.domain.models import FetchTarget, WikiPageConfig
from src.scraper.domain.types import DEFAULT_PROVIDER


def build_primary_url(provider: str, owner: str, repo: str, page: str) -> str:
    if provider == "github":
        return f"https://raw.githubusercontent.com/wiki/{owner}/{repo}/{page}.md"
    if provider == "gitlab":
        return f"https://gitlab.com/{owner}/{repo}/-/wikis/{page}.md"
    raise UnsupportedProviderError(provider)


def build_fallback_url(provider: str, owner: str, repo: str, page: str) -> str | None:
    # 只有 GitHub 有備用的 wiki.git raw 路徑
    if provider == "github":
        return f"https://github.com/{owner}/{repo}.wiki.git/raw/master/{page}.md"
    return None


def expand_targets(configs: Iterable[WikiPageConfig]) -> list[FetchTarget]:
    return [
        FetchTarget(provider=config.provider, owner=config.owner, repo=config.repo, page=page)
        for config in configs
        for page in config.pages
    ]


def parse_exclude_prefixes(raw: str | None) -> list[str]:
    return [prefix.strip() for prefix in (raw or "").split(",") if prefix.strip()]


def parse_wiki_page_configs(raw: str | None) -> list[WikiPageConfig]:
    """Parse the ``WIKI_PAGES`` JSON array into page configs.

    Each entry looks like ``{"type": "github", "owner": "...", "repo": "...",
    "pages": ["Home", ...]}``. ``type`` falls back to ``github``; the value is
    not validated here so an unknown provider is reported per page at fetch time.
    """
    try:
        data: Any = json.loads(raw or "[]")
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid WIKI_PAGES JSON: {exc}") from exc

    if not isinstance(data, list):
        raise ConfigError("WIKI_PAGES must be a JSON array")

    configs: list[WikiPageConfig] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ConfigError(f"WIKI_PAGES[{index}] must be an object")
        for key in ("owner", "repo", "pages"):
            if key not in item:
                raise ConfigError(f"WIKI_PAGES[{index}] is missing '{key}'")
        pages = item["pages"]
        if not isinstance(pages, list):
            raise ConfigError(f"WIKI_PAGES[{index}].pages must be a list")
        configs.append(
            WikiPageConfig(
                provider=str(item.get("type") or DEFAULT_PROVIDER),
                owner=str(item["owner"]),
                repo=str(item["repo"]),
                pages=tuple(str(page) for page in pages),
            )
        )
    return configs
