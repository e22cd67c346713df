"""Domain models and deterministic rules for wiki scraping."""

from src.scraper.domain.errors import ConfigError, FetchError, UnsupportedProviderError, WikiScraperError
from src.scraper.domain.extraction import extract_bash_blocks, filter_by_prefix
from src.scraper.domain.models import AggregateResult, AggregateSummary, FetchOutcome, FetchTarget, WikiPageConfig
from src.scraper.domain.rules import (
    build_fallback_url,
    build_primary_url,
    expand_targets,
    parse_exclude_prefixes,
    parse_wiki_page_configs,
)

__all__ = [
    "AggregateResult",
    "AggregateSummary",
    "build_fallback_url",
    "build_primary_url",
    "ConfigError",
    "expand_targets",
    "extract_bash_blocks",
    "FetchError",
    "FetchOutcome",
    "FetchTarget",
    "filter_by_prefix",
    "parse_exclude_prefixes",
    "parse_wiki_page_configs",
    "UnsupportedProviderError",
    "WikiPageConfig",
    "WikiScraperError",
]
