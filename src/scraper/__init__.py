"""Wiki bash scraping package."""

from src.scraper.domain.models import AggregateResult, AggregateSummary
from src.scraper.scrape import fetch_single, fetch_single_async, run_aggregate, run_aggregate_async

__all__ = [
    "AggregateResult",
    "AggregateSummary",
    "fetch_single",
    "fetch_single_async",
    "run_aggregate",
    "run_aggregate_async",
]
