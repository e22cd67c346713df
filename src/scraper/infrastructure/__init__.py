"""Infrastructure adapters for wiki scraping."""

from src.scraper.infrastructure.wiki_client import WikiPageClient

__all__ = ["WikiPageClient"]
