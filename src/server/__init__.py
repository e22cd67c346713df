"""HTTP boundary for the wiki bash scraper."""

from src.server.app import create_app

__all__ = ["create_app"]
