class WikiScraperError(Exception):
    """Base error for wiki page fetching and extraction."""


class UnsupportedProviderError(WikiScraperError):
    def __init__(self, provider: str) -> None:
        super().__init__(f"Unsupported type: {provider}")
        self.provider = provider


class FetchError(WikiScraperError):
    def __init__(self, message: str, status: int | None = None, reason: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.reason = reason

    @classmethod
    def from_status(cls, status: int, reason: str | None) -> "FetchError":
        return cls(f"HTTP {status}: {reason or ''}", status=status, reason=reason)


class ConfigError(WikiScraperError, ValueError):
    """Raised when the wiki page configuration cannot be parsed."""
