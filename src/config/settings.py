# 伺服器與抓取設定 (從環境變數 / .env 讀取)

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_USER_AGENT = "Wiki-Bash-Scraper/1.0"
DEFAULT_CACHE_MAX_AGE = 300


@dataclass(frozen=True)
class ServerSettings:
    wiki_pages: str = "[]"
    exclude_prefixes: str = ""
    host: str = "0.0.0.0"
    port: int = 8080
    cache_max_age: int = DEFAULT_CACHE_MAX_AGE
    user_agent: str = DEFAULT_USER_AGENT
    fetch_timeout_seconds: float | None = None


def load_settings() -> ServerSettings:
    load_dotenv()

    # 未設定時不加上 timeout，與原本行為一致
    timeout_raw = (os.getenv("FETCH_TIMEOUT_SECONDS") or "").strip()
    return ServerSettings(
        wiki_pages=os.getenv("WIKI_PAGES") or "[]",
        exclude_prefixes=os.getenv("EXCLUDE_PREFIXES", ""),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        cache_max_age=int(os.getenv("CACHE_MAX_AGE", str(DEFAULT_CACHE_MAX_AGE))),
        user_agent=os.getenv("USER_AGENT") or DEFAULT_USER_AGENT,
        fetch_timeout_seconds=float(timeout_raw) if timeout_raw else None,
    )
