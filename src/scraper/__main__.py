from src.config.logger_config import logger
from src.config.settings import load_settings
from src.scraper.domain.rules import parse_exclude_prefixes, parse_wiki_page_configs
from src.scraper.scrape import run_aggregate

# python -m src.scraper
if __name__ == "__main__":
    settings = load_settings()
    result = run_aggregate(
        parse_wiki_page_configs(settings.wiki_pages),
        parse_exclude_prefixes(settings.exclude_prefixes),
        user_agent=settings.user_agent,
        timeout_seconds=settings.fetch_timeout_seconds,
    )
    print(result.text)
    logger.info("{}", result.summary)
