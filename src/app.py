from aiohttp import web

from src.config.logger_config import logger
from src.config.settings import load_settings
from src.server.app import create_app


def main():
    settings = load_settings()
    logger.info("Starting wiki bash scraper on {}:{}", settings.host, settings.port)
    web.run_app(create_app(settings), host=settings.host, port=settings.port, print=None)


# python -m src.app
if __name__ == "__main__":
    main()
