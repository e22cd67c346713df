import os
import sys
from pathlib import Path

from loguru import logger

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
log_dir = os.getenv("LOG_DIR")

logger.remove()
logger.add(sys.stderr, level=log_level)

if log_dir:
    logger.add(
        Path(log_dir) / "wiki_scraper_{time}.log",
        rotation="256 MB",  # 每個檔案滿 256MB 就切分
        retention="10 days",  # 只保留最近 10 天的日誌
        compression="zip",
        encoding="utf-8",
        level=log_level,
        enqueue=True,
    )
