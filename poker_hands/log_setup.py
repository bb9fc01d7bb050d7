"""
Logging configuration for the poker_hands logger
"""

import logging
from typing import Optional

LOGGER_NAME = "poker_hands"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """ログ設定をセットアップ"""
    poker_logger = logging.getLogger(LOGGER_NAME)
    poker_logger.setLevel(level)

    # 既存のハンドラーをクリア（重複を避けるため）
    poker_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    poker_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        poker_logger.addHandler(file_handler)

    return poker_logger
