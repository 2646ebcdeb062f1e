"""
Logging configuration for the n8n MCP server.

Writes rotating logs to $N8N_MCP_LOG_DIR/n8n_mcp.log (default ~/.n8n-mcp/logs).
The console handler writes to stderr; stdout is reserved for the MCP stdio
transport.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "n8n_mcp"
LOG_FILE_NAME = "n8n_mcp.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


def get_log_dir() -> Path:
    raw = os.getenv("N8N_MCP_LOG_DIR")
    if raw:
        return Path(raw).expanduser()
    return Path.home() / ".n8n-mcp" / "logs"


def _setup_file_logger(name: str, log_file: Path, level: int) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


def setup_logging() -> Path:
    """
    Configure logging for the n8n MCP server.

    Returns the path of the log file in use.
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, log_level, logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    _setup_file_logger(LOGGER_NAME, log_file, level)
    return log_file


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
