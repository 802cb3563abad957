"""
Logging configuration for readtext.

Log records go to stderr through rich so they never mix with the
extracted text written to stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from readtext.config import Config

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Logging level name (defaults to READTEXT_LOG_LEVEL)
    """
    log_level = (log_level or Config.LOG_LEVEL).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    # Langfuse and its HTTP stack are chatty at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("langfuse").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging configured at {log_level}")
