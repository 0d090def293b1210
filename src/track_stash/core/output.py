"""
Logging output using Loguru.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def setup_loguru(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    console_output: bool = True,
) -> None:
    """
    Configure loguru sinks for the server process.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path for a rotating file sink
        console_output: Whether to log to stderr
    """
    # Remove default handler
    logger.remove()

    if console_output:
        logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention=5,  # Keep 5 backup files
            level=level,
            format=LOG_FORMAT,
            enqueue=False,
        )

    logger.info(f"Loguru initialized (level={level}, file={log_file or 'none'})")


def mask_token(token: Optional[str], visible: int = 6) -> str:
    """Shorten a bearer token for log output."""
    if not token:
        return "<none>"
    if len(token) <= visible:
        return "*" * len(token)
    return f"{token[:visible]}..."
