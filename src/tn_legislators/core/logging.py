"""Loguru logging configuration and log-safe formatting helpers.

Console output is human-readable by default and switches to one JSON object
per line when ``json_logs`` is set. Individual records can opt into JSON on a
text console by binding ``json_output=True``. A rotating file sink is added
when a ``log_dir`` is provided.
"""

import re
import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"
_LOG_FILE_NAME = "tn-legislators.log"

_ZIP_IN_TEXT = re.compile(r"\b(\d{5})(?:-\d{4})?\b")


def _wants_json(record: dict) -> bool:
    return bool(record["extra"].get("json_output", False))


def setup_logging(log_level: str = "INFO", log_dir: str | None = None, json_logs: bool = False) -> None:  # noqa: FBT001, FBT002
    """Configure Loguru sinks, replacing any existing ones.

    Args:
        log_level: Minimum log level to emit (case-insensitive).
        log_dir: Optional directory for log files.  When set, a rotating
            file sink is added (rotated every 24 hours, retained 7 days).
        json_logs: Serialize every console record as JSON.
    """
    level = log_level.upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=_LOG_FORMAT, filter=lambda r: not _wants_json(r))
        logger.add(sys.stderr, level=level, serialize=True, filter=_wants_json)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / _LOG_FILE_NAME,
            level=level,
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )


def redact_address(address: str) -> str:
    """Reduce a user-submitted address to its ZIP code for logging.

    >>> redact_address("123 Main St, 37203, Tennessee, USA")
    '<address in 37203>'
    """
    zips = _ZIP_IN_TEXT.findall(address or "")
    return f"<address in {zips[-1]}>" if zips else "<address>"
