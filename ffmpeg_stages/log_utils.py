"""
Logging utilities for safe log output.

Paths, raw tokens and filter expressions passed to the builder are
caller-provided and end up in debug logs, often as whole argument lists.
A value containing a newline or another control character could forge
log entries, so the record factory installed here escapes them before
formatting.

Install once at startup via install_safe_logging(), or call
configure_logging() to also attach a handler to the package logger.
"""

import logging
import re
from typing import Optional

from ffmpeg_stages.config import VALID_LOG_LEVELS, get_settings

PACKAGE_LOGGER = "ffmpeg_stages"

_ORIGINAL_FACTORY = logging.getLogRecordFactory()

_ESCAPES = {"\r\n": "\\r\\n", "\r": "\\r", "\n": "\\n", "\t": "\\t"}
_CONTROL_RE = re.compile(r"\r\n|[\x00-\x1f\x7f]")

logger = logging.getLogger(__name__)


def _escape(match: re.Match) -> str:
    char = match.group(0)
    escaped = _ESCAPES.get(char)
    if escaped is not None:
        return escaped
    return f"\\x{ord(char):02x}"


def _sanitize_value(value):
    """Escape control characters in strings, including inside lists and tuples."""
    if isinstance(value, str):
        return _CONTROL_RE.sub(_escape, value)
    if isinstance(value, list):
        return [_sanitize_value(v) for v in value]
    if isinstance(value, tuple):
        return tuple(_sanitize_value(v) for v in value)
    return value


def _safe_record_factory(*args, **kwargs):
    """LogRecord factory that sanitizes args to prevent log injection."""
    record = _ORIGINAL_FACTORY(*args, **kwargs)
    if record.args:
        if isinstance(record.args, dict):
            record.args = {k: _sanitize_value(v) for k, v in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(_sanitize_value(a) for a in record.args)
    return record


def install_safe_logging():
    """Install a global LogRecord factory that sanitizes all log arguments."""
    logging.setLogRecordFactory(_safe_record_factory)


def set_log_level(level: str) -> None:
    """Set the level of the package logger, falling back to INFO on bad names."""
    level_upper = level.upper()

    if level_upper not in VALID_LOG_LEVELS:
        logger.warning(f"Invalid log level '{level}', using INFO")
        level_upper = "INFO"

    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, level_upper))


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Set up package logging: safe records, one stream handler, a level.

    Calling it again replaces the handler instead of stacking another one.
    """
    install_safe_logging()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    package_logger.addHandler(handler)

    set_log_level(level or get_settings().log_level)
    return package_logger
