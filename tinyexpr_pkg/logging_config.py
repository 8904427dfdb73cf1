"""Structured logging configuration for tinyexpr.

Log calls about a particular input pass it as ``extra={"expression": ...}``;
the formatter appends it, shortened, after the message.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

# Longest expression excerpt written into a log line
MAX_LOGGED_EXPRESSION = 80


def shorten_expression(expression: str, limit: int = MAX_LOGGED_EXPRESSION) -> str:
    """Return ``expression`` cut to ``limit`` characters with a trailing ellipsis."""
    if len(expression) <= limit:
        return expression
    return expression[: limit - 3] + "..."


class StructuredFormatter(logging.Formatter):
    """Render ``timestamp [LEVEL] logger: message`` with optional expression context."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat(timespec="milliseconds")
        parts = [f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"]
        expression = getattr(record, "expression", None)
        if expression is not None:
            parts.append(f" (expression={shorten_expression(expression)!r})")
        if record.exc_info:
            parts.append("\n" + self.formatException(record.exc_info))
        return "".join(parts)


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """Configure the ``tinyexpr`` logger tree.

    Args:
        level: Logging level name; unknown names fall back to WARNING
        log_file: Optional file that receives the same records as stderr

    Returns:
        The configured ``tinyexpr`` root logger
    """
    root = logging.getLogger("tinyexpr")
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    # Repeated CLI invocations in one process must not stack handlers
    root.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    formatter = StructuredFormatter()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return the ``tinyexpr.<name>`` child logger for a module."""
    return logging.getLogger(f"tinyexpr.{name}")
