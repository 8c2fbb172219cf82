"""
Logging configuration for the asset ledger engine.

Provides consistent logging format across all modules with:
- JSON line output for production
- Human-readable output for development
- Transaction ID tracking so lines from one host invocation correlate
"""

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime

# Ledger transaction ID of the invocation currently being served
current_tx_id: ContextVar[str | None] = ContextVar("current_tx_id", default=None)

HUMAN_FORMAT = "%(timestamp)s | %(levelname)-8s | %(name)s | %(tx_id)s%(message)s"


class LedgerFormatter(logging.Formatter):
    """
    Human-readable formatter.

    Includes timestamp, level, module, tx_id (if set), and message.
    """

    def format(self, record: logging.LogRecord) -> str:
        record.timestamp = datetime.now(UTC).isoformat()

        tx_id = current_tx_id.get()
        record.tx_id = f"[{tx_id}] " if tx_id else ""

        return super().format(record)


class JSONLineFormatter(logging.Formatter):
    """Formatter emitting one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "tx_id": current_tx_id.get(),
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> logging.Logger:
    """
    Configure logging for the asset ledger engine.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the configured log_level.
        json_output: If True, output JSON lines. Defaults to the configured log_json.

    Returns:
        Configured root logger
    """
    if level is None or json_output is None:
        from asset_ledger.config import get_settings

        settings = get_settings()
        level = level if level is not None else settings.log_level
        json_output = json_output if json_output is not None else settings.log_json

    root = logging.getLogger()
    root.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)

    formatter: logging.Formatter
    if json_output:
        formatter = JSONLineFormatter()
    else:
        formatter = LedgerFormatter(HUMAN_FORMAT)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_tx_id(tx_id: str) -> None:
    """Set the current transaction ID for log correlation."""
    current_tx_id.set(tx_id)


def clear_tx_id() -> None:
    """Clear the current transaction ID."""
    current_tx_id.set(None)


@contextmanager
def transaction_scope(tx_id: str) -> Iterator[None]:
    """
    Tag every log line emitted inside the block with a transaction ID.

    The previous ID is restored on exit, so scopes may nest.
    """
    token = current_tx_id.set(tx_id)
    try:
        yield
    finally:
        current_tx_id.reset(token)
