# nse_ranker/errors.py — Exception hierarchy
from typing import Any


class RankerError(Exception):
    """Base error for the ranker."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SourceError(RankerError):
    """A quote/history provider failed for one symbol (network, bad status, bad payload).

    Always recoverable: the pipeline drops the symbol and carries on.
    """

    def __init__(self, symbol: str, message: str, details: dict[str, Any] | None = None):
        super().__init__(f"{symbol}: {message}", details)
        self.symbol = symbol


class ConfigurationError(RankerError):
    """Invalid pipeline input. Raised before any fetch is issued."""
