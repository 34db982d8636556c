# nse_ranker/models.py — Per-run data records
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Quote:
    symbol: str
    last_price: float | None
    currency: str | None = None


@dataclass
class HistorySeries:
    closes: list[float]
    volumes: list[float]


@dataclass
class SignalSet:
    two_period_return: float | None = None
    rsi: float | None = None
    volume_surge: float | None = None


@dataclass
class ScoredResult:
    symbol: str
    last_price: float
    currency: str | None
    two_period_return: float | None
    rsi: float | None
    volume_surge: float | None
    score: float


@dataclass
class SymbolOutcome:
    """Tagged result of one symbol's work: `value` on success, `reason` when dropped."""

    symbol: str
    value: Any = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.reason

    @classmethod
    def dropped(cls, symbol: str, reason: str) -> "SymbolOutcome":
        return cls(symbol=symbol, value=None, reason=reason)


@dataclass
class AnalysisReport:
    generated_at: datetime
    universe_size: int
    eligible_count: int
    best: ScoredResult | None
    ranked: list[ScoredResult]
    price_cap: float
    dropped: list[SymbolOutcome] = field(default_factory=list)
