# nse_ranker/data_yahoo.py — Yahoo Finance quote + daily history sources
import pandas as pd
import yfinance as yf
from nse_ranker.config import CFG
from nse_ranker.errors import SourceError
from nse_ranker.models import HistorySeries, Quote
from nse_ranker.utils import _safe, _clean_series


def fetch_quote(symbol: str, timeout: float = None) -> Quote:
    """Latest trade price + currency. A non-numeric price comes back as None, not an error.

    Read from a short daily chart so the request honours `timeout`: the chart
    metadata carries regularMarketPrice + currency, the last Close is the fallback.
    """
    timeout = timeout or CFG["fetch_timeout"]
    try:
        ticker = yf.Ticker(symbol)
        hist = ticker.history(period="5d", interval="1d", auto_adjust=False,
                              timeout=timeout, raise_errors=True)
        meta = ticker.get_history_metadata() or {}
    except Exception as e:
        raise SourceError(symbol, f"quote fetch failed: {e}") from e

    last = _safe(meta.get("regularMarketPrice"))
    if last is None and hist is not None and "Close" in hist.columns:
        closes = _clean_series(hist["Close"])
        last = closes[-1] if closes else None
    return Quote(symbol=symbol, last_price=last, currency=meta.get("currency") or None)


def fetch_history(symbol: str,
                  period: str = None,
                  interval: str = None,
                  timeout: float = None) -> HistorySeries:
    """Daily closes and volumes, oldest first, over the configured window."""
    period   = period   or CFG["history_period"]
    interval = interval or CFG["history_interval"]
    timeout  = timeout  or CFG["fetch_timeout"]
    try:
        hist = yf.Ticker(symbol).history(period=period, interval=interval,
                                         auto_adjust=False, timeout=timeout,
                                         raise_errors=True)
    except Exception as e:
        raise SourceError(symbol, f"history fetch failed: {e}") from e

    if hist is None or hist.empty:
        raise SourceError(symbol, "history fetch returned no rows")
    missing = [c for c in ("Close", "Volume") if c not in hist.columns]
    if missing:
        raise SourceError(symbol, f"history payload missing columns {missing}",
                          details={"columns": list(hist.columns)})

    if isinstance(hist.index, pd.DatetimeIndex):
        hist = hist.sort_index()
    # Each column is cleaned on its own; gaps are not re-paired across columns
    return HistorySeries(closes=_clean_series(hist["Close"]),
                         volumes=_clean_series(hist["Volume"]))
