# nse_ranker/pipeline.py — Main orchestration
import math
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from concurrent.futures import TimeoutError as FuturesTimeout
from datetime import datetime, timezone
from numbers import Real
from typing import Callable
from tqdm import tqdm
from nse_ranker.composite import compute_score
from nse_ranker.config import CFG, TICKERS
from nse_ranker.data_yahoo import fetch_history, fetch_quote
from nse_ranker.errors import ConfigurationError, SourceError
from nse_ranker.models import (
    AnalysisReport, HistorySeries, Quote, ScoredResult, SymbolOutcome,
)
from nse_ranker.signals import extract_signals
from nse_ranker.utils import _safe


def _validate(universe, price_cap, max_workers, stage_timeout, call_timeout):
    if isinstance(universe, (str, bytes)) or not isinstance(universe, (list, tuple)):
        raise ConfigurationError("universe must be a list of symbols",
                                 details={"type": type(universe).__name__})
    bad = [s for s in universe if not isinstance(s, str) or not s.strip()]
    if bad:
        raise ConfigurationError(f"universe has {len(bad)} invalid symbol(s)",
                                 details={"invalid": bad})
    if (isinstance(price_cap, bool) or not isinstance(price_cap, Real)
            or not math.isfinite(price_cap) or price_cap <= 0):
        raise ConfigurationError(f"price cap must be a positive number, got {price_cap!r}")
    if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
        raise ConfigurationError(f"max_workers must be a positive integer, got {max_workers!r}")
    if (isinstance(stage_timeout, bool) or not isinstance(stage_timeout, Real)
            or not stage_timeout > 0):
        raise ConfigurationError(f"stage_timeout must be positive, got {stage_timeout!r}")
    if (isinstance(call_timeout, bool) or not isinstance(call_timeout, Real)
            or not call_timeout > 0):
        raise ConfigurationError(f"call_timeout must be positive, got {call_timeout!r}")


def _stage_deadline(n: int, max_workers: int, call_timeout: float,
                    stage_timeout: float) -> float:
    """Last-resort cap for a whole stage.

    Never shorter than the time the queue needs when every call uses its full
    per-call deadline, so a queued symbol is not cut off by slower neighbours.
    """
    rounds = math.ceil(n / max(1, min(max_workers, n)))
    return max(stage_timeout, rounds * call_timeout + 1.0)


def _fan_out(task: Callable, symbols: list, desc: str,
             max_workers: int, timeout: float) -> list:
    """Run task(item) for every item (symbol or Quote) in parallel and wait for all of them.

    Returns (index, SymbolOutcome) pairs in completion order. Tasks still
    running when the stage deadline passes come last, dropped.
    """
    if not symbols:
        return []
    done = {}
    executor = ThreadPoolExecutor(max_workers=min(max_workers, len(symbols)))
    futures = {executor.submit(task, sym): i for i, sym in enumerate(symbols)}
    try:
        for future in tqdm(as_completed(futures, timeout=timeout),
                           total=len(futures), desc=desc):
            done[futures[future]] = future.result()
    except FuturesTimeout:
        print(f"  ⚠️  {desc}: {len(futures) - len(done)} task(s) unfinished after "
              f"{timeout:g}s stage deadline, dropping them")
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    out = list(done.items())
    for i, item in enumerate(symbols):
        if i not in done:
            out.append((i, SymbolOutcome.dropped(getattr(item, "symbol", item),
                                                 "stage deadline passed")))
    return out


def _call_with_deadline(source: Callable, symbol: str, timeout: float):
    """source(symbol) on its own daemon thread; SourceError if it outlives `timeout`.

    The clock starts when the call starts, not when the symbol was queued.
    An abandoned call keeps running in the background and its result is discarded.
    """
    box = {}

    def target():
        try:
            box["value"] = source(symbol)
        except Exception as e:
            box["error"] = e

    worker = threading.Thread(target=target, name=f"fetch-{symbol}", daemon=True)
    worker.start()
    worker.join(timeout)
    if worker.is_alive():
        raise SourceError(symbol, f"timed out after {timeout:g}s")
    if "error" in box:
        raise box["error"]
    return box["value"]


def _drop_reason(stage: str, e: Exception) -> str:
    if isinstance(e, SourceError):
        return f"{stage}: {e.message}"
    return f"{stage}: {type(e).__name__}: {e}"


# Transport-level failures from any source count as a failed fetch
_FETCH_ERRORS = (SourceError, OSError)


def _quote_task(quote_source: Callable, call_timeout: float) -> Callable:
    def run(symbol: str) -> SymbolOutcome:
        try:
            quote: Quote = _call_with_deadline(quote_source, symbol, call_timeout)
        except _FETCH_ERRORS as e:
            return SymbolOutcome.dropped(symbol, _drop_reason("quote", e))
        return SymbolOutcome(symbol=symbol, value=quote)
    return run


def _history_task(history_source: Callable, price_cap: float,
                  call_timeout: float) -> Callable:
    def run(quote: Quote) -> SymbolOutcome:
        try:
            history: HistorySeries = _call_with_deadline(history_source, quote.symbol,
                                                         call_timeout)
        except _FETCH_ERRORS as e:
            return SymbolOutcome.dropped(quote.symbol, _drop_reason("history", e))
        signals = extract_signals(history)
        result = ScoredResult(
            symbol=quote.symbol,
            last_price=quote.last_price,
            currency=quote.currency,
            two_period_return=signals.two_period_return,
            rsi=signals.rsi,
            volume_surge=signals.volume_surge,
            score=compute_score(signals, quote.last_price, price_cap),
        )
        return SymbolOutcome(symbol=quote.symbol, value=result)
    return run


def _eligibility(outcome: SymbolOutcome, price_cap: float) -> str:
    """Empty string when eligible, otherwise the drop reason."""
    if not outcome.ok:
        return outcome.reason
    last = _safe(outcome.value.last_price)
    if last is None:
        return "quote: no numeric price"
    if last > price_cap:
        return f"price {last:.2f} above cap {price_cap:g}"
    return ""


def run_pipeline(universe: list = None,
                 price_cap: float = None,
                 quote_source: Callable = None,
                 history_source: Callable = None,
                 max_workers: int = None,
                 stage_timeout: float = None,
                 call_timeout: float = None) -> AnalysisReport:
    universe       = list(TICKERS) if universe is None else universe
    price_cap      = CFG["price_cap"] if price_cap is None else price_cap
    quote_source   = quote_source or fetch_quote
    history_source = history_source or fetch_history
    max_workers    = CFG["max_workers"] if max_workers is None else max_workers
    stage_timeout  = CFG["stage_timeout"] if stage_timeout is None else stage_timeout
    call_timeout   = CFG["call_timeout"] if call_timeout is None else call_timeout
    _validate(universe, price_cap, max_workers, stage_timeout, call_timeout)

    print("=" * 65)
    print(f"  NSE MOMENTUM RANKER — price cap {price_cap:g}")
    print(f"  {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print("=" * 65)
    dropped = []

    # 1. Quotes (parallel), every fetch settles before filtering
    print(f"\n[1/3]  Quotes ({len(universe)} tickers, parallel)...")
    deadline = _stage_deadline(len(universe), max_workers, call_timeout, stage_timeout)
    quotes = sorted(_fan_out(_quote_task(quote_source, call_timeout), universe, "Quotes",
                             max_workers, deadline), key=lambda p: p[0])

    # 2. Price filter
    eligible = []
    for _, outcome in quotes:
        reason = _eligibility(outcome, price_cap)
        if reason:
            dropped.append(SymbolOutcome.dropped(outcome.symbol, reason))
        else:
            eligible.append(outcome.value)
    print(f"  Price filter: {len(universe)} → {len(eligible)} "
          f"(removed {len(universe) - len(eligible)})")

    # 3. History + signals + score (parallel)
    print(f"\n[2/3]  History + scoring ({len(eligible)} tickers, parallel)...")
    results = []
    deadline = _stage_deadline(len(eligible), max_workers, call_timeout, stage_timeout)
    scored = _fan_out(_history_task(history_source, price_cap, call_timeout), eligible,
                      "History", max_workers, deadline)
    for _, outcome in scored:
        if outcome.ok:
            results.append(outcome.value)
        else:
            dropped.append(outcome)
    for d in dropped:
        print(f"  ⚠️  {d.symbol} dropped — {d.reason}")

    # 4. Rank: stable, so equal scores keep completion order
    print("\n[3/3]  Ranking...")
    ranked = sorted(results, key=lambda r: r.score, reverse=True)
    best = ranked[0] if ranked else None
    if best is not None:
        print(f"  ✅  Top pick: {best.symbol} (score {best.score:.2f})")
    else:
        print("  ⚠️  No symbol could be scored")

    return AnalysisReport(
        generated_at=datetime.now(timezone.utc),
        universe_size=len(universe),
        eligible_count=len(ranked),
        best=best,
        ranked=ranked,
        price_cap=float(price_cap),
        dropped=dropped,
    )
