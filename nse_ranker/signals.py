# nse_ranker/signals.py — Per-symbol technical signals from a daily history
from nse_ranker.config import CFG, MIN_BARS_RETURN, MIN_BARS_SURGE, SURGE_WINDOW
from nse_ranker.indicators import compute_rsi
from nse_ranker.models import HistorySeries, SignalSet


def compute_two_period_return(closes: list) -> float | None:
    """% change from closes[-3] to closes[-1].

    Labelled "2-day return": it spans two bars back from the latest close,
    i.e. three samples. Keep the window as is.
    """
    if len(closes) < MIN_BARS_RETURN:
        return None
    c0 = closes[-3]
    c1 = closes[-1]
    if not c0 or not c1:
        return None
    return (c1 - c0) / c0 * 100


def compute_volume_surge(volumes: list) -> float | None:
    """Latest volume / mean of the 5 volumes before it."""
    if len(volumes) < MIN_BARS_SURGE:
        return None
    recent_avg = sum(volumes[-(SURGE_WINDOW + 1):-1]) / SURGE_WINDOW
    last_vol = volumes[-1]
    if recent_avg > 0 and last_vol:
        return last_vol / recent_avg
    return None


def extract_signals(history: HistorySeries) -> SignalSet:
    # each signal is independent; a short series only blanks the ones it can't feed
    return SignalSet(
        two_period_return=compute_two_period_return(history.closes),
        rsi=compute_rsi(history.closes, CFG["rsi_period"]),
        volume_surge=compute_volume_surge(history.volumes),
    )
