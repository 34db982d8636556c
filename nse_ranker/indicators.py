"""
Technical indicators computed from a plain closing-price list.
"""
import numpy as np

from nse_ranker.config import CFG


def compute_rsi(closes, period: int = CFG["rsi_period"]) -> float | None:
    """
    Wilder's RSI.

    Seed:    simple mean of the first `period` gains and losses (diffs 1..period)
    Smooth:  avg = (avg * (period - 1) + current) / period for every later diff
    Result:  100 - 100 / (1 + avg_gain / avg_loss), or exactly 100 with no losses

    Returns None when there are fewer than period + 1 closes.
    """
    if len(closes) < period + 1:
        return None

    diffs = np.diff(np.asarray(closes, dtype=float)).tolist()
    gains, losses = 0.0, 0.0
    for diff in diffs[:period]:
        if diff >= 0:
            gains += diff
        else:
            losses -= diff
    avg_gain = gains / period
    avg_loss = losses / period

    # Order matters here: each step feeds the next
    for diff in diffs[period:]:
        gain = max(diff, 0.0)
        loss = max(-diff, 0.0)
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period

    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100 - 100 / (1 + rs)
