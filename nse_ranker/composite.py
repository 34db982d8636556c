# nse_ranker/composite.py — Composite momentum scoring
from nse_ranker.config import CFG
from nse_ranker.models import SignalSet


def compute_score(signals: SignalSet, last_price: float, price_cap: float,
                  weights: dict = None) -> float:
    """
    Linear momentum composite. Each term only applies when its signal exists.

      + 2-day return                       (x1.0)
      + (RSI - 50) * 0.5                   favour RSI > 50, penalise < 50
      + (volume surge - 1) * 5             boost breakouts
      - max(0, RSI - 75)                   avoid overbought extremes
      - max(0, 40 - RSI)                   avoid weak names
      + min(0, 2-day return)               negative return counted twice
      + max(0, (cap - last) / cap) * 2     slight edge to cheaper names

    No fixed range: the score is only a ranking key.
    """
    if weights is None:
        weights = CFG["score"]
    ret, rsi, surge = signals.two_period_return, signals.rsi, signals.volume_surge

    score = 0.0
    if ret is not None:
        score += ret * weights["return_weight"]
    if rsi is not None:
        score += (rsi - weights["rsi_midpoint"]) * weights["rsi_weight"]
    if surge is not None:
        score += (surge - 1) * weights["surge_weight"]
    if rsi is not None and rsi > weights["rsi_overbought"]:
        score -= (rsi - weights["rsi_overbought"]) * weights["rsi_band_penalty"]
    if rsi is not None and rsi < weights["rsi_weak"]:
        score -= (weights["rsi_weak"] - rsi) * weights["rsi_band_penalty"]
    if ret is not None and ret < 0:
        score += ret * weights["negative_return_extra"]
    score += max(0.0, (price_cap - last_price) / price_cap) * weights["cheapness_weight"]
    return score
