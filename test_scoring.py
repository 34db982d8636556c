"""
Unit tests for the NSE Momentum Ranker.
Tests indicator, signal and scoring functions to prevent silent regressions.
Run: python -m pytest test_scoring.py -v
"""

import pytest
import numpy as np
import sys
import os

# Add parent dir to path
sys.path.insert(0, os.path.dirname(__file__))

from nse_ranker.composite import compute_score
from nse_ranker.config import CFG, TICKERS
from nse_ranker.indicators import compute_rsi
from nse_ranker.models import HistorySeries, SignalSet
from nse_ranker.signals import (
    compute_two_period_return,
    compute_volume_surge,
    extract_signals,
)
from nse_ranker.utils import _safe, _clean_series


EXAMPLE_CLOSES = [10, 10.5, 11, 10.8, 11.2, 11.5, 12, 12.3, 12.1,
                  12.5, 12.8, 13, 13.2, 13.5, 13.8]


# ═══════════════════════════════════════════════════
#  TEST: _safe / _clean_series utilities
# ═══════════════════════════════════════════════════

class TestSafe:
    def test_normal_value(self):
        assert _safe(42.0) == 42.0

    def test_numeric_string(self):
        assert _safe("3.5") == 3.5

    def test_none_returns_default(self):
        assert _safe(None) is None
        assert _safe(None, 0) == 0

    def test_nan_and_inf_return_default(self):
        assert _safe(float("nan")) is None
        assert _safe(float("inf")) is None

    def test_string_returns_default(self):
        assert _safe("not_a_number") is None


class TestCleanSeries:
    def test_drops_missing_and_non_numeric(self):
        assert _clean_series([1, None, "x", 2.5, float("nan")]) == [1.0, 2.5]

    def test_keeps_order(self):
        assert _clean_series([3, 1, 2]) == [3.0, 1.0, 2.0]

    def test_none_input(self):
        assert _clean_series(None) == []


# ═══════════════════════════════════════════════════
#  TEST: Wilder RSI
# ═══════════════════════════════════════════════════

class TestRSI:
    def test_insufficient_history_returns_none(self):
        assert compute_rsi(EXAMPLE_CLOSES[:14], 14) is None
        assert compute_rsi([], 14) is None

    def test_seed_only_example(self):
        # gains 4.2, losses 0.4 over 14 diffs → rs = 10.5
        rsi = compute_rsi(EXAMPLE_CLOSES, 14)
        assert rsi == pytest.approx(100 - 100 / 11.5, rel=1e-9)
        assert rsi == pytest.approx(91.304347826, rel=1e-9)

    def test_one_smoothing_step(self):
        # avg_gain = 0.3*13/14, avg_loss = (0.4/14*13 + 0.3)/14 → rs = 54.6/9.4
        rsi = compute_rsi(EXAMPLE_CLOSES + [13.5], 14)
        assert rsi == pytest.approx(85.3125, rel=1e-9)

    def test_not_a_simple_average_rsi(self):
        closes = EXAMPLE_CLOSES + [13.5]
        diffs = np.diff(closes)[-14:]
        gains, losses = diffs[diffs > 0].sum(), -diffs[diffs < 0].sum()
        sma_rsi = 100 - 100 / (1 + gains / losses)
        assert compute_rsi(closes, 14) != pytest.approx(sma_rsi, rel=1e-6)

    def test_all_gains_is_exactly_100(self):
        closes = [float(i) for i in range(1, 31)]
        assert compute_rsi(closes, 14) == 100.0

    def test_flat_series_is_100(self):
        assert compute_rsi([5.0] * 20, 14) == 100.0

    def test_all_losses_is_zero(self):
        closes = [float(i) for i in range(30, 0, -1)]
        assert compute_rsi(closes, 14) == pytest.approx(0.0)

    def test_range_on_random_walk(self):
        rng = np.random.default_rng(7)
        for _ in range(20):
            closes = (50 + np.cumsum(rng.normal(0, 1, 40))).tolist()
            rsi = compute_rsi(closes, 14)
            assert 0 <= rsi <= 100

    def test_custom_period(self):
        assert compute_rsi([1, 2, 3], 2) == 100.0
        assert compute_rsi([1, 2], 2) is None


# ═══════════════════════════════════════════════════
#  TEST: Signals
# ═══════════════════════════════════════════════════

class TestTwoPeriodReturn:
    def test_too_short_returns_none(self):
        assert compute_two_period_return([12, 10]) is None

    def test_basic(self):
        assert compute_two_period_return([10, 11, 12]) == pytest.approx(20.0)

    def test_window_is_len_minus_3_to_last(self):
        # closes[-3] = 20, closes[-1] = 22; the leading 10 and closes[-2] are ignored
        assert compute_two_period_return([10, 20, 11, 22]) == pytest.approx(10.0)

    def test_zero_close_returns_none(self):
        assert compute_two_period_return([0, 1, 2]) is None
        assert compute_two_period_return([1, 2, 0]) is None

    def test_negative_return(self):
        assert compute_two_period_return([20, 19, 18]) == pytest.approx(-10.0)


class TestVolumeSurge:
    def test_example(self):
        assert compute_volume_surge([100, 110, 90, 105, 95, 200]) == pytest.approx(2.0)

    def test_window_ends_one_before_last(self):
        assert compute_volume_surge([1000, 100, 110, 90, 105, 95, 200]) == pytest.approx(2.0)

    def test_too_short_returns_none(self):
        assert compute_volume_surge([100, 110, 90, 105, 200]) is None

    def test_zero_average_returns_none(self):
        assert compute_volume_surge([0, 0, 0, 0, 0, 200]) is None

    def test_zero_last_volume_returns_none(self):
        assert compute_volume_surge([100, 110, 90, 105, 95, 0]) is None


class TestExtractSignals:
    def test_short_history_keeps_independent_signals(self):
        sig = extract_signals(HistorySeries(closes=[12, 10],
                                            volumes=[100, 110, 90, 105, 95, 200]))
        assert sig.two_period_return is None
        assert sig.rsi is None
        assert sig.volume_surge == pytest.approx(2.0)

    def test_full_history(self):
        sig = extract_signals(HistorySeries(closes=EXAMPLE_CLOSES,
                                            volumes=[100, 110, 90, 105, 95, 200]))
        assert sig.two_period_return == pytest.approx((13.8 - 13.2) / 13.2 * 100)
        assert sig.rsi == pytest.approx(91.304347826, rel=1e-9)
        assert sig.volume_surge == pytest.approx(2.0)


# ═══════════════════════════════════════════════════
#  TEST: Composite Score
# ═══════════════════════════════════════════════════

class TestComposite:
    def test_all_terms_bullish(self):
        # 2 + (60-50)*0.5 + (2-1)*5 + (50-40)/50*2
        sig = SignalSet(two_period_return=2.0, rsi=60.0, volume_surge=2.0)
        assert compute_score(sig, 40.0, 50.0) == pytest.approx(12.4)

    def test_overbought_and_negative_return(self):
        # -3 + 15 - 5 (overbought) - 3 (negative return again) + 0 cheapness
        sig = SignalSet(two_period_return=-3.0, rsi=80.0)
        assert compute_score(sig, 50.0, 50.0) == pytest.approx(4.0)

    def test_weak_rsi_and_thin_volume(self):
        # -10 - 2.5 - 10 (weak) + 1.0 cheapness
        sig = SignalSet(rsi=30.0, volume_surge=0.5)
        assert compute_score(sig, 25.0, 50.0) == pytest.approx(-21.5)

    def test_no_signals_only_cheapness(self):
        assert compute_score(SignalSet(), 50.0, 50.0) == 0.0
        assert compute_score(SignalSet(), 10.0, 50.0) == pytest.approx(1.6)

    def test_cheapness_never_negative(self):
        assert compute_score(SignalSet(), 60.0, 50.0) == 0.0

    def test_cheapness_scales_with_cap(self):
        assert compute_score(SignalSet(), 50.0, 100.0) == pytest.approx(1.0)

    def test_rsi_band_edges_not_penalised(self):
        assert compute_score(SignalSet(rsi=75.0), 50.0, 50.0) == pytest.approx(12.5)
        assert compute_score(SignalSet(rsi=40.0), 50.0, 50.0) == pytest.approx(-5.0)


# ═══════════════════════════════════════════════════
#  TEST: Config Integrity
# ═══════════════════════════════════════════════════

class TestConfig:
    def test_default_cap(self):
        assert CFG["price_cap"] == 50

    def test_all_score_weights_present(self):
        for key in ["return_weight", "rsi_midpoint", "rsi_weight", "surge_weight",
                    "rsi_overbought", "rsi_weak", "rsi_band_penalty",
                    "negative_return_extra", "cheapness_weight"]:
            assert key in CFG["score"], f"Missing score weight '{key}'"

    def test_universe_keeps_duplicate(self):
        assert TICKERS.count("IDEA.NS") == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
