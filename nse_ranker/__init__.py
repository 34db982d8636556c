# nse_ranker/__init__.py — NSE sub-₹50 Momentum Ranker v1.2
#
# Ranks a fixed ticker universe by a short-term momentum composite,
# restricted to names whose latest quote is at or under the price cap.
# Import anything directly: `from nse_ranker import run_pipeline, CFG`
#
# Module layout:
#   config.py        — CFG, universe, score weights, output rules
#   errors.py        — RankerError / SourceError / ConfigurationError
#   models.py        — Quote, HistorySeries, SignalSet, ScoredResult, AnalysisReport
#   utils.py         — _safe(), _clean_series() shared helpers
#   data_yahoo.py    — Yahoo Finance quote + daily history sources
#   data_tickers.py  — Universe loading from a symbols file
#   indicators.py    — Wilder RSI
#   signals.py       — 2-day return, RSI, volume surge
#   composite.py     — Composite momentum score
#   pipeline.py      — Main orchestration (run_pipeline)
#   summary.py       — Console summary output
#   export_json.py   — JSON export for consumers

__version__ = "1.2"

from nse_ranker.config import CFG, TICKERS
from nse_ranker.errors import ConfigurationError, RankerError, SourceError
from nse_ranker.models import (
    AnalysisReport,
    HistorySeries,
    Quote,
    ScoredResult,
    SignalSet,
    SymbolOutcome,
)
from nse_ranker.pipeline import run_pipeline
