# nse_ranker/summary.py — Console summary output
from dataclasses import asdict
import pandas as pd
from nse_ranker.models import AnalysisReport


def report_to_frame(report: AnalysisReport) -> pd.DataFrame:
    cols = ["rank", "symbol", "last_price", "currency", "two_period_return",
            "rsi", "volume_surge", "score"]
    if not report.ranked:
        return pd.DataFrame(columns=cols)
    df = pd.DataFrame([asdict(r) for r in report.ranked])
    df.insert(0, "rank", range(1, len(df) + 1))
    return df[cols]


def print_summary(report: AnalysisReport, top: int = 20):
    print("\n" + "=" * 65)
    print(f"  TOP {top} UNDER {report.price_cap:g}")
    print("=" * 65)
    print(f"  Universe: {report.universe_size}   Scored: {report.eligible_count}   "
          f"Dropped: {len(report.dropped)}")
    df = report_to_frame(report)
    if df.empty:
        print("  (no eligible symbols)")
    else:
        print(df.head(top).round(2).to_string(index=False))

    if report.best is not None:
        b = report.best
        print(f"\n  BEST PICK: {b.symbol} @ {b.last_price:.2f} {b.currency or ''}".rstrip())
        print(f"  score={b.score:.2f}")
