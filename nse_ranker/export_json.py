# nse_ranker/export_json.py — JSON export for consumers
import json, os
from nse_ranker.config import CFG, DISCLAIMER, RULES_SIGNALS
from nse_ranker.models import AnalysisReport, ScoredResult
from nse_ranker.utils import _safe


def _record(r: ScoredResult) -> dict:
    def safe(v):
        f = _safe(v)
        return None if f is None else round(f, 4)

    return {
        "symbol":       r.symbol,
        "last":         safe(r.last_price),
        "currency":     r.currency,
        "twoDayReturn": safe(r.two_period_return),
        "rsi":          safe(r.rsi),
        "volumeSurge":  safe(r.volume_surge),
        "score":        safe(r.score),
    }


def report_to_payload(report: AnalysisReport) -> dict:
    """Response document: run metadata, best pick, full ranking, rules and disclaimer."""
    return {
        "generatedAt":   report.generated_at.isoformat(),
        "universeSize":  report.universe_size,
        "eligibleCount": report.eligible_count,
        "best":          _record(report.best) if report.best is not None else None,
        "ranked":        [_record(r) for r in report.ranked],
        "rules": {
            "priceCap": report.price_cap,
            "signals":  list(RULES_SIGNALS),
        },
        "disclaimer":    DISCLAIMER,
    }


def export_json(report: AnalysisReport, json_path: str = None) -> str:
    json_path = json_path or CFG["output_file"]
    folder = os.path.dirname(json_path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(report_to_payload(report), f, separators=(",", ":"))
    print(f"✅  JSON → {json_path}  ({report.eligible_count} ranked)")
    return json_path
