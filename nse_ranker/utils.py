# nse_ranker/utils.py — Shared utility functions
import numpy as np
import pandas as pd


def _safe(val, default=None):
    """Safely convert value to a finite float, returning default for None/NaN/inf/non-numeric."""
    if val is None or isinstance(val, bool):
        return default
    try:
        f = float(val)
    except (TypeError, ValueError):
        return default
    return f if np.isfinite(f) else default


def _clean_series(values) -> list[float]:
    """Coerce a raw feed column to floats, dropping missing/non-numeric entries.

    Entries are dropped in place, so two columns cleaned separately can end up
    misaligned if the feed has gaps at different bars.
    """
    if values is None:
        return []
    s = pd.to_numeric(pd.Series(list(values), dtype=object), errors="coerce")
    s = s.replace([np.inf, -np.inf], np.nan).dropna()
    return [float(v) for v in s.tolist()]
