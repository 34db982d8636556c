# nse_ranker/data_tickers.py — Universe loading
import os
import pandas as pd
from nse_ranker.config import TICKERS
from nse_ranker.errors import ConfigurationError


def load_universe(path: str = None) -> list:
    """
    Fixed ticker universe. With no path, the built-in NSE list.

    Accepts a CSV with a `ticker` or `symbol` column, or a plain file with
    one symbol per line. Order and duplicates are kept as written.
    """
    if path is None:
        return list(TICKERS)
    if not os.path.exists(path):
        raise ConfigurationError(f"universe file not found: {path}")

    with open(path, encoding="utf-8") as f:
        header = f.readline().strip().lower()
    cols = [c.strip() for c in header.split(",")]
    col = next((c for c in cols if c in ("ticker", "symbol")), None)

    if col is not None:
        raw = pd.read_csv(path, dtype=str)
        raw.columns = [c.strip().lower() for c in raw.columns]
        symbols = raw[col].dropna().astype(str).str.strip().tolist()
    else:
        with open(path, encoding="utf-8") as f:
            symbols = [line.strip() for line in f]
    symbols = [s for s in symbols if s and not s.startswith("#")]
    print(f"✅  {len(symbols)} tickers ({os.path.basename(path)})")
    return symbols
