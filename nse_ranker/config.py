# nse_ranker/config.py — Configuration, universe, score weights, constants

# ════════════════════════════════════════════════════════════
#  CONFIGURATION
# ════════════════════════════════════════════════════════════
CFG = {
    "price_cap":        50.0,    # INR for the default .NS universe
    "rsi_period":       14,
    "history_period":   "30d",   # 30 calendar days of daily bars covers RSI(14) + volume window
    "history_interval": "1d",
    "max_workers":      16,
    "fetch_timeout":    15,      # seconds, passed to the provider transport
    "call_timeout":     30,      # seconds, hard deadline per source call, counted from its start
    "stage_timeout":    120,     # seconds, floor for the last-resort cap on a whole fan-out stage
    "output_file":      "artifacts/nse_momentum.json",
    "score": {
        # ── Composite momentum weights ──────────────────────────────
        #  • 2-day return counted once, negative returns counted twice
        #  • RSI centred on 50, with extra penalty outside 40–75
        #  • Volume surge above 1.0x rewarded as breakout confirmation
        #  • Small bonus for cheaper names under the cap
        "return_weight":        1.0,
        "rsi_midpoint":         50.0,
        "rsi_weight":           0.5,
        "surge_weight":         5.0,
        "rsi_overbought":       75.0,
        "rsi_weak":             40.0,
        "rsi_band_penalty":     1.0,
        "negative_return_extra": 1.0,
        "cheapness_weight":     2.0,
    },
}
assert CFG["price_cap"] > 0, "Price cap must be positive"
assert CFG["rsi_period"] >= 1, "RSI period must be at least 1"
assert CFG["score"]["rsi_weak"] < CFG["score"]["rsi_overbought"], "RSI penalty band is inverted"

# Curated NSE tickers; filtered to the price cap via latest quote.
# IDEA.NS is listed twice on purpose; duplicates are processed as-is.
TICKERS = [
    "IDEA.NS", "SUZLON.NS", "JPPOWER.NS", "RENUKA.NS", "YESBANK.NS", "DISHTV.NS",
    "TV18BRDCST.NS", "ASHOKA.NS", "ALOKINDS.NS", "CGPOWER.NS", "TRIDENT.NS",
    "JPASSOCIAT.NS", "RPOWER.NS", "RBLBANK.NS", "UJJIVAN.NS", "PNCINFRA.NS",
    "SPICEJET.NS", "MRPL.NS", "IDEA.NS", "IBULHSGFIN.NS", "RECLTD.NS",
    "BANKBARODA.NS", "UCOBANK.NS", "SOBHA.NS", "RAIN.NS", "MOTHERSUMI.NS",
]

RULES_SIGNALS = [
    "2-day momentum",
    "RSI > 50 preference",
    "volume surge breakout",
]

DISCLAIMER = "This tool is for informational purposes only and is not financial advice."

# Minimum bars each signal needs before it is reported
MIN_BARS_RETURN = 3
MIN_BARS_SURGE  = 6
SURGE_WINDOW    = 5
