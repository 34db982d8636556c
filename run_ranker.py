"""Run the NSE momentum ranker once: fetch, score, print the table and write the JSON."""
import argparse
import sys

from nse_ranker.config import CFG
from nse_ranker.data_tickers import load_universe
from nse_ranker.errors import ConfigurationError
from nse_ranker.export_json import export_json
from nse_ranker.pipeline import run_pipeline
from nse_ranker.summary import print_summary


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Rank sub-cap NSE tickers by short-term momentum.")
    parser.add_argument("--price-cap", type=float, default=CFG["price_cap"])
    parser.add_argument("--universe-file", default=None,
                        help="CSV with a ticker/symbol column, or one symbol per line")
    parser.add_argument("--json", default=CFG["output_file"], help="output JSON path")
    parser.add_argument("--top", type=int, default=20)
    args = parser.parse_args(argv)

    try:
        universe = load_universe(args.universe_file)
        report = run_pipeline(universe, price_cap=args.price_cap)
    except ConfigurationError as e:
        print(f"  ❌  {e.message}", file=sys.stderr)
        return 2

    print_summary(report, top=args.top)
    export_json(report, args.json)
    print("\n✅  DONE!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
