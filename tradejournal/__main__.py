"""Command line entry point: ``python -m tradejournal``."""

import argparse
import logging

from .journal import TradeStore, run_journal_ui, submit_trade_entry
from .journal.table_ui import DEFAULT_HOST, DEFAULT_PORT

DEMO_ENTRIES = [
    ("aapl", "190.50", "185.00"),
    ("msft", "410", "370"),
    ("", "1520", "1480"),
    ("nvda", "880", "700"),
]


def build_store(demo: bool = False) -> TradeStore:
    """Create the session store, optionally seeded with sample trades."""
    store = TradeStore()
    if demo:
        for ticker, tvh, sl in DEMO_ENTRIES:
            submit_trade_entry(store, ticker, tvh, sl)
        logging.info(f"Seeded {len(store)} demo trades")
    return store


def main() -> None:
    """Entry point for running the journal from command line."""
    parser = argparse.ArgumentParser(
        description="Start the trade journal web view",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help="Interface to bind",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help="Server port",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open a browser window",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Start with sample trades",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    store = build_store(demo=args.demo)
    run_journal_ui(
        store,
        host=args.host,
        port=args.port,
        open_browser=not args.no_browser,
    )


if __name__ == "__main__":
    main()
