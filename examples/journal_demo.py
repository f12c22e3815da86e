#!/usr/bin/env python3
"""
Journal Demo - Record a few trades, watch the totals, open the web view.

Usage:
    python examples/journal_demo.py
"""

from tradejournal import EntryError, TradeStore, submit_trade_entry
from tradejournal.risk import format_risk


def main():
    store = TradeStore()
    store.subscribe(lambda s: print(f"  -> {len(s)} trades, total risk {format_risk(s.total_risk)}"))

    entries = [
        ("aapl", "190.50", "185.00"),
        ("msft", "410", "370"),
        ("", "1520", "1480"),
        ("tsla", "abc", "200"),
    ]
    for ticker, tvh, sl in entries:
        print(f"Saving {ticker or '<blank>'} TVH={tvh} SL={sl}")
        try:
            submit_trade_entry(store, ticker, tvh, sl)
        except EntryError as e:
            print(f"  rejected: {e}")

    print()
    for trade in store:
        level = trade.risk_level
        print(f"{trade.ticker:<10} TVH: {trade.tvh:>8.2f}  SL: {trade.sl:>8.2f}  "
              f"Risk: {format_risk(trade.risk):>7} ({level.value.lower()}, {level.color})")

    print()
    print("Launching browser UI...")
    store.show(port=8080)


if __name__ == "__main__":
    main()
