"""Trade journal: trades, the session store, entry parsing and the web view."""

from .trade import Trade
from .store import TradeStore
from .entry import DEFAULT_TICKER, parse_trade_entry, submit_trade_entry
from .table_ui import create_journal_app, run_journal_ui

__all__ = [
    "Trade",
    "TradeStore",
    # Entry flow
    "DEFAULT_TICKER",
    "parse_trade_entry",
    "submit_trade_entry",
    # Web view
    "create_journal_app",
    "run_journal_ui",
]
