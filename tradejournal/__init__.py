"""
Tradejournal - Personal trade-risk journal.

Records trades (ticker, entry price, stop-loss), derives the risk of each
one as the stop-loss distance from entry in percent, and shows the list with
color-coded severity.

Submodules:
    tradejournal.journal - Trade, TradeStore, entry parsing, web view
    tradejournal.risk - Risk formula and LOW / MEDIUM / HIGH bands
"""

from .journal import (
    Trade,
    TradeStore,
    DEFAULT_TICKER,
    parse_trade_entry,
    submit_trade_entry,
    create_journal_app,
    run_journal_ui,
)
from .risk import RiskLevel, classify, compute_risk
from .exceptions import JournalError, EntryError, InvalidIndexError
from . import risk

__all__ = [
    # Submodules
    "risk",
    # Journal
    "Trade",
    "TradeStore",
    "DEFAULT_TICKER",
    "parse_trade_entry",
    "submit_trade_entry",
    "create_journal_app",
    "run_journal_ui",
    # Risk
    "RiskLevel",
    "classify",
    "compute_risk",
    # Errors
    "JournalError",
    "EntryError",
    "InvalidIndexError",
]

__version__ = "0.1.0"
