"""Trade entry: turn the three text fields of the entry form into a Trade.

A blank ticker falls back to ``DEFAULT_TICKER``. Prices must be plain
decimal numbers (``"101.5"``, ``"-3"``, ``"1e2"``). Grouping separators,
decimal commas and the ``inf``/``nan`` spellings are rejected. Any failure
raises ``EntryError`` before a Trade exists, so a bad form never produces a
partial record.
"""

import math
import re

from ..exceptions import EntryError
from .store import TradeStore
from .trade import Trade

DEFAULT_TICKER = "HDFS1000"

_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_price(field: str, text: str) -> float:
    """
    Parse a price field.

    Args:
        field: Field name used in the error message ("tvh" or "sl")
        text: Raw field text

    Raises:
        EntryError: If the text is empty or not a plain decimal number.
    """
    stripped = text.strip()
    if not stripped:
        raise EntryError(field, text, "value is required")
    if not _DECIMAL.fullmatch(stripped):
        raise EntryError(field, text, "not a decimal number")
    value = float(stripped)
    if math.isinf(value):
        raise EntryError(field, text, "number is out of range")
    return value


def normalize_ticker(text: str) -> str:
    """Strip and upper-case a ticker, using DEFAULT_TICKER when blank."""
    ticker = text.strip()
    return ticker.upper() if ticker else DEFAULT_TICKER


def parse_trade_entry(ticker: str, tvh: str, sl: str) -> Trade:
    """
    Build a Trade from entry form text.

    Args:
        ticker: Ticker text, may be blank
        tvh: Entry price text
        sl: Stop-loss price text

    Returns:
        A new Trade.

    Raises:
        EntryError: If a price does not parse or the entry price is not
            positive.

    Example:
        trade = parse_trade_entry("", "250", "230")
        print(trade.ticker)   # HDFS1000
        print(trade.risk)     # 8.0
    """
    tvh_value = parse_price("tvh", tvh)
    sl_value = parse_price("sl", sl)
    if tvh_value <= 0:
        raise EntryError("tvh", tvh, "entry price must be positive")
    return Trade(ticker=normalize_ticker(ticker), tvh=tvh_value, sl=sl_value)


def submit_trade_entry(store: TradeStore, ticker: str, tvh: str, sl: str) -> Trade:
    """Parse an entry and add it to ``store``. The store is untouched on error."""
    trade = parse_trade_entry(ticker, tvh, sl)
    store.add_trade(trade)
    return trade
