"""Observable in-memory trade store."""

import logging
from typing import Callable, Iterable, Iterator, List, Tuple

from ..exceptions import InvalidIndexError
from .trade import Trade

logger = logging.getLogger(__name__)

Observer = Callable[["TradeStore"], None]


class TradeStore:
    """
    Ordered collection of trades for one journaling session.

    Insertion order is display order. Every completed mutation bumps
    ``version`` and then calls each subscribed observer with the store.

    Example:
        store = TradeStore()
        store.subscribe(lambda s: print(f"{len(s)} trades, {s.total_risk:.2f}%"))

        store.add_trade(Trade(ticker="AAPL", tvh=100.0, sl=95.0))
        store.add_trade(Trade(ticker="MSFT", tvh=400.0, sl=380.0))
        store.delete_trade({0})

        for trade in store:
            print(f"{trade.ticker}: {trade.risk:.2f}%")
    """

    def __init__(self):
        """Create an empty trade store."""
        self._trades: List[Trade] = []
        self._observers: List[Observer] = []
        self._version = 0

    @property
    def trades(self) -> Tuple[Trade, ...]:
        """Snapshot of the current sequence."""
        return tuple(self._trades)

    @property
    def version(self) -> int:
        """Number of completed mutations since the store was created."""
        return self._version

    @property
    def total_risk(self) -> float:
        """Sum of risk over all current trades."""
        return sum(trade.risk for trade in self._trades)

    def add_trade(self, trade: Trade) -> None:
        """Append a trade to the end of the sequence."""
        self._trades.append(trade)
        logger.debug(f"Added {trade.ticker} ({trade.id}) at position {len(self._trades) - 1}")
        self._changed()

    def delete_trade(self, indices: Iterable[int]) -> int:
        """
        Remove the trades at the given positions in one update.

        Positions refer to the sequence before the call, so removing
        ``{1, 3}`` drops the original second and fourth trades.

        Args:
            indices: Positions to remove. Duplicates are ignored.

        Returns:
            Number of trades removed.

        Raises:
            InvalidIndexError: If any position is negative or past the end.
                Nothing is removed in that case.
        """
        positions = set(indices)
        if not positions:
            return 0

        size = len(self._trades)
        invalid = [i for i in positions if i < 0 or i >= size]
        if invalid:
            raise InvalidIndexError(invalid, size)

        self._trades = [t for i, t in enumerate(self._trades) if i not in positions]
        logger.debug(f"Deleted positions {sorted(positions)}, {len(self._trades)} trades left")
        self._changed()
        return len(positions)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a callback run after every completed mutation.

        Returns:
            A function that removes the subscription.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _changed(self) -> None:
        self._version += 1
        for observer in list(self._observers):
            observer(self)

    def __len__(self) -> int:
        """Return the number of trades."""
        return len(self._trades)

    def __iter__(self) -> Iterator[Trade]:
        """Iterate over trades in display order."""
        return iter(self.trades)

    def __getitem__(self, index: int) -> Trade:
        """Get a trade by position."""
        return self._trades[index]

    def show(self, port: int = 8080, open_browser: bool = True) -> None:
        """
        Display the journal in a web browser.

        Args:
            port: Server port (default 8080)
            open_browser: Whether to open browser automatically

        Example:
            store = TradeStore()
            store.add_trade(Trade(ticker="AAPL", tvh=100.0, sl=95.0))
            store.show()  # Opens browser with the trade list
        """
        from .table_ui import run_journal_ui

        run_journal_ui(self, port=port, open_browser=open_browser)
