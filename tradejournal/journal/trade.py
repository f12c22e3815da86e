"""Trade as a pydantic model.

A Trade is one journaled position: what was bought, at what price, and
where the stop-loss sits.
"""

import math
from typing import Any, Dict
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from ..risk import RiskLevel, classify, compute_risk


class Trade(BaseModel):
    """A single journaled trade with its derived risk.

    The ticker is upper-cased whenever it is set, so comparisons are
    case-insensitive by construction. Risk is recomputed from ``tvh`` and
    ``sl`` on every read. Prices must be finite.

    Example:
        trade = Trade(ticker="aapl", tvh=100.0, sl=95.0)

        print(trade.ticker)       # AAPL
        print(trade.risk)         # 5.0
        print(trade.risk_level)   # RiskLevel.MEDIUM

        trade.ticker = "msft"
        print(trade.ticker)       # MSFT
    """

    model_config = ConfigDict(validate_assignment=True, allow_inf_nan=False)

    # ==================== Inputs ====================

    id: UUID = Field(default_factory=uuid4, frozen=True)
    ticker: str
    tvh: float
    sl: float

    @field_validator("ticker")
    @classmethod
    def _uppercase_ticker(cls, value: str) -> str:
        return value.upper()

    # ==================== Computed ====================

    @computed_field
    @property
    def risk(self) -> float:
        """Stop-loss distance from entry in percent (``inf`` when tvh is 0)."""
        return compute_risk(self.tvh, self.sl)

    @computed_field
    @property
    def risk_level(self) -> RiskLevel:
        """Severity band of ``risk``."""
        return classify(self.risk)

    def to_row(self) -> Dict[str, Any]:
        """Row mapping for list rendering. Non-finite risk becomes None."""
        risk = self.risk
        level = self.risk_level
        return {
            "id": str(self.id),
            "ticker": self.ticker,
            "tvh": self.tvh,
            "sl": self.sl,
            "risk": risk if math.isfinite(risk) else None,
            "risk_level": level.value,
            "color": level.color,
        }
