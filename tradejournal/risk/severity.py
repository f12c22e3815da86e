"""Risk percentage and severity bands.

Risk is the distance of the stop-loss from the entry price, expressed as a
percentage of the entry price:

    risk = round(|sl / tvh - 1| * 100, 2)

Severity bands:

    risk < 5          LOW     (green)
    5 <= risk < 15    MEDIUM  (yellow)
    risk >= 15        HIGH    (red)
"""

import math
from enum import Enum

LOW_RISK_THRESHOLD = 5.0
HIGH_RISK_THRESHOLD = 15.0


class RiskLevel(str, Enum):
    """Severity of a trade's risk, with the color it is rendered in."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def color(self) -> str:
        return _COLORS[self]


_COLORS = {
    RiskLevel.LOW: "green",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "red",
}


def compute_risk(tvh: float, sl: float) -> float:
    """
    Percentage deviation of the stop-loss from the entry price.

    Args:
        tvh: Entry price
        sl: Stop-loss price

    Returns:
        Risk in percent, rounded to 2 decimal places. ``math.inf`` when
        ``tvh`` is zero, whatever ``sl`` is.

    Example:
        compute_risk(100.0, 95.0)   # 5.0
        compute_risk(100.0, 85.0)   # 15.0
    """
    if tvh == 0:
        return math.inf
    return round(abs(sl / tvh - 1) * 100, 2)


def classify(risk: float) -> RiskLevel:
    """
    Map a risk percentage to its severity band.

    NaN is treated as HIGH so every float has a band.
    """
    if math.isnan(risk):
        return RiskLevel.HIGH
    if risk < LOW_RISK_THRESHOLD:
        return RiskLevel.LOW
    if risk < HIGH_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def format_risk(risk: float) -> str:
    """Format a risk value for display, e.g. ``"5.00%"``."""
    if math.isinf(risk):
        return "inf%"
    return f"{risk:.2f}%"
