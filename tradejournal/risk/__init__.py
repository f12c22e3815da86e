"""Risk computation and classification.

Key Functions:
    - compute_risk(): Stop-loss distance from entry, in percent
    - classify(): Risk percentage to LOW / MEDIUM / HIGH
    - format_risk(): Display string for a risk value

Example:
    from tradejournal import risk

    value = risk.compute_risk(tvh=250.0, sl=230.0)
    level = risk.classify(value)
    print(f"{risk.format_risk(value)} {level.value} ({level.color})")
"""

from .severity import (
    RiskLevel,
    compute_risk,
    classify,
    format_risk,
    LOW_RISK_THRESHOLD,
    HIGH_RISK_THRESHOLD,
)

__all__ = [
    "RiskLevel",
    "compute_risk",
    "classify",
    "format_risk",
    "LOW_RISK_THRESHOLD",
    "HIGH_RISK_THRESHOLD",
]
