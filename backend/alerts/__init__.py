"""
Alert System
One-shot price threshold alert.

Structure:
    alerts/
    ├── models.py    → AlertRule, AlertState, AlertEvent, AlertStatus
    └── rule.py      → PriceAlert (evaluation + state), parse_price

Usage:
    from alerts import AlertRule, PriceAlert

    alert = PriceAlert(AlertRule(market="btcngn", target_price=Decimal("200000000")))
    event = alert.evaluate(ticker)
    if event:
        print(event.message)
"""

from .models import (
    AlertRule,
    AlertState,
    AlertEvent,
    AlertStatus,
)

from .rule import (
    PriceAlert,
    parse_price,
)

__all__ = [
    # Models
    "AlertRule",
    "AlertState",
    "AlertEvent",
    "AlertStatus",
    # Rule
    "PriceAlert",
    "parse_price",
]
