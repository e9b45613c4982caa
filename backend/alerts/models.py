"""
Alert Models
Data structures for the price alert rule, its state, and the trigger event.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Dict, Any
from enum import Enum

BANNER_RULE = "=========================================="


class AlertStatus(str, Enum):
    """One-shot rule lifecycle"""
    PENDING = "pending"
    TRIGGERED = "triggered"


@dataclass(frozen=True)
class AlertRule:
    """
    Price threshold rule.

    Example:
        "Alert me once when BTCNGN >= 200,000,000"
    """
    market: str
    target_price: Decimal
    name: str = ""

    def __post_init__(self):
        if not self.name:
            object.__setattr__(self, "name", f"{self.market} >= {self.target_price}")

    def is_met(self, current_price: Decimal) -> bool:
        return current_price >= self.target_price

    def to_dict(self) -> Dict[str, Any]:
        return {
            "market": self.market,
            "target_price": str(self.target_price),
            "name": self.name,
        }


@dataclass
class AlertState:
    """
    Runtime state for the rule.

    Starts PENDING and moves to TRIGGERED exactly once. There is no
    transition back.
    """
    status: AlertStatus = AlertStatus.PENDING
    triggered_at: Optional[datetime] = None
    trigger_price: Optional[Decimal] = None
    last_price: Optional[Decimal] = None
    checks: int = 0

    @property
    def is_triggered(self) -> bool:
        return self.status == AlertStatus.TRIGGERED

    def record_check(self, price: Decimal) -> None:
        self.checks += 1
        self.last_price = price

    def record_trigger(self, price: Decimal) -> None:
        """Move to TRIGGERED; a second call is ignored"""
        if self.is_triggered:
            return
        self.status = AlertStatus.TRIGGERED
        self.triggered_at = datetime.now()
        self.trigger_price = price

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "triggered_at": self.triggered_at.isoformat() if self.triggered_at else None,
            "trigger_price": str(self.trigger_price) if self.trigger_price is not None else None,
            "last_price": str(self.last_price) if self.last_price is not None else None,
            "checks": self.checks,
        }


@dataclass(frozen=True)
class AlertEvent:
    """
    The single trigger of a rule.

    banner_lines() is what gets printed to the console.
    """
    market: str
    target_price: Decimal
    current_price: Decimal
    timestamp: datetime = field(default_factory=datetime.now)

    def banner_lines(self) -> List[str]:
        return [
            BANNER_RULE,
            "!!! PRICE ALERT TRIGGERED !!!",
            f"{self.market.upper()} has reached the target price of {self.target_price}",
            f"Current Price: {self.current_price}",
            BANNER_RULE,
        ]

    @property
    def message(self) -> str:
        return "\n".join(self.banner_lines())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "market": self.market,
            "target_price": str(self.target_price),
            "current_price": str(self.current_price),
            "timestamp": self.timestamp.isoformat(),
            "message": self.message,
        }

    @classmethod
    def from_rule(cls, rule: AlertRule, current_price: Decimal) -> "AlertEvent":
        """Create event from triggered rule"""
        return cls(
            market=rule.market,
            target_price=rule.target_price,
            current_price=current_price,
        )
