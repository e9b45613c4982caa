from decimal import Decimal, InvalidOperation
from typing import Optional

from core import Ticker
from errors import PriceParseError

from .models import AlertRule, AlertState, AlertEvent, AlertStatus


def parse_price(raw: str) -> Decimal:
    """Exchange price string → Decimal; raises PriceParseError"""
    text = str(raw)
    # Decimal() also accepts padding and "_" grouping
    if "_" in text or text != text.strip():
        raise PriceParseError(raw)
    try:
        price = Decimal(text)
    except (InvalidOperation, ValueError) as e:
        raise PriceParseError(raw) from e
    if not price.is_finite():
        raise PriceParseError(raw)
    return price


class PriceAlert:
    """
    One-shot price alert.

    Owns a rule and its state. evaluate() returns an AlertEvent on the
    check where the price first reaches the target, and None on every
    other check, including every check after that one.
    """

    def __init__(self, rule: AlertRule):
        self.rule = rule
        self.state = AlertState()
        self.event: Optional[AlertEvent] = None

    @property
    def status(self) -> AlertStatus:
        return self.state.status

    @property
    def is_triggered(self) -> bool:
        return self.state.is_triggered

    def evaluate(self, ticker: Optional[Ticker]) -> Optional[AlertEvent]:
        if self.is_triggered:
            return None
        if ticker is None or ticker.price is None:
            return None

        current_price = parse_price(ticker.price)
        self.state.record_check(current_price)

        if not self.rule.is_met(current_price):
            return None

        event = AlertEvent.from_rule(self.rule, current_price)
        self.state.record_trigger(current_price)
        self.event = event
        return event

    def to_dict(self):
        return {
            "rule": self.rule.to_dict(),
            "state": self.state.to_dict(),
        }
