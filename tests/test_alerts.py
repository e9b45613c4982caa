from decimal import Decimal

import pytest

from alerts import AlertEvent, AlertRule, AlertStatus, PriceAlert, parse_price
from core import Ticker
from errors import PriceParseError


def test_parse_price():
    assert parse_price("199000000") == Decimal("199000000")
    assert parse_price("0.00012345") == Decimal("0.00012345")
    assert parse_price("-1E+3") == Decimal("-1000")


@pytest.mark.parametrize("raw", ["", "abc", "1,000", "NaN", "Infinity", " 42.5 ", "42.5\n", "1_000"])
def test_parse_price_rejects_non_numbers(raw):
    with pytest.raises(PriceParseError) as exc_info:
        parse_price(raw)

    assert exc_info.value.raw_price == raw


def test_rule_defaults_name():
    rule = AlertRule(market="btcngn", target_price=Decimal("200000000"))

    assert rule.name == "btcngn >= 200000000"


def test_alert_starts_pending(alert):
    assert alert.status == AlertStatus.PENDING
    assert not alert.is_triggered
    assert alert.event is None


def test_below_target_does_not_trigger(alert):
    assert alert.evaluate(Ticker(price="199999999.99")) is None

    assert alert.status == AlertStatus.PENDING
    assert alert.state.last_price == Decimal("199999999.99")
    assert alert.state.checks == 1


def test_equal_to_target_triggers(alert):
    event = alert.evaluate(Ticker(price="200000000"))

    assert event is not None
    assert event.current_price == Decimal("200000000")
    assert alert.status == AlertStatus.TRIGGERED
    assert alert.state.trigger_price == Decimal("200000000")
    assert alert.state.triggered_at is not None
    assert alert.event is event


def test_triggers_only_once(alert):
    first = alert.evaluate(Ticker(price="205000000"))
    second = alert.evaluate(Ticker(price="210000000"))
    third = alert.evaluate(Ticker(price="100"))

    assert first is not None
    assert second is None
    assert third is None
    assert alert.status == AlertStatus.TRIGGERED
    assert alert.state.trigger_price == Decimal("205000000")
    assert alert.state.checks == 1


def test_missing_ticker_or_price_is_ignored(alert):
    assert alert.evaluate(None) is None
    assert alert.evaluate(Ticker()) is None
    assert alert.state.checks == 0


def test_invalid_price_raises_and_stays_pending(alert):
    with pytest.raises(PriceParseError):
        alert.evaluate(Ticker(price="n/a"))

    assert alert.status == AlertStatus.PENDING


def test_record_trigger_is_one_shot(alert):
    alert.state.record_trigger(Decimal("1"))
    alert.state.record_trigger(Decimal("2"))

    assert alert.state.trigger_price == Decimal("1")


def test_banner_lines():
    event = AlertEvent(
        market="btcngn",
        target_price=Decimal("200000000"),
        current_price=Decimal("200000000"),
    )

    assert event.banner_lines() == [
        "==========================================",
        "!!! PRICE ALERT TRIGGERED !!!",
        "BTCNGN has reached the target price of 200000000",
        "Current Price: 200000000",
        "==========================================",
    ]


def test_to_dict_uses_strings_for_prices(alert):
    alert.evaluate(Ticker(price="200000001.5"))

    data = alert.to_dict()

    assert data["rule"]["target_price"] == "200000000"
    assert data["state"]["status"] == "triggered"
    assert data["state"]["trigger_price"] == "200000001.5"
