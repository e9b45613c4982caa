from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from alerts import AlertRule, PriceAlert
from services import PriceWatcher, QuidaxClient

TARGET = Decimal("200000000")


def ticker_payload(price="199000000", status="success", market="btcngn", at=1700000000):
    return {
        "status": status,
        "message": "Successful",
        "data": {
            "at": at,
            "market": market,
            "ticker": {
                "buy": "198900000.0",
                "sell": "199100000.0",
                "low": "195000000.0",
                "high": "201000000.0",
                "open": "196000000.0",
                "last": price,
                "vol": "12.3456",
                "price": price,
            },
        },
    }


def make_response(payload=None, status_code=200, json_error=None):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return QuidaxClient(base_url="https://exchange.test/", timeout=3, session=session)


@pytest.fixture
def alert():
    return PriceAlert(AlertRule(market="btcngn", target_price=TARGET))


@pytest.fixture
def printed():
    return []


@pytest.fixture
def watcher(client, alert, printed):
    return PriceWatcher(client, alert, interval_sec=0.05, out=printed.append)
