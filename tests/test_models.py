from core import FetchFailureReason, Ticker, to_fetch_result

from conftest import ticker_payload


def test_success_envelope_returns_ticker_unchanged():
    payload = ticker_payload(price="199000000")
    result = to_fetch_result(payload, "btcngn")

    assert result.ok
    assert result.reason is None
    assert result.ticker == Ticker(**payload["data"]["ticker"])
    assert result.ticker.price == "199000000"
    assert result.market_data.at == 1700000000
    assert result.market_data.market == "btcngn"


def test_extra_ticker_fields_are_kept():
    payload = ticker_payload()
    payload["data"]["ticker"]["avg"] = "1.0"

    result = to_fetch_result(payload, "btcngn")

    assert result.ok
    assert result.ticker.model_extra == {"avg": "1.0"}


def test_non_success_status_is_failure():
    for status in ("error", "fail", "SUCCESS", "", None):
        result = to_fetch_result(ticker_payload(status=status), "btcngn")

        assert not result.ok
        assert result.ticker is None
        assert result.reason == FetchFailureReason.STATUS_NOT_SUCCESS


def test_missing_status_is_failure():
    payload = ticker_payload()
    del payload["status"]

    result = to_fetch_result(payload, "btcngn")

    assert result.reason == FetchFailureReason.STATUS_NOT_SUCCESS


def test_error_message_is_in_detail():
    result = to_fetch_result({"status": "error", "message": "Market not found"}, "xyz")

    assert "Market not found" in result.detail
    assert result.market == "xyz"


def test_missing_data_is_failure():
    result = to_fetch_result({"status": "success"}, "btcngn")

    assert not result.ok
    assert result.reason == FetchFailureReason.MISSING_DATA


def test_missing_ticker_is_failure():
    payload = ticker_payload()
    del payload["data"]["ticker"]

    result = to_fetch_result(payload, "btcngn")

    assert not result.ok
    assert result.reason == FetchFailureReason.MISSING_TICKER


def test_wrong_shape_is_failure():
    assert to_fetch_result([1, 2, 3], "btcngn").reason == FetchFailureReason.INVALID_SHAPE
    assert to_fetch_result(None, "btcngn").reason == FetchFailureReason.INVALID_SHAPE

    payload = ticker_payload()
    payload["data"]["ticker"] = "not-an-object"
    assert to_fetch_result(payload, "btcngn").reason == FetchFailureReason.INVALID_SHAPE


def test_ticker_without_price_is_still_success():
    payload = ticker_payload()
    del payload["data"]["ticker"]["price"]

    result = to_fetch_result(payload, "btcngn")

    assert result.ok
    assert result.ticker.price is None


def test_numeric_ignored_field_is_still_success():
    payload = ticker_payload(price="200000000")
    payload["data"]["ticker"]["vol"] = 12.3456

    result = to_fetch_result(payload, "btcngn")

    assert result.ok
    assert result.ticker.vol == "12.3456"
    assert result.ticker.price == "200000000"


def test_numeric_price_is_kept_as_string():
    payload = ticker_payload()
    payload["data"]["ticker"]["price"] = 200000000

    result = to_fetch_result(payload, "btcngn")

    assert result.ok
    assert result.ticker.price == "200000000"
