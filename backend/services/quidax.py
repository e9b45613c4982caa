"""
Quidax Ticker Client
Fetches one market ticker from the Quidax public API.

Usage:
    client = QuidaxClient()
    result = client.fetch_ticker("btcngn")
    if result.ok:
        print(result.ticker.price)
    else:
        print(result.reason, result.detail)
"""

import logging
from typing import Optional

import requests

from core import FetchResult, Ticker, to_fetch_result
from errors import ExchangeConnectionError, ExchangeHTTPError, ExchangeResponseError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://app.quidax.com"
TICKER_PATH = "/api/v1/markets/tickers/"


class QuidaxClient:
    """Client for the Quidax ticker endpoint"""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def ticker_url(self, market: str) -> str:
        return f"{self.base_url}{TICKER_PATH}{market}"

    def _get_json(self, url: str):
        """GET url and decode JSON; raises ExchangeError subclasses"""
        try:
            resp = self.session.get(url, timeout=self.timeout, verify=True)
        except requests.exceptions.RequestException as e:
            raise ExchangeConnectionError(f"GET {url} failed: {e}", url=url) from e

        if not 200 <= resp.status_code < 300:
            raise ExchangeHTTPError(
                resp.status_code,
                f"GET {url} returned HTTP {resp.status_code}",
                url=url
            )

        try:
            return resp.json()
        except ValueError as e:
            raise ExchangeResponseError(f"GET {url} returned invalid JSON: {e}", url=url) from e

    def fetch_ticker(self, market: str) -> FetchResult:
        """
        Fetch the ticker for a market.

        Args:
            market: Market id (e.g., "btcngn")

        Returns:
            FetchResult; ok only when status is "success" and
            data.ticker is present

        Raises:
            ExchangeConnectionError: transport failure
            ExchangeHTTPError: non-2xx status
            ExchangeResponseError: body is not JSON
        """
        url = self.ticker_url(market)
        payload = self._get_json(url)
        result = to_fetch_result(payload, market)

        if not result.ok:
            logger.debug("No ticker for %s: %s (%s)", market, result.reason.value, result.detail)
        return result

    def get_ticker(self, market: str) -> Optional[Ticker]:
        """Ticker or None when the response has no usable ticker"""
        result = self.fetch_ticker(market)
        return result.ticker if result.ok else None

    def close(self) -> None:
        self.session.close()
