"""
Error Types
Everything the price alert raises derives from PriceAlertError.
"""

from typing import Optional


class PriceAlertError(Exception):
    """Base error"""


class ExchangeError(PriceAlertError):
    """Exchange call failed"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ExchangeConnectionError(ExchangeError):
    """Transport failure: DNS, refused connection, timeout, TLS"""


class ExchangeHTTPError(ExchangeError):
    """Exchange answered with a non-2xx status"""

    def __init__(self, status_code: int, message: str, url: Optional[str] = None):
        super().__init__(message, url=url)
        self.status_code = status_code


class ExchangeResponseError(ExchangeError):
    """Body was not valid JSON"""


class PriceParseError(PriceAlertError):
    """Ticker price is present but not a number"""

    def __init__(self, raw_price: str):
        super().__init__(f"Invalid price: {raw_price!r}")
        self.raw_price = raw_price
