"""
Domain Models
Data shapes for the exchange ticker response.

The exchange wraps every ticker in two levels of JSON:
    envelope (status) → data (at, market) → ticker (price, ...)

Only these types leave the fetch client. Nothing downstream sees raw JSON.
"""

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from typing import Optional
from enum import Enum


# =============================================================================
# Ticker: The Core Data Contract
# =============================================================================

class Ticker(BaseModel):
    """
    Latest price quote for one market.

    Prices are kept as the decimal strings the exchange sends; parsing
    happens at comparison time so no precision is lost here.

    Fields:
        price: Last traded price (may be absent)
        buy/sell: Best bid / ask
        low/high/open: 24h range
        last: Last price as reported by some endpoints
        vol: 24h volume
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    price: Optional[str] = None
    buy: Optional[str] = None
    sell: Optional[str] = None
    low: Optional[str] = None
    high: Optional[str] = None
    open: Optional[str] = None
    last: Optional[str] = None
    vol: Optional[str] = None

    @field_validator('price', 'buy', 'sell', 'low', 'high', 'open', 'last', 'vol', mode='before')
    @classmethod
    def number_to_str(cls, v):
        """Some responses send bare JSON numbers"""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class MarketData(BaseModel):
    """Ticker plus the market it belongs to and the quote time"""
    model_config = ConfigDict(frozen=True, extra="allow")

    at: Optional[int] = None
    market: Optional[str] = None
    ticker: Optional[Ticker] = None


class TickerResponse(BaseModel):
    """Outer envelope returned by /api/v1/markets/tickers/{market}"""
    model_config = ConfigDict(frozen=True, extra="allow")

    status: Optional[str] = None
    message: Optional[str] = None
    data: Optional[MarketData] = None


# =============================================================================
# Fetch Result: tagged success / failure
# =============================================================================

class FetchFailureReason(str, Enum):
    """Why a response produced no ticker"""
    STATUS_NOT_SUCCESS = "status_not_success"
    MISSING_DATA = "missing_data"
    MISSING_TICKER = "missing_ticker"
    INVALID_SHAPE = "invalid_shape"


class FetchResult(BaseModel):
    """
    Result of one ticker fetch.

    Either ok=True with a ticker, or ok=False with a reason.
    Build with FetchResult.success() / FetchResult.failure().
    """
    model_config = ConfigDict(frozen=True)

    ok: bool
    market: str
    ticker: Optional[Ticker] = None
    market_data: Optional[MarketData] = None
    reason: Optional[FetchFailureReason] = None
    detail: str = ""

    @classmethod
    def success(cls, market: str, market_data: MarketData) -> "FetchResult":
        return cls(ok=True, market=market, ticker=market_data.ticker, market_data=market_data)

    @classmethod
    def failure(cls, market: str, reason: FetchFailureReason, detail: str = "") -> "FetchResult":
        return cls(ok=False, market=market, reason=reason, detail=detail)


# =============================================================================
# Converters: External → Internal
# =============================================================================

SUCCESS_STATUS = "success"


def to_fetch_result(payload, market: str) -> FetchResult:
    """
    Convert a decoded JSON body to a FetchResult.

    This is the UNWRAPPING POINT. A ticker comes back only when
    status == "success" and both nesting levels are present.
    """
    if not isinstance(payload, dict):
        return FetchResult.failure(
            market, FetchFailureReason.INVALID_SHAPE,
            f"expected a JSON object, got {type(payload).__name__}"
        )

    try:
        response = TickerResponse.model_validate(payload)
    except ValidationError as e:
        return FetchResult.failure(market, FetchFailureReason.INVALID_SHAPE, str(e))

    if response.status != SUCCESS_STATUS:
        detail = f"status={response.status!r}"
        if response.message:
            detail += f" message={response.message!r}"
        return FetchResult.failure(market, FetchFailureReason.STATUS_NOT_SUCCESS, detail)

    if response.data is None:
        return FetchResult.failure(market, FetchFailureReason.MISSING_DATA, "envelope has no data")

    if response.data.ticker is None:
        return FetchResult.failure(market, FetchFailureReason.MISSING_TICKER, "data has no ticker")

    return FetchResult.success(market, response.data)
