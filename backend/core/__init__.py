"""
Core Module
Exchange response shapes and the unwrapping converter.

Exports:
    Models: Ticker, MarketData, TickerResponse
    Result: FetchResult, FetchFailureReason
    Converters: to_fetch_result
"""

from .models import (
    Ticker,
    MarketData,
    TickerResponse,
    FetchResult,
    FetchFailureReason,
    SUCCESS_STATUS,
    to_fetch_result,
)

__all__ = [
    # Models
    "Ticker",
    "MarketData",
    "TickerResponse",
    # Result
    "FetchResult",
    "FetchFailureReason",
    "SUCCESS_STATUS",
    # Converters
    "to_fetch_result",
]
