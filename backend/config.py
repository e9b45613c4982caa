"""
Configuration
One alert rule per process, read from the environment.

    PRICE_ALERT_MARKET        market to watch           (btcngn)
    PRICE_ALERT_TARGET        target price              (200000000)
    PRICE_ALERT_INTERVAL_SEC  poll interval in seconds  (10)
    QUIDAX_BASE_URL           exchange base URL         (https://app.quidax.com)
    QUIDAX_TIMEOUT_SEC        HTTP request timeout      (10)
    PRICE_ALERT_AUTO_START    start watcher with the API (true)
    LOG_LEVEL                 logging level             (INFO)
"""

import os
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_MARKET = "btcngn"
DEFAULT_TARGET_PRICE = Decimal("200000000")  # 200 Million NGN
DEFAULT_INTERVAL_SEC = 10.0
DEFAULT_BASE_URL = "https://app.quidax.com"
DEFAULT_TIMEOUT_SEC = 10.0

TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    market: str = Field(default=DEFAULT_MARKET, min_length=1)
    target_price: Decimal = Field(default=DEFAULT_TARGET_PRICE, gt=0)
    interval_sec: float = Field(default=DEFAULT_INTERVAL_SEC, gt=0)
    base_url: str = DEFAULT_BASE_URL
    request_timeout_sec: float = Field(default=DEFAULT_TIMEOUT_SEC, gt=0)
    auto_start: bool = True
    log_level: str = "INFO"

    @field_validator("market", mode="before")
    @classmethod
    def normalize_market(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/") if isinstance(v, str) else v

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            market=env.get("PRICE_ALERT_MARKET", DEFAULT_MARKET),
            target_price=env.get("PRICE_ALERT_TARGET", DEFAULT_TARGET_PRICE),
            interval_sec=env.get("PRICE_ALERT_INTERVAL_SEC", DEFAULT_INTERVAL_SEC),
            base_url=env.get("QUIDAX_BASE_URL", DEFAULT_BASE_URL),
            request_timeout_sec=env.get("QUIDAX_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC),
            auto_start=env.get("PRICE_ALERT_AUTO_START", "true").strip().lower() in TRUE_VALUES,
            log_level=env.get("LOG_LEVEL", "INFO"),
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or load settings singleton"""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
