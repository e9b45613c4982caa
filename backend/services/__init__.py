"""
Services
Exchange client and the periodic price watcher.
"""

from .quidax import QuidaxClient
from .price_watcher import PriceWatcher, WatcherStats, get_price_watcher

__all__ = ["QuidaxClient", "PriceWatcher", "WatcherStats", "get_price_watcher"]
