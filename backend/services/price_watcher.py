"""
Price Watcher Service
Polls the exchange ticker on a fixed interval and fires the price alert once.

Usage:
    from services import get_price_watcher

    watcher = get_price_watcher()
    watcher.start()
    # Ticks run every interval_sec in a background thread
    watcher.stop()
"""

import logging
import threading
import time
from datetime import datetime
from typing import Callable, Dict, Any, List, Optional
from dataclasses import dataclass

from alerts import AlertEvent, AlertRule, PriceAlert
from config import Settings, get_settings
from .quidax import QuidaxClient

logger = logging.getLogger(__name__)

OnAlertCallback = Callable[[AlertEvent], None]


@dataclass
class WatcherStats:
    """Price watcher statistics"""
    is_running: bool = False
    ticks: int = 0
    skipped: int = 0
    suppressed: int = 0
    errors: int = 0
    last_check_time: Optional[datetime] = None
    last_price: Optional[str] = None
    last_error: Optional[str] = None
    started_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_running": self.is_running,
            "ticks": self.ticks,
            "skipped": self.skipped,
            "suppressed": self.suppressed,
            "errors": self.errors,
            "last_check_time": self.last_check_time.isoformat() if self.last_check_time else None,
            "last_price": self.last_price,
            "last_error": self.last_error,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "uptime_seconds": (datetime.now() - self.started_at).total_seconds() if self.started_at and self.is_running else 0,
        }


class PriceWatcher:
    """
    Periodic ticker poller.

    Each tick fetches the ticker for the rule's market and hands it to
    the PriceAlert. After the alert fires, ticks become no-ops but the
    timer keeps running until stop().
    """

    def __init__(
        self,
        client: QuidaxClient,
        alert: PriceAlert,
        interval_sec: float = 10.0,
        out: Callable[[str], None] = print
    ):
        self.client = client
        self.alert = alert
        self.interval_sec = interval_sec
        self._out = out
        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stats = WatcherStats()
        self._callbacks: List[OnAlertCallback] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "PriceWatcher":
        client = QuidaxClient(base_url=settings.base_url, timeout=settings.request_timeout_sec)
        alert = PriceAlert(AlertRule(market=settings.market, target_price=settings.target_price))
        return cls(client, alert, interval_sec=settings.interval_sec)

    @property
    def market(self) -> str:
        return self.alert.rule.market

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def stats(self) -> WatcherStats:
        return self._stats

    def on_alert(self, callback: OnAlertCallback) -> None:
        self._callbacks.append(callback)

    # =========================================================================
    # Tick
    # =========================================================================

    def tick(self) -> Optional[AlertEvent]:
        """
        Run one poll.

        Exchange and price parse errors propagate to the caller.

        Returns:
            The AlertEvent on the tick that triggers, else None
        """
        if self.alert.is_triggered:
            self._stats.suppressed += 1
            return None

        self._stats.ticks += 1
        self._stats.last_check_time = datetime.now()
        self._out(f"Checking price for {self.market} at {self._stats.last_check_time.strftime('%H:%M:%S')}")

        result = self.client.fetch_ticker(self.market)
        if not result.ok:
            self._stats.skipped += 1
            return None

        self._stats.last_price = result.ticker.price
        event = self.alert.evaluate(result.ticker)
        if event is None:
            return None

        for line in event.banner_lines():
            self._out(line)
        logger.info("Alert triggered for %s at %s", event.market, event.current_price)

        for callback in self._callbacks:
            try:
                callback(event)
            except Exception:
                logger.exception("Alert callback failed")
        return event

    def _safe_tick(self) -> None:
        try:
            self.tick()
        except Exception as e:
            self._stats.errors += 1
            self._stats.last_error = f"{type(e).__name__}: {e}"
            logger.exception("Price check for %s failed", self.market)

    # =========================================================================
    # Loop
    # =========================================================================

    def _run_loop(self) -> None:
        """Fixed-rate loop; exits when the stop event is set"""
        next_run = time.monotonic()
        while not self._stop_event.is_set():
            self._safe_tick()
            next_run += self.interval_sec
            delay = next_run - time.monotonic()
            if delay < 0:
                # Tick overran the interval; start the next one now
                next_run = time.monotonic()
                delay = 0
            if self._stop_event.wait(delay):
                break
        self._stats.is_running = False

    def start(self) -> Dict[str, Any]:
        """Start polling in a background thread"""
        with self._lock:
            if self.is_running:
                return {"status": "already_running", "market": self.market}

            self._stop_event.clear()
            self._stats.is_running = True
            self._stats.started_at = datetime.now()

            self._thread = threading.Thread(
                target=self._run_loop,
                name=f"price-watcher-{self.market}",
                daemon=True
            )
            self._thread.start()

        logger.info(
            "Watching %s every %ss for price >= %s",
            self.market, self.interval_sec, self.alert.rule.target_price
        )
        return {"status": "started", "market": self.market}

    def stop(self, timeout: Optional[float] = 5.0) -> Dict[str, Any]:
        """Stop polling; waits for an in-flight tick up to timeout"""
        with self._lock:
            # Also ends a run_forever() loop in another thread
            self._stop_event.set()
            if not self.is_running:
                return {"status": "not_running"}
            thread = self._thread

        thread.join(timeout)
        if thread.is_alive():
            logger.warning("Watcher for %s still finishing a tick", self.market)
            return {"status": "stopping", "total_ticks": self._stats.ticks}

        self._stats.is_running = False
        logger.info("Stopped watching %s", self.market)
        return {"status": "stopped", "total_ticks": self._stats.ticks}

    def run_forever(self) -> None:
        """
        Run the loop in the calling thread until stop() or Ctrl+C.

        A stop() issued before this call makes it return at once.
        """
        self._stats.is_running = True
        self._stats.started_at = datetime.now()
        try:
            self._run_loop()
        except KeyboardInterrupt:
            pass
        finally:
            self._stats.is_running = False

    def close(self) -> None:
        self.stop()
        self.client.close()

    def status(self) -> Dict[str, Any]:
        return {
            "status": "running" if self.is_running else "stopped",
            "interval_sec": self.interval_sec,
            **self._stats.to_dict(),
            "alert": self.alert.to_dict(),
        }


# Singleton
_price_watcher: Optional[PriceWatcher] = None


def get_price_watcher() -> PriceWatcher:
    """Get or create price watcher singleton"""
    global _price_watcher
    if _price_watcher is None:
        _price_watcher = PriceWatcher.from_settings(get_settings())
    return _price_watcher
