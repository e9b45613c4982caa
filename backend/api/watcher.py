"""
Watcher API
Endpoints to inspect and control the price watcher.

Endpoints:
    GET    /api/watcher/status   → Stats, rule and alert state
    GET    /api/watcher/alert    → Trigger event (404 while pending)
    POST   /api/watcher/start    → Start polling
    POST   /api/watcher/stop     → Stop polling
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Optional

from services import get_price_watcher


router = APIRouter(prefix="/watcher", tags=["Watcher"])


class WatcherResponse(BaseModel):
    """Response for start/stop"""
    status: str
    market: Optional[str] = None
    total_ticks: Optional[int] = None


@router.get("/status")
async def get_watcher_status():
    """
    Get current status of the price watcher.

    Returns:
        Tick counts, last price, rule and alert state
    """
    watcher = get_price_watcher()
    return watcher.status()


@router.get("/alert")
async def get_alert():
    """Get the alert event once the rule has triggered"""
    watcher = get_price_watcher()
    event = watcher.alert.event

    if event is None:
        raise HTTPException(404, f"Alert for {watcher.market} has not triggered")

    return event.to_dict()


@router.post("/start", response_model=WatcherResponse)
async def start_watcher():
    """Start polling the exchange"""
    watcher = get_price_watcher()
    return watcher.start()


@router.post("/stop", response_model=WatcherResponse)
async def stop_watcher():
    """Stop polling the exchange"""
    watcher = get_price_watcher()
    return watcher.stop()
