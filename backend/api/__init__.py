"""
API Routers
"""
from .watcher import router as watcher_router

__all__ = ["watcher_router"]
