from contextlib import asynccontextmanager
from fastapi import FastAPI

from api import watcher_router
from config import get_settings
from logger import setup_logger
from services import get_price_watcher


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logger(level=settings.log_level)
    watcher = get_price_watcher()
    if settings.auto_start:
        watcher.start()
    yield
    watcher.close()

app = FastAPI(
    title="Crypto Price Alert",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
)

app.include_router(watcher_router, prefix="/api")

@app.get("/")
async def root():
    return {
        "name": "Crypto Price Alert",
        "version": "1.0.0",
        "docs": "/docs",
    }

@app.get("/health")
async def health():
    watcher = get_price_watcher()

    return {
        "status": "healthy",
        "watcher": {
            "is_running": watcher.is_running,
            "market": watcher.market,
            "alert_status": watcher.alert.status.value,
        }
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000)
