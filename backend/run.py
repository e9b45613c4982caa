"""
Console entry point: watch one market in the foreground until Ctrl+C.
"""

import signal
import sys

from config import get_settings
from logger import setup_logger
from services import PriceWatcher


def main():
    settings = get_settings()
    setup_logger(level=settings.log_level)

    watcher = PriceWatcher.from_settings(settings)

    def signal_handler(signum, frame):
        watcher.stop()

    if sys.platform != "win32":
        signal.signal(signal.SIGTERM, signal_handler)

    print(f"\nWatching {settings.market.upper()} for price >= {settings.target_price}")
    print("Press Ctrl+C to stop\n")

    try:
        watcher.run_forever()
    finally:
        watcher.client.close()
        print("\nShutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
