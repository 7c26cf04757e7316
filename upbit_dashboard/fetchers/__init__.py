from .upbit import (
    UpbitAPIError,
    fetch_upbit_day_candles_async,
    list_upbit_markets,
)

__all__ = [
    "UpbitAPIError",
    "fetch_upbit_day_candles_async",
    "list_upbit_markets",
]
