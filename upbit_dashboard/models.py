from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class MarketInfo:
    """업비트 마켓 목록의 한 항목."""

    market: str  # 예: 'KRW-BTC'
    korean_name: str
    english_name: str = ""


@dataclass(frozen=True)
class CandleRecord:
    """일 캔들 한 개. 업비트는 최신순으로 돌려준다."""

    market: str
    trade_price: float
    acc_trade_volume: float
    timestamp: int
    candle_date_time_utc: str = ""
    candle_date_time_kst: str = ""
    opening_price: float = 0.0
    high_price: float = 0.0
    low_price: float = 0.0
    acc_trade_price: float = 0.0


@dataclass(frozen=True)
class CoinMetrics:
    """요청 하나 동안만 쓰이는 코인별 지표."""

    market: str
    korean_name: str
    current_price: float
    volume_24h: float
    rsi: float
    price_change_24h: float
    price_change_percent: Optional[float]

    def __post_init__(self):
        if not (0 <= self.rsi <= 100):
            raise ValueError(f"RSI must be between 0-100: {self.rsi}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "market": self.market,
            "koreanName": self.korean_name,
            "currentPrice": self.current_price,
            "volume24h": self.volume_24h,
            "rsi": self.rsi,
            "priceChange24h": self.price_change_24h,
            "priceChangePercent": self.price_change_percent,
        }
