# tests/conftest.py
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from upbit_dashboard.models import CoinMetrics

# 최신순 체결가 15개 (RSI 62.5)
SAMPLE_PRICES = [105, 100, 98, 102, 99, 97, 101, 103, 96, 94, 100, 102, 98, 95, 93]


def make_candle_payload(market, prices, volumes=None):
    """업비트 /v1/candles/days 응답 형태의 캔들 목록 (최신순)."""
    volumes = volumes or [1000.0 + i for i in range(len(prices))]
    return [
        {
            "market": market,
            "candle_date_time_utc": f"2024-01-{len(prices) - i:02d}T00:00:00",
            "candle_date_time_kst": f"2024-01-{len(prices) - i:02d}T09:00:00",
            "opening_price": price,
            "high_price": price,
            "low_price": price,
            "trade_price": price,
            "timestamp": 1704067200000 - i * 86400000,
            "candle_acc_trade_price": price * volume,
            "candle_acc_trade_volume": volume,
        }
        for i, (price, volume) in enumerate(zip(prices, volumes))
    ]


def make_coin(market="KRW-BTC", volume=1.0, rsi=50.0, percent=0.0, name="비트코인", price=100.0):
    return CoinMetrics(
        market=market,
        korean_name=name,
        current_price=price,
        volume_24h=volume,
        rsi=rsi,
        price_change_24h=0.0,
        price_change_percent=percent,
    )


@pytest.fixture
def sample_prices():
    return list(SAMPLE_PRICES)


@pytest.fixture
def market_list_payload():
    return [
        {"market": "KRW-BTC", "korean_name": "비트코인", "english_name": "Bitcoin"},
        {"market": "BTC-ETH", "korean_name": "이더리움", "english_name": "Ethereum"},
        {"market": "KRW-ETH", "korean_name": "이더리움", "english_name": "Ethereum"},
        {"market": "USDT-XRP", "korean_name": "리플", "english_name": "Ripple"},
        {"market": "KRW-XRP", "korean_name": "리플", "english_name": "Ripple"},
    ]
