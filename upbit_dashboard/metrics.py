"""
코인 메트릭 집계.

1. 업비트 마켓 목록에서 KRW 마켓만 골라 앞에서부터 상위 30개를 취한다.
2. 각 마켓의 일 캔들을 동시에(병렬) 가져온다. 한 마켓이 실패해도 나머지는 계속 처리한다.
3. 최근 두 캔들로 현재가, 거래량, 전일 대비 변동을 계산하고 전체 가격으로 RSI 를 계산한다.

결과 순서는 보장하지 않는다. 정렬은 표시 단계(dashboard)에서 한다.
"""

import asyncio
import logging
from typing import Iterable, List, Optional, Sequence

import httpx

from upbit_dashboard.config import (
    CANDLE_COUNT,
    QUOTE_MARKET_PREFIX,
    RSI_PERIOD,
    TOP_MARKET_LIMIT,
)
from upbit_dashboard.fetchers.upbit import (
    UpbitAPIError,
    fetch_upbit_day_candles_async,
    list_upbit_markets,
)
from upbit_dashboard.indicators import calculate_price_change, calculate_rsi
from upbit_dashboard.models import CandleRecord, CoinMetrics, MarketInfo

logger = logging.getLogger(__name__)


def select_markets(
    markets: Iterable[MarketInfo],
    quote_prefix: str = QUOTE_MARKET_PREFIX,
    limit: int = TOP_MARKET_LIMIT,
) -> List[MarketInfo]:
    """접두어가 일치하는 마켓을 업비트 목록 순서대로 최대 limit 개."""
    selected = [m for m in markets if m.market.startswith(quote_prefix)]
    return selected[:limit]


def build_coin_metrics(
    market: MarketInfo,
    candles: Sequence[CandleRecord],
    period: int = RSI_PERIOD,
) -> Optional[CoinMetrics]:
    """캔들이 2개 미만이면 None."""
    if len(candles) < 2:
        return None

    latest, previous = candles[0], candles[1]
    price_change, price_change_percent = calculate_price_change(
        latest.trade_price, previous.trade_price
    )
    rsi = calculate_rsi([c.trade_price for c in candles], period)

    return CoinMetrics(
        market=market.market,
        korean_name=market.korean_name,
        current_price=latest.trade_price,
        volume_24h=latest.acc_trade_volume,
        rsi=rsi,
        price_change_24h=price_change,
        price_change_percent=price_change_percent,
    )


async def _collect_market_async(
    client: httpx.AsyncClient,
    market: MarketInfo,
    candle_count: int,
    period: int,
) -> Optional[CoinMetrics]:
    try:
        candles = await fetch_upbit_day_candles_async(client, market.market, candle_count)
        metrics = build_coin_metrics(market, candles, period)
    except (
        httpx.HTTPError,
        UpbitAPIError,
        ValueError,
        KeyError,
        TypeError,
        OverflowError,
    ) as exc:
        logger.warning("%s 데이터 가져오기 실패: %s", market.market, exc)
        return None

    if metrics is None:
        logger.warning("%s 캔들 부족 (%d개), 제외", market.market, len(candles))
    return metrics


async def collect_coin_metrics_async(
    client: httpx.AsyncClient,
    quote_prefix: str = QUOTE_MARKET_PREFIX,
    limit: int = TOP_MARKET_LIMIT,
    candle_count: int = CANDLE_COUNT,
    period: int = RSI_PERIOD,
) -> List[CoinMetrics]:
    # 마켓 목록 실패는 요청 전체의 실패로 그대로 올려보낸다.
    markets = select_markets(list_upbit_markets(), quote_prefix, limit)

    tasks = [
        _collect_market_async(client, market, candle_count, period)
        for market in markets
    ]
    results: List[Optional[CoinMetrics]] = []
    if tasks:
        results = await asyncio.gather(*tasks)

    metrics = [r for r in results if r is not None]
    logger.info("코인 메트릭 집계 완료: 성공 %d개, 제외 %d개", len(metrics), len(markets) - len(metrics))
    return metrics


def get_coin_metrics() -> List[CoinMetrics]:
    """요청마다 새 클라이언트로 전체를 다시 계산한다."""

    async def _run() -> List[CoinMetrics]:
        async with httpx.AsyncClient() as client:
            return await collect_coin_metrics_async(client)

    return asyncio.run(_run())
