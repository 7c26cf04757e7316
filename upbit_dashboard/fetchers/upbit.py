from typing import Any, Dict, List

import httpx
import requests

from upbit_dashboard.config import REQUEST_TIMEOUT, UPBIT_BASE_URL
from upbit_dashboard.models import CandleRecord, MarketInfo

_HEADERS = {"Accept": "application/json"}


class UpbitAPIError(Exception):
    """업비트가 성공이 아닌 상태 코드를 돌려준 경우."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Upbit API 오류: {status_code}")
        self.status_code = status_code


def list_upbit_markets() -> List[MarketInfo]:
    """업비트 전체 마켓 목록. 순서는 업비트가 돌려준 그대로 유지한다."""
    response = requests.get(
        f"{UPBIT_BASE_URL}/v1/market/all",
        headers=_HEADERS,
        timeout=REQUEST_TIMEOUT,
    )
    if not response.ok:
        raise UpbitAPIError(response.status_code)
    data = response.json()

    if not isinstance(data, list):
        raise ValueError(f"API 응답 형식 오류: 리스트를 기대했으나 {type(data)}")

    markets: List[MarketInfo] = []
    for item in data:
        if not isinstance(item, dict) or not item.get("market"):
            raise ValueError(f"마켓 데이터 형식 오류: {item}")
        markets.append(
            MarketInfo(
                market=item["market"],
                korean_name=item.get("korean_name", ""),
                english_name=item.get("english_name", ""),
            )
        )
    return markets


async def fetch_upbit_day_candles_async(
    client: httpx.AsyncClient,
    market: str,
    count: int,
) -> List[CandleRecord]:
    response = await client.get(
        f"{UPBIT_BASE_URL}/v1/candles/days",
        params={"market": market, "count": count},
        headers=_HEADERS,
        timeout=REQUEST_TIMEOUT,
    )
    if not response.is_success:
        raise UpbitAPIError(response.status_code)
    raw_candles = response.json()

    if not isinstance(raw_candles, list):
        raise ValueError(f"API 응답 형식 오류: 리스트를 기대했으나 {type(raw_candles)}")

    # 업비트 일 캔들은 최신순(가장 최근이 먼저)으로 내려온다.
    return [_parse_candle(entry, market) for entry in raw_candles]


def _parse_candle(entry: Dict[str, Any], market: str) -> CandleRecord:
    if not isinstance(entry, dict):
        raise ValueError(f"캔들 데이터 형식 오류: {entry}")

    return CandleRecord(
        market=entry.get("market", market),
        trade_price=float(entry["trade_price"]),
        acc_trade_volume=float(entry["candle_acc_trade_volume"]),
        timestamp=int(entry.get("timestamp", 0)),
        candle_date_time_utc=entry.get("candle_date_time_utc", ""),
        candle_date_time_kst=entry.get("candle_date_time_kst", ""),
        opening_price=float(entry.get("opening_price", 0)),
        high_price=float(entry.get("high_price", 0)),
        low_price=float(entry.get("low_price", 0)),
        acc_trade_price=float(entry.get("candle_acc_trade_price", 0)),
    )
