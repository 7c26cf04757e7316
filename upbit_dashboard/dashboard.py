import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from flask import render_template

from upbit_dashboard.config import DEFAULT_SORT, SORT_KEYS
from upbit_dashboard.models import CoinMetrics

logger = logging.getLogger(__name__)

OVERBOUGHT_COLOR = "#ef4444"
OVERSOLD_COLOR = "#3b82f6"
NEUTRAL_COLOR = "#6b7280"
RISE_COLOR = "#10b981"
FALL_COLOR = "#ef4444"


def _change_sort_value(coin: CoinMetrics) -> float:
    # 변동률을 정의할 수 없는 코인은 맨 뒤로
    if coin.price_change_percent is None:
        return float("-inf")
    return coin.price_change_percent


SORT_FIELDS: Dict[str, Callable[[CoinMetrics], float]] = {
    "volume": lambda coin: coin.volume_24h,
    "rsi": lambda coin: coin.rsi,
    "change": _change_sort_value,
}

SORT_LABELS = dict(zip(SORT_KEYS, ("거래량 높은순", "RSI 높은순", "변동률 높은순")))


def sort_metrics(metrics: Sequence[CoinMetrics], sort_by: str) -> List[CoinMetrics]:
    """
    정렬 기준에 따라 내림차순 정렬한 새 리스트를 돌려준다.

    값이 같으면 입력 순서를 유지한다. 알 수 없는 기준이면 입력 순서 그대로.
    """
    key = SORT_FIELDS.get(sort_by)
    if key is None:
        logger.debug("알 수 없는 정렬 기준 %r, 정렬하지 않음", sort_by)
        return list(metrics)
    return sorted(metrics, key=key, reverse=True)


def rsi_color(rsi: float) -> str:
    if rsi > 70:
        return OVERBOUGHT_COLOR
    if rsi < 30:
        return OVERSOLD_COLOR
    return NEUTRAL_COLOR


def change_color(percent: Optional[float]) -> str:
    if percent is None:
        return NEUTRAL_COLOR
    return RISE_COLOR if percent > 0 else FALL_COLOR


def _format_number(value: float, max_fraction_digits: int) -> str:
    text = f"{value:,.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_price(value: float) -> str:
    return f"{_format_number(value, 3)}원"


def format_volume(value: float) -> str:
    return _format_number(value, 2)


def format_percent(percent: Optional[float]) -> str:
    if percent is None:
        return "-"
    sign = "+" if percent > 0 else ""
    return f"{sign}{percent:.2f}%"


def build_rows(metrics: Sequence[CoinMetrics]) -> List[Dict[str, Any]]:
    """템플릿에 넘길 표 행. 색상과 숫자 형식은 여기서 정한다."""
    return [
        {
            "rank": index,
            "korean_name": coin.korean_name,
            "market": coin.market,
            "price": format_price(coin.current_price),
            "change": format_percent(coin.price_change_percent),
            "change_color": change_color(coin.price_change_percent),
            "volume": format_volume(coin.volume_24h),
            "rsi": f"{coin.rsi:.2f}",
            "rsi_color": rsi_color(coin.rsi),
        }
        for index, coin in enumerate(metrics, 1)
    ]


def render_dashboard(metrics: Sequence[CoinMetrics], sort_by: str = DEFAULT_SORT) -> str:
    """Flask 애플리케이션 컨텍스트 안에서 호출해야 한다."""
    rows = build_rows(sort_metrics(metrics, sort_by))
    return render_template(
        "dashboard.html",
        rows=rows,
        sort_by=sort_by,
        sort_options=[(key, SORT_LABELS[key]) for key in SORT_KEYS],
        colors={
            "overbought": OVERBOUGHT_COLOR,
            "oversold": OVERSOLD_COLOR,
            "neutral": NEUTRAL_COLOR,
        },
    )


def render_metrics_json(metrics: Sequence[CoinMetrics]) -> List[Dict[str, Any]]:
    return [coin.to_dict() for coin in metrics]
