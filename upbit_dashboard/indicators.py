import math
from typing import Optional, Sequence, Tuple

NEUTRAL_RSI = 50.0
MAX_RSI = 100.0


def calculate_rsi(prices: Sequence[float], period: int = 14) -> float:
    """
    최신순(newest-first) 체결가 목록으로 RSI 를 계산한다.

    데이터가 period + 1 개보다 적으면 중립값 50 을 돌려준다.
    오래된 순으로 뒤집은 뒤 처음 period 개의 변화량만 사용하므로,
    그 뒤(더 최신)의 값은 결과에 영향을 주지 않는다.
    """
    if len(prices) < period + 1:
        return NEUTRAL_RSI

    ordered = list(reversed(prices))

    gains = 0.0
    losses = 0.0
    for i in range(1, period + 1):
        change = ordered[i] - ordered[i - 1]
        if change > 0:
            gains += change
        else:
            losses += abs(change)

    avg_gain = gains / period
    avg_loss = losses / period

    if avg_loss == 0:
        return MAX_RSI

    rs = avg_gain / avg_loss
    rsi = 100 - 100 / (1 + rs)
    return round_half_up(rsi, 2)


def round_half_up(value: float, digits: int = 2) -> float:
    """소수점 digits 자리에서 반올림(.5 는 항상 올림)."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def calculate_price_change(current: float, previous: float) -> Tuple[float, Optional[float]]:
    """전일 대비 변동액과 변동률(%).전일 가격이 0 이면 변동률은 None."""
    change = current - previous
    if previous == 0:
        return change, None
    return change, change / previous * 100
