# 업비트 공개 API
UPBIT_BASE_URL = "https://api.upbit.com"
REQUEST_TIMEOUT = 30

# 집계 대상
QUOTE_MARKET_PREFIX = "KRW-"
TOP_MARKET_LIMIT = 30
CANDLE_COUNT = 15
RSI_PERIOD = 14

# 정렬
DEFAULT_SORT = "volume"
SORT_KEYS = ("volume", "rsi", "change")

# 서버
HOST = "0.0.0.0"
PORT = 5000
LOG_LEVEL = "INFO"
