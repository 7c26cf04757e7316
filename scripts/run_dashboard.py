"""
업비트 코인 지표 대시보드 실행 스크립트.

예시:
    python scripts/run_dashboard.py --port 8080
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from upbit_dashboard.app import app
from upbit_dashboard.config import HOST, LOG_LEVEL, PORT


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="업비트 코인 지표 대시보드 서버 실행")
    parser.add_argument("--host", default=HOST, help=f"바인딩 주소, 기본 {HOST}")
    parser.add_argument("--port", type=int, default=PORT, help=f"포트, 기본 {PORT}")
    parser.add_argument("--debug", action="store_true", help="Flask 디버그 모드")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    print(f"대시보드: http://{args.host}:{args.port}")
    print(f"API: http://{args.host}:{args.port}/api/metrics")
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
