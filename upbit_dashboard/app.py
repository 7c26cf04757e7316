"""
업비트 코인 지표 대시보드 Flask 애플리케이션.

- /api/metrics : 코인 메트릭 JSON (CORS 허용)
- 그 외 모든 경로 : ?sort=volume|rsi|change 로 정렬한 HTML 대시보드
"""
import logging

from flask import Flask, Response, jsonify, request

from upbit_dashboard.config import DEFAULT_SORT
from upbit_dashboard.dashboard import render_dashboard, render_metrics_json
from upbit_dashboard.metrics import get_coin_metrics

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "알 수 없는 오류"

# 메서드와 관계없이 같은 응답을 준다
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

app = Flask(__name__)


def error_response(exc: Exception) -> Response:
    message = str(exc) or UNKNOWN_ERROR_MESSAGE
    return Response(
        f"오류 발생: {message}",
        status=500,
        content_type="text/plain; charset=utf-8",
    )


@app.route("/api/metrics", methods=ALL_METHODS)
def api_metrics():
    """API endpoint for coin metrics"""
    try:
        metrics = get_coin_metrics()
        response = jsonify(render_metrics_json(metrics))
    except Exception as exc:
        logger.exception("코인 메트릭 API 처리 실패")
        return error_response(exc)

    response.headers["Access-Control-Allow-Origin"] = "*"
    return response


@app.route("/", defaults={"path": ""}, methods=ALL_METHODS)
@app.route("/<path:path>", methods=ALL_METHODS)
def dashboard(path: str):
    """Dashboard page route"""
    sort_by = request.args.get("sort") or DEFAULT_SORT
    try:
        metrics = get_coin_metrics()
        html = render_dashboard(metrics, sort_by)
    except Exception as exc:
        logger.exception("대시보드 생성 실패")
        return error_response(exc)

    return Response(html, content_type="text/html; charset=utf-8")
