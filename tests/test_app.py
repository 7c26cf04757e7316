from unittest.mock import patch

import pytest

from upbit_dashboard.app import app
from upbit_dashboard.fetchers.upbit import UpbitAPIError

from conftest import make_coin


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def coins():
    return [
        make_coin("KRW-BTC", volume=10.0, rsi=80.0, percent=-1.0),
        make_coin("KRW-ETH", volume=90.0, rsi=20.0, percent=3.0),
    ]


class TestApiMetrics:
    def test_returns_json_with_cors(self, client, coins):
        with patch("upbit_dashboard.app.get_coin_metrics", return_value=coins):
            response = client.get("/api/metrics")

        assert response.status_code == 200
        assert response.mimetype == "application/json"
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert [d["market"] for d in response.get_json()] == ["KRW-BTC", "KRW-ETH"]

    def test_ignores_sort_parameter(self, client, coins):
        with patch("upbit_dashboard.app.get_coin_metrics", return_value=coins):
            response = client.get("/api/metrics?sort=volume")

        assert [d["market"] for d in response.get_json()] == ["KRW-BTC", "KRW-ETH"]

    def test_upstream_failure_is_500(self, client):
        with patch("upbit_dashboard.app.get_coin_metrics", side_effect=UpbitAPIError(502)):
            response = client.get("/api/metrics")

        assert response.status_code == 500
        assert response.mimetype == "text/plain"
        assert response.get_data(as_text=True) == "오류 발생: Upbit API 오류: 502"


class TestDashboard:
    def test_default_sort_is_volume(self, client, coins):
        with patch("upbit_dashboard.app.get_coin_metrics", return_value=coins):
            response = client.get("/")

        html = response.get_data(as_text=True)
        assert response.status_code == 200
        assert response.content_type == "text/html; charset=utf-8"
        assert html.index("KRW-ETH") < html.index("KRW-BTC")
        assert '<option value="volume" selected>' in html

    def test_sort_by_rsi(self, client, coins):
        with patch("upbit_dashboard.app.get_coin_metrics", return_value=coins):
            html = client.get("/?sort=rsi").get_data(as_text=True)

        assert html.index("KRW-BTC") < html.index("KRW-ETH")

    def test_any_other_path_renders_dashboard(self, client, coins):
        with patch("upbit_dashboard.app.get_coin_metrics", return_value=coins):
            response = client.get("/some/other/page?sort=change")

        html = response.get_data(as_text=True)
        assert response.status_code == 200
        assert html.index("KRW-ETH") < html.index("KRW-BTC")

    def test_failure_without_message(self, client):
        with patch("upbit_dashboard.app.get_coin_metrics", side_effect=RuntimeError()):
            response = client.get("/")

        assert response.status_code == 500
        assert response.get_data(as_text=True) == "오류 발생: 알 수 없는 오류"

    def test_render_failure_is_500(self, client, coins):
        with patch("upbit_dashboard.app.get_coin_metrics", return_value=coins), \
             patch("upbit_dashboard.app.render_dashboard", side_effect=ValueError("template broken")):
            response = client.get("/")

        assert response.status_code == 500
        assert response.get_data(as_text=True) == "오류 발생: template broken"


@pytest.mark.parametrize("method", ["post", "put", "delete"])
def test_every_method_is_served(client, coins, method):
    with patch("upbit_dashboard.app.get_coin_metrics", return_value=coins):
        page = getattr(client, method)("/")
        api = getattr(client, method)("/api/metrics")

    assert page.status_code == 200
    assert page.mimetype == "text/html"
    assert api.status_code == 200
    assert api.headers["Access-Control-Allow-Origin"] == "*"
