from __future__ import annotations

import threading

import requests


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"status": "ok", "screen": "idle"}


def test_state_before_fetch(client):
    data = client.get("/api/state").get_json()["data"]

    assert data["state"] == "idle"
    assert data["report"] == "아직 분석된 내용이 없습니다."
    assert data["combinations"] == []
    assert data["stats"] is None


def test_api_analyze_success(client, payload):
    resp = client.post("/api/analyze")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["started"] is True
    assert body["data"]["report"] == payload["report"]
    assert body["data"]["stats"]["sum_trend_polyline"][0] == [10.0, 110.0]


def test_api_analyze_failure_keeps_state(client, source):
    first = client.post("/api/analyze").get_json()["data"]

    resp = client.post("/api/analyze")

    assert resp.status_code == 502
    body = resp.get_json()
    assert body["success"] is False
    assert body["error"]["code"] == "fetch_failed"
    after = client.get("/api/state").get_json()["data"]
    assert after["report"] == first["report"]
    assert after["combinations"] == first["combinations"]
    assert after["stats"] == first["stats"]
    assert after["notifications"] == []
    assert source.calls == 2


def test_index_empty_screen(client):
    resp = client.get("/")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "버튼을 눌러 분석을 시작하세요!" in html
    assert "AI 정밀 분석 시작" in html


def test_form_trigger_renders_results(client):
    resp = client.post("/analyze")

    assert resp.status_code == 302
    html = client.get("/").get_data(as_text=True)
    assert "균형 잡힌 조합" in html
    assert "#fbc400" in html
    assert "최신" in html
    assert "🔥 Hot" in html


def test_form_failure_shows_alert_exactly_once(client):
    client.post("/analyze")
    client.post("/analyze")

    first = client.get("/").get_data(as_text=True)
    second = client.get("/").get_data(as_text=True)

    assert first.count("서버 연결 실패") == 1
    assert "서버 연결 실패" not in second
    assert "균형 잡힌 조합" in second


def test_unknown_route_is_json_404(client):
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "not_found"


def test_favicon(client):
    resp = client.get("/favicon.ico")

    assert resp.mimetype == "image/svg+xml"


def _blocked_app(*results):
    from lotto_viewer import create_app
    from tests.conftest import FakeSource

    source = FakeSource(*results)
    source.block = True
    app = create_app({"TESTING": True, "ANALYSIS_CLIENT": source})
    return app, source


def test_api_analyze_while_busy_does_not_start(payload):
    app, source = _blocked_app(payload, payload)
    screen = app.extensions["screen"]
    worker = threading.Thread(target=screen.trigger)
    worker.start()
    assert source.started.wait(timeout=5)

    try:
        client = app.test_client()
        resp = client.post("/api/analyze")
        html = client.get("/").get_data(as_text=True)
    finally:
        source.release.set()
        worker.join(timeout=5)

    assert resp.status_code == 200
    body = resp.get_json()["data"]
    assert body["started"] is False
    assert body["is_loading"] is True
    assert source.calls == 1
    assert 'type="submit" disabled' in html
    assert "분석 중..." in html


def test_button_enabled_when_idle(client):
    html = client.get("/").get_data(as_text=True)

    assert 'type="submit" disabled' not in html


def test_api_failure_keeps_form_notifications(client):
    client.post("/analyze")
    client.post("/analyze")

    assert client.post("/api/analyze").status_code == 200
    html = client.get("/").get_data(as_text=True)

    assert html.count("서버 연결 실패") == 1


def test_deeply_nested_payload_shows_alert():
    from lotto_viewer import create_app
    from lotto_viewer.clients.analysis_client import AnalysisClient

    depth = 200_000
    resp = requests.Response()
    resp.status_code = 200
    resp._content = b"[" * depth + b"]" * depth
    resp.encoding = "utf-8"

    class _Http:
        def get(self, url, **kwargs):
            return resp

    analysis = AnalysisClient("http://analysis.test/x", http=_Http())  # type: ignore[arg-type]
    client = create_app({"TESTING": True, "ANALYSIS_CLIENT": analysis}).test_client()

    assert client.post("/analyze").status_code == 302
    html = client.get("/").get_data(as_text=True)

    assert html.count("서버 연결 실패") == 1
    assert "버튼을 눌러 분석을 시작하세요!" in html
