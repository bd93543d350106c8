import requests

from mcp_tools_weather.services import http
from mcp_tools_weather.services.http import fetch_json


class _Response:
    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


def test_fetch_json_returns_parsed_object(monkeypatch):
    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen.update(url=url, params=params, timeout=timeout)
        return _Response(payload={"results": []})

    monkeypatch.setattr(http.requests, "get", fake_get)

    result = fetch_json("https://example.test/api", params={"a": 1}, timeout_s=5)

    assert result.ok
    assert result.data == {"results": []}
    assert seen == {"url": "https://example.test/api", "params": {"a": 1}, "timeout": 5}


def test_fetch_json_non_2xx_is_failure(monkeypatch, caplog):
    monkeypatch.setattr(http.requests, "get", lambda *a, **kw: _Response(status_code=503))

    result = fetch_json("https://example.test/api")

    assert not result.ok
    assert result.data is None
    assert "503" in result.error
    assert "Request error" in caplog.text


def test_fetch_json_network_error_is_failure(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(http.requests, "get", boom)

    result = fetch_json("https://example.test/api")

    assert not result.ok
    assert "connection refused" in result.error


def test_fetch_json_invalid_json_is_failure(monkeypatch, caplog):
    monkeypatch.setattr(
        http.requests,
        "get",
        lambda *a, **kw: _Response(json_error=ValueError("Expecting value")),
    )

    result = fetch_json("https://example.test/api")

    assert not result.ok
    assert result.error.startswith("invalid JSON")
    assert "Invalid JSON" in caplog.text


def test_fetch_json_rejects_non_object_body(monkeypatch):
    monkeypatch.setattr(http.requests, "get", lambda *a, **kw: _Response(payload=[1, 2]))

    result = fetch_json("https://example.test/api")

    assert not result.ok
    assert "list" in result.error
