"""
HTTP API Tests

Exercises the page, the two JSON endpoints, error responses and CORS headers
through Starlette's TestClient.
"""

import json
import logging

import pytest
from starlette.testclient import TestClient

from tapcount import JsonFileStore, MemoryStore, StoreWriteError, create_app
from tapcount.app.middleware import CORS_HEADERS


def assert_cors(response):
    for name, value in CORS_HEADERS.items():
        assert response.headers.get(name) == value, f"missing {name}"


class FailingWriteStore(MemoryStore):
    def write(self, count: int) -> None:
        if self.exists():
            raise StoreWriteError("disk full")
        super().write(count)


class TestPage:

    def test_index_serves_html(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"] == "text/html; charset=utf-8"
        body = response.text
        assert body.lower().startswith("<!doctype html>")
        assert "<title>Click Counter</title>" in body
        assert "/api/increment" in body
        assert "touchcount.json" in body
        assert_cors(response)


class TestCountApi:

    def test_fresh_start_returns_zero_and_creates_file(self, app, data_path):
        # no lifespan: the request itself must create the file
        client = TestClient(app)
        assert not data_path.exists()

        response = client.get("/api/count")

        assert response.status_code == 200
        assert response.json() == {"count": 0}
        assert json.loads(data_path.read_text()) == {"count": 0}

    def test_startup_creates_data_file(self, client, data_path):
        assert json.loads(data_path.read_text()) == {"count": 0}

    def test_reads_existing_value(self, app, data_path):
        data_path.write_text(json.dumps({"count": 17}))
        with TestClient(app) as client:
            assert client.get("/api/count").json() == {"count": 17}

    @pytest.mark.parametrize("content", [
        "{{{ definitely not json",
        pytest.param("[" * 100000, id="deeply-nested"),
        pytest.param("{\"count\": 1" + "0" * 5000 + "}", id="int-past-digit-limit"),
    ])
    def test_corrupt_file_reads_zero(self, app, data_path, content):
        data_path.write_text(content)
        with TestClient(app) as client:
            response = client.get("/api/count")
        assert response.status_code == 200
        assert response.json() == {"count": 0}

    def test_response_is_json_with_cors(self, client):
        response = client.get("/api/count")
        assert response.headers["content-type"].startswith("application/json")
        assert_cors(response)


class TestIncrementApi:

    def test_increment_returns_new_count(self, client):
        response = client.post("/api/increment")
        assert response.status_code == 200
        assert response.json() == {"count": 1}
        assert_cors(response)

    def test_n_sequential_increments(self, client, data_path):
        data_path.write_text(json.dumps({"count": 100}))
        for _ in range(7):
            client.post("/api/increment")
        assert client.get("/api/count").json() == {"count": 107}
        assert json.loads(data_path.read_text()) == {"count": 107}

    @pytest.mark.parametrize("content", ["garbage", pytest.param("[" * 100000, id="deeply-nested")])
    def test_increment_recovers_from_corrupt_file(self, client, data_path, content):
        data_path.write_text(content)
        assert client.post("/api/increment").json() == {"count": 1}
        assert json.loads(data_path.read_text()) == {"count": 1}

    def test_count_persists_across_app_instances(self, config, data_path):
        with TestClient(create_app(config, JsonFileStore(data_path))) as client:
            client.post("/api/increment")
            client.post("/api/increment")

        with TestClient(create_app(config, JsonFileStore(data_path))) as client:
            assert client.get("/api/count").json() == {"count": 2}


class TestErrors:

    @pytest.mark.parametrize("method,path", [
        ("GET", "/missing"),
        ("GET", "/api"),
        ("POST", "/api/count/extra"),
        ("GET", "/api/increment"),
        ("POST", "/api/count"),
        ("POST", "/"),
    ])
    def test_unknown_route_is_404_json(self, client, method, path):
        response = client.request(method, path)
        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}
        assert_cors(response)

    def test_write_failure_is_500_json(self, config, caplog):
        app = create_app(config, FailingWriteStore())
        with TestClient(app, raise_server_exceptions=False) as client:
            with caplog.at_level(logging.ERROR, logger="tapcount.app.routes"):
                response = client.post("/api/increment")

        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}
        assert_cors(response)
        assert any("Unhandled error" in r.getMessage() for r in caplog.records)


class TestPreflight:

    @pytest.mark.parametrize("path", ["/", "/api/count", "/api/increment", "/anything"])
    def test_options_returns_204(self, client, path):
        response = client.options(path)
        assert response.status_code == 204
        assert response.content == b""
        assert_cors(response)
