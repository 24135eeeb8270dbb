from __future__ import annotations

import json
import logging
import sys
import threading
import urllib.error
import urllib.request
from http.server import HTTPServer
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from http_errors import web
from http_errors.factory import create_error


@pytest.fixture()
def server_url():
    httpd = HTTPServer(("127.0.0.1", 0), web.ErrorDemoRequestHandler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    host, port = httpd.server_address[:2]
    yield f"http://{host}:{port}"
    httpd.shutdown()
    httpd.server_close()
    thread.join()


def _get(url: str):
    try:
        with urllib.request.urlopen(url, timeout=5) as resp:
            return resp.status, resp.headers.get("Content-Type"), resp.read().decode("utf-8")
    except urllib.error.HTTPError as exc:
        return exc.code, exc.headers.get("Content-Type"), exc.read().decode("utf-8")


def test_plain_route(server_url):
    status, content_type, body = _get(server_url + "/")
    assert status == 200
    assert content_type.startswith("text/plain")
    assert body == "Hello!"


def test_client_error_is_exposed(server_url, caplog):
    caplog.set_level(logging.WARNING, logger="http_errors.web")
    status, content_type, body = _get(server_url + "/4xx")
    assert status == 403
    assert content_type.startswith("application/json")
    assert json.loads(body) == {"name": "ForbiddenError", "status": 403, "message": "Forbidden"}
    assert any(r.levelno == logging.WARNING and "ForbiddenError [403]" in r.getMessage() for r in caplog.records)


def test_unexpected_error_is_hidden(server_url, caplog):
    caplog.set_level(logging.ERROR, logger="http_errors.web")
    status, content_type, body = _get(server_url + "/5xx")
    assert status == 500
    assert content_type.startswith("application/json")
    payload = json.loads(body)
    assert payload == {"name": "InternalServerError", "status": 500, "message": "Internal Server Error"}
    assert "DB error" not in body
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors and errors[0].exc_info is not None


def test_server_error_details_are_not_exposed():
    status, payload = web.error_response(create_error(503, "replica lag 40s"))
    assert status == 500
    assert payload["message"] == "Internal Server Error"


def test_exposed_error_keeps_custom_message():
    status, payload = web.error_response(create_error(404, "No such user", {"user_id": 3}))
    assert status == 404
    assert payload == {"name": "NotFoundError", "status": 404, "message": "No such user"}
