from __future__ import annotations

import json
import logging
import urllib.parse
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any, Dict, Tuple

from .exceptions import HttpError
from .factory import create_error

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def handle_path(path: str) -> str:
    """Return the body for ``path`` or raise the error the route demonstrates."""
    if path == "/4xx":
        raise create_error(403)
    if path == "/5xx":
        raise RuntimeError("DB error!")
    return "Hello!"


def error_response(exc: BaseException) -> Tuple[int, Dict[str, Any]]:
    """Turn any exception into a status and a body that is safe to send.

    Exposable errors go out as they are. Anything else is logged with its
    traceback and replaced by a generic 500.
    """
    if isinstance(exc, HttpError) and exc.expose:
        logger.warning("%s", exc)
        return exc.status, exc.to_json()
    logger.error("Unhandled error while serving request", exc_info=exc)
    err = create_error(500)
    return err.status, err.to_json()


def _write_body(handler: BaseHTTPRequestHandler, status: int, content: str, content_type: str) -> None:
    handler.send_response(status)
    handler.send_header("Content-Type", content_type)
    body = content.encode("utf-8")
    handler.send_header("Content-Length", str(len(body)))
    handler.end_headers()
    handler.wfile.write(body)


class ErrorDemoRequestHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:  # noqa: N802
        path = urllib.parse.urlparse(self.path).path
        try:
            content = handle_path(path)
        except Exception as exc:  # noqa: BLE001
            status, payload = error_response(exc)
            _write_body(self, status, json.dumps(payload), JSON_CONTENT_TYPE)
            return
        _write_body(self, HTTPStatus.OK, content, TEXT_CONTENT_TYPE)

    def log_message(self, format: str, *args: object) -> None:  # noqa: A003
        logger.debug("%s - %s", self.address_string(), format % args)


def run(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    with HTTPServer((host, port), ErrorDemoRequestHandler) as httpd:
        logger.info("Server listening on http://%s:%d", host, port)
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:  # pragma: no cover - manual stop
            logger.info("Server stopped")
