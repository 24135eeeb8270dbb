from __future__ import annotations

import os

from . import web
from .logging_config import configure_logging


def main() -> None:
    configure_logging(os.environ.get("HTTP_ERRORS_LOG_LEVEL", "INFO"))
    host = os.environ.get("HTTP_ERRORS_HOST", web.DEFAULT_HOST)
    port = int(os.environ.get("HTTP_ERRORS_PORT", web.DEFAULT_PORT))
    web.run(host, port)


if __name__ == "__main__":
    main()
