"""
service_gateway.api.__main__

Entrypoint for running the gateway via `python -m service_gateway.api`.

Responsibilities:
- Load settings.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from service_gateway.api.app import create_app
from service_gateway.observability.logging import get_logger
from service_gateway.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    log.info(
        "gateway_listening",
        port=settings.api_port,
        url=f"http://localhost:{settings.api_port}",
    )
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
