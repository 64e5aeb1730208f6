"""
booking_platform.api.__main__

Entrypoint for running the API via `python -m booking_platform.api`.
"""

from __future__ import annotations

import uvicorn

from booking_platform.api.app import create_app
from booking_platform.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
