"""
fix_karachi.api.__main__

Entrypoint for running the web application via `python -m fix_karachi.api`
(or the `fix-karachi` console script).

Responsibilities:
- Load settings.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from fix_karachi.api.app import create_app
from fix_karachi.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
