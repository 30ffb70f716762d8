"""
Know India translation gateway - main entry point.

Runs the API server:
    python -m knowindia.main
"""

from __future__ import annotations

import logging

import uvicorn

from knowindia.config import get_settings


def main():
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    uvicorn.run(
        "knowindia.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug and not settings.is_production,
    )


if __name__ == "__main__":
    main()
