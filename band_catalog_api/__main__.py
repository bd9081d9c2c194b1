"""Run the Band Catalog API under uvicorn.

Host and port come from ``HOST`` and ``PORT`` (defaults ``0.0.0.0`` and
``3003``).

Usage:
    python -m band_catalog_api
"""

import logging

import uvicorn

from band_catalog_api.app.core.config import settings
from band_catalog_api.app.main import app


def main() -> None:
    logging.getLogger(__name__).info("Server listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
