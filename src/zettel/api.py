"""Entry point for running the API server.

Usage:
    zettel-api
    python -m zettel.api
"""

import uvicorn

from zettel.config import get_settings


def main() -> None:
    """Run the API server."""
    settings = get_settings()
    uvicorn.run(
        "zettel.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
