"""FastAPI application entry point."""

from fastapi import FastAPI

from zettel import __version__
from zettel.config import get_settings
from zettel.logging_config import configure_logging, get_logger
from zettel.routers import shopping_list_router

# Configure logging on module load
configure_logging(log_level=get_settings().log_level)
logger = get_logger(__name__)


app = FastAPI(
    title="Zettel API",
    description="Sort, deduplicate and group free-text shopping lists",
    version=__version__,
)

app.include_router(shopping_list_router)


@app.get("/health")
def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "zettel-api"}


@app.get("/")
def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Zettel API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
