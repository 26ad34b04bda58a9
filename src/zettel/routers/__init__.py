"""API routers for the zettel application."""

from zettel.routers.shopping_list import router as shopping_list_router

__all__ = [
    "shopping_list_router",
]
