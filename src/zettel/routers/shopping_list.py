"""API routes for generating shopping lists."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from zettel.config import get_settings
from zettel.errors import ZettelError
from zettel.logging_config import get_logger
from zettel.pipeline import ShoppingListGenerator

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])


# Request/Response schemas
class ShoppingListRequest(BaseModel):
    """Free-text list and optional catalog document."""

    text: str = Field(description="Newline-separated items, optionally prefixed by an amount")
    catalog: str | None = Field(None, description="Catalog YAML with waren and locations")


class ShoppingListGroup(BaseModel):
    """Rendered items for one merchant."""

    name: str
    items: list[str]


class ShoppingListResponse(BaseModel):
    """Generated shopping list."""

    plaintext: str
    groups: list[ShoppingListGroup]
    partitioned: bool


@router.post("", response_model=ShoppingListResponse)
def create_shopping_list(request: ShoppingListRequest) -> ShoppingListResponse:
    """
    Sort, deduplicate and group a shopping list.

    Without a catalog, or with a catalog that lists no merchants, the
    result is a single flat group.
    """
    try:
        generator = ShoppingListGenerator.from_catalog_text(request.catalog, get_settings())
        result = generator.generate(request.text)
    except ZettelError as e:
        logger.warning(f"Rejected shopping list request: {e}")
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e

    return ShoppingListResponse(
        plaintext=result.to_text(),
        groups=[ShoppingListGroup(**group) for group in result.to_list()],
        partitioned=result.is_partitioned,
    )
