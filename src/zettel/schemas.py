"""Pydantic schemas for validating the goods and merchant catalog."""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from zettel.errors import CatalogFormatError


class Good(BaseModel):
    """A good with its canonical name and alternate spellings."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(min_length=1)
    alt_names: list[StrictStr] = Field(default_factory=list, alias="alt-names")


class Merchant(BaseModel):
    """A merchant and the goods it carries, in shopping order."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(min_length=1)
    goods: list[StrictStr] = Field(alias="waren")


class Catalog(BaseModel):
    """Declarative catalog of goods and merchants.

    The document keys follow the goods DB format: ``waren`` lists goods and
    ``locations`` lists merchants. A catalog without ``locations`` only
    contributes alternate names.
    """

    model_config = ConfigDict(frozen=True)

    goods: list[Good] = Field(alias="waren")
    merchants: list[Merchant] | None = Field(default=None, alias="locations")

    @property
    def has_merchants(self) -> bool:
        """Check if the catalog declares merchants."""
        return self.merchants is not None


ModelT = TypeVar("ModelT", bound=BaseModel)


def format_validation_error(error: ValidationError) -> str:
    """Render a pydantic validation error as one line per offending field."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<document>"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


def validate_model(model: type[ModelT], data: Any) -> ModelT:
    """
    Validate raw catalog data against a schema.

    Raises:
        CatalogFormatError: If the data does not match the schema.
    """
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise CatalogFormatError(
            f"Invalid {model.__name__.lower()} entry: {format_validation_error(e)}",
            errors=e.errors(include_url=False),
        ) from e


def validate_entries(
    model: type[ModelT], entries: Iterable[ModelT | Mapping[str, Any]]
) -> list[ModelT]:
    """Validate every entry of a catalog section."""
    return [validate_model(model, entry) for entry in entries]
