"""Shopping list generation from free-text input."""

from dataclasses import dataclass
from typing import Any

from zettel.catalog.aliases import AliasTable
from zettel.catalog.loader import load_catalog
from zettel.config import Settings, get_settings
from zettel.logging_config import get_logger
from zettel.normalize.lines import parse_lines
from zettel.plan.aggregate import AggregatedItem, aggregate
from zettel.plan.merchants import MerchantGroup, partition
from zettel.plan.render import render_groups, render_items, to_list_result
from zettel.schemas import Catalog

logger = get_logger(__name__)


@dataclass(frozen=True)
class ShoppingListResult:
    """Outcome of one generation run.

    ``groups`` is None when no merchants were configured; the list is then
    the flat aggregated ``items``.
    """

    items: list[AggregatedItem]
    groups: list[MerchantGroup] | None = None
    flat_label: str = "Einkaufszettel"

    @property
    def is_partitioned(self) -> bool:
        return self.groups is not None

    def to_text(self) -> str:
        """Plaintext rendering of the list."""
        if self.groups is not None:
            return render_groups(self.groups)
        return render_items(self.items)

    def to_list(self) -> list[dict[str, Any]]:
        """Structured rendering; a flat list is reported as a single group."""
        if self.groups is not None:
            return to_list_result(self.groups)
        return to_list_result([MerchantGroup(name=self.flat_label, items=self.items)])


class ShoppingListGenerator:
    """
    Generates shopping lists from free text with:
    - Amount parsing and unit-aware summation
    - Alternate name resolution from the goods catalog
    - Merchant grouping from the catalog's locations

    The catalog-derived tables are built once and reused for every input.
    """

    def __init__(self, catalog: Catalog | None = None, settings: Settings | None = None):
        self.catalog = catalog
        self.settings = settings or get_settings()
        self.aliases = AliasTable.from_catalog(catalog)

    @classmethod
    def from_catalog_text(
        cls, catalog_text: str | None, settings: Settings | None = None
    ) -> "ShoppingListGenerator":
        """Create a generator from a catalog YAML document, if any."""
        catalog = load_catalog(catalog_text) if catalog_text is not None else None
        return cls(catalog, settings)

    def generate(self, text: str) -> ShoppingListResult:
        """
        Generate a shopping list from free text.

        Raises:
            ZettelError: On any parse, unit or catalog error; nothing partial is returned.
        """
        entries = parse_lines(text)
        items = aggregate(entries, self.aliases)

        groups = None
        if self.catalog is not None and self.catalog.merchants is not None:
            groups = partition(items, self.catalog.merchants, self.settings.fallback_label)

        logger.info(
            f"Generated shopping list: {len(entries)} lines, {len(items)} items"
            + (f", {len(groups)} groups" if groups is not None else "")
        )
        return ShoppingListResult(
            items=items,
            groups=groups,
            flat_label=self.settings.flat_list_label,
        )


def make_shopping_list(text: str, catalog_text: str | None = None) -> str:
    """Turn free text, with an optional catalog document, into a plaintext shopping list."""
    return ShoppingListGenerator.from_catalog_text(catalog_text).generate(text).to_text()


class ShoppingListSession:
    """Interactive state: load a catalog once, then process inputs repeatedly."""

    NOTHING = "Nothing"

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._generator = ShoppingListGenerator(settings=self.settings)
        self._result: ShoppingListResult | None = None

    def load_config(self, catalog_text: str) -> None:
        """Load a catalog document for subsequent inputs."""
        self._generator = ShoppingListGenerator.from_catalog_text(catalog_text, self.settings)

    def process_input(self, text: str) -> None:
        """Generate a list from text; on error the previous result is kept."""
        self._result = self._generator.generate(text)

    @property
    def result(self) -> ShoppingListResult | None:
        return self._result

    def get_plaintext_result(self) -> str:
        if self._result is None:
            return self.NOTHING
        return self._result.to_text()

    def get_list_result(self) -> list[dict[str, Any]]:
        if self._result is None:
            return []
        return self._result.to_list()
