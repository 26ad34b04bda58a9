"""Alternate name resolution for goods."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from zettel.logging_config import get_logger
from zettel.schemas import Catalog, Good, validate_entries

logger = get_logger(__name__)


class AliasTable:
    """Read-only mapping from alternate spellings to canonical names.

    Lookups are exact and case-sensitive. Names without an entry are their
    own canonical name.
    """

    def __init__(self, mapping: Mapping[str, str] | None = None):
        self._mapping = MappingProxyType(dict(mapping or {}))

    @classmethod
    def from_goods(cls, goods: Iterable[Good | Mapping[str, Any]]) -> "AliasTable":
        """
        Build the table from goods entries.

        An alternate name listed under several goods maps to the last one.

        Raises:
            CatalogFormatError: If a goods entry is malformed.
        """
        mapping: dict[str, str] = {}
        for good in validate_entries(Good, goods):
            for alt_name in good.alt_names:
                mapping[alt_name] = good.name

        logger.debug(f"Built alias table with {len(mapping)} alternate names")
        return cls(mapping)

    @classmethod
    def from_catalog(cls, catalog: Catalog | None) -> "AliasTable":
        """Build the table from a catalog; no catalog yields an empty table."""
        if catalog is None:
            return cls()
        return cls.from_goods(catalog.goods)

    def lookup(self, name: str) -> str:
        """Return the canonical name for a name."""
        return self._mapping.get(name, name)

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, name: object) -> bool:
        return name in self._mapping

    def __repr__(self) -> str:
        return f"AliasTable({dict(self._mapping)!r})"


def build_alias_table(goods: Iterable[Good | Mapping[str, Any]]) -> AliasTable:
    """Build an alias table from goods entries."""
    return AliasTable.from_goods(goods)
