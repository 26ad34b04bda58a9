"""Goods and merchant catalog loading and alias resolution."""

from zettel.catalog.aliases import AliasTable, build_alias_table
from zettel.catalog.loader import load_catalog, load_catalog_file

__all__ = [
    "AliasTable",
    "build_alias_table",
    "load_catalog",
    "load_catalog_file",
]
