"""Loading the goods and merchant catalog from YAML."""

from pathlib import Path

import yaml

from zettel.errors import CatalogFormatError
from zettel.logging_config import get_logger
from zettel.schemas import Catalog, validate_model

logger = get_logger(__name__)


def load_catalog(text: str) -> Catalog:
    """
    Parse and validate a catalog document.

    Example document:
        waren:
          - name: Milch
            alt-names: [Vollmilch]
        locations:
          - name: Supermarkt
            waren: [Milch]

    Raises:
        CatalogFormatError: If the YAML is malformed, empty or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogFormatError(f"Malformed catalog YAML: {e}") from e

    if data is None:
        raise CatalogFormatError("No documents in YAML file")

    catalog = validate_model(Catalog, data)
    logger.debug(
        f"Loaded catalog: {len(catalog.goods)} goods, "
        f"{len(catalog.merchants) if catalog.merchants is not None else 'no'} merchants"
    )
    return catalog


def load_catalog_file(path: str | Path) -> Catalog:
    """
    Read a UTF-8 catalog file and parse it.

    Raises:
        OSError: If the file cannot be read.
        CatalogFormatError: If the file is not UTF-8 or not a valid catalog.
    """
    path = Path(path)
    logger.info(f"Loading catalog from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CatalogFormatError(f"Catalog {path} is not valid UTF-8: {e}") from e
    return load_catalog(text)
