"""Command line interface for sorting a shopping list.

Reads an unsorted list of goods and writes the sorted shopping list.

Run with: zettel einkauf.txt
          zettel einkauf.txt sorted.txt --goods-db waren.yaml
          cat einkauf.txt | zettel
"""

import argparse
import sys
from pathlib import Path

from zettel.catalog.loader import load_catalog_file
from zettel.config import get_settings
from zettel.errors import ZettelError
from zettel.logging_config import LoggingContext, configure_logging, get_logger
from zettel.pipeline import ShoppingListGenerator

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="zettel",
        description="Sort, deduplicate and group a free-text shopping list.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Unsorted list of goods to buy (default: stdin)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        help="File for the final shopping list (default: stdout)",
    )
    parser.add_argument(
        "--goods-db",
        type=Path,
        default=None,
        help="YAML file listing goods, alternate names and merchants",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum log level (default: from ZETTEL_LOG_LEVEL or INFO)",
    )
    return parser


def run(args: argparse.Namespace) -> str:
    """Load inputs, generate the list and return its plaintext rendering."""
    settings = get_settings()
    goods_db = args.goods_db or settings.goods_db

    catalog = None
    if goods_db is not None:
        with LoggingContext(catalog=str(goods_db)):
            catalog = load_catalog_file(goods_db)

    source = str(args.input) if args.input else "<stdin>"
    if args.input:
        text = args.input.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    with LoggingContext(source=source):
        result = ShoppingListGenerator(catalog, settings).generate(text)
    return result.to_text()


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``zettel`` command."""
    args = build_parser().parse_args(argv)
    configure_logging(log_level=args.log_level or get_settings().log_level)

    try:
        output = run(args)
    except ZettelError as e:
        logger.error(f"Unable to build shopping list: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Unable to read input: {e}")
        return 1

    if args.output:
        try:
            args.output.write_text(output, encoding="utf-8")
        except OSError as e:
            logger.error(f"Unable to write output file: {e}")
            return 1
        logger.info(f"Wrote shopping list to {args.output}")
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
