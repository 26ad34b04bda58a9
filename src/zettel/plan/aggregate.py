"""Aggregation of parsed entries into a sorted, deduplicated list."""

from collections.abc import Iterable
from dataclasses import dataclass

from zettel.catalog.aliases import AliasTable
from zettel.errors import UnitMismatchError
from zettel.logging_config import get_logger
from zettel.normalize.lines import RawEntry
from zettel.normalize.units import Amount

logger = get_logger(__name__)


@dataclass(frozen=True)
class AggregatedItem:
    """A canonical good with its summed amount."""

    name: str
    amount: Amount

    def __str__(self) -> str:
        if self.amount.is_single:
            return self.name
        return f"{self.amount} {self.name}"


def aggregate(
    entries: Iterable[RawEntry | AggregatedItem],
    aliases: AliasTable | None = None,
) -> list[AggregatedItem]:
    """
    Combine entries of the same canonical good.

    Names are resolved through the alias table, absent amounts count as one,
    and amounts of each good are added in input order. The result is sorted
    by canonical name.

    Args:
        entries: Parsed lines, or already aggregated items.
        aliases: Alternate name table; None resolves every name to itself.

    Returns:
        One AggregatedItem per canonical name, sorted by name.

    Raises:
        UnitMismatchError: If one good is listed with amounts of different kinds.
    """
    aliases = aliases or AliasTable()
    totals: dict[str, Amount] = {}

    for entry in entries:
        name = aliases.lookup(entry.name)
        amount = entry.effective_amount if isinstance(entry, RawEntry) else entry.amount

        if name not in totals:
            totals[name] = amount
            continue

        try:
            totals[name] = totals[name] + amount
        except UnitMismatchError as e:
            raise UnitMismatchError(
                f"Amounts for {name!r} differ in kind: {e}",
                name=name,
                kinds=e.kinds,
            ) from e

    logger.debug(f"Aggregated entries into {len(totals)} items")
    return [AggregatedItem(name=name, amount=totals[name]) for name in sorted(totals)]
