"""Assignment of aggregated items to merchants."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from zettel.logging_config import get_logger
from zettel.plan.aggregate import AggregatedItem
from zettel.schemas import Merchant, validate_entries

logger = get_logger(__name__)

FALLBACK_MERCHANT = "elsewhere"


@dataclass
class MerchantGroup:
    """Items to buy at one merchant, in shopping order."""

    name: str
    items: list[AggregatedItem] = field(default_factory=list)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def partition(
    items: Sequence[AggregatedItem],
    merchants: Iterable[Merchant | Mapping[str, Any]],
    fallback_label: str = FALLBACK_MERCHANT,
) -> list[MerchantGroup]:
    """
    Split aggregated items across merchants.

    Each item goes to the first merchant, in declaration order, that lists
    it. Items within a merchant follow the merchant's declared goods order.
    Merchants without items are left out. Unclaimed items end up in a final
    fallback group in their aggregated order.

    Args:
        items: Aggregated items, one per canonical name.
        merchants: Merchant entries in declaration order.
        fallback_label: Name of the group for unclaimed items.

    Returns:
        Non-empty merchant groups, followed by the fallback group if any
        items were left over.

    Raises:
        CatalogFormatError: If a merchant entry is malformed.
    """
    merchants = validate_entries(Merchant, merchants)
    by_name = {item.name: item for item in items}
    claimed: set[str] = set()
    groups: list[MerchantGroup] = []

    for merchant in merchants:
        group = MerchantGroup(name=merchant.name)
        for good in merchant.goods:
            if good in by_name and good not in claimed:
                claimed.add(good)
                group.items.append(by_name[good])
        if group.items:
            groups.append(group)

    leftovers = [item for item in items if item.name not in claimed]
    if leftovers:
        groups.append(MerchantGroup(name=fallback_label, items=leftovers))

    logger.debug(
        f"Partitioned {len(items)} items into {len(groups)} groups, "
        f"{len(leftovers)} without merchant"
    )
    return groups
