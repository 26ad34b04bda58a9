"""Aggregation, merchant grouping and rendering of shopping lists."""

from zettel.plan.aggregate import AggregatedItem, aggregate
from zettel.plan.merchants import FALLBACK_MERCHANT, MerchantGroup, partition
from zettel.plan.render import (
    render_group,
    render_groups,
    render_item,
    render_items,
    to_list_result,
)

__all__ = [
    "FALLBACK_MERCHANT",
    "AggregatedItem",
    "MerchantGroup",
    "aggregate",
    "partition",
    "render_group",
    "render_groups",
    "render_item",
    "render_items",
    "to_list_result",
]
