"""Text and structured rendering of shopping lists."""

from collections.abc import Iterable, Sequence
from typing import Any

from zettel.plan.aggregate import AggregatedItem
from zettel.plan.merchants import MerchantGroup


def render_item(item: AggregatedItem) -> str:
    """Render one item as "<amount> <name>", or just the name for a single item."""
    return str(item)


def render_items(items: Iterable[AggregatedItem]) -> str:
    """Render a flat list, one newline-terminated line per item."""
    return "".join(f"{render_item(item)}\n" for item in items)


def render_group(group: MerchantGroup) -> str:
    """Render one merchant block with an underlined header."""
    header = f"{group.name}\n{'=' * len(group.name)}\n"
    return header + render_items(group.items)


def render_groups(groups: Iterable[MerchantGroup]) -> str:
    """Render merchant blocks separated by a blank line."""
    return "\n".join(render_group(group) for group in groups)


def to_list_result(groups: Sequence[MerchantGroup]) -> list[dict[str, Any]]:
    """
    Convert groups into plain data for UI callers.

    Returns:
        A list of {"name": <group name>, "items": [<rendered item>, ...]}.
    """
    return [
        {"name": group.name, "items": [render_item(item) for item in group.items]}
        for group in groups
    ]
