"""Parse free-text lines into amounts and names."""

from zettel.normalize.lines import RawEntry, parse_line, parse_lines
from zettel.normalize.units import (
    ONE,
    Amount,
    AmountKind,
    parse_amount,
    try_parse_amount,
)

__all__ = [
    "ONE",
    "Amount",
    "AmountKind",
    "RawEntry",
    "parse_amount",
    "parse_line",
    "parse_lines",
    "try_parse_amount",
]
