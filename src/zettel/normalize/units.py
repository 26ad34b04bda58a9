"""Unit-aware amounts: parsing, display and addition."""

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from zettel.errors import ParseError, UnitMismatchError


class AmountKind(str, Enum):
    """Kind of quantity an amount measures."""

    COUNT = "count"
    MASS = "mass"
    VOLUME = "volume"


# =============================================================================
# Unit Conversion Tables
# =============================================================================

# Suffixes in matching order: (suffix, kind, factor to canonical sub-unit).
# "g" is tried before "kg", so "1.5kg" first leaves "1.5k", which is not a number.
UNIT_SUFFIXES: list[tuple[str, AmountKind, int]] = [
    ("g", AmountKind.MASS, 1),
    ("kg", AmountKind.MASS, 1000),
    ("ml", AmountKind.VOLUME, 1),
    ("l", AmountKind.VOLUME, 1000),
]

# Display units: (small unit, large unit); the large unit is 1000 small units.
DISPLAY_UNITS: dict[AmountKind, tuple[str, str]] = {
    AmountKind.MASS: ("g", "kg"),
    AmountKind.VOLUME: ("ml", "l"),
}

LARGE_UNIT_THRESHOLD = 1000

_DECIMAL_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+", re.ASCII)
_COUNT_RE = re.compile(r"\d+", re.ASCII)


@dataclass(frozen=True)
class Amount:
    """A quantity stored as an integer number of canonical sub-units.

    Counts are plain integers, masses are grams and volumes are milliliters.
    """

    kind: AmountKind
    value: int

    @classmethod
    def count(cls, value: int) -> "Amount":
        return cls(AmountKind.COUNT, value)

    @classmethod
    def grams(cls, value: int) -> "Amount":
        return cls(AmountKind.MASS, value)

    @classmethod
    def millis(cls, value: int) -> "Amount":
        return cls(AmountKind.VOLUME, value)

    def __add__(self, other: "Amount") -> "Amount":
        """Add two amounts of the same kind.

        Raises:
            UnitMismatchError: If the amounts are of different kinds.
        """
        if not isinstance(other, Amount):
            return NotImplemented
        if self.kind != other.kind:
            raise UnitMismatchError(
                f"Cannot add {other.kind.value} to {self.kind.value}",
                kinds=(self.kind.value, other.kind.value),
            )
        return Amount(self.kind, self.value + other.value)

    def __str__(self) -> str:
        if self.kind == AmountKind.COUNT:
            return str(self.value)

        small, large = DISPLAY_UNITS[self.kind]
        if self.value < LARGE_UNIT_THRESHOLD:
            return f"{self.value}{small}"
        return f"{format_large(self.value)}{large}"

    @property
    def is_single(self) -> bool:
        """True for the implicit amount of an item listed without quantity."""
        return self == ONE


ONE = Amount.count(1)


def format_large(value: int) -> str:
    """Format a sub-unit magnitude in the large unit.

    Sub-unit values have at most three fractional digits in the large unit,
    so the division is printed exactly with trailing zeros dropped.
    """
    return f"{value / LARGE_UNIT_THRESHOLD:.3f}".rstrip("0").rstrip(".")


# =============================================================================
# Parsing Functions
# =============================================================================


def _parse_with_suffix(text: str, suffix: str, kind: AmountKind, factor: int) -> Amount | None:
    if not text.endswith(suffix):
        return None
    number = text[: -len(suffix)]
    if not _DECIMAL_RE.fullmatch(number):
        return None
    return Amount(kind, int(Decimal(number) * factor))


def parse_amount(text: str) -> Amount:
    """
    Parse an amount token.

    Handles formats like:
    - "5" (count)
    - "500g", "1.5kg" (mass, stored in grams)
    - "250ml", "2l", ".5l" (volume, stored in milliliters)

    Fractional sub-units are truncated, so "1.2345kg" is 1234 grams.

    Raises:
        ParseError: If the token is not a recognized amount.
    """
    for suffix, kind, factor in UNIT_SUFFIXES:
        amount = _parse_with_suffix(text, suffix, kind, factor)
        if amount is not None:
            return amount

    if _COUNT_RE.fullmatch(text):
        return Amount.count(int(text))

    raise ParseError(f"Unparsable amount {text!r}", text=text)


def try_parse_amount(text: str) -> Amount | None:
    """Parse an amount token, returning None if it is not an amount."""
    try:
        return parse_amount(text)
    except ParseError:
        return None
