"""Parsing of free-text shopping list lines."""

from dataclasses import dataclass

from zettel.errors import EmptyLineError, MissingNameError, ParseError
from zettel.logging_config import get_logger
from zettel.normalize.units import ONE, Amount, try_parse_amount

logger = get_logger(__name__)


@dataclass(frozen=True)
class RawEntry:
    """One parsed input line."""

    name: str
    amount: Amount | None = None

    @property
    def effective_amount(self) -> Amount:
        """The amount, with an absent amount counting as one item."""
        return self.amount if self.amount is not None else ONE


def parse_line(line: str) -> RawEntry:
    """
    Split one line into an optional amount and a name.

    The first whitespace-delimited token is taken as the amount if it parses
    as one; otherwise the whole line is the name. Names are kept as written.

    Examples:
        "500g Zucker" -> RawEntry("Zucker", Amount.grams(500))
        "Olivenöl extra" -> RawEntry("Olivenöl extra", None)

    Raises:
        EmptyLineError: If the line is blank.
        MissingNameError: If the line is only an amount.
    """
    stripped = line.strip()
    if not stripped:
        raise EmptyLineError("Empty line", text=line)

    parts = stripped.split(maxsplit=1)
    head = parts[0]
    rest = parts[1] if len(parts) > 1 else ""

    amount = try_parse_amount(head)
    if amount is None:
        return RawEntry(name=stripped)

    name = rest.strip()
    if not name:
        raise MissingNameError(f"Line without name: {stripped!r}", text=line)

    return RawEntry(name=name, amount=amount)


def parse_lines(text: str) -> list[RawEntry]:
    """
    Parse every non-blank line of a shopping list text.

    Raises:
        ParseError: If any line cannot be parsed; line_number is 1-based.
    """
    entries: list[RawEntry] = []

    lines = text.split("\n")
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            entries.append(parse_line(line))
        except ParseError as e:
            e.line_number = line_number
            raise

    logger.debug(f"Parsed {len(entries)} entries from {len(lines)} lines")
    return entries
