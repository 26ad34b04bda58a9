"""Exceptions raised by the shopping list pipeline."""

from typing import Any


class ZettelError(Exception):
    """Base exception for all shopping list errors."""


class ParseError(ZettelError):
    """Raised when an amount or line cannot be parsed."""

    def __init__(self, message: str, text: str | None = None, line_number: int | None = None):
        super().__init__(message)
        self.text = text
        self.line_number = line_number

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message


class EmptyLineError(ParseError):
    """Raised when a line has no content after trimming."""


class MissingNameError(ParseError):
    """Raised when a line carries an amount but no item name."""


class UnitMismatchError(ZettelError):
    """Raised when amounts of different kinds are added together."""

    def __init__(self, message: str, name: str | None = None, kinds: tuple[str, str] | None = None):
        super().__init__(message)
        self.name = name
        self.kinds = kinds


class CatalogFormatError(ZettelError):
    """Raised when a goods or merchant catalog is structurally invalid."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []
