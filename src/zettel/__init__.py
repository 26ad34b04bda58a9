"""Sort, deduplicate and group free-text shopping lists."""

__version__ = "0.1.0"
