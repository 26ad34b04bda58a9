"""Pytest configuration and shared fixtures."""

import logging

import pytest

from zettel.config import get_settings

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "api: marks tests that exercise the HTTP API")


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler changes made by configure_logging()."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from ZETTEL_* variables of the calling environment."""
    for name in ("ZETTEL_GOODS_DB", "ZETTEL_FALLBACK_LABEL", "ZETTEL_FLAT_LIST_LABEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Shopping List Fixtures
# =============================================================================


@pytest.fixture
def sample_text():
    """Unsorted list with a blank line and two entries for the same good."""
    return "500g Zucker\n2l Milch\n\n5 Eier\n500ml Milch"


@pytest.fixture
def catalog_text():
    """Catalog document with alternate names and two merchants."""
    return """\
waren:
  - name: Milch
    alt-names:
      - Vollmilch
      - H-Milch
  - name: Zucker
  - name: Eier
    alt-names: [Ei]
  - name: Brot
locations:
  - name: Supermarkt
    waren:
      - Milch
      - Zucker
  - name: Bäcker
    waren:
      - Brot
      - Milch
"""


@pytest.fixture
def goods_only_catalog_text():
    """Catalog document without merchants."""
    return """\
waren:
  - name: Milch
    alt-names: [Vollmilch]
"""
