"""Tests for settings loading."""

from pathlib import Path

from zettel.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()
        assert settings.goods_db is None
        assert settings.fallback_label == "elsewhere"
        assert settings.flat_list_label == "Einkaufszettel"
        assert settings.is_development

    def test_environment_prefix(self, monkeypatch):
        """Test values are read from ZETTEL_* variables."""
        monkeypatch.setenv("ZETTEL_GOODS_DB", "/etc/zettel/waren.yaml")
        monkeypatch.setenv("ZETTEL_FALLBACK_LABEL", "Woanders")
        monkeypatch.setenv("ZETTEL_ENVIRONMENT", "production")

        settings = Settings()
        assert settings.goods_db == Path("/etc/zettel/waren.yaml")
        assert settings.fallback_label == "Woanders"
        assert not settings.is_development

    def test_get_settings_is_cached(self):
        """Test that the same instance is returned."""
        assert get_settings() is get_settings()
