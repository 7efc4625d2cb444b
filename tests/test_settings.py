"""Tests for extraction settings."""

import pytest

from portfolioai import settings as settings_module
from portfolioai.settings import ExtractionSettings, configure_defaults, get_default_settings


@pytest.fixture
def restore_defaults():
    """Put the process-wide default settings back after a test."""
    saved = get_default_settings()
    yield
    configure_defaults(saved)


class TestExtractionSettings:
    """Tests for the ExtractionSettings dataclass."""

    def test_defaults(self):
        """Defaults match the documented limits."""
        s = ExtractionSettings()
        assert s.max_pages == 15
        assert s.line_tolerance == 5.0
        assert s.min_text_length == 100

    @pytest.mark.parametrize("kwargs", [
        {"max_pages": 0},
        {"line_tolerance": -1.0},
        {"min_text_length": -5},
    ])
    def test_invalid_values_rejected(self, kwargs):
        """Out-of-range values raise ValueError."""
        with pytest.raises(ValueError):
            ExtractionSettings(**kwargs)

    def test_from_env_reads_overrides(self):
        """PORTFOLIOAI_* variables override the defaults."""
        s = ExtractionSettings.from_env({
            "PORTFOLIOAI_MAX_PAGES": "3",
            "PORTFOLIOAI_LINE_TOLERANCE": "2.5",
            "PORTFOLIOAI_MIN_TEXT_LENGTH": "40",
        })
        assert s == ExtractionSettings(max_pages=3, line_tolerance=2.5, min_text_length=40)

    def test_from_env_ignores_unset_and_empty(self):
        """Unset or empty variables keep the defaults."""
        assert ExtractionSettings.from_env({"PORTFOLIOAI_MAX_PAGES": ""}) == ExtractionSettings()

    def test_from_env_invalid_number(self):
        """A non-numeric value raises ValueError."""
        with pytest.raises(ValueError):
            ExtractionSettings.from_env({"PORTFOLIOAI_MAX_PAGES": "many"})


class TestConfigureDefaults:
    """Tests for the process-wide default settings."""

    def test_overrides_apply_on_top_of_current(self, restore_defaults):
        """Keyword overrides change only the named fields."""
        result = configure_defaults(max_pages=4)
        assert result.max_pages == 4
        assert result.min_text_length == 100
        assert get_default_settings() is result

    def test_install_complete_settings(self, restore_defaults):
        """A full settings value replaces the default."""
        custom = ExtractionSettings(min_text_length=10)
        configure_defaults(custom)
        assert settings_module.get_default_settings() is custom
