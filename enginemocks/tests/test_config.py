"""Tests for settings loading and date parsing."""

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from enginemocks.config import configure_logging, get_settings, load_settings
from enginemocks.dates import parse_date


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        settings = load_settings()

        assert settings.date_format == "%Y-%m-%dT%H:%M:%S"
        assert settings.date_timezone == "naive"
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"
        assert settings.debug is False

    def test_load_settings_from_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "DATE_TIMEZONE": "utc",
                "LOG_LEVEL": "DEBUG",
                "LOG_FORMAT": "json",
            },
        ):
            settings = load_settings()
            assert settings.date_timezone == "utc"
            assert settings.log_level == "DEBUG"
            assert settings.log_format == "json"

    def test_load_settings_from_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "fixtures.env"
        env_file.write_text("DEBUG=true\nLOG_LEVEL=WARNING\n", encoding="utf-8")

        settings = load_settings(str(env_file))

        assert settings.debug is True
        assert settings.log_level == "WARNING"

    def test_blank_date_format_rejected(self) -> None:
        with patch.dict(os.environ, {"DATE_FORMAT": "   "}):
            with pytest.raises(ValidationError):
                load_settings()

    def test_unknown_timezone_rejected(self) -> None:
        with patch.dict(os.environ, {"DATE_TIMEZONE": "Europe/Berlin"}):
            with pytest.raises(ValidationError):
                load_settings()

    def test_get_settings_is_cached(self, fresh_settings: None) -> None:
        assert get_settings() is get_settings()


class TestLoggingConfiguration:
    def test_configure_logging_accepts_both_formats(self) -> None:
        configure_logging("INFO", "text")
        configure_logging("DEBUG", "json")

        assert logging.getLogger().handlers


# ============================================================================
# Date parsing
# ============================================================================


class TestParseDate:
    def test_naive_by_default(self, fresh_settings: None) -> None:
        with patch.dict(os.environ, {"DATE_TIMEZONE": "naive"}):
            parsed = parse_date("2013-01-23T13:42:42")

        assert parsed == datetime(2013, 1, 23, 13, 42, 42)
        assert parsed.tzinfo is None

    def test_utc_timezone(self, fresh_settings: None) -> None:
        with patch.dict(os.environ, {"DATE_TIMEZONE": "utc"}):
            parsed = parse_date("2013-01-23T13:42:42")

        assert parsed == datetime(2013, 1, 23, 13, 42, 42, tzinfo=timezone.utc)

    def test_custom_format(self, fresh_settings: None) -> None:
        with patch.dict(os.environ, {"DATE_FORMAT": "%d.%m.%Y", "DATE_TIMEZONE": "naive"}):
            assert parse_date("23.01.2013") == datetime(2013, 1, 23)

    def test_malformed_literal_raises(self, fresh_settings: None) -> None:
        with patch.dict(os.environ, {"DATE_TIMEZONE": "naive"}):
            with pytest.raises(ValueError):
                parse_date("not a date")
