"""Tests for settings."""

from pathlib import Path

from calprint.config import PrintSettings


def test_print_settings_defaults():
    """Test PrintSettings default values."""
    settings = PrintSettings()
    assert settings.config_file == Path("calendar.toml")
    assert settings.output_file == Path("calendar.pdf")
    assert settings.layout == "month"
    assert settings.log_dir is None


def test_print_settings_from_env_all_vars(monkeypatch):
    """Test loading all settings from environment."""
    monkeypatch.setenv("CALPRINT_CONFIG_FILE", "/data/cal.toml")
    monkeypatch.setenv("CALPRINT_OUTPUT_FILE", "out/cal.pdf")
    monkeypatch.setenv("CALPRINT_LAYOUT", "Year")
    monkeypatch.setenv("CALPRINT_LOG_DIR", "/tmp/logs")
    monkeypatch.setenv("CALPRINT_LOG_FILENAME", "cal.log")

    settings = PrintSettings.from_env()
    assert settings.config_file == Path("/data/cal.toml")
    assert settings.output_file == Path("out/cal.pdf")
    assert settings.layout == "year"
    assert settings.log_dir == Path("/tmp/logs")
    assert settings.log_filename == "cal.log"


def test_print_settings_invalid_layout(monkeypatch):
    """Test an unknown layout falls back to the default."""
    monkeypatch.setenv("CALPRINT_LAYOUT", "poster")
    settings = PrintSettings.from_env()
    assert settings.layout == "month"
