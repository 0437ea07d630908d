import pytest

from calendar_relay.config import Settings
from calendar_relay.errors import ConfigurationError


def test_load_reads_required_values(relay_env):
    s = Settings.load()
    assert s.downstream_function == "trello-card"
    assert s.client_secret_parameter == "/calendar/client-secret"
    assert s.token_parameter == "/calendar/token"
    assert s.interval_minutes == 60


def test_load_defaults(relay_env):
    s = Settings.load()
    assert s.aws_region == "us-west-2"
    assert s.google_calendar_id == "primary"
    assert s.display_tz is None
    assert s.auth_code is None
    assert s.log_level == "INFO"


def test_values_are_stripped(relay_env, monkeypatch):
    monkeypatch.setenv("interval", " 30\n")
    monkeypatch.setenv("GOOGLE_CALENDAR_ID", "  team@example.com ")
    s = Settings.load()
    assert s.interval_minutes == 30
    assert s.google_calendar_id == "team@example.com"


@pytest.mark.parametrize("key", ["arntrello", "cspointer", "interval", "tokenpointer"])
def test_missing_required_value(relay_env, monkeypatch, key):
    monkeypatch.delenv(key)
    with pytest.raises(ConfigurationError, match=key):
        Settings.load()


def test_blank_required_value_counts_as_missing(relay_env, monkeypatch):
    monkeypatch.setenv("tokenpointer", "   ")
    with pytest.raises(ConfigurationError, match="tokenpointer"):
        Settings.load()


@pytest.mark.parametrize("value", ["sixty", "1.5", "0", "-15"])
def test_invalid_interval(relay_env, monkeypatch, value):
    monkeypatch.setenv("interval", value)
    with pytest.raises(ConfigurationError, match="interval"):
        Settings.load()


def test_unknown_display_tz(relay_env, monkeypatch):
    monkeypatch.setenv("DISPLAY_TZ", "Mars/Olympus")
    with pytest.raises(ConfigurationError, match="DISPLAY_TZ"):
        Settings.load()


def test_unknown_log_level(relay_env, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        Settings.load()


def test_settings_are_frozen(relay_env):
    s = Settings.load()
    with pytest.raises(AttributeError):
        s.interval_minutes = 5
