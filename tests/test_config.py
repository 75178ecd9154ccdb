"""Tests for configuration loading."""

import calendar

import pytest

from eventdesk.config import Config, load_config, parse_weekday


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)


@pytest.fixture
def conf_file(tmp_path):
    path = tmp_path / "eventdesk.conf"

    def _write(text: str):
        path.write_text(text)
        return path

    return _write


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")
        assert config == Config()
        assert config.week_start == calendar.SUNDAY
        assert config.store_backend == "memory"

    def test_parses_values(self, conf_file):
        path = conf_file(
            "# eventdesk settings\n"
            'GEMINI_API_KEY = "abc123"  # from console\n'
            "GEMINI_MODEL = gemini-2.0-flash\n"
            "STORE_BACKEND = http\n"
            "STORE_URL = https://api.example.com/\n"
            "STORE_TOKEN = 'tok'\n"
            "WEEK_START = Monday\n"
            "RECENT_BOOKINGS_LIMIT = 10 # rows\n"
            "CURRENCY_SYMBOL = Rs.\n"
        )
        config = load_config(path)
        assert config.gemini_api_key == "abc123"
        assert config.gemini_model == "gemini-2.0-flash"
        assert config.store_backend == "http"
        assert config.store_url == "https://api.example.com"
        assert config.store_token == "tok"
        assert config.week_start == calendar.MONDAY
        assert config.recent_bookings_limit == 10
        assert config.currency_symbol == "Rs."

    def test_skips_junk_lines(self, conf_file):
        config = load_config(conf_file("not a setting\n\nUNKNOWN_KEY = 1\n"))
        assert config == Config()

    def test_bad_values_fall_back(self, conf_file, caplog):
        path = conf_file("STORE_BACKEND = redis\nWEEK_START = Someday\nRECENT_BOOKINGS_LIMIT = lots\n")
        with caplog.at_level("WARNING"):
            config = load_config(path)
        assert config.store_backend == "memory"
        assert config.week_start == calendar.SUNDAY
        assert config.recent_bookings_limit == 5
        assert "STORE_BACKEND" in caplog.text

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_recent_limit_must_be_positive(self, conf_file, caplog, value):
        with caplog.at_level("WARNING"):
            config = load_config(conf_file(f"RECENT_BOOKINGS_LIMIT = {value}\n"))
        assert config.recent_bookings_limit == 5
        assert "RECENT_BOOKINGS_LIMIT" in caplog.text

    def test_env_overrides_file_key(self, conf_file, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "from-env")
        config = load_config(conf_file("GEMINI_API_KEY = from-file\n"))
        assert config.gemini_api_key == "from-env"

    def test_legacy_api_key_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("API_KEY", "legacy")
        assert load_config(tmp_path / "missing.conf").gemini_api_key == "legacy"


class TestParseWeekday:
    def test_full_and_short_names(self):
        assert parse_weekday("Sunday") == calendar.SUNDAY
        assert parse_weekday("mon") == calendar.MONDAY
        assert parse_weekday(" SAT ") == calendar.SATURDAY

    def test_unknown(self):
        with pytest.raises(ValueError):
            parse_weekday("Funday")

    def test_empty(self):
        with pytest.raises(ValueError):
            parse_weekday("")
