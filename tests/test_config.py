"""Tests for configuration loading."""

from holical.config import BUNDLED_DATA_PATH, Config


def test_defaults():
    config = Config()
    assert config.data_source == str(BUNDLED_DATA_PATH)
    assert config.default_country == "colombia"
    assert config.default_language == "es"
    assert config.fallback_language == "en"
    assert config.languages == ("es", "en")


def test_save_and_load(tmp_path):
    """Test a saved configuration loads back unchanged."""
    path = tmp_path / "holical" / "config.ini"
    config = Config(
        data_source="https://example.com/data",
        default_country="usa",
        default_language="en",
        fallback_language="es",
        languages=("en", "es"),
        site_url="https://example.com",
    )
    config.save(path)

    assert Config.load(path) == config


def test_load_missing_file(tmp_path):
    assert Config.load(tmp_path / "missing.ini") is None


def test_from_env_requires_data_source(monkeypatch):
    monkeypatch.delenv("HOLICAL_DATA_SOURCE", raising=False)
    assert Config.from_env() is None


def test_from_env(monkeypatch):
    monkeypatch.setenv("HOLICAL_DATA_SOURCE", "/srv/holidays")
    monkeypatch.setenv("HOLICAL_COUNTRY", "usa")
    monkeypatch.setenv("HOLICAL_LANGUAGES", "en, es ,")
    monkeypatch.delenv("HOLICAL_LANGUAGE", raising=False)

    config = Config.from_env()
    assert config is not None
    assert config.data_source == "/srv/holidays"
    assert config.default_country == "usa"
    assert config.default_language == "es"
    assert config.languages == ("en", "es")
