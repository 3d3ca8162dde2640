"""Tests for loading the dataset and locales."""

import json
from pathlib import Path

import pytest
import requests

from holical import loader
from holical.config import BUNDLED_DATA_PATH
from holical.errors import DataLoadError
from holical.loader import load_resources


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Create a data directory with a dataset and two locales."""
    (tmp_path / "locales").mkdir()
    (tmp_path / "holidays.json").write_text(
        json.dumps(
            {
                "countries": {
                    "colombia": {
                        "name": "Colombia",
                        "holidays": [
                            {"date": "08-07", "articleId": "battle_boyaca", "seoSlug": "boyaca"}
                        ],
                    }
                }
            }
        )
    )
    (tmp_path / "locales" / "es.json").write_text(json.dumps({"translation": {"months": []}}))
    (tmp_path / "locales" / "en.json").write_text(json.dumps({"translation": {"months": []}}))
    return tmp_path


def test_load_from_directory(data_dir):
    resources = load_resources(str(data_dir), ("es", "en"))
    assert resources.dataset.country_codes() == ["colombia"]
    assert set(resources.locales) == {"es", "en"}


def test_load_bundled_data():
    """The bundled sample data loads and has Spanish month names."""
    resources = load_resources(str(BUNDLED_DATA_PATH), ("es", "en"))
    assert "colombia" in resources.dataset
    assert resources.locales["es"]["translation"]["months"][7] == "Agosto"


def test_missing_locale_fails(data_dir):
    with pytest.raises(DataLoadError):
        load_resources(str(data_dir), ("es", "fr"))


def test_missing_dataset_fails(tmp_path):
    with pytest.raises(DataLoadError):
        load_resources(str(tmp_path), ("es",))


def test_invalid_json_fails(data_dir):
    (data_dir / "holidays.json").write_text("{not json")
    with pytest.raises(DataLoadError):
        load_resources(str(data_dir), ("es",))


def test_no_languages_fails(data_dir):
    with pytest.raises(DataLoadError):
        load_resources(str(data_dir), ())


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            msg = f"{self.status_code} Error"
            raise requests.HTTPError(msg)

    def json(self):
        return self.payload


def test_load_from_url(monkeypatch):
    """Files are fetched relative to the base URL."""
    requested = []
    payloads = {
        "https://example.com/data/holidays.json": {"countries": {"usa": {"name": "USA"}}},
        "https://example.com/data/locales/en.json": {"translation": {}},
    }

    def fake_get(url, timeout):
        requested.append(url)
        return FakeResponse(payloads[url])

    monkeypatch.setattr(loader.requests, "get", fake_get)
    resources = load_resources("https://example.com/data/", ["en"])

    assert requested == list(payloads)
    assert resources.dataset.country_codes() == ["usa"]
    assert resources.locales == {"en": {"translation": {}}}


def test_load_from_url_http_error(monkeypatch):
    monkeypatch.setattr(loader.requests, "get", lambda url, timeout: FakeResponse(status_code=404))
    with pytest.raises(DataLoadError):
        load_resources("https://example.com/data", ["en"])


def test_load_from_url_connection_error(monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(loader.requests, "get", fake_get)
    with pytest.raises(DataLoadError):
        load_resources("https://example.com/data", ["en"])
