"""Loading of the holiday dataset and locale dictionaries."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import requests

from holical.dataset import HolidayDataset
from holical.errors import DataLoadError

logger = logging.getLogger(__name__)

DATASET_FILE = "holidays.json"
LOCALES_DIR = "locales"
REQUEST_TIMEOUT = 10  # seconds


@dataclass
class Resources:
    """Everything the application needs before it can render."""

    dataset: HolidayDataset
    locales: dict[str, dict[str, Any]]


def load_resources(source: str, languages: tuple[str, ...] | list[str]) -> Resources:
    """
    Load the dataset and one locale dictionary per language.

    Args:
        source: Directory path or http(s) base URL holding holidays.json and locales/
        languages: Language codes whose dictionaries must be present

    All files must load; any failure raises DataLoadError.
    """
    if not languages:
        msg = "At least one language is required"
        raise DataLoadError(msg)

    dataset = HolidayDataset.from_dict(_read_json(source, DATASET_FILE))
    locales = {
        language: _read_json(source, f"{LOCALES_DIR}/{language}.json") for language in languages
    }
    logger.info("Loaded %d countries and %d locales from %s", len(dataset), len(locales), source)
    return Resources(dataset=dataset, locales=locales)


def _read_json(source: str, name: str) -> Any:
    """Read one JSON document from a directory or a base URL."""
    if source.startswith(("http://", "https://")):
        url = f"{source.rstrip('/')}/{name}"
        try:
            response = requests.get(url, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            msg = f"Could not load {url}: {e}"
            raise DataLoadError(msg) from e

    path = Path(source) / name
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        msg = f"Could not load {path}: {e}"
        raise DataLoadError(msg) from e
