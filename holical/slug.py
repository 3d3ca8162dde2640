"""Conversion between holidays and their human-readable URL slugs.

A slug reads "{day}-{month name}-{seo slug}", e.g. "07-agosto-batalla-de-boyaca".
The month name is the localized one, so a slug only resolves under the
language it was generated in.
"""

import re
from collections.abc import Callable

from holical.dataset import HolidayDataset
from holical.models import Holiday

ARTICLES_PREFIX = "/articles/"

_WHITESPACE = re.compile(r"\s")


def kebab(text: str) -> str:
    """Lower-case text and replace each whitespace character with a hyphen."""
    return _WHITESPACE.sub("-", text.lower())


def encode_slug(holiday: Holiday, month_name: str) -> str:
    """Build the slug of a holiday for an already localized month name."""
    return f"{holiday.day_part}-{kebab(month_name)}-{holiday.seo_slug}"


def decode_slug(
    country: str,
    slug_part: str,
    dataset: HolidayDataset,
    month_name: Callable[[int], str],
) -> Holiday | None:
    """Find the first holiday of the country whose slug equals slug_part."""
    for holiday in dataset.holidays_for(country):
        if encode_slug(holiday, month_name(holiday.month_index)) == slug_part:
            return holiday
    return None


def article_path(country: str, holiday: Holiday, month_name: str) -> str:
    return f"{ARTICLES_PREFIX}{country}/{encode_slug(holiday, month_name)}"
