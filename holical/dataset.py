"""In-memory store for the holiday dataset."""

from typing import Any

from holical.errors import DataLoadError
from holical.models import CountryEntry, Holiday


class HolidayDataset:
    """Read-only table of countries and their holidays."""

    def __init__(self, countries: dict[str, CountryEntry]) -> None:
        self._countries = dict(countries)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "HolidayDataset":
        """
        Build the dataset from its JSON payload.

        Expected shape:
            {"countries": {code: {"name": ..., "holidays": [{"date", "articleId", "seoSlug"}]}}}
        """
        try:
            raw_countries = payload["countries"]
            countries = {
                code: CountryEntry(
                    name=entry["name"],
                    holidays=tuple(Holiday.from_dict(item) for item in entry.get("holidays", [])),
                )
                for code, entry in raw_countries.items()
            }
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            msg = f"Invalid holiday dataset: {e}"
            raise DataLoadError(msg) from e
        if not countries:
            msg = "Invalid holiday dataset: no countries"
            raise DataLoadError(msg)
        return cls(countries)

    def __contains__(self, code: object) -> bool:
        return code in self._countries

    def __len__(self) -> int:
        return len(self._countries)

    def country_codes(self) -> list[str]:
        """Country codes in source order."""
        return list(self._countries)

    def country(self, code: str) -> CountryEntry | None:
        return self._countries.get(code)

    def holidays_for(self, code: str) -> tuple[Holiday, ...]:
        """Holidays of a country, empty when the country is unknown."""
        entry = self._countries.get(code)
        return entry.holidays if entry else ()

    def holiday_on(self, code: str, key: str) -> Holiday | None:
        """First holiday of the country on the "MM-DD" key."""
        return next((holiday for holiday in self.holidays_for(code) if holiday.date == key), None)
