"""Data models for holidays, view state and user commands."""

import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any

DATE_KEY_PATTERN = re.compile(r"^(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])$")


def date_key(month: int, day: int) -> str:
    """Build the "MM-DD" key for a 1-based month and a day of month."""
    return f"{month:02d}-{day:02d}"


@dataclass(frozen=True)
class Holiday:
    """A dated public holiday with its article."""

    date: str
    article_id: str
    seo_slug: str

    def __post_init__(self) -> None:
        if not DATE_KEY_PATTERN.match(self.date):
            msg = f"Invalid holiday date {self.date!r}, expected MM-DD"
            raise ValueError(msg)

    @property
    def month(self) -> int:
        """Month of the holiday (1-12)."""
        return int(self.date[:2])

    @property
    def month_index(self) -> int:
        """Month of the holiday as a 0-11 index."""
        return self.month - 1

    @property
    def day(self) -> int:
        return int(self.date[3:])

    @property
    def day_part(self) -> str:
        """Zero-padded day as it appears in the date key."""
        return self.date[3:]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Holiday":
        """Build a holiday from its JSON representation."""
        return cls(date=data["date"], article_id=data["articleId"], seo_slug=data["seoSlug"])


@dataclass(frozen=True)
class CountryEntry:
    """A country and its holidays, in source order."""

    name: str
    holidays: tuple[Holiday, ...] = ()


class ViewKind(str, Enum):
    """What the application currently displays."""

    CALENDAR = "calendar"
    ARTICLE = "article"
    UNKNOWN = "unknown"


@dataclass
class ViewState:
    """Mutable record of what the application displays. Owned by the router."""

    language: str
    country: str
    displayed_month: int
    displayed_year: int
    active_view: ViewKind = ViewKind.UNKNOWN
    active_holiday: Holiday | None = None
    active_country: str | None = None

    @classmethod
    def create(cls, today: date, country: str, language: str) -> "ViewState":
        """Create the initial state for a session."""
        return cls(
            language=language,
            country=country,
            displayed_month=today.month - 1,
            displayed_year=today.year,
        )

    def shift_month(self, delta: int) -> None:
        """Move the displayed month, rolling the year over as needed."""
        total = self.displayed_year * 12 + self.displayed_month + delta
        self.displayed_year, self.displayed_month = divmod(total, 12)

    def reset_month(self, today: date) -> None:
        """Display the month containing today."""
        self.displayed_month = today.month - 1
        self.displayed_year = today.year


@dataclass(frozen=True)
class Navigate:
    """Go to a path, pushing a history entry."""

    path: str
    state: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ChangeLanguage:
    """Switch the active language."""

    language: str


@dataclass(frozen=True)
class ChangeCountry:
    """Switch the country whose holidays are displayed."""

    country: str


@dataclass(frozen=True)
class ChangeMonth:
    """Move the displayed month by delta months."""

    delta: int


@dataclass(frozen=True)
class ShowCurrentMonth:
    """Display the current month."""


@dataclass(frozen=True)
class GoBack:
    """Move one entry back in history."""


@dataclass(frozen=True)
class GoForward:
    """Move one entry forward in history."""


Command = (
    Navigate | ChangeLanguage | ChangeCountry | ChangeMonth | ShowCurrentMonth | GoBack | GoForward
)
