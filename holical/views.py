"""View models for the calendar and article screens."""

from calendar import monthrange
from dataclasses import dataclass, field
from typing import Any

from holical.dataset import HolidayDataset
from holical.html import html_to_markdown
from holical.i18n import Translator
from holical.models import Holiday, ViewState, date_key
from holical.slug import article_path

PLACEHOLDER_IMAGE = "/placeholder.svg?height=400&width=600"
IMAGES_DIR = "images"

# Monday first, with the label used when a translation is missing
DAY_NAMES = (
    ("monday", "Mon"),
    ("tuesday", "Tue"),
    ("wednesday", "Wed"),
    ("thursday", "Thu"),
    ("friday", "Fri"),
    ("saturday", "Sat"),
    ("sunday", "Sun"),
)


@dataclass(frozen=True)
class CalendarCell:
    """A single day of the displayed month."""

    day: int
    date_key: str
    country: str
    holiday: Holiday | None = None
    label: str | None = None
    article_path: str | None = None

    @property
    def article_state(self) -> dict[str, str]:
        """History payload attached when navigating to the holiday's article."""
        if self.holiday is None:
            return {}
        return {
            "articleId": self.holiday.article_id,
            "country": self.country,
            "seoSlug": self.holiday.seo_slug,
            "date": self.holiday.date,
        }


@dataclass(frozen=True)
class CalendarMonth:
    """Everything needed to draw one month of the calendar."""

    year: int
    month: int
    title: str
    day_names: list[str]
    leading_blanks: int
    cells: list[CalendarCell] = field(default_factory=list)

    @property
    def holiday_cells(self) -> list[CalendarCell]:
        return [cell for cell in self.cells if cell.holiday is not None]


@dataclass(frozen=True)
class ArticleView:
    """A resolved holiday article ready for display."""

    country: str
    holiday: Holiday
    title: str
    image_url: str
    content_html: str

    @property
    def content_markdown(self) -> str:
        return html_to_markdown(self.content_html)


def build_calendar(
    state: ViewState, dataset: HolidayDataset, translator: Translator
) -> CalendarMonth:
    """Build the grid for the displayed month, year and country."""
    month_number = state.displayed_month + 1
    # monthrange gives Monday=0 .. Sunday=6, which is also the number of leading blanks
    start_day, days_in_month = monthrange(state.displayed_year, month_number)
    month_name = translator.t(f"translation.months.{state.displayed_month}", default="Month")

    cells = []
    for day in range(1, days_in_month + 1):
        key = date_key(month_number, day)
        holiday = dataset.holiday_on(state.country, key)
        if holiday is None:
            cells.append(CalendarCell(day=day, date_key=key, country=state.country))
            continue

        label = translator.t(
            f"translation.articles.{holiday.article_id}.shortText", default="Holiday"
        )
        path = article_path(state.country, holiday, translator.month_name(holiday.month_index))
        cells.append(
            CalendarCell(
                day=day,
                date_key=key,
                country=state.country,
                holiday=holiday,
                label=label,
                article_path=path,
            )
        )

    day_names = [
        translator.t(f"translation.days.{name}", default=short) for name, short in DAY_NAMES
    ]
    return CalendarMonth(
        year=state.displayed_year,
        month=state.displayed_month,
        title=f"{month_name} {state.displayed_year}",
        day_names=day_names,
        leading_blanks=start_day,
        cells=cells,
    )


def build_article(country: str, holiday: Holiday, content: dict[str, Any]) -> ArticleView:
    """Build the article view from a translated article object."""
    image = content.get("image")
    return ArticleView(
        country=country,
        holiday=holiday,
        title=content["title"],
        image_url=f"{IMAGES_DIR}/{image}" if image else PLACEHOLDER_IMAGE,
        content_html=content.get("content", ""),
    )
