"""Routing between history paths and the view state."""

import logging
from collections.abc import Callable
from datetime import date
from enum import Enum
from typing import Protocol

from holical.articles import resolve_article
from holical.dataset import HolidayDataset
from holical.errors import ArticleError
from holical.history import ROOT_PATH, History
from holical.i18n import Translator
from holical.models import (
    ChangeCountry,
    ChangeLanguage,
    ChangeMonth,
    Command,
    GoBack,
    GoForward,
    Holiday,
    Navigate,
    ShowCurrentMonth,
    ViewKind,
    ViewState,
)
from holical.slug import ARTICLES_PREFIX, article_path
from holical.views import ArticleView, CalendarMonth, build_calendar

logger = logging.getLogger(__name__)

ROOT_PATHS = (ROOT_PATH, "/index.html")
PAGE_EXTENSIONS = (".html", ".htm")


class View(Protocol):
    """Presentation layer driven by the router."""

    def show_calendar(self, month: CalendarMonth) -> None: ...

    def show_article(self, article: ArticleView) -> None: ...

    def clear_view(self) -> None: ...

    def show_error(self, title: str, message: str) -> None: ...

    def retranslate(self) -> None: ...


class RouteOutcome(str, Enum):
    """What a call into the router ended up doing."""

    CALENDAR = "calendar"
    ARTICLE = "article"
    CLEARED = "cleared"
    REDIRECTED = "redirected"


def strip_path(path: str) -> str:
    """Drop the query string and fragment, keeping the rest of the path as given."""
    return path.split("#", 1)[0].split("?", 1)[0]


def is_page_file(path: str) -> bool:
    """Whether the path names a standalone page outside of the app."""
    return strip_path(path).lower().endswith(PAGE_EXTENSIONS)


def is_spa_link(href: str) -> bool:
    """Whether a link is handled by the router instead of default navigation."""
    return href.startswith("/") and not href.startswith("//") and not is_page_file(href)


class Router:
    """
    Single owner of the view state.

    Every navigation, back/forward move and selector change goes through
    the router, which updates the state and asks the view for exactly one
    render (calendar or article) or a clear.
    """

    def __init__(
        self,
        state: ViewState,
        history: History,
        dataset: HolidayDataset,
        translator: Translator,
        view: View,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.state = state
        self.history = history
        self.dataset = dataset
        self.translator = translator
        self.view = view
        self._today = today

    def handle_route(self, path: str | None = None) -> RouteOutcome:
        """Display whatever the path (the current history entry by default) points to."""
        if path is None:
            path = self.history.current.path
        path = strip_path(path)

        if path in ROOT_PATHS:
            self._show_calendar()
            return RouteOutcome.CALENDAR

        if path.startswith(ARTICLES_PREFIX):
            return self._show_article(path)

        if is_page_file(path):
            self.state.active_view = ViewKind.UNKNOWN
            self.state.active_holiday = None
            self.state.active_country = None
            self.view.clear_view()
            return RouteOutcome.CLEARED

        logger.info("Unknown path %s, redirecting to %s", path, ROOT_PATH)
        return self._redirect_home()

    def navigate(self, path: str, state: dict[str, str] | None = None) -> RouteOutcome:
        """Push a history entry for the path and display it."""
        self.history.push(path, state)
        return self.handle_route(path)

    def follow_link(self, href: str) -> RouteOutcome | None:
        """Navigate to an internal link; return None when default navigation applies."""
        if not is_spa_link(href):
            return None
        return self.navigate(href)

    def back(self) -> RouteOutcome | None:
        """Go to the previous history entry; None when there is none."""
        entry = self.history.back()
        if entry is None:
            return None
        return self.handle_route(entry.path)

    def forward(self) -> RouteOutcome | None:
        """Go to the next history entry; None when there is none."""
        entry = self.history.forward()
        if entry is None:
            return None
        return self.handle_route(entry.path)

    def article_link(self, country: str, holiday: Holiday) -> tuple[str, dict[str, str]]:
        """Path and history payload of a holiday's article in the active language."""
        path = article_path(country, holiday, self.translator.month_name(holiday.month_index))
        state = {
            "articleId": holiday.article_id,
            "country": country,
            "seoSlug": holiday.seo_slug,
            "date": holiday.date,
        }
        return path, state

    def dispatch(self, command: Command) -> RouteOutcome | None:
        """Apply a user command. Returns the route outcome when a route was handled."""
        if isinstance(command, Navigate):
            return self.navigate(command.path, command.state)
        if isinstance(command, ChangeLanguage):
            return self._change_language(command.language)
        if isinstance(command, ChangeCountry):
            return self._change_country(command.country)
        if isinstance(command, ChangeMonth):
            self.state.shift_month(command.delta)
            return self._refresh_calendar()
        if isinstance(command, ShowCurrentMonth):
            self.state.reset_month(self._today())
            return self._refresh_calendar()
        if isinstance(command, GoBack):
            return self.back()
        if isinstance(command, GoForward):
            return self.forward()
        msg = f"Unknown command: {command!r}"
        raise TypeError(msg)

    def _change_language(self, language: str) -> RouteOutcome | None:
        if language == self.state.language:
            return None
        try:
            self.translator.change_language(language)
        except ValueError:
            logger.warning("Ignoring unknown language %s", language)
            return None

        holiday = self.state.active_holiday
        country = self.state.active_country
        self.state.language = language
        if self.state.active_view is ViewKind.ARTICLE and holiday and country:
            # Slugs embed the month name, so the open article gets a new path
            path, state = self.article_link(country, holiday)
            self.history.replace(path, state)

        self.view.retranslate()
        return self.handle_route()

    def _change_country(self, country: str) -> RouteOutcome | None:
        if country == self.state.country:
            return None
        if country not in self.dataset:
            logger.warning("Ignoring unknown country %s", country)
            return None
        self.state.country = country
        return self._refresh_calendar()

    def _refresh_calendar(self) -> RouteOutcome | None:
        """Redraw the calendar if it is the active view."""
        if self.state.active_view is not ViewKind.CALENDAR:
            return None
        self._show_calendar()
        return RouteOutcome.CALENDAR

    def _show_calendar(self) -> None:
        self.state.active_view = ViewKind.CALENDAR
        self.state.active_holiday = None
        self.state.active_country = None
        self.view.show_calendar(build_calendar(self.state, self.dataset, self.translator))

    def _show_article(self, path: str) -> RouteOutcome:
        try:
            article = resolve_article(path, self.dataset, self.translator)
        except ArticleError as e:
            logger.error("Cannot display %s: %s", path, e)
            self.view.show_error("Error", e.message)
            return self._redirect_home()

        self.state.active_view = ViewKind.ARTICLE
        self.state.active_holiday = article.holiday
        self.state.active_country = article.country
        self.view.show_article(article)
        return RouteOutcome.ARTICLE

    def _redirect_home(self) -> RouteOutcome:
        self.history.replace(ROOT_PATH)
        self._show_calendar()
        return RouteOutcome.REDIRECTED
