"""Main Textual application."""

import logging
from datetime import date
from typing import ClassVar
from urllib.parse import urljoin, urlsplit

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, ContentSwitcher, Footer, Header, LoadingIndicator, Select

from holical.config import Config
from holical.errors import DataLoadError
from holical.history import History
from holical.i18n import Translator
from holical.loader import Resources, load_resources
from holical.models import (
    ChangeCountry,
    ChangeLanguage,
    ChangeMonth,
    Command,
    GoBack,
    GoForward,
    Navigate,
    ShowCurrentMonth,
    ViewState,
)
from holical.router import RouteOutcome, Router
from holical.views import ArticleView, CalendarMonth
from holical.widgets import (
    ArticlePanel,
    CalendarGrid,
    ErrorDialog,
    NavLink,
    PathDialog,
    TranslatedLabel,
)

logger = logging.getLogger(__name__)

LANGUAGE_NAMES = {"es": "Español", "en": "English"}

NAV_LINKS = (
    ("/", "translation.nav.calendar", "Calendar"),
    ("/about.html", "translation.nav.about", "About"),
    ("/contact.html", "translation.nav.contact", "Contact"),
)


class HolicalApp(App):
    """Perpetual holiday calendar TUI application."""

    CSS = """
    #toolbar {
        height: auto;
        padding: 0 1;
        background: $panel;
    }

    #toolbar Select {
        width: 24;
    }

    #tagline {
        width: 1fr;
        padding: 1;
    }

    #loading-indicator {
        layer: overlay;
        offset: 50% 50%;
        width: auto;
        height: auto;
        display: none;
    }

    #loading-indicator.visible {
        display: block;
    }

    #app-container {
        height: 1fr;
        border: solid $primary;
    }

    #calendar-header {
        height: auto;
        align: center middle;
    }

    #month-title {
        width: 30;
        text-align: center;
        padding: 1;
    }

    #calendar-days {
        grid-size: 7;
        grid-gutter: 0 1;
        grid-rows: 3;
        height: auto;
    }

    .day-name {
        text-style: bold;
        text-align: center;
        color: $accent;
    }

    .calendar-day {
        text-align: center;
    }

    .holiday-day {
        width: 100%;
        height: 3;
        min-width: 0;
    }

    #article-view {
        padding: 1 2;
    }

    #article-title {
        margin: 1 0;
    }
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("q", "quit", "Quit"),
        ("n", "next_month", "Next Month"),
        ("b", "prev_month", "Prev Month"),
        ("c", "current_month", "Current Month"),
        ("escape", "calendar", "Calendar"),
        ("alt+left", "history_back", "Back"),
        ("alt+right", "history_forward", "Forward"),
        ("g", "open_path", "Open Path"),
        ("?", "help", "Help"),
    ]

    def __init__(self, config: Config, initial_path: str = "/") -> None:
        super().__init__()
        self.config = config
        self.history = History(initial_path)
        self.translator: Translator | None = None
        self.router: Router | None = None

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header()
        with Horizontal(id="toolbar"):
            yield TranslatedLabel("translation.ui.tagline", "Public holidays", id="tagline")
            yield Select(
                [(LANGUAGE_NAMES.get(code, code), code) for code in self.config.languages],
                value=self._initial_language(),
                allow_blank=False,
                id="lang-select",
            )
            for href, i18n_key, default in NAV_LINKS:
                yield NavLink(href, i18n_key, default, classes="nav-link")
        yield LoadingIndicator(id="loading-indicator")
        with ContentSwitcher(id="app-container"):
            yield CalendarGrid(id="calendar-view")
            yield ArticlePanel(id="article-view")
        yield Footer()

    def _initial_language(self) -> str:
        if self.config.default_language in self.config.languages:
            return self.config.default_language
        return self.config.languages[0]

    def on_mount(self) -> None:
        """Load data when the app starts."""
        self.title = "holical"
        self.query_one("#app-container", ContentSwitcher).current = None
        self.load_data_async()

    def load_data_async(self) -> None:
        """Start loading the dataset and locales; the app is inert until it finishes."""
        loading = self.query_one("#loading-indicator", LoadingIndicator)
        loading.add_class("visible")
        self.run_worker(self._fetch_resources, exclusive=True, thread=True)

    def _fetch_resources(self) -> None:
        """Load all resources in a worker thread."""
        try:
            resources = load_resources(self.config.data_source, self.config.languages)
        except DataLoadError as e:
            logger.error("Error loading data: %s", e)
            self.call_from_thread(self._show_load_failure, e)
            return
        self.call_from_thread(self._start, resources)

    def _show_load_failure(self, error: DataLoadError) -> None:
        """Show the fatal load error and exit once it is dismissed."""
        self.query_one("#loading-indicator", LoadingIndicator).remove_class("visible")
        self.push_screen(
            ErrorDialog(
                "Error", f"Could not load application data. Please try again later.\n\n{error}"
            ),
            lambda _: self.exit(return_code=1),
        )

    def _start(self, resources: Resources) -> None:
        """Create the router and display the initial path (must run on main thread)."""
        language = self.config.default_language
        if language not in resources.locales:
            language = next(iter(resources.locales))
        self.translator = Translator(resources.locales, language, self.config.fallback_language)

        country_codes = resources.dataset.country_codes()
        country = self.config.default_country
        if country not in resources.dataset and country_codes:
            country = country_codes[0]

        state = ViewState.create(date.today(), country, language)
        self.router = Router(state, self.history, resources.dataset, self.translator, self)

        country_select: Select[str] = Select(
            [(resources.dataset.country(code).name, code) for code in country_codes],
            value=country,
            allow_blank=False,
            id="country-select",
        )
        self.query_one("#toolbar", Horizontal).mount(country_select, after="#lang-select")
        self.query_one("#lang-select", Select).value = language
        self.query_one("#loading-indicator", LoadingIndicator).remove_class("visible")

        self.retranslate()
        self.router.handle_route()

    def send_command(self, command: Command) -> RouteOutcome | None:
        """Hand a command to the router; ignored until data is loaded."""
        if self.router is None:
            return None
        return self.router.dispatch(command)

    # View implementation used by the router

    def show_calendar(self, month: CalendarMonth) -> None:
        self.query_one("#app-container", ContentSwitcher).current = "calendar-view"
        self.query_one("#calendar-view", CalendarGrid).show_month(month)
        self.sub_title = self.history.current.path

    def show_article(self, article: ArticleView) -> None:
        self.query_one("#app-container", ContentSwitcher).current = "article-view"
        self.query_one("#article-view", ArticlePanel).show_article(article)
        self.sub_title = self.history.current.path

    def clear_view(self) -> None:
        self.query_one("#app-container", ContentSwitcher).current = None
        self.sub_title = self.history.current.path

    def show_error(self, title: str, message: str) -> None:
        self.push_screen(ErrorDialog(title, message))

    def retranslate(self) -> None:
        """Re-render every translated label in the active language."""
        if self.translator is None:
            return
        for label in self.query(TranslatedLabel):
            label.retranslate(self.translator)
        for link in self.query(NavLink):
            link.retranslate(self.translator)

    # Event handlers

    def on_select_changed(self, event: Select.Changed) -> None:
        """Handle the language and country selectors."""
        if event.value is Select.BLANK:
            return
        if event.select.id == "lang-select":
            self.send_command(ChangeLanguage(str(event.value)))
        elif event.select.id == "country-select":
            self.send_command(ChangeCountry(str(event.value)))

    def on_calendar_grid_holiday_selected(self, event: CalendarGrid.HolidaySelected) -> None:
        """Open the article of the pressed holiday."""
        cell = event.cell
        if cell.article_path:
            self.send_command(Navigate(cell.article_path, cell.article_state))

    def on_calendar_grid_month_changed(self, event: CalendarGrid.MonthChanged) -> None:
        self.send_command(ChangeMonth(event.delta))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Follow nav links, letting page links open outside the app."""
        if not isinstance(event.button, NavLink) or self.router is None:
            return
        if self.router.follow_link(event.button.href) is None:
            self._open_external(event.button.href)

    def _open_external(self, href: str) -> None:
        if not self.config.site_url:
            self.notify(f"{href} is not part of the calendar", severity="warning")
            return
        self.open_url(urljoin(self.config.site_url, href))

    # Actions

    def action_next_month(self) -> None:
        """Navigate to next month."""
        self.send_command(ChangeMonth(1))

    def action_prev_month(self) -> None:
        """Navigate to previous month."""
        self.send_command(ChangeMonth(-1))

    def action_current_month(self) -> None:
        """Navigate to current month."""
        self.send_command(ShowCurrentMonth())

    def action_calendar(self) -> None:
        """Go back to the calendar."""
        self.send_command(Navigate("/"))

    def action_history_back(self) -> None:
        if self.send_command(GoBack()) is None and self.router is not None:
            self.notify("No previous page", severity="information")

    def action_history_forward(self) -> None:
        if self.send_command(GoForward()) is None and self.router is not None:
            self.notify("No next page", severity="information")

    def action_open_path(self) -> None:
        """Ask for a path or shared link to open."""
        if self.router is None:
            return
        self.push_screen(PathDialog(), self.handle_path_result)

    def handle_path_result(self, result: str | None) -> None:
        """Navigate to the path entered in the dialog."""
        if result is None:
            return
        if result.startswith("/"):
            self.send_command(Navigate(result))
            return
        # A full shared link keeps only its path
        parts = urlsplit(result)
        self.send_command(Navigate(parts.path or "/"))

    def action_help(self) -> None:
        """Show help message."""
        help_text = """
        [bold]holical - Keyboard Shortcuts[/bold]

        [cyan]n[/cyan] / [cyan]b[/cyan] - Next / previous month
        [cyan]c[/cyan] - Current month
        [cyan]escape[/cyan] - Back to calendar
        [cyan]alt+left[/cyan] / [cyan]alt+right[/cyan] - History back / forward
        [cyan]g[/cyan] - Open a path or shared link
        [cyan]q[/cyan] - Quit application

        Article links use month names of the active language;
        a link shared in another language will not resolve.
        """
        self.notify(help_text, title="Help", timeout=10)
