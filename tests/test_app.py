"""Tests for the Textual application driven through a pilot."""

import asyncio
import calendar

from textual.widgets import ContentSwitcher, Select

from holical.app import HolicalApp
from holical.config import Config
from holical.widgets import CalendarGrid, HolidayCell, NavLink, TranslatedLabel


async def _wait_for_data(app: HolicalApp, pilot) -> None:
    await app.workers.wait_for_complete()
    await pilot.pause(0.1)


def _nav_labels(app: HolicalApp) -> list[str]:
    return [str(link.label) for link in app.query(".nav-link").results(NavLink)]


def test_language_switch_retranslates_tagged_texts():
    """Switching the language selector re-renders the toolbar, back link and month title."""

    async def run() -> None:
        app = HolicalApp(Config())
        async with app.run_test(size=(140, 60)) as pilot:
            await _wait_for_data(app, pilot)
            tagline = app.query_one("#tagline", TranslatedLabel)
            back_link = app.query_one(".back-button", NavLink)

            assert tagline.text == "Festivos de todo el año"
            assert _nav_labels(app) == ["Calendario", "Acerca de", "Contacto"]
            assert str(back_link.label) == "Volver al calendario"

            app.query_one("#lang-select", Select).value = "en"
            await pilot.pause(0.1)

            assert app.router.state.language == "en"
            assert tagline.text == "Public holidays all year round"
            assert _nav_labels(app) == ["Calendar", "About", "Contact"]
            assert str(back_link.label) == "Back to calendar"

            state = app.router.state
            month_name = calendar.month_name[state.displayed_month + 1]
            grid = app.query_one("#calendar-view", CalendarGrid)
            assert grid.month.title == f"{month_name} {state.displayed_year}"

    asyncio.run(run())


def test_holiday_cell_press_opens_article():
    """Pressing a holiday day pushes its article path and shows the article."""

    async def run() -> None:
        app = HolicalApp(Config())
        async with app.run_test(size=(140, 60)) as pilot:
            await _wait_for_data(app, pilot)
            for _ in range(12):
                if app.query(HolidayCell):
                    break
                app.action_next_month()
                await pilot.pause(0.1)

            cell = app.query(HolidayCell).first()
            cell.press()
            await pilot.pause(0.1)

            assert app.history.current.path == cell.cell.article_path
            assert app.history.current.path.startswith("/articles/colombia/")
            assert len(app.history) == 2
            assert app.query_one("#app-container", ContentSwitcher).current == "article-view"

    asyncio.run(run())
