"""Shared fixtures."""

from datetime import date

import pytest

from holical.dataset import HolidayDataset
from holical.history import History
from holical.i18n import Translator
from holical.models import ViewState
from holical.router import Router

DATASET = {
    "countries": {
        "colombia": {
            "name": "Colombia",
            "holidays": [
                {"date": "01-01", "articleId": "new_year", "seoSlug": "ano-nuevo"},
                {"date": "08-07", "articleId": "battle_boyaca", "seoSlug": "batalla-de-boyaca"},
                {"date": "12-25", "articleId": "no_content", "seoSlug": "navidad"},
            ],
        },
        "usa": {
            "name": "United States",
            "holidays": [
                {"date": "07-04", "articleId": "usa_independence", "seoSlug": "independence-day"},
            ],
        },
        "empty": {"name": "Nowhere", "holidays": []},
    }
}

MONTHS_ES = [
    "Enero", "Febrero", "Marzo", "Abril", "Mayo", "Junio",
    "Julio", "Agosto", "Septiembre", "Octubre", "Noviembre", "Diciembre",
]  # fmt: skip
MONTHS_EN = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]  # fmt: skip

LOCALES = {
    "es": {
        "translation": {
            "months": MONTHS_ES,
            "days": {"monday": "Lun", "sunday": "Dom"},
            "articles": {
                "new_year": {"title": "Año Nuevo", "shortText": "Año Nuevo", "content": "<p>1</p>"},
                "battle_boyaca": {
                    "title": "Batalla de Boyacá",
                    "shortText": "Boyacá",
                    "image": "boyaca.jpg",
                    "content": "<p>La <strong>batalla</strong></p>",
                },
                "no_content": {"shortText": "Navidad"},
            },
            "ui": {"backToCalendar": "Volver al calendario"},
        }
    },
    "en": {
        "translation": {
            "months": MONTHS_EN,
            "days": {"monday": "Mon", "tuesday": "Tue", "sunday": "Sun"},
            "articles": {
                "new_year": {"title": "New Year", "shortText": "New Year", "content": "<p>1</p>"},
                "battle_boyaca": {
                    "title": "Battle of Boyacá",
                    "shortText": "Boyacá",
                    "content": "<p>The battle</p>",
                },
                "usa_independence": {
                    "title": "Independence Day",
                    "shortText": "July 4th",
                    "content": "<p>1776</p>",
                },
            },
            "ui": {"backToCalendar": "Back to calendar"},
        }
    },
}


class RecordingView:
    """View that records every call made by the router."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def show_calendar(self, month) -> None:
        self.calls.append(("calendar", month))

    def show_article(self, article) -> None:
        self.calls.append(("article", article))

    def clear_view(self) -> None:
        self.calls.append(("clear",))

    def show_error(self, title: str, message: str) -> None:
        self.calls.append(("error", title, message))

    def retranslate(self) -> None:
        self.calls.append(("retranslate",))

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]

    @property
    def last(self) -> tuple:
        return self.calls[-1]


@pytest.fixture
def dataset():
    return HolidayDataset.from_dict(DATASET)


@pytest.fixture
def translator():
    return Translator(LOCALES, "es", "en")


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def make_router(dataset, translator, view):
    """Build a router whose history starts at the given path."""

    def _make(initial_path: str = "/", today: date = date(2025, 8, 15)) -> Router:
        state = ViewState.create(today, "colombia", translator.language)
        return Router(state, History(initial_path), dataset, translator, view, today=lambda: today)

    return _make
