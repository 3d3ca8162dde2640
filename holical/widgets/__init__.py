"""Textual widgets for the TUI."""

from holical.widgets.article_panel import ArticlePanel
from holical.widgets.calendar_grid import CalendarGrid, HolidayCell
from holical.widgets.dialogs import ErrorDialog, PathDialog
from holical.widgets.translated import NavLink, TranslatedLabel

__all__ = [
    "ArticlePanel",
    "CalendarGrid",
    "ErrorDialog",
    "HolidayCell",
    "NavLink",
    "PathDialog",
    "TranslatedLabel",
]
