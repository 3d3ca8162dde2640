"""Month grid widget showing the holidays of the selected country."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Grid, Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Static

from holical.views import CalendarCell, CalendarMonth


class HolidayCell(Button):
    """A day with a holiday; pressing it opens the holiday's article."""

    def __init__(self, cell: CalendarCell, **kwargs) -> None:
        super().__init__(Text(f"{cell.day}\n{cell.label}"), classes="holiday-day", **kwargs)
        self.cell = cell


class CalendarGrid(Vertical):
    """Calendar view: month header with navigation and a Monday-first grid."""

    month: CalendarMonth | None = None

    class HolidaySelected(Message):
        """Posted when a holiday day is pressed."""

        def __init__(self, cell: CalendarCell) -> None:
            super().__init__()
            self.cell = cell

    class MonthChanged(Message):
        """Posted when the previous/next month buttons are pressed."""

        def __init__(self, delta: int) -> None:
            super().__init__()
            self.delta = delta

    def compose(self) -> ComposeResult:
        """Compose the calendar header and grid."""
        with Horizontal(id="calendar-header"):
            yield Button("<", id="prev-month")
            yield Static("", id="month-title")
            yield Button(">", id="next-month")
        yield Grid(id="calendar-days")

    def show_month(self, month: CalendarMonth) -> None:
        """Replace the grid content with the given month."""
        self.month = month
        self.query_one("#month-title", Static).update(Text(month.title, style="bold"))

        cells: list[Static | Button] = [
            Static(name, classes="day-name") for name in month.day_names
        ]
        cells.extend(Static("", classes="empty-day") for _ in range(month.leading_blanks))
        for cell in month.cells:
            if cell.holiday is None:
                cells.append(Static(str(cell.day), classes="calendar-day"))
            else:
                cells.append(HolidayCell(cell))

        grid = self.query_one("#calendar-days", Grid)
        grid.remove_children()
        grid.mount(*cells)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Turn button presses into calendar messages."""
        event.stop()
        if isinstance(event.button, HolidayCell):
            self.post_message(self.HolidaySelected(event.button.cell))
        elif event.button.id == "prev-month":
            self.post_message(self.MonthChanged(-1))
        elif event.button.id == "next-month":
            self.post_message(self.MonthChanged(1))
