"""Article view widget."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Markdown, Static

from holical.views import ArticleView
from holical.widgets.translated import NavLink


class ArticlePanel(VerticalScroll):
    """Panel displaying a holiday article."""

    def compose(self) -> ComposeResult:
        """Compose the article panel."""
        yield NavLink(
            "/", "translation.ui.backToCalendar", "Back to calendar", classes="back-button"
        )
        yield Static("", id="article-title")
        yield Static("", id="article-image")
        yield Markdown("", id="article-content")

    def show_article(self, article: ArticleView) -> None:
        """Display the article."""
        self.query_one("#article-title", Static).update(Text(article.title, style="bold"))
        self.query_one("#article-image", Static).update(Text(article.image_url, style="dim"))
        self.query_one("#article-content", Markdown).update(article.content_markdown)
        self.scroll_home(animate=False)
