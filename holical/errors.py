"""Custom exceptions."""


class HolicalError(Exception):
    """Base exception for holical."""


class DataLoadError(HolicalError):
    """Raised when the holiday dataset or a locale dictionary cannot be loaded."""


class ArticleError(HolicalError):
    """Base exception for article paths that cannot be displayed."""

    message = "Article could not be displayed."

    def __init__(self, path: str) -> None:
        super().__init__(f"{self.message} ({path})")
        self.path = path


class MalformedPathError(ArticleError):
    """Raised when an article path does not have the expected segments."""

    message = "Invalid article path."


class ArticleNotFoundError(ArticleError):
    """Raised when no holiday of the country matches the slug."""

    message = "Article not found."


class ArticleContentMissingError(ArticleError):
    """Raised when the matched holiday has no translated article."""

    message = "Article content missing."
