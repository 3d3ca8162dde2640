"""Resolution of article paths into displayable articles."""

from holical.dataset import HolidayDataset
from holical.errors import ArticleContentMissingError, ArticleNotFoundError, MalformedPathError
from holical.i18n import Translator
from holical.slug import decode_slug
from holical.views import ArticleView, build_article


def parse_article_path(path: str) -> tuple[str, str]:
    """
    Split "/articles/{country}/{slug}" into its country and slug.

    Segments after the slug are ignored.
    """
    parts = path.split("/")
    if len(parts) < 4 or parts[1] != "articles":
        raise MalformedPathError(path)
    return parts[2], parts[3]


def resolve_article(path: str, dataset: HolidayDataset, translator: Translator) -> ArticleView:
    """
    Find the holiday an article path refers to and load its translated article.

    The slug is decoded with the active language's month names.

    Raises:
        MalformedPathError: The path does not have the article segments
        ArticleNotFoundError: Unknown country, or no holiday matches the slug
        ArticleContentMissingError: The holiday has no translated title
    """
    country, slug_part = parse_article_path(path)
    holiday = decode_slug(country, slug_part, dataset, translator.month_name)
    if holiday is None:
        raise ArticleNotFoundError(path)

    content = translator.t(f"translation.articles.{holiday.article_id}", return_objects=True)
    if not isinstance(content, dict) or not content.get("title"):
        raise ArticleContentMissingError(path)

    return build_article(country, holiday, content)
