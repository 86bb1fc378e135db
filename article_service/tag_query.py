"""
Tag and date query over the article store.

Path grammar handled here::

    "/tags/" tag "/" date8 ["/"]

The date segment is eight characters ``yyyymmdd`` and is turned into
``yyyy-mm-dd`` for a literal comparison against each article's date.
"""
from typing import Iterable, Set, Tuple

from article_service.errors import InvalidQueryPathError
from article_service.models import Article, TagQueryResult

TAGS_PREFIX = "/tags/"
MAX_RESULT_ARTICLES = 10


def parse_tag_query_path(path: str) -> Tuple[str, str]:
    """
    Split a tag query path into its tag and date.

    Args:
        path: Request path, e.g. ``/tags/fruit/19941124/``

    Returns:
        Tuple of (lowercased tag, date as ``yyyy-mm-dd``)

    Raises:
        InvalidQueryPathError: If the path does not have exactly two non-empty
            segments or the date segment is not eight characters long
    """
    trimmed = path[len(TAGS_PREFIX):] if path.startswith(TAGS_PREFIX) else path
    if trimmed.endswith("/"):
        trimmed = trimmed[:-1]

    params = trimmed.split("/")
    if len(params) != 2 or not all(params):
        raise InvalidQueryPathError("Invalid URL parameters")

    tag, raw_date = params
    if len(raw_date) != 8:
        raise InvalidQueryPathError("Invalid date format - use yyyymmdd")

    date = f"{raw_date[:4]}-{raw_date[4:6]}-{raw_date[6:]}"
    return tag.lower(), date


def query_by_tag_and_date(
    articles: Iterable[Tuple[int, Article]],
    tag: str,
    date: str,
) -> TagQueryResult:
    """
    Find articles published on ``date`` that carry ``tag``.

    Every matching tag occurrence counts once and may add the article id
    again, so an article listing the same tag twice contributes 2 to the
    count. Related tags keep their stored casing and exclude any spelling of
    the queried tag.

    Args:
        articles: (key, article) pairs to scan
        tag: Tag to look for, compared case-insensitively
        date: Date string compared verbatim against ``Article.date``

    Returns:
        TagQueryResult with at most ten article ids
    """
    tag = tag.lower()
    result = TagQueryResult(tag=tag)
    related_tags: Set[str] = set()

    for article_id, article in articles:
        if article.date != date:
            continue
        for article_tag in article.tags:
            if article_tag.lower() != tag:
                continue
            if len(result.articles) < MAX_RESULT_ARTICLES:
                result.articles.append(str(article_id))
            related_tags.update(t for t in article.tags if t.lower() != tag)
            result.count += 1

    result.related_tags = sorted(related_tags)
    return result
