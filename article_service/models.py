"""
Data models for articles and tag query results.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, ValidationError

from article_service.errors import MalformedRequestBodyError


class Article(BaseModel):
    """A stored article. Field order is the order used when serializing."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    id: str
    title: str
    date: str
    body: str
    tags: List[str]


class TagQueryResult(BaseModel):
    """Result of a tag and date query."""

    tag: str
    count: int = 0
    articles: List[str] = []
    related_tags: List[str] = []


def _describe_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def decode_article(raw_body: bytes) -> Article:
    """
    Decode a request body into an Article.

    Every field is required and unknown fields are rejected.

    Args:
        raw_body: Raw JSON request body

    Returns:
        Decoded Article

    Raises:
        MalformedRequestBodyError: If the body is not a valid article document
    """
    try:
        return Article.model_validate_json(raw_body)
    except ValidationError as exc:
        raise MalformedRequestBodyError(_describe_validation_error(exc)) from exc
