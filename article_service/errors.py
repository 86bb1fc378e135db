"""
Error taxonomy for the article service.

Each error carries the HTTP status and the plain-text message that the
handlers return to the caller.
"""
import re

_IDENTIFIER_PATTERN = re.compile(r"[+-]?[0-9]+")

MIN_IDENTIFIER = -(2 ** 63)
MAX_IDENTIFIER = 2 ** 63 - 1
# Digits in MAX_IDENTIFIER, ignoring leading zeros
_MAX_SIGNIFICANT_DIGITS = 19


class ArticleServiceError(Exception):
    """Base class for errors surfaced to HTTP callers."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedRequestBodyError(ArticleServiceError):
    """Request body is not valid JSON or does not decode into an article."""


class InvalidIdentifierError(ArticleServiceError):
    """Article identifier is not a base-10 integer."""

    def __init__(self, message: str = "Invalid ID - Not a valid number"):
        super().__init__(message)


class DuplicateIdentifierError(ArticleServiceError):
    """An article with the same numeric identifier is already stored."""

    def __init__(self, message: str = "Article with that ID already exists"):
        super().__init__(message)


class InvalidQueryPathError(ArticleServiceError):
    """Tag query path has the wrong shape or date length."""


def parse_identifier(value: str) -> int:
    """
    Parse an article identifier into its integer key.

    Accepts an optional sign followed by decimal digits whose value fits a
    signed 64-bit integer. Whitespace, underscores and other forms that
    ``int()`` would tolerate are rejected.

    Args:
        value: Identifier as received from the client

    Returns:
        Integer key for the store

    Raises:
        InvalidIdentifierError: If the value is not a base-10 integer or is
            out of the 64-bit range
    """
    if not isinstance(value, str) or not _IDENTIFIER_PATTERN.fullmatch(value):
        raise InvalidIdentifierError()
    digits = value.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_SIGNIFICANT_DIGITS:
        raise InvalidIdentifierError()

    identifier = int(digits or "0")
    if value.startswith("-"):
        identifier = -identifier
    if not MIN_IDENTIFIER <= identifier <= MAX_IDENTIFIER:
        raise InvalidIdentifierError()
    return identifier
