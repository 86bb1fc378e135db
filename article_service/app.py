"""
HTTP application for the article service.
Creates articles, fetches them by id, and queries them by tag and date.
"""
from typing import NoReturn, Optional

from fastapi import FastAPI, Request, Response, HTTPException
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from article_service.article_store import ArticleStore
from article_service.errors import ArticleServiceError, parse_identifier
from article_service.in_memory_article_store import InMemoryArticleStore
from article_service.logging_utils import configure_logging
from article_service.models import decode_article
from article_service.response_utils import (
    JSON_MEDIA_TYPE,
    pretty_json_response,
    sanitize_log_input,
)
from article_service.tag_query import TAGS_PREFIX, parse_tag_query_path, query_by_tag_and_date

logger = configure_logging()

ARTICLE_NOT_FOUND = "Article not found"
UNSUPPORTED_MEDIA_TYPE = "Content-Type header is not set to application/json"


def _describe_request(request: Request) -> str:
    """Method and sanitized path of a request, for log lines."""
    return f"{request.method} {sanitize_log_input(request.url.path)}"


def _log_success(request: Request) -> None:
    logger.info(f"{request.method} request to {sanitize_log_input(request.url.path)}")


def _reject(request: Request, status_code: int, message: str) -> NoReturn:
    """Log a failed request and abort it with a plain-text error."""
    logger.error(f"{_describe_request(request)} - {status_code} {sanitize_log_input(message)}")
    raise HTTPException(status_code=status_code, detail=message)


def create_app(store: Optional[ArticleStore] = None) -> FastAPI:
    """
    Create the article service FastAPI application.

    Args:
        store: Article store to serve from (defaults to a new in-memory store)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(title="Tagged Article Service")  # pylint: disable=redefined-outer-name

    if store is None:
        store = InMemoryArticleStore()
    app.state.store = store

    @app.exception_handler(StarletteHTTPException)
    async def plain_text_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        """Render every HTTP error, routing 404/405 included, as plain text."""
        return PlainTextResponse(
            content=str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.post("/articles")
    async def create_article(request: Request) -> Response:
        """Store a new article sent as a JSON body."""
        if request.headers.get("content-type") != JSON_MEDIA_TYPE:
            _reject(request, 415, UNSUPPORTED_MEDIA_TYPE)

        body = await request.body()
        try:
            article = decode_article(body)
            article_id = parse_identifier(article.id)
            store.put(article_id, article)
        except ArticleServiceError as exc:
            _reject(request, exc.status_code, exc.message)

        _log_success(request)
        return Response(status_code=200)

    @app.get("/articles/{article_path:path}")
    async def get_article(article_path: str, request: Request) -> Response:
        """Return a stored article as pretty JSON."""
        try:
            article_id = parse_identifier(article_path)
        except ArticleServiceError as exc:
            _reject(request, exc.status_code, exc.message)

        article = store.get(article_id)
        if article is None:
            logger.info(f"{_describe_request(request)} - {ARTICLE_NOT_FOUND}")
            return PlainTextResponse(content=ARTICLE_NOT_FOUND)

        _log_success(request)
        return pretty_json_response(article.model_dump())

    @app.get("/tags/{query_path:path}")
    async def get_articles_by_tag_and_date(query_path: str, request: Request) -> Response:
        """Return the articles of one day carrying a tag, with related tags."""
        try:
            tag, date = parse_tag_query_path(TAGS_PREFIX + query_path)
        except ArticleServiceError as exc:
            _reject(request, exc.status_code, exc.message)

        result = query_by_tag_and_date(store.items(), tag, date)

        _log_success(request)
        return pretty_json_response(result.model_dump())

    return app


# Create the default app instance for production use
app = create_app()
