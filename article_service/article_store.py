"""
Abstract interface for article storage backends.

Defines the interface for storing and looking up articles by their numeric
identifier. Articles are never updated or deleted once stored.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from article_service.models import Article


class ArticleStore(ABC):
    """Abstract base class for article storage backends."""

    @abstractmethod
    def put(self, article_id: int, article: Article) -> None:
        """
        Store a new article.

        Args:
            article_id: Numeric key parsed from the article's id.
            article: The article to store.

        Raises:
            DuplicateIdentifierError: If an article with this key already exists.
        """

    @abstractmethod
    def get(self, article_id: int) -> Optional[Article]:
        """
        Get a single article by its numeric key.

        Args:
            article_id: Numeric key of the article.

        Returns:
            The stored Article, or None if not found.
        """

    @abstractmethod
    def items(self) -> List[Tuple[int, Article]]:
        """
        Get a snapshot of every stored article.

        Returns:
            List of (key, article) pairs in insertion order.
        """

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored articles."""
