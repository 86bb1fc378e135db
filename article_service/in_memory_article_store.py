"""
In-memory implementation of article storage.

Articles live in a dict owned by the process and are lost on restart.
"""
import threading
from typing import Dict, List, Optional, Tuple

from article_service.article_store import ArticleStore
from article_service.errors import DuplicateIdentifierError
from article_service.models import Article


class InMemoryArticleStore(ArticleStore):
    """
    In-memory implementation of article storage.

    A single lock guards every read and write so that handlers running on
    different threads see a consistent mapping.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._articles: Dict[int, Article] = {}
        self._lock = threading.Lock()

    def put(self, article_id: int, article: Article) -> None:
        """
        Store a new article in memory.

        Args:
            article_id: Numeric key parsed from the article's id.
            article: The article to store.

        Raises:
            DuplicateIdentifierError: If the key is already taken.
        """
        with self._lock:
            if article_id in self._articles:
                raise DuplicateIdentifierError()
            self._articles[article_id] = article

    def get(self, article_id: int) -> Optional[Article]:
        with self._lock:
            return self._articles.get(article_id)

    def items(self) -> List[Tuple[int, Article]]:
        with self._lock:
            return list(self._articles.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._articles)
