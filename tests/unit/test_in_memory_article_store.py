"""
Unit tests for InMemoryArticleStore.
"""
import threading

import pytest

from article_service.article_store import ArticleStore
from article_service.errors import DuplicateIdentifierError
from article_service.in_memory_article_store import InMemoryArticleStore
from article_service.models import Article


class TestInMemoryArticleStore:
    """Test suite for InMemoryArticleStore."""

    @pytest.fixture
    def store(self):
        """Create an empty store."""
        return InMemoryArticleStore()

    @pytest.fixture
    def article(self):
        """Sample article."""
        return Article(
            id="55",
            title="Bananas are superior to apples",
            date="1970-07-29",
            body="Surely not wrong",
            tags=["Banana", "Apple", "Fruit"],
        )

    def test_implements_interface(self, store):
        """Test that InMemoryArticleStore implements the ArticleStore interface."""
        assert isinstance(store, ArticleStore)

    def test_empty_by_default(self, store):
        """Test a new store holds nothing."""
        assert len(store) == 0
        assert store.items() == []

    def test_put_and_get(self, store, article):
        """Test storing an article and reading it back."""
        store.put(55, article)
        assert store.get(55) == article
        assert len(store) == 1

    def test_get_missing_returns_none(self, store):
        """Test that get returns None for an unknown key."""
        assert store.get(404) is None

    def test_duplicate_put_rejected_and_first_kept(self, store, article):
        """Test a second put with the same key fails and keeps the original."""
        store.put(55, article)
        other = article.model_copy(update={"title": "Apples strike back"})

        with pytest.raises(DuplicateIdentifierError):
            store.put(55, other)

        assert store.get(55).title == "Bananas are superior to apples"
        assert len(store) == 1

    def test_items_in_insertion_order(self, store, article):
        """Test items returns (key, article) pairs in insertion order."""
        for key in (3, 77, 12):
            store.put(key, article.model_copy(update={"id": str(key)}))

        assert [key for key, _ in store.items()] == [3, 77, 12]

    def test_items_is_a_snapshot(self, store, article):
        """Test that later puts do not change an earlier snapshot."""
        store.put(1, article)
        snapshot = store.items()
        store.put(2, article)
        assert len(snapshot) == 1

    def test_concurrent_puts_with_same_key(self, store, article):
        """Test only one of many concurrent puts for one key succeeds."""
        failures = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            try:
                store.put(1, article)
            except DuplicateIdentifierError:
                failures.append(1)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(failures) == 7
        assert len(store) == 1
