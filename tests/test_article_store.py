"""Tests for the article stores."""

import json

import pytest

from core.article_store import InMemoryArticleStore, JsonArticleStore
from core.errors import PersistError
from models.article import GeneratedArticle

ARTICLE = GeneratedArticle("Hello", "alice", "# Hello\n\nCafé ☕", "2024-01-01T00:00:00.000Z")


class TestJsonArticleStore:
    def test_missing_file_loads_empty(self, json_store):
        assert not json_store.exists()
        assert json_store.load() == []

    def test_save_writes_camel_case_array(self, json_store):
        json_store.save([ARTICLE])
        text = json_store.path.read_text(encoding="utf-8")
        assert json.loads(text) == [{
            "originalTitle": "Hello",
            "originalAuthor": "alice",
            "generatedArticle": "# Hello\n\nCafé ☕",
            "timestamp": "2024-01-01T00:00:00.000Z",
        }]
        assert text.startswith("[\n  {")
        assert json_store.load() == [ARTICLE]

    def test_save_overwrites_and_leaves_no_temp_files(self, json_store):
        json_store.save([ARTICLE, ARTICLE])
        json_store.save([ARTICLE])
        assert len(json_store.load()) == 1
        assert [p.name for p in json_store.path.parent.iterdir() if p.name.startswith(".articles")] == []

    def test_corrupt_file_raises(self, json_store):
        json_store.path.write_text("[{", encoding="utf-8")
        with pytest.raises(PersistError, match="Failed to read articles file"):
            json_store.load()

    def test_schema_mismatch_raises(self, json_store):
        json_store.path.write_text(json.dumps([{"originalTitle": "x"}]), encoding="utf-8")
        with pytest.raises(PersistError):
            json_store.load()

    def test_write_failure_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = JsonArticleStore(blocker / "articles.json")
        with pytest.raises(PersistError, match="Failed to write articles file"):
            store.save([ARTICLE])


class TestInMemoryArticleStore:
    def test_round_trip_copies(self):
        store = InMemoryArticleStore()
        assert not store.exists()
        articles = [ARTICLE]
        store.save(articles)
        articles.append(ARTICLE)
        assert store.exists()
        assert store.load() == [ARTICLE]
