"""
Pytest configuration for the article generator tests.
"""

import json

import pytest

from core import logger
from core.article_pipeline import ArticlePipeline
from core.article_store import InMemoryArticleStore, JsonArticleStore
from core.errors import GenerationError
from core.post_loader import load_posts


class FakeWriter:
    """Records prompts and returns a canned article for each one."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def generate(self, post_data: str) -> str:
        self.calls.append(post_data)
        if self.fail_on is not None and len(self.calls) == self.fail_on:
            raise GenerationError()
        return f"# Article {len(self.calls)}\n\nBody {len(self.calls)}"


@pytest.fixture(autouse=True)
def event_log(tmp_path):
    """Send log events to a temporary file."""
    path = tmp_path / "log.json"
    logger.configure(path)
    return path


@pytest.fixture
def write_posts(tmp_path):
    def _write(document):
        path = tmp_path / "posts.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def writer():
    return FakeWriter()


@pytest.fixture
def memory_store():
    return InMemoryArticleStore()


@pytest.fixture
def json_store(tmp_path):
    return JsonArticleStore(tmp_path / "articles.json")


@pytest.fixture
def make_pipeline(writer):
    def _make(posts_file, store, article_writer=None):
        return ArticlePipeline(store, article_writer or writer, lambda: load_posts(posts_file))
    return _make
