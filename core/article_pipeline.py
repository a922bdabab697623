import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List

from config import DEFAULT_NUM_POSTS
from models.article import GeneratedArticle, Post
from utils.post_formatter import format_post_data
from .logger import log_event
from .post_loader import load_posts

NOTHING_NEW_MESSAGE = "No new posts to process. All posts have already been generated into articles."


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class GenerationResult:
    articles: List[GeneratedArticle]
    new_count: int
    message: str

    def to_dict(self) -> dict:
        return {
            "success": True,
            "message": self.message,
            "articles": [a.to_dict() for a in self.articles],
        }


class ArticlePipeline:
    """
    Turns unprocessed posts into articles and appends them to the store.

    Posts are matched against stored articles by title, so a post is only
    generated once unless ``force`` is set, which starts a fresh collection.
    Runs are serialized so overlapping callers never save over each other.
    """

    def __init__(self, store, writer, posts_source: Callable[[], List[Post]]):
        self.store = store
        self.writer = writer
        self.posts_source = posts_source
        self._lock = threading.Lock()

    @classmethod
    def from_posts_file(cls, store, writer, posts_file: Path) -> "ArticlePipeline":
        return cls(store, writer, lambda: load_posts(posts_file))

    def run(self, num_posts: int = DEFAULT_NUM_POSTS, force: bool = False) -> GenerationResult:
        with self._lock:
            return self._run(num_posts, force)

    def _run(self, num_posts: int, force: bool) -> GenerationResult:
        posts = self.posts_source()
        existing = [] if force else self.store.load()

        processed_titles = {article.original_title for article in existing}
        unprocessed = [p for p in posts if p.resolved_title not in processed_titles]
        to_process = unprocessed[:num_posts]

        if not to_process:
            log_event("INFO", "No new posts to process", {"existing": len(existing)})
            return GenerationResult(existing, 0, NOTHING_NEW_MESSAGE)

        new_articles = []
        for post in to_process:
            log_event("INFO", f"Generating article for: {post.resolved_title}")
            article = self.writer.generate(format_post_data(post))
            new_articles.append(GeneratedArticle(
                original_title=post.resolved_title,
                original_author=post.resolved_author,
                generated_article=article,
                timestamp=utc_timestamp(),
            ))

        all_articles = existing + new_articles
        self.store.save(all_articles)
        log_event("SUCCESS", "Articles saved", {"new": len(new_articles), "total": len(all_articles)})

        return GenerationResult(
            all_articles,
            len(new_articles),
            f"Generated {len(new_articles)} new articles. Total: {len(all_articles)}",
        )
