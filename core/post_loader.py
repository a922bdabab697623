import json
from pathlib import Path
from typing import Any, List

from models.article import Post
from .errors import LoadError
from .logger import log_event


def read_posts_file(path: Path) -> Any:
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as err:
        log_event("ERROR", "Error reading posts file", {"path": str(path), "error": repr(err)})
        raise LoadError() from err


def resolve_posts(document: Any) -> List[dict]:
    """
    Decide whether the loaded document is one post or many.

    A document with a title or body text is a single post, a list is used
    as-is, anything else is treated as one post.
    """
    if isinstance(document, dict) and document.get("title"):
        return [document]
    if isinstance(document, dict) and document.get("text"):
        return [document]
    if isinstance(document, list):
        return document
    return [document]


def load_posts(path: Path) -> List[Post]:
    posts = []
    for index, raw in enumerate(resolve_posts(read_posts_file(path))):
        if not isinstance(raw, dict):
            log_event("WARNING", "Skipping post that is not a JSON object",
                      {"index": index, "type": type(raw).__name__})
            continue
        posts.append(Post.from_dict(raw))
    return posts
