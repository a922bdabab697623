# airticles/models/article.py
import json
from dataclasses import dataclass, field
from typing import List, Optional

from config import UNKNOWN_AUTHOR, UNTITLED_POST


def _text(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)) and value:
        return json.dumps(value)
    return ""


def _items(value) -> list:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


@dataclass
class Reply:
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Reply":
        return cls(text=_text(data.get("text")))


@dataclass
class Comment:
    text: str = ""
    replies: List[Reply] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Comment":
        return cls(
            text=_text(data.get("text")),
            replies=[Reply.from_dict(r) for r in _items(data.get("replies"))],
        )


@dataclass
class Post:
    title: Optional[str] = None
    author: Optional[str] = None
    text: str = ""
    comments: List[Comment] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Post":
        return cls(
            title=_text(data.get("title")) or None,
            author=_text(data.get("author")) or None,
            text=_text(data.get("text")),
            comments=[Comment.from_dict(c) for c in _items(data.get("comments"))],
        )

    @property
    def resolved_title(self) -> str:
        return self.title or UNTITLED_POST

    @property
    def resolved_author(self) -> str:
        return self.author or UNKNOWN_AUTHOR


@dataclass
class GeneratedArticle:
    original_title: str
    original_author: str
    generated_article: str
    timestamp: str

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedArticle":
        return cls(
            original_title=data["originalTitle"],
            original_author=data["originalAuthor"],
            generated_article=data["generatedArticle"],
            timestamp=data["timestamp"],
        )

    def to_dict(self) -> dict:
        return {
            "originalTitle": self.original_title,
            "originalAuthor": self.original_author,
            "generatedArticle": self.generated_article,
            "timestamp": self.timestamp,
        }
