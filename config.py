# airticles/config.py
import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "gpt-4.1-nano"
DEFAULT_NUM_POSTS = 3
TEMPERATURE = 0.7
MAX_TOKENS = 2000

UNTITLED_POST = "Untitled Post"
UNKNOWN_AUTHOR = "Unknown Author"


@dataclass(frozen=True)
class Settings:
    openai_api_key: Optional[str]
    openai_model: str = DEFAULT_MODEL
    posts_file: Path = Path("posts.json")
    articles_file: Path = Path("articles.json")
    log_file: Path = Path("log.json")


def settings_from_env() -> Settings:
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        openai_model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
        posts_file=Path(os.getenv("POSTS_FILE", "posts.json")),
        articles_file=Path(os.getenv("ARTICLES_FILE", "articles.json")),
        log_file=Path(os.getenv("LOG_FILE", "log.json")),
    )


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from the environment, then apply overrides from a JSON file.
    """
    settings = settings_from_env()
    if not config_path:
        return settings

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open("r", encoding="utf-8") as f:
        config = json.load(f)

    overrides = {}
    for key in ("openai_api_key", "openai_model"):
        if config.get(key):
            overrides[key] = config[key]
    for key in ("posts_file", "articles_file", "log_file"):
        if config.get(key):
            overrides[key] = Path(config[key])

    return replace(settings, **overrides)
