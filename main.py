#!/usr/bin/env python3
"""Generate magazine-style articles from social media posts.

Usage:
    python main.py generate                 # Generate up to 3 new articles
    python main.py generate --num-posts 5   # Generate up to 5 new articles
    python main.py generate --force         # Discard stored articles and regenerate
    python main.py list                     # Show stored articles
    python main.py serve --port 3000        # Run the HTTP API
"""

import argparse
import sys

from pydantic import ValidationError

from config import load_config
from core import logger
from core.api import GenerateRequest, create_app
from core.article_pipeline import ArticlePipeline
from core.article_store import JsonArticleStore
from core.errors import ArticleGeneratorError
from core.logger import log_event
from core.openai_writer import OpenAIArticleWriter
from utils.text_cleaner import DEFAULT_TITLE, extract_title


def build_pipeline(settings) -> ArticlePipeline:
    store = JsonArticleStore(settings.articles_file)
    writer = OpenAIArticleWriter(settings.openai_api_key, settings.openai_model)
    return ArticlePipeline.from_posts_file(store, writer, settings.posts_file)


def cmd_generate(args, settings) -> int:
    try:
        params = GenerateRequest.model_validate({"numPosts": args.num_posts, "force": args.force})
    except ValidationError:
        print("--num-posts must be a positive integer", file=sys.stderr)
        return 2

    try:
        result = build_pipeline(settings).run(num_posts=params.num_posts, force=params.force)
    except ArticleGeneratorError as err:
        log_event("ERROR", "Error processing posts", {"error": str(err)})
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(result.message)
    return 0


def cmd_list(args, settings) -> int:
    store = JsonArticleStore(settings.articles_file)
    if not store.exists():
        print(f"No articles yet ({settings.articles_file} not found)")
        return 0
    try:
        articles = store.load()
    except ArticleGeneratorError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    for i, article in enumerate(articles, 1):
        title, _ = extract_title(article.generated_article)
        if title == DEFAULT_TITLE:
            title = article.original_title
        print(f"{i:>3}. {title} ({article.original_author}, {article.timestamp[:10]})")
    return 0


def cmd_serve(args, settings) -> int:
    app = create_app(settings)
    app.run(host=args.host, port=args.port)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate articles from social media posts")
    parser.add_argument("--config", type=str, default=None, help="Optional JSON config file")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate articles for unprocessed posts")
    gen.add_argument("--num-posts", type=int, default=3, help="Maximum number of new articles")
    gen.add_argument("--force", action="store_true", help="Ignore stored articles and regenerate")
    gen.set_defaults(func=cmd_generate)

    lst = sub.add_parser("list", help="List stored articles")
    lst.set_defaults(func=cmd_list)

    srv = sub.add_parser("serve", help="Run the HTTP API")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=3000)
    srv.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    settings = load_config(args.config)
    logger.configure(settings.log_file)
    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main())
