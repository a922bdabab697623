from flask import Flask, jsonify, request
from pydantic import BaseModel, Field, PositiveInt, ValidationError

from config import DEFAULT_NUM_POSTS, Settings, load_config
from . import logger
from .article_pipeline import ArticlePipeline
from .article_store import JsonArticleStore
from .errors import ArticleGeneratorError
from .logger import log_event
from .openai_writer import OpenAIArticleWriter


class GenerateRequest(BaseModel):
    num_posts: PositiveInt = Field(default=DEFAULT_NUM_POSTS, alias="numPosts")
    force: bool = False

    @classmethod
    def from_args(cls, args) -> "GenerateRequest":
        data = {"force": args.get("force") == "true"}
        if args.get("numPosts"):
            data["numPosts"] = args.get("numPosts")
        return cls.model_validate(data)


def create_app(settings: Settings = None, pipeline: ArticlePipeline = None, store=None) -> Flask:
    settings = settings or load_config()
    logger.configure(settings.log_file)

    if store is None:
        store = JsonArticleStore(settings.articles_file)
    if pipeline is None:
        writer = OpenAIArticleWriter(settings.openai_api_key, settings.openai_model)
        pipeline = ArticlePipeline.from_posts_file(store, writer, settings.posts_file)

    app = Flask(__name__)

    @app.get("/api/generate-article")
    def generate_article():
        try:
            params = GenerateRequest.from_args(request.args)
        except ValidationError as err:
            log_event("WARNING", "Rejected generate request", {"error": str(err)})
            return jsonify({"success": False, "error": "numPosts must be a positive integer"}), 400

        try:
            result = pipeline.run(num_posts=params.num_posts, force=params.force)
        except ArticleGeneratorError as err:
            log_event("ERROR", "Error processing posts", {"error": str(err)})
            return jsonify({"success": False, "error": str(err)}), 500
        except Exception as err:
            log_event("ERROR", "Unexpected error processing posts", {"error": repr(err)})
            return jsonify({"success": False, "error": "Failed to process posts"}), 500

        return jsonify(result.to_dict())

    @app.get("/api/articles")
    def list_articles():
        if not store.exists():
            return jsonify([]), 404
        try:
            articles = store.load()
        except ArticleGeneratorError as err:
            return jsonify({"error": str(err)}), 500
        return jsonify([a.to_dict() for a in articles])

    return app
