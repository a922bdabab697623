import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List

import jsonschema

from models.article import GeneratedArticle
from .errors import PersistError
from .logger import log_event

SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schemas"


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a JSON schema from the schemas directory."""
    path = SCHEMA_DIR / f"{schema_name}.json"
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_name}")
    return json.loads(path.read_text(encoding="utf-8"))


class InMemoryArticleStore:
    def __init__(self, articles: List[GeneratedArticle] = None):
        self._articles = list(articles) if articles is not None else None

    def exists(self) -> bool:
        return self._articles is not None

    def load(self) -> List[GeneratedArticle]:
        return list(self._articles or [])

    def save(self, articles: List[GeneratedArticle]) -> None:
        self._articles = list(articles)


class JsonArticleStore:
    """
    Keeps the article collection in a single JSON file, read and written whole.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.schema = load_schema("articles")

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> List[GeneratedArticle]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            jsonschema.validate(data, self.schema)
        except (OSError, ValueError, jsonschema.ValidationError) as err:
            log_event("ERROR", "Error reading articles file", {"path": str(self.path), "error": repr(err)})
            raise PersistError("Failed to read articles file") from err
        return [GeneratedArticle.from_dict(item) for item in data]

    def save(self, articles: List[GeneratedArticle]) -> None:
        payload = json.dumps([a.to_dict() for a in articles], indent=2, ensure_ascii=False)
        directory = self.path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, prefix=f".{self.path.name}.", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as err:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            log_event("ERROR", "Error writing articles file", {"path": str(self.path), "error": repr(err)})
            raise PersistError() from err
