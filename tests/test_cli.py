"""Tests for the command line entry point and config loading."""

import json

import pytest

import main
from config import load_config
from conftest import FakeWriter
from utils.text_cleaner import extract_title


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "openai_api_key": "test-key",
        "posts_file": str(tmp_path / "posts.json"),
        "articles_file": str(tmp_path / "articles.json"),
        "log_file": str(tmp_path / "log.json"),
    }), encoding="utf-8")
    return path


class TestLoadConfig:
    def test_file_overrides_environment(self, config_file, tmp_path):
        settings = load_config(str(config_file))
        assert settings.openai_api_key == "test-key"
        assert settings.articles_file == tmp_path / "articles.json"
        assert settings.openai_model

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.json"))


class TestExtractTitle:
    def test_first_heading_becomes_title(self):
        title, body = extract_title("intro\n# Big Title\n\n## Part\ntext\n# Second")
        assert title == "Big Title"
        assert body == "intro\n\n\n## Part\ntext\n# Second"

    def test_without_heading(self):
        assert extract_title("## Only section") == ("Generated Article", "## Only section")


class TestMain:
    def test_generate_then_list(self, config_file, tmp_path, monkeypatch, capsys):
        (tmp_path / "posts.json").write_text(json.dumps({"title": "Hello"}), encoding="utf-8")
        monkeypatch.setattr(main, "OpenAIArticleWriter", lambda *args: FakeWriter())

        assert main.main(["--config", str(config_file), "generate"]) == 0
        assert "Generated 1 new articles. Total: 1" in capsys.readouterr().out

        assert main.main(["--config", str(config_file), "list"]) == 0
        assert "Article 1 (Unknown Author," in capsys.readouterr().out

    def test_generate_rejects_bad_num_posts(self, config_file, capsys):
        assert main.main(["--config", str(config_file), "generate", "--num-posts", "0"]) == 2

    def test_generate_reports_load_error(self, config_file, capsys):
        assert main.main(["--config", str(config_file), "generate"]) == 1
        assert "Failed to read posts file" in capsys.readouterr().err
