"""Unit tests for settings and report config loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from issue_comment_summarizer.config import SummarizerSettings, load_report_config

_ENV_VARS = (
    "SUMMARIZER_GITHUB_TOKEN",
    "GITHUB_BASE_URL",
    "OPENAI_API_KEY",
    "SUMMARIZER_MODEL",
    "SUMMARIZER_MAX_TOKENS",
    "SUMMARIZER_BOT_LOGIN",
    "SUMMARIZER_CHUNK_CONCURRENCY",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_settings_loads_from_dotenv(clean_env: Path) -> None:
    (clean_env / ".env").write_text(
        "\n".join(
            [
                "SUMMARIZER_GITHUB_TOKEN=test-token",
                "SUMMARIZER_MAX_TOKENS=512",
                "SUMMARIZER_BOT_LOGIN=summary-bot[bot]",
                "LOG_LEVEL=DEBUG",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = SummarizerSettings()

    assert settings.github_token == "test-token"
    assert settings.max_tokens == 512
    assert settings.bot_login == "summary-bot[bot]"
    assert settings.log_level == "DEBUG"


def test_settings_defaults(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUMMARIZER_GITHUB_TOKEN", "test-token")

    settings = SummarizerSettings()

    assert settings.github_base_url == "https://api.github.com"
    assert settings.llm_provider == "openai"
    assert settings.model == "gpt-3.5-turbo-instruct"
    assert settings.max_tokens == 1024
    assert settings.token_encoding == "cl100k_base"
    assert settings.bot_login == "github-actions[bot]"
    assert settings.chunk_concurrency == 1


def test_settings_require_github_token(clean_env: Path) -> None:
    with pytest.raises(ValidationError, match="SUMMARIZER_GITHUB_TOKEN"):
        SummarizerSettings()


def test_settings_reject_non_positive_max_tokens(
    clean_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SUMMARIZER_GITHUB_TOKEN", "test-token")
    monkeypatch.setenv("SUMMARIZER_MAX_TOKENS", "0")

    with pytest.raises(ValidationError):
        SummarizerSettings()


def test_load_report_config_accepts_camel_case_section(tmp_path: Path) -> None:
    path = tmp_path / "report.json"
    path.write_text(
        json.dumps(
            {"sections": {"commentSummary": {"prompt": "P {{issueComments}}", "title": "T"}}}
        ),
        encoding="utf-8",
    )

    config = load_report_config(path)

    assert config.sections.comment_summary is not None
    assert config.sections.comment_summary.prompt == "P {{issueComments}}"
    assert config.sections.comment_summary.title == "T"


def test_load_report_config_accepts_snake_case_section(tmp_path: Path) -> None:
    path = tmp_path / "report.json"
    path.write_text(
        json.dumps({"sections": {"comment_summary": {"prompt": "P", "title": "T"}}}),
        encoding="utf-8",
    )

    assert load_report_config(path).sections.comment_summary.title == "T"


def test_load_report_config_without_sections(tmp_path: Path) -> None:
    path = tmp_path / "report.json"
    path.write_text("{}", encoding="utf-8")

    assert load_report_config(path).sections.comment_summary is None
