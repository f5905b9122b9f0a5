"""Configuration for the comment summarizer.

Runtime settings are loaded from:
- environment variables
- and a local `.env` file (if present)

Section configuration (prompt template and title) lives in a JSON report
config file owned by the caller; see `load_report_config`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BOT_LOGIN = "github-actions[bot]"


class ConfigurationError(ValueError):
    """Raised when settings make a summarization run impossible."""


class SummarizerSettings(BaseSettings):
    """Settings for the comment summarizer.

    Environment variables:
    - SUMMARIZER_GITHUB_TOKEN
    - GITHUB_BASE_URL               (optional)
    - OPENAI_API_KEY                (required for the openai provider)
    - SUMMARIZER_LLM_PROVIDER       (optional)
    - SUMMARIZER_LLAMA_MODEL_PATH   (required for the llama provider)
    - SUMMARIZER_MODEL              (optional)
    - SUMMARIZER_MAX_TOKENS         (optional)
    - SUMMARIZER_TOKEN_ENCODING     (optional)
    - SUMMARIZER_BOT_LOGIN          (optional)
    - SUMMARIZER_CHUNK_CONCURRENCY  (optional)
    - LOG_LEVEL                     (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `SummarizerSettings(_env_file=path_to_env)`.
    """

    github_token: str = Field(
        default="",
        validation_alias="SUMMARIZER_GITHUB_TOKEN",
        description="GitHub token used for API authentication",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )

    llm_provider: Literal["openai", "llama"] = Field(
        default="openai",
        validation_alias="SUMMARIZER_LLM_PROVIDER",
        description="Completion backend to use",
    )
    openai_api_key: str | None = Field(
        default=None,
        validation_alias="OPENAI_API_KEY",
        description="OpenAI API key",
    )
    llama_model_path: Path | None = Field(
        default=None,
        validation_alias="SUMMARIZER_LLAMA_MODEL_PATH",
        description="Path to a local LLaMA model file",
    )

    model: str = Field(
        default="gpt-3.5-turbo-instruct",
        validation_alias="SUMMARIZER_MODEL",
        description="Completion model identifier",
    )
    max_tokens: int = Field(
        default=1024,
        gt=0,
        validation_alias="SUMMARIZER_MAX_TOKENS",
        description="Maximum tokens requested for each completion",
    )
    token_encoding: str = Field(
        default="cl100k_base",
        validation_alias="SUMMARIZER_TOKEN_ENCODING",
        description="tiktoken encoding used to measure prompts and split comments",
    )
    bot_login: str = Field(
        default=DEFAULT_BOT_LOGIN,
        validation_alias="SUMMARIZER_BOT_LOGIN",
        description="Login of the automation whose own comments are never summarized",
    )
    chunk_concurrency: int = Field(
        default=1,
        ge=1,
        validation_alias="SUMMARIZER_CHUNK_CONCURRENCY",
        description="Number of chunk completions requested in parallel (1 = sequential)",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _require_github_auth(self) -> SummarizerSettings:
        if not self.github_token.strip():
            raise ValueError("SUMMARIZER_GITHUB_TOKEN is required")
        return self


class SectionConfig(BaseModel):
    """Prompt template and display title of one report section."""

    prompt: str = ""
    title: str = ""


class SectionsConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    comment_summary: SectionConfig | None = Field(default=None, alias="commentSummary")


class ReportConfig(BaseModel):
    """Report configuration supplied by the caller."""

    sections: SectionsConfig = Field(default_factory=SectionsConfig)


def load_report_config(path: Path) -> ReportConfig:
    """Load a report configuration from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file content does not match `ReportConfig`.
    """

    raw = json.loads(path.read_text(encoding="utf-8"))
    return ReportConfig.model_validate(raw)
