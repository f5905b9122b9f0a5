"""Test configuration and fixtures."""

from collections.abc import Sequence
from unittest.mock import Mock

import pytest

from issue_comment_summarizer.config import ReportConfig, SectionConfig, SectionsConfig
from issue_comment_summarizer.github.client import GitHubClient
from issue_comment_summarizer.llm.provider import CompletionProvider
from issue_comment_summarizer.models import IssueContext, SummaryInputs

PROMPT_TEMPLATE = (
    "Summarize the discussion.\n"
    "Title: {{ issueTitle }}\n"
    "Body: {{ issueBody }}\n"
    "Comments: {{ issueComments }}"
)


class CharTokenizer:
    """Deterministic tokenizer: one token per character."""

    def encode(self, text: str) -> list[int]:
        return [ord(c) for c in text]

    def decode(self, tokens: Sequence[int]) -> str:
        return "".join(chr(t) for t in tokens)

    def is_char_boundary(self, tokens: Sequence[int]) -> bool:
        return True


class ByteTokenizer:
    """Byte-level tokenizer: one token per UTF-8 byte, so characters can span tokens."""

    def encode(self, text: str) -> list[int]:
        return list(text.encode("utf-8"))

    def decode(self, tokens: Sequence[int]) -> str:
        return bytes(tokens).decode("utf-8", errors="replace")

    def is_char_boundary(self, tokens: Sequence[int]) -> bool:
        try:
            bytes(tokens).decode("utf-8")
        except UnicodeDecodeError:
            return False
        return True


@pytest.fixture
def tokenizer() -> CharTokenizer:
    """Provide a character-level tokenizer."""
    return CharTokenizer()


@pytest.fixture
def byte_tokenizer() -> ByteTokenizer:
    """Provide a tokenizer whose tokens can split multi-byte characters."""
    return ByteTokenizer()


@pytest.fixture
def report_config() -> ReportConfig:
    """Provide a report config with the comment summary section enabled."""
    return ReportConfig(
        sections=SectionsConfig(
            comment_summary=SectionConfig(prompt=PROMPT_TEMPLATE, title="Comment summary")
        )
    )


@pytest.fixture
def issue() -> IssueContext:
    """Provide a test issue."""
    return IssueContext(
        owner="octo-org",
        repo="octo-repo",
        issue_number=42,
        title="Crash on start",
        body="The app crashes when started without a config file.",
    )


@pytest.fixture
def inputs() -> SummaryInputs:
    """Provide summarization inputs."""
    return SummaryInputs(model="gpt-3.5-turbo-instruct", max_tokens=256)


@pytest.fixture
def mock_github() -> Mock:
    """Provide a GitHub client double with no comments."""
    github = Mock(spec=GitHubClient)
    github.list_issue_comments.return_value = []
    return github


@pytest.fixture
def mock_completions() -> Mock:
    """Provide a completion provider double."""
    return Mock(spec=CompletionProvider)
