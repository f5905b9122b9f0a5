"""Records passed between the GitHub adapter, the summarizer and its callers."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from issue_comment_summarizer.config import ConfigurationError


@dataclass(frozen=True, slots=True)
class IssueContext:
    """The issue being summarized.

    Title and body are passed through to the prompt template as-is, so either
    may be None when the issue has none.
    """

    owner: str
    repo: str
    issue_number: int
    title: str | None = None
    body: str | None = None

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True, slots=True)
class Comment:
    """A discussion comment projected from a raw API record."""

    body: str | None
    created_at: str | None
    author: str | None

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> Comment:
        user = record.get("user")
        author = user.get("login") if isinstance(user, dict) else None
        return cls(
            body=record.get("body"),
            created_at=record.get("created_at"),
            author=author,
        )

    def to_payload(self) -> dict[str, str]:
        """Return the JSON-ready form, omitting absent fields."""

        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True, slots=True)
class SummaryInputs:
    """Caller-supplied inputs for one summarization run."""

    model: str
    max_tokens: int
    add_comment_summary_section: bool = True

    def __post_init__(self) -> None:
        if self.max_tokens <= 0:
            raise ConfigurationError(f"max_tokens must be positive, got {self.max_tokens}")


@dataclass(frozen=True, slots=True)
class SummarySection:
    """One titled block of generated content for the assembled report."""

    prompt: str
    title: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def to_markdown(self) -> str:
        return f"### {self.title}\n\n{self.description.strip()}\n"
