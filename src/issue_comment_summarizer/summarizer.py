"""Issue comment summarization section.

Fetches the discussion comments of an issue, splits them into chunks that fit
the model context window, summarizes each chunk, then asks the model to merge
the partial summaries into one answer.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Protocol

from issue_comment_summarizer.chunking import generate_prompt_chunks
from issue_comment_summarizer.config import DEFAULT_BOT_LOGIN, ReportConfig, SectionConfig
from issue_comment_summarizer.llm.provider import CompletionProvider
from issue_comment_summarizer.models import Comment, IssueContext, SummaryInputs, SummarySection
from issue_comment_summarizer.templating import render_prompt
from issue_comment_summarizer.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

MERGE_INSTRUCTION = (
    "Merge all the summarization data into one message. Each data chunk is separated by ---"
)
CHUNK_SEPARATOR = "---"


class CommentSource(Protocol):
    """Anything that can list the raw comment records of an issue."""

    def list_issue_comments(
        self, *, owner: str, repo: str, issue_number: int
    ) -> list[dict[str, Any]]: ...


def _section_config(config: ReportConfig | None) -> SectionConfig | None:
    if config is None:
        return None
    return config.sections.comment_summary


def is_add_section(inputs: SummaryInputs, config: ReportConfig | None) -> bool:
    """Return True when the comment summary section is requested and configured."""

    section = _section_config(config)
    return bool(
        inputs.add_comment_summary_section
        and section is not None
        and section.prompt
        and section.title
    )


def filter_comments(comments: Iterable[Comment], *, bot_login: str) -> list[Comment]:
    """Drop comments written by the automation itself, keeping order."""

    return [comment for comment in comments if comment.author != bot_login]


def serialize_comments(comments: Sequence[Comment]) -> str:
    """Serialize comments as compact JSON; no comments serializes to an empty string."""

    if not comments:
        return ""
    return json.dumps(
        [comment.to_payload() for comment in comments],
        ensure_ascii=False,
        separators=(",", ":"),
    )


class CommentSummarizer:
    """Build the comment summary section of a report."""

    def __init__(
        self,
        *,
        comments: CommentSource,
        completions: CompletionProvider,
        tokenizer: Tokenizer,
        bot_login: str = DEFAULT_BOT_LOGIN,
        chunk_concurrency: int = 1,
    ) -> None:
        if chunk_concurrency < 1:
            raise ValueError("chunk_concurrency must be at least 1")

        self._comments = comments
        self._completions = completions
        self._tokenizer = tokenizer
        self._bot_login = bot_login
        self._chunk_concurrency = chunk_concurrency

    def fetch_comments(self, issue: IssueContext) -> list[Comment]:
        """Fetch the issue's comments, minus the ones the automation wrote."""

        records = self._comments.list_issue_comments(
            owner=issue.owner, repo=issue.repo, issue_number=issue.issue_number
        )
        comments = filter_comments(
            (Comment.from_api(record) for record in records), bot_login=self._bot_login
        )
        logger.info(
            "Collected issue comments",
            extra={
                "repo": issue.repository,
                "issue_number": issue.issue_number,
                "fetched": len(records),
                "kept": len(comments),
            },
        )
        return comments

    def create_section(
        self,
        issue: IssueContext,
        inputs: SummaryInputs,
        config: ReportConfig,
    ) -> list[SummarySection]:
        """Summarize the issue discussion into a single report section.

        Makes one completion request per comment chunk plus one merge request.
        Any failure propagates and discards the partial summaries.
        """

        section = _section_config(config)
        if section is None:
            raise ValueError("Report config has no comment summary section")

        comments = self.fetch_comments(issue)

        prompt = self._render(section.prompt, issue, issue_comments="")
        prompt_length = len(self._tokenizer.encode(prompt))

        chunks = generate_prompt_chunks(
            serialize_comments(comments),
            inputs.max_tokens - prompt_length,
            self._tokenizer,
        )
        logger.info(
            "Summarizing comment chunks",
            extra={
                "issue_number": issue.issue_number,
                "chunks": len(chunks),
                "prompt_tokens": prompt_length,
            },
        )

        chunk_prompts = [
            self._render(section.prompt, issue, issue_comments=chunk) for chunk in chunks
        ]
        message_parts = [MERGE_INSTRUCTION, *self._complete_all(chunk_prompts, inputs)]

        message = self._completions.create_completion(
            model=inputs.model,
            prompt=CHUNK_SEPARATOR.join(message_parts),
            max_tokens=inputs.max_tokens,
        )

        return [SummarySection(prompt=prompt, title=section.title, description=message)]

    def _complete_all(self, prompts: list[str], inputs: SummaryInputs) -> list[str]:
        def _complete(prompt: str) -> str:
            return self._completions.create_completion(
                model=inputs.model, prompt=prompt, max_tokens=inputs.max_tokens
            )

        if self._chunk_concurrency == 1 or len(prompts) <= 1:
            return [_complete(prompt) for prompt in prompts]

        # map() yields results in submission order and re-raises the first failure.
        with ThreadPoolExecutor(max_workers=self._chunk_concurrency) as pool:
            return list(pool.map(_complete, prompts))

    @staticmethod
    def _render(template: str, issue: IssueContext, *, issue_comments: str) -> str:
        return render_prompt(
            template,
            {
                "issueTitle": issue.title,
                "issueBody": issue.body,
                "issueComments": issue_comments,
            },
        )
