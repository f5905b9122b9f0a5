"""CLI entrypoint for the comment summarizer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from issue_comment_summarizer import __version__
from issue_comment_summarizer.config import (
    ConfigurationError,
    SummarizerSettings,
    load_report_config,
)
from issue_comment_summarizer.github.client import GitHubClient
from issue_comment_summarizer.llm.factory import CompletionProviderFactory
from issue_comment_summarizer.logging import configure_logging
from issue_comment_summarizer.models import SummaryInputs
from issue_comment_summarizer.summarizer import CommentSummarizer, is_add_section
from issue_comment_summarizer.tokenizer import TiktokenTokenizer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="comment-summarizer",
        description="Summarize the discussion comments of a GitHub issue",
    )
    parser.add_argument(
        "--version", action="version", version=f"issue-comment-summarizer {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    summarize = subparsers.add_parser("summarize", help="Summarize an issue's comments")
    summarize.add_argument(
        "--repo",
        "--repository",
        dest="repository",
        required=True,
        help="Repository in the form 'owner/repo'",
    )
    summarize.add_argument(
        "--issue-number",
        type=int,
        required=True,
        help="Issue whose comments should be summarized",
    )
    summarize.add_argument(
        "--config",
        type=Path,
        required=True,
        help="JSON report config holding sections.comment_summary.{prompt,title}",
    )
    summarize.add_argument(
        "--model",
        default=None,
        help="Completion model (defaults to SUMMARIZER_MODEL)",
    )
    summarize.add_argument(
        "--max-tokens",
        type=int,
        default=None,
        help="Maximum tokens per completion (defaults to SUMMARIZER_MAX_TOKENS)",
    )
    summarize.add_argument(
        "--format",
        choices=("markdown", "json"),
        default="markdown",
        help="Output format",
    )
    summarize.add_argument(
        "--no-section",
        action="store_true",
        help="Disable the comment summary section (nothing is fetched or printed)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = SummarizerSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        if args.command == "summarize":
            report_config = load_report_config(args.config)
            inputs = SummaryInputs(
                model=args.model or settings.model,
                max_tokens=(
                    args.max_tokens if args.max_tokens is not None else settings.max_tokens
                ),
                add_comment_summary_section=not args.no_section,
            )

            if not is_add_section(inputs, report_config):
                logger.info("Comment summary section disabled; nothing to do")
                return 0

            github = GitHubClient(token=settings.github_token, base_url=settings.github_base_url)
            try:
                issue = github.get_issue_context(
                    repository=args.repository, issue_number=args.issue_number
                )
                summarizer = CommentSummarizer(
                    comments=github,
                    completions=CompletionProviderFactory.create(settings),
                    tokenizer=TiktokenTokenizer(settings.token_encoding),
                    bot_login=settings.bot_login,
                    chunk_concurrency=settings.chunk_concurrency,
                )
                sections = summarizer.create_section(issue, inputs, report_config)
            finally:
                github.close()

            if args.format == "json":
                print(json.dumps([s.to_dict() for s in sections], indent=2, ensure_ascii=False))
            else:
                for section in sections:
                    print(section.to_markdown())
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except (ConfigurationError, ValidationError) as e:
        logger.error("Invalid configuration", extra={"error": str(e)})
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
