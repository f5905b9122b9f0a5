"""GitHub integration."""

from issue_comment_summarizer.github.client import GitHubClient

__all__ = ["GitHubClient"]
