"""Completion provider package."""

from issue_comment_summarizer.llm.factory import CompletionProviderFactory
from issue_comment_summarizer.llm.provider import CompletionProvider

__all__ = [
    "CompletionProvider",
    "CompletionProviderFactory",
]
