"""Issue Comment Summarizer.

Summarizes the discussion comments of a GitHub issue into a titled report
section:
- comments fetched through the GitHub REST API
- token-bounded chunking to respect the model context window
- one completion per chunk, merged by a final completion
"""

__version__ = "0.1.0"

from issue_comment_summarizer.config import SummarizerSettings
from issue_comment_summarizer.models import IssueContext, SummaryInputs, SummarySection
from issue_comment_summarizer.summarizer import CommentSummarizer, is_add_section

__all__ = [
    "__version__",
    "CommentSummarizer",
    "IssueContext",
    "SummarizerSettings",
    "SummaryInputs",
    "SummarySection",
    "is_add_section",
]
