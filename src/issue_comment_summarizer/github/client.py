"""GitHub API client wrapper.

Comment listing goes straight to the REST API through a `requests` session;
issue metadata lookups go through PyGithub. Keeping both behind this class keeps
GitHub calls out of the summarizer and CLI code and makes tests easy.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from github import Auth, Github

from issue_comment_summarizer.models import IssueContext

logger = logging.getLogger(__name__)


class GitHubClient:
    """Small wrapper around the GitHub REST API for the calls the summarizer needs."""

    per_page = 100

    def __init__(
        self,
        *,
        token: str,
        base_url: str = "https://api.github.com",
        github_api: Github | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise ValueError("GitHub token is required")

        self._token = token
        self._base_url = base_url
        self._rest_base_url = base_url.rstrip("/")
        self._github = github_api
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "issue-comment-summarizer",
            }
        )

    def _github_api(self) -> Github:
        if self._github is None:
            self._github = Github(auth=Auth.Token(self._token), base_url=self._base_url)
        return self._github

    def _issue_comments_url(self, *, owner: str, repo: str, issue_number: int) -> str:
        owner = owner.strip().strip("/")
        repo = repo.strip().strip("/")
        if not owner or not repo:
            raise ValueError("owner and repo are required")
        if issue_number <= 0:
            raise ValueError("issue_number must be a positive integer")
        return f"{self._rest_base_url}/repos/{owner}/{repo}/issues/{issue_number}/comments"

    def _get_paginated_json_list(self, url: str) -> list[dict[str, Any]]:
        """Fetch every page of a REST endpoint that returns a JSON list.

        Stops at the first page holding fewer than `per_page` items.
        """

        items: list[dict[str, Any]] = []
        page = 1
        while True:
            resp = self._session.get(
                url,
                params={"per_page": self.per_page, "page": page},
                timeout=30,
            )
            resp.raise_for_status()
            payload = resp.json()
            if not isinstance(payload, list):
                break

            items.extend(p for p in payload if isinstance(p, dict))

            if len(payload) < self.per_page:
                break
            page += 1
        return items

    def list_issue_comments(
        self, *, owner: str, repo: str, issue_number: int
    ) -> list[dict[str, Any]]:
        """Return all raw comment records of an issue, in creation order."""

        url = self._issue_comments_url(owner=owner, repo=repo, issue_number=issue_number)
        comments = self._get_paginated_json_list(url)
        logger.debug(
            "Fetched issue comments",
            extra={
                "repo": f"{owner}/{repo}",
                "issue_number": issue_number,
                "count": len(comments),
            },
        )
        return comments

    def get_issue_context(self, *, repository: str, issue_number: int) -> IssueContext:
        """Look up an issue's title and body and bundle them with its coordinates.

        Args:
            repository: Repository in the form "owner/repo".
            issue_number: Issue number.
        """

        owner, sep, repo = repository.strip().strip("/").partition("/")
        if not sep or not owner or not repo:
            raise ValueError(f"Repository must be in the form 'owner/repo': {repository!r}")

        issue = self._github_api().get_repo(f"{owner}/{repo}").get_issue(issue_number)
        logger.info(
            "Loaded issue",
            extra={"repo": f"{owner}/{repo}", "issue_number": issue_number},
        )
        return IssueContext(
            owner=owner,
            repo=repo,
            issue_number=issue_number,
            title=issue.title,
            body=issue.body,
        )

    def close(self) -> None:
        self._session.close()
        if self._github is not None:
            self._github.close()
