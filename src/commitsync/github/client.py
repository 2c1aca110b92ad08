"""
Async wrapper around PyGithub.

PyGithub is synchronous; we run it in a thread pool executor so it doesn't
block the asyncio event loop. Only the two endpoints the sync needs are
exposed: list commits and get a single commit.

Errors from GitHub (github.GithubException, network errors) propagate to the
caller.
"""
import asyncio
import itertools
from datetime import datetime
from typing import List, Optional

from github import Auth, Github

from commitsync.github.normalizer import summarize_commit
from commitsync.models.commit import CommitSummary

# GitHub's maximum page size for the commits endpoint.
MAX_PER_PAGE = 100


class GitHubClient:
    """Thin async wrapper over github.Github, bound to one repository."""

    def __init__(self, token: str, owner: str, repo: str, api: Optional[Github] = None):
        """
        Args:
            token: GitHub personal access token.
            owner: Repository owner (user or organisation).
            repo: Repository name.
            api: Pre-built Github instance (tests).
        """
        self.owner = owner
        self.repo = repo
        self._api = api or Github(auth=Auth.Token(token))
        self._repo = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    async def _run(self, fn, *args, **kwargs):
        """Run a sync PyGithub call in the thread pool."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, lambda: fn(*args, **kwargs))

    def _get_repo(self):
        if self._repo is None:
            self._repo = self._api.get_repo(self.full_name)
        return self._repo

    def _list_commits_sync(self, since: Optional[datetime], limit: int) -> List[CommitSummary]:
        kwargs = {}
        if since is not None:
            kwargs["since"] = since
        # One page of `limit` commits where possible.
        self._api.per_page = min(limit, MAX_PER_PAGE)
        commits = self._get_repo().get_commits(**kwargs)
        return [summarize_commit(c) for c in itertools.islice(commits, limit)]

    async def list_commits(
        self,
        since: Optional[datetime] = None,
        limit: int = 50,
    ) -> List[CommitSummary]:
        """
        Fetch up to `limit` commits from the default branch, newest first.

        Args:
            since: Only commits authored after this time. None means no bound.
            limit: Maximum number of commits to return.
        """
        return await self._run(self._list_commits_sync, since, limit)

    async def get_commit(self, sha: str):
        """Fetch a single commit (github.Commit.Commit) including stats and files."""
        return await self._run(lambda: self._get_repo().get_commit(sha))
