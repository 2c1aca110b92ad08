"""
Per-commit detail lookups for the sync loop.

Both methods swallow and log GitHub errors: a commit that can't be fetched is
skipped for this run and retried on the next one (it was never cached).
"""
import logging
from typing import List, Optional

from commitsync.github.normalizer import commit_file_paths, normalize_commit_detail
from commitsync.models.commit import CommitRecord

logger = logging.getLogger(__name__)


class CommitDetailFetcher:
    def __init__(self, client):
        """
        Args:
            client: GitHubClient instance (or AsyncMock in tests).
        """
        self.client = client

    async def fetch_detail(self, sha: str) -> Optional[CommitRecord]:
        """Return the full CommitRecord for `sha`, or None if GitHub fails."""
        try:
            commit = await self.client.get_commit(sha)
            return normalize_commit_detail(commit)
        except Exception as exc:
            logger.warning("Could not get details for commit %s: %s", sha[:7], exc)
            return None

    async def fetch_file_paths(self, sha: str) -> List[str]:
        """Return the changed file names for `sha`, or [] if GitHub fails."""
        try:
            commit = await self.client.get_commit(sha)
            return commit_file_paths(commit)
        except Exception as exc:
            logger.warning("Could not get files for commit %s: %s", sha[:7], exc)
            return []
