"""Commit values passed between the GitHub fetcher and the Notion writer."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

SHORT_SHA_LENGTH = 7
UNKNOWN_AUTHOR = "Unknown"


@dataclass
class CommitSummary:
    """One item of the commit list endpoint."""
    sha: str
    message: str
    author_name: str = UNKNOWN_AUTHOR
    author_date: Optional[datetime] = None

    @property
    def short_sha(self) -> str:
        return self.sha[:SHORT_SHA_LENGTH]


@dataclass
class CommitStats:
    additions: int = 0
    deletions: int = 0
    total: int = 0


@dataclass
class CommitRecord:
    """Full commit metadata for one row in the Notion database."""
    sha: str
    message: str
    url: str
    author_name: str = UNKNOWN_AUTHOR
    author_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    stats: CommitStats = field(default_factory=CommitStats)
    file_count: int = 0

    @property
    def short_sha(self) -> str:
        return self.sha[:SHORT_SHA_LENGTH]

    @property
    def commit_day(self) -> str:
        """Author date as a UTC calendar day, e.g. '2025-01-15'."""
        dt = self.author_date
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc).date().isoformat()
