"""
Pure functions: PyGithub commit objects → CommitSummary / CommitRecord.

Everything GitHub may omit (author, stats, files) falls back to a default so
a partially populated commit still produces a row.
"""
from datetime import datetime, timezone
from typing import List, Optional

from commitsync.models.commit import UNKNOWN_AUTHOR, CommitRecord, CommitStats, CommitSummary


def _git_author(commit):
    git_commit = getattr(commit, "commit", None)
    return getattr(git_commit, "author", None) if git_commit is not None else None


def _aware(dt: Optional[datetime]) -> Optional[datetime]:
    if dt is not None and dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def summarize_commit(commit) -> CommitSummary:
    """Build a CommitSummary from a commit list item."""
    author = _git_author(commit)
    return CommitSummary(
        sha=commit.sha,
        message=commit.commit.message or "",
        author_name=getattr(author, "name", None) or UNKNOWN_AUTHOR,
        author_date=_aware(getattr(author, "date", None)),
    )


def commit_file_paths(commit) -> List[str]:
    """Changed file names, in the order GitHub lists them."""
    files = commit.files
    if files is None:
        return []
    return [f.filename for f in files]


def normalize_commit_detail(commit, now: Optional[datetime] = None) -> CommitRecord:
    """
    Build a CommitRecord from a full commit (get_commit response).

    Args:
        commit: github.Commit.Commit (or an object with the same attributes).
        now: Fallback author date when GitHub reports none.
    """
    author = _git_author(commit)
    author_date = _aware(getattr(author, "date", None)) or now or datetime.now(timezone.utc)

    stats = commit.stats
    if stats is not None:
        commit_stats = CommitStats(
            additions=stats.additions or 0,
            deletions=stats.deletions or 0,
            total=stats.total or 0,
        )
    else:
        commit_stats = CommitStats()

    return CommitRecord(
        sha=commit.sha,
        message=commit.commit.message or "",
        url=commit.html_url or "",
        author_name=getattr(author, "name", None) or UNKNOWN_AUTHOR,
        author_date=author_date,
        stats=commit_stats,
        file_count=len(commit_file_paths(commit)),
    )
