"""Shared test fixtures."""
import json
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from commitsync.config import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _parse_date(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def github_commit_from_json(data: Dict[str, Any]) -> SimpleNamespace:
    """Mimic the attribute layout of github.Commit.Commit for a REST payload."""
    author = data["commit"].get("author")
    stats = data.get("stats")
    files = data.get("files")
    return SimpleNamespace(
        sha=data["sha"],
        html_url=data.get("html_url"),
        commit=SimpleNamespace(
            message=data["commit"].get("message"),
            author=(
                SimpleNamespace(name=author.get("name"), date=_parse_date(author.get("date")))
                if author is not None
                else None
            ),
        ),
        stats=SimpleNamespace(**stats) if stats is not None else None,
        files=[SimpleNamespace(filename=f["filename"]) for f in files] if files is not None else None,
    )


@pytest.fixture(name="commit_detail_json")
def commit_detail_json_fixture() -> Dict[str, Any]:
    return json.loads((FIXTURES_DIR / "github_commit_detail.json").read_text())


@pytest.fixture(name="commit_detail")
def commit_detail_fixture(commit_detail_json) -> SimpleNamespace:
    """A full commit, as returned by Repository.get_commit()."""
    return github_commit_from_json(commit_detail_json)


@pytest.fixture(name="make_commit")
def make_commit_fixture():
    """Factory for minimal commit objects (list items or details)."""

    def _make(
        sha: str,
        message: str = "update copy",
        author: Optional[str] = "Dana Reyes",
        date: Optional[str] = "2025-01-15T07:30:00Z",
        additions: int = 1,
        deletions: int = 1,
        files: Optional[List[str]] = None,
    ) -> SimpleNamespace:
        return github_commit_from_json({
            "sha": sha,
            "html_url": f"https://github.com/acme/widgets/commit/{sha}",
            "commit": {
                "message": message,
                "author": {"name": author, "date": date} if author is not None else None,
            },
            "stats": {"additions": additions, "deletions": deletions, "total": additions + deletions},
            "files": [{"filename": f} for f in (files or [])],
        })

    return _make


@pytest.fixture(name="settings")
def settings_fixture(tmp_path) -> Settings:
    """Settings with fake credentials and the cache in a temp dir; ignores .env files."""
    return Settings(
        _env_file=None,
        notion_token="secret_notion",
        github_token="ghp_test",
        notion_database_id="db-123",
        github_owner="acme",
        github_repo="widgets",
        cache_file=str(tmp_path / ".github-sync-cache.json"),
        request_delay_seconds=0.0,
    )
