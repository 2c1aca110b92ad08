"""Tests for PyGithub commit → CommitSummary / CommitRecord normalization.

Uses the github_commit_detail.json fixture (a REST get-commit payload) mapped
onto the attribute layout PyGithub exposes.
"""
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from commitsync.github.normalizer import (
    commit_file_paths,
    normalize_commit_detail,
    summarize_commit,
)
from commitsync.models.commit import CommitRecord, CommitSummary


class TestNormalizeCommitDetail:
    def test_returns_commit_record(self, commit_detail):
        assert isinstance(normalize_commit_detail(commit_detail), CommitRecord)

    def test_full_sha_kept(self, commit_detail):
        record = normalize_commit_detail(commit_detail)
        assert record.sha == "3f2c1e9a7b4d5c6e8f9012a3b4c5d6e7f8091a2b"
        assert record.short_sha == "3f2c1e9"

    def test_message_and_url(self, commit_detail):
        record = normalize_commit_detail(commit_detail)
        assert record.message.startswith("feat: add streaming responses")
        assert record.url.endswith("/commit/3f2c1e9a7b4d5c6e8f9012a3b4c5d6e7f8091a2b")

    def test_author(self, commit_detail):
        record = normalize_commit_detail(commit_detail)
        assert record.author_name == "Dana Reyes"
        assert record.author_date == datetime(2025, 1, 15, 23, 41, 7, tzinfo=timezone.utc)

    def test_stats(self, commit_detail):
        record = normalize_commit_detail(commit_detail)
        assert (record.stats.additions, record.stats.deletions, record.stats.total) == (184, 37, 221)

    def test_file_count(self, commit_detail):
        assert normalize_commit_detail(commit_detail).file_count == 3

    def test_missing_author_falls_back(self, make_commit):
        now = datetime(2025, 2, 1, 12, 0, tzinfo=timezone.utc)
        record = normalize_commit_detail(make_commit("abc1234def", author=None), now=now)
        assert record.author_name == "Unknown"
        assert record.author_date == now

    def test_missing_author_date_defaults_to_current_time(self, make_commit):
        before = datetime.now(timezone.utc)
        record = normalize_commit_detail(make_commit("abc1234def", date=None))
        assert record.author_date >= before

    def test_missing_stats_default_to_zero(self, make_commit):
        commit = make_commit("abc1234def")
        commit.stats = None
        record = normalize_commit_detail(commit)
        assert (record.stats.additions, record.stats.deletions, record.stats.total) == (0, 0, 0)

    def test_missing_files_default_to_zero(self, make_commit):
        commit = make_commit("abc1234def")
        commit.files = None
        assert normalize_commit_detail(commit).file_count == 0

    def test_naive_date_treated_as_utc(self, make_commit):
        commit = make_commit("abc1234def")
        commit.commit.author.date = datetime(2025, 1, 15, 7, 30)
        record = normalize_commit_detail(commit)
        assert record.author_date.tzinfo == timezone.utc


class TestCommitFilePaths:
    def test_returns_filenames_in_order(self, commit_detail):
        assert commit_file_paths(commit_detail) == [
            "src/components/chat-interface/ChatWindow.tsx",
            "src/lib/stream.ts",
            "src/styles/chat.css",
        ]

    def test_none_files(self):
        assert commit_file_paths(SimpleNamespace(files=None)) == []

    def test_iterable_files(self):
        """PyGithub may return a PaginatedList; any iterable works."""
        files = iter([SimpleNamespace(filename="a.py"), SimpleNamespace(filename="b.py")])
        assert commit_file_paths(SimpleNamespace(files=files)) == ["a.py", "b.py"]


class TestSummarizeCommit:
    def test_returns_summary(self, make_commit):
        summary = summarize_commit(make_commit("abcdef1234", message="fix: x"))
        assert isinstance(summary, CommitSummary)
        assert summary.sha == "abcdef1234"
        assert summary.short_sha == "abcdef1"
        assert summary.message == "fix: x"
        assert summary.author_name == "Dana Reyes"
        assert summary.author_date == datetime(2025, 1, 15, 7, 30, tzinfo=timezone.utc)

    def test_missing_author(self, make_commit):
        summary = summarize_commit(make_commit("abcdef1234", author=None))
        assert summary.author_name == "Unknown"
        assert summary.author_date is None


class TestCommitDay:
    @pytest.mark.parametrize("dt,expected", [
        (datetime(2025, 1, 15, 23, 41, tzinfo=timezone.utc), "2025-01-15"),
        (datetime(2025, 1, 15, 7, 30), "2025-01-15"),
    ])
    def test_commit_day(self, dt, expected):
        record = CommitRecord(sha="a" * 40, message="m", url="u", author_date=dt)
        assert record.commit_day == expected

    def test_commit_day_converts_to_utc(self):
        # 20:00 in UTC-5 is 01:00 the next day in UTC
        dt = datetime(2025, 1, 15, 20, 0, tzinfo=timezone(timedelta(hours=-5)))
        record = CommitRecord(sha="a" * 40, message="m", url="u", author_date=dt)
        assert record.commit_day == "2025-01-16"
