"""
CommitSyncService — mirrors recent GitHub commits into the Notion database.

Flow for one run (sync(window_days)):
  1. Load the local SHA cache
  2. Probe the commits endpoint (diagnostics only)
  3. List commits from the last `window_days`; if none, retry with the
     fallback window (30 days); if still none, stop cleanly
  4. For each commit, newest first:
       cached      → skip
       otherwise   → fetch detail → classify + write Notion row → cache SHA
     with a fixed pause between consecutive write attempts
  5. Trim and save the cache

Per-commit failures are logged and skipped, never retried. A failure outside
the per-commit boundary (e.g. the list request itself) ends the run with
status="error" and leaves the cache file untouched.
"""
import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from commitsync.cache.store import CacheStore
from commitsync.models.commit import CommitSummary
from commitsync.models.sync import SyncResult

logger = logging.getLogger(__name__)

FALLBACK_WINDOW_DAYS = 30
PAGE_SIZE = 50
PROBE_PAGE_SIZE = 10
REQUEST_DELAY_SECONDS = 1.0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CommitSyncService:
    """Orchestrates GitHub → Notion sync for one repository."""

    def __init__(
        self,
        github,
        fetcher,
        writer,
        cache_store: CacheStore,
        *,
        fallback_window_days: int = FALLBACK_WINDOW_DAYS,
        page_size: int = PAGE_SIZE,
        probe_page_size: int = PROBE_PAGE_SIZE,
        request_delay_seconds: float = REQUEST_DELAY_SECONDS,
    ):
        """
        Args:
            github: GitHubClient instance (or AsyncMock in tests).
            fetcher: CommitDetailFetcher.
            writer: CommitRowWriter.
            cache_store: CacheStore for the local SHA cache.
        """
        self.github = github
        self.fetcher = fetcher
        self.writer = writer
        self.cache_store = cache_store
        self.fallback_window_days = fallback_window_days
        self.page_size = page_size
        self.probe_page_size = probe_page_size
        self.request_delay_seconds = request_delay_seconds

    async def sync(self, window_days: int = 7) -> SyncResult:
        """
        Sync commits from the last `window_days` days.

        Never raises: every failure is reported through SyncResult.status.
        """
        cache = self.cache_store.load()
        logger.info("Cache: %d commits previously processed", len(cache.processed_shas))
        logger.info("Last sync: %s", cache.last_sync)

        result = SyncResult(status="success", window_days=window_days)

        try:
            await self._probe()

            commits = await self._list_since(window_days)
            logger.info("Found %d commits in the last %d days", len(commits), window_days)

            if not commits:
                logger.warning(
                    "No commits found in the last %d days; trying the last %d days",
                    window_days,
                    self.fallback_window_days,
                )
                commits = await self._list_since(self.fallback_window_days)
                if not commits:
                    logger.warning(
                        "No commits found in the last %d days either. This might mean: "
                        "the repository is empty, all commits are older than %d days, "
                        "or there's an issue with GitHub API access.",
                        self.fallback_window_days,
                        self.fallback_window_days,
                    )
                    result.status = "no_commits"
                    result.cache_size = len(cache.processed_shas)
                    return result

                logger.info(
                    "Found %d commits in the last %d days; processing these instead",
                    len(commits),
                    self.fallback_window_days,
                )
                result.used_fallback = True

            pending_delay = False
            for summary in commits:
                if self.cache_store.contains(summary.sha, cache):
                    logger.info("Skipping cached commit: %s", summary.short_sha)
                    result.skipped += 1
                    continue

                # Rate limiting: pause between write attempts, never before the first.
                if pending_delay:
                    await asyncio.sleep(self.request_delay_seconds)
                    pending_delay = False

                record = await self.fetcher.fetch_detail(summary.sha)
                if record is None:
                    logger.warning("Could not get details for commit: %s", summary.short_sha)
                    result.failed += 1
                    continue

                if await self.writer.write_row(record):
                    result.processed += 1
                    cache.record(summary.sha)
                else:
                    result.failed += 1
                pending_delay = True

        except Exception as exc:
            logger.exception("Error during sync")
            result.status = "error"
            result.error_message = str(exc)
            result.cache_size = len(cache.processed_shas)
            return result

        self.cache_store.trim(cache)
        cache.last_sync = _utcnow().isoformat()
        self.cache_store.save(cache)
        result.cache_size = len(cache.processed_shas)

        logger.info(
            "Sync complete! Processed: %d, Skipped: %d, Failed: %d",
            result.processed,
            result.skipped,
            result.failed,
        )
        logger.info("Total commits in cache: %d", result.cache_size)
        return result

    # ─── Internal helpers ─────────────────────────────────────────────────────

    async def _list_since(self, days: int) -> List[CommitSummary]:
        since = _utcnow() - timedelta(days=days)
        logger.info("Fetching commits since %s", since.isoformat())
        return await self.github.list_commits(since=since, limit=self.page_size)

    async def _probe(self) -> None:
        """Log what the unfiltered commit list looks like (connectivity check)."""
        logger.info("Testing GitHub API connection...")
        latest = await self.github.list_commits(limit=self.probe_page_size)
        logger.info("Total commits in repo (last %d): %d", self.probe_page_size, len(latest))
        if latest:
            head = latest[0]
            logger.info(
                "Most recent commit: %s %s",
                head.author_date.isoformat() if head.author_date else "(no date)",
                head.message.splitlines()[0] if head.message else "",
            )


def build_sync_service(settings) -> CommitSyncService:
    """Wire real GitHub / Notion clients and the cache from settings."""
    from commitsync.github.client import GitHubClient
    from commitsync.github.fetcher import CommitDetailFetcher
    from commitsync.notion.client import NotionClient
    from commitsync.notion.row_writer import CommitRowWriter

    github = GitHubClient(settings.github_token, settings.github_owner, settings.github_repo)
    fetcher = CommitDetailFetcher(github)
    writer = CommitRowWriter(NotionClient(settings.notion_token), fetcher, settings)
    cache_store = CacheStore(settings.cache_file, max_size=settings.max_cache_size)
    return CommitSyncService(
        github,
        fetcher,
        writer,
        cache_store,
        fallback_window_days=settings.fallback_window_days,
        page_size=settings.page_size,
        probe_page_size=settings.probe_page_size,
        request_delay_seconds=settings.request_delay_seconds,
    )
