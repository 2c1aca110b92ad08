"""
APScheduler job for unattended daily sync.

`python -m commitsync schedule` keeps one process alive and runs the same
sync as the CLI once a day at settings.sync_hour (UTC). The local cache makes
repeated runs safe: commits already mirrored are skipped.
"""
import logging
from datetime import datetime, timezone

from apscheduler.schedulers.asyncio import AsyncIOScheduler

logger = logging.getLogger(__name__)


def build_scheduler(settings) -> AsyncIOScheduler:
    """
    Create and configure the APScheduler.

    Args:
        settings: Settings passed through to every job run.

    Returns:
        Configured AsyncIOScheduler (not yet started).
    """
    scheduler = AsyncIOScheduler(timezone=timezone.utc)

    scheduler.add_job(
        _scheduled_sync,
        trigger="cron",
        hour=settings.sync_hour,
        minute=0,
        id="commit_sync",
        replace_existing=True,
        max_instances=1,
        kwargs={"settings": settings},
    )

    return scheduler


async def _scheduled_sync(settings) -> None:
    """Daily job: sync the default window. Never raises."""
    from commitsync.sync_service import build_sync_service

    logger.info("Scheduled sync starting at %s", datetime.now(timezone.utc).isoformat())

    try:
        service = build_sync_service(settings)
        result = await service.sync(settings.default_window_days)
        logger.info(
            "Scheduled sync finished: %s (processed=%d, skipped=%d)",
            result.status,
            result.processed,
            result.skipped,
        )
    except Exception as exc:
        logger.error("Scheduled sync failed: %s", exc)
