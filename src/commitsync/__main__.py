"""
Main entrypoint.

Usage:
    python -m commitsync [DAYS]          # one sync run (default: last 7 days)
    python -m commitsync --clear-cache   # delete the local SHA cache
    python -m commitsync schedule        # run forever, syncing daily
"""
import asyncio
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


async def _run_scheduler() -> None:
    from commitsync.config import ConfigurationError, get_settings
    from commitsync.scheduler.jobs import build_scheduler

    settings = get_settings()
    try:
        settings.require_tokens()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    scheduler = build_scheduler(settings)
    scheduler.start()
    logger.info(
        "Scheduler started (daily sync at %02d:00 UTC for %s/%s)",
        settings.sync_hour,
        settings.github_owner,
        settings.github_repo,
    )

    try:
        await asyncio.Event().wait()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Shutting down...")
    finally:
        scheduler.shutdown()


def main() -> None:
    # Dispatch on first argument: `schedule`, otherwise the one-shot sync CLI
    if len(sys.argv) > 1 and sys.argv[1] == "schedule":
        asyncio.run(_run_scheduler())
    else:
        from commitsync.scripts.sync_commits import main as sync_main
        sync_main(sys.argv[1:])


if __name__ == "__main__":
    main()
