"""
Sync script: mirror recent GitHub commits into the Notion commits database.

Usage:
    python -m commitsync.scripts.sync_commits [DAYS]
    python -m commitsync.scripts.sync_commits --clear-cache

DAYS defaults to 7 and must be an integer between 1 and 365. If nothing was
committed in that window, the last 30 days are tried instead.

Commits already recorded in .github-sync-cache.json are skipped.
--clear-cache deletes that file and exits without contacting any API.

Exit status: 0 on success (including "no commits found"), 1 on missing
tokens or a failed sync, 2 on a bad DAYS argument.
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_DAYS = 7
MIN_DAYS = 1
MAX_DAYS = 365


def parse_window_days(value: Optional[str]) -> int:
    """
    Validate the DAYS argument.

    Raises:
        argparse.ArgumentTypeError: if not an integer in [MIN_DAYS, MAX_DAYS].
    """
    if value is None:
        return DEFAULT_DAYS
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid days parameter {value!r}. Please provide a number between "
            f"{MIN_DAYS} and {MAX_DAYS}."
        ) from None
    if not MIN_DAYS <= days <= MAX_DAYS:
        raise argparse.ArgumentTypeError(
            f"Invalid days parameter {days}. Please provide a number between "
            f"{MIN_DAYS} and {MAX_DAYS}."
        )
    return days


def _clear_cache(settings) -> None:
    from commitsync.cache.store import CacheStore

    store = CacheStore(settings.cache_file)
    if store.clear():
        logger.info("Cache cleared successfully (%s)", store.path)
    else:
        logger.info("No cache file found at %s", store.path)


async def _sync(days: int, settings):
    from commitsync.sync_service import build_sync_service

    service = build_sync_service(settings)
    return await service.sync(days)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sync recent GitHub commits to a Notion database",
    )
    # Validated after --clear-cache is handled, so a bad value can't block clearing.
    parser.add_argument(
        "days",
        nargs="?",
        default=None,
        help=f"Number of days to look back ({MIN_DAYS}-{MAX_DAYS}, default: {DEFAULT_DAYS})",
    )
    parser.add_argument(
        "--clear-cache",
        action="store_true",
        help="Delete the local commit cache and exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    from commitsync.config import ConfigurationError, get_settings

    parser = build_parser()
    # --clear-cache wins over anything else on the command line, valid or not.
    args, extra = parser.parse_known_args(argv)
    settings = get_settings()

    if args.clear_cache:
        _clear_cache(settings)
        sys.exit(0)

    if extra:
        parser.error(f"unrecognized arguments: {' '.join(extra)}")

    try:
        days = parse_window_days(args.days)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    try:
        settings.require_tokens()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        logger.error("  NOTION_TOKEN - your Notion integration token")
        logger.error("  GITHUB_TOKEN - your GitHub personal access token")
        sys.exit(1)

    logger.info("GitHub: %s/%s", settings.github_owner, settings.github_repo)
    logger.info("Notion database: %s", settings.notion_database_id)
    logger.info("Days to sync: %d", days)

    result = asyncio.run(_sync(days, settings))
    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
