"""
Local cache of commit SHAs already mirrored to Notion.

The cache is a small JSON file in the working directory:

    {
        "processedSHAs": ["3f2c1e...", "a91b07..."],
        "lastSync": "2025-01-15T07:30:00+00:00",
        "totalProcessed": 42
    }

It is the only dedup mechanism: a SHA listed here is never fetched or written
again. The list is capped at MAX_CACHE_SIZE entries, oldest first out.

A missing or unreadable file is not an error; the run simply starts from an
empty cache. Write failures are logged but never abort a sync.
"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from commitsync.models.cache import SyncCache

logger = logging.getLogger(__name__)

# ── Constants ─────────────────────────────────────────────────────────────────

CACHE_FILE_DEFAULT = Path(".github-sync-cache.json")
MAX_CACHE_SIZE = 1000


def contains(sha: str, cache: SyncCache) -> bool:
    """Exact-match membership test against the processed SHA list."""
    return sha in cache.processed_shas


def trim(cache: SyncCache, max_size: int = MAX_CACHE_SIZE) -> int:
    """
    Keep only the `max_size` most recently appended SHAs.

    Returns:
        Number of SHAs dropped (0 if the cache was already small enough).
    """
    overflow = len(cache.processed_shas) - max_size
    if overflow <= 0:
        return 0
    cache.processed_shas = cache.processed_shas[-max_size:] if max_size > 0 else []
    logger.info("Cache trimmed: dropped %d oldest SHAs, kept %d", overflow, max_size)
    return overflow


# ── Main class ────────────────────────────────────────────────────────────────

class CacheStore:
    """
    Reads and writes the SyncCache JSON file.

    Usage:
        store = CacheStore(".github-sync-cache.json", max_size=1000)
        cache = store.load()
        ...
        store.trim(cache)
        store.save(cache)
    """

    def __init__(
        self,
        path: Union[str, Path] = CACHE_FILE_DEFAULT,
        max_size: int = MAX_CACHE_SIZE,
    ):
        self.path = Path(path)
        self.max_size = max_size

    def load(self) -> SyncCache:
        """Return the cache on disk, or an empty cache if missing or corrupt."""
        if not self.path.exists():
            return SyncCache.empty()

        try:
            return SyncCache.model_validate(json.loads(self.path.read_text()))
        except (OSError, ValueError, TypeError, ValidationError) as exc:
            logger.warning("Cache file %s is unreadable (%s); starting fresh", self.path, exc)
            return SyncCache.empty()

    def save(self, cache: SyncCache) -> bool:
        """
        Write the cache as pretty-printed JSON.

        Returns:
            True on success, False if the file could not be written.
        """
        data = cache.model_dump(by_alias=True)
        try:
            self.path.write_text(json.dumps(data, indent=2))
        except OSError as exc:
            logger.error("Failed to save cache to %s: %s", self.path, exc)
            return False
        return True

    def trim(self, cache: SyncCache, max_size: Optional[int] = None) -> int:
        return trim(cache, self.max_size if max_size is None else max_size)

    def contains(self, sha: str, cache: SyncCache) -> bool:
        return contains(sha, cache)

    def clear(self) -> bool:
        """
        Delete the cache file.

        Returns:
            True if a file was removed, False if there was nothing to remove.
        """
        if not self.path.exists():
            return False
        self.path.unlink()
        return True
