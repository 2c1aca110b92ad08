"""Persisted record of commits already mirrored to Notion."""
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class SyncCache(BaseModel):
    """
    On-disk shape:

        {"processedSHAs": [...], "lastSync": "<iso-8601>", "totalProcessed": 12}

    All three keys are required when loading; anything else is treated as a
    corrupt cache and replaced with SyncCache.empty().
    """

    model_config = ConfigDict(populate_by_name=True)

    processed_shas: List[str] = Field(alias="processedSHAs")
    last_sync: str = Field(alias="lastSync")
    # Lifetime counter; not reduced when processed_shas is trimmed.
    total_processed: int = Field(alias="totalProcessed")

    @classmethod
    def empty(cls) -> "SyncCache":
        return cls(processed_shas=[], last_sync=_now_iso(), total_processed=0)

    def record(self, sha: str) -> None:
        """Append a newly processed SHA and bump the lifetime counter."""
        self.processed_shas.append(sha)
        self.total_processed += 1
