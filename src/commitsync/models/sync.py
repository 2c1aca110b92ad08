"""Outcome of one sync run."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class SyncResult:
    status: str  # "success", "no_commits", "error"
    window_days: int
    used_fallback: bool = False
    processed: int = 0
    skipped: int = 0
    failed: int = 0
    cache_size: int = 0
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != "error"
