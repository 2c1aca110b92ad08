"""
Commit → Notion row.

Each synced commit becomes one page in the commits database with this fixed
column mapping:

    Commit Message  title       commit message
    GitHub SHA      rich_text   7-char SHA
    GitHub URL      url
    Author          rich_text
    Commit Date     date        UTC day of the author date
    Repository      select      settings.repository_label
    Feature Area    select      classify_feature_area()
    Impact Level    select      classify_impact_level()
    Lines Added     number
    Lines Deleted   number
    Files Changed   number
    Status          select      always "Committed"
    Branch          rich_text   settings.branch_label

Rows are only ever created; nothing here reads, updates or deletes them.
"""
import logging
from typing import Any, Dict

from commitsync.analysis.classifier import (
    FeatureArea,
    ImpactLevel,
    classify_feature_area,
    classify_impact_level,
)
from commitsync.models.commit import CommitRecord

logger = logging.getLogger(__name__)

COMMITTED_STATUS = "Committed"


def _rich_text(content: str) -> Dict[str, Any]:
    return {"rich_text": [{"text": {"content": content}}]}


def _select(name: str) -> Dict[str, Any]:
    return {"select": {"name": name}}


def build_commit_properties(
    record: CommitRecord,
    feature_area: FeatureArea,
    impact_level: ImpactLevel,
    repository_label: str,
    branch_label: str,
) -> Dict[str, Any]:
    """Build the Notion `properties` payload for one commit."""
    return {
        "Commit Message": {"title": [{"text": {"content": record.message}}]},
        "GitHub SHA": _rich_text(record.short_sha),
        "GitHub URL": {"url": record.url},
        "Author": _rich_text(record.author_name),
        "Commit Date": {"date": {"start": record.commit_day}},
        "Repository": _select(repository_label),
        "Feature Area": _select(feature_area.value),
        "Impact Level": _select(impact_level.value),
        "Lines Added": {"number": record.stats.additions},
        "Lines Deleted": {"number": record.stats.deletions},
        "Files Changed": {"number": record.file_count},
        "Status": _select(COMMITTED_STATUS),
        "Branch": _rich_text(branch_label),
    }


class CommitRowWriter:
    """Classifies a commit and creates its Notion row."""

    def __init__(self, notion, fetcher, settings):
        """
        Args:
            notion: NotionClient instance (or AsyncMock in tests).
            fetcher: CommitDetailFetcher, used for the changed-file list.
            settings: Settings (database id and fixed labels).
        """
        self.notion = notion
        self.fetcher = fetcher
        self.settings = settings

    async def write_row(self, record: CommitRecord) -> bool:
        """
        Create the Notion row for `record`.

        Returns:
            True if the page was created, False if Notion rejected it.
        """
        files = await self.fetcher.fetch_file_paths(record.sha)
        feature_area = classify_feature_area(record.message, files)
        impact_level = classify_impact_level(
            record.message,
            record.stats.additions,
            record.stats.deletions,
        )
        properties = build_commit_properties(
            record,
            feature_area,
            impact_level,
            repository_label=self.settings.repository_label,
            branch_label=self.settings.branch_label,
        )

        try:
            await self.notion.create_page(self.settings.notion_database_id, properties)
        except Exception as exc:
            logger.error("Error creating Notion entry for commit %s: %s", record.short_sha, exc)
            return False

        logger.info(
            "Created Notion entry for commit %s (%s, %s)",
            record.short_sha,
            feature_area.value,
            impact_level.value,
        )
        return True
