"""Async Notion API wrapper."""
import asyncio
from typing import Any, Dict, Optional

from notion_client import Client

# Database-parented page creation; pinned so SDK upgrades don't change the payload shape.
NOTION_API_VERSION = "2022-06-28"


class NotionClient:
    """Thin async wrapper over the notion-client SDK."""

    def __init__(self, token: str, client: Optional[Client] = None):
        self._client = client or Client(auth=token, notion_version=NOTION_API_VERSION)

    async def create_page(self, database_id: str, properties: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create one row in a Notion database and return the created page object.
        Runs the sync SDK call in a thread pool executor.
        """
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(
            None,
            lambda: self._create_page_sync(database_id, properties),
        )

    def _create_page_sync(self, database_id: str, properties: Dict[str, Any]) -> Dict[str, Any]:
        return self._client.pages.create(
            parent={"database_id": database_id},
            properties=properties,
        )
