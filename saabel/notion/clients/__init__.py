"""High-level clients."""

from .notion_client import NotionClient

__all__ = ["NotionClient"]
