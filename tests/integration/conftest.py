"""Shared fixtures for integration tests.

Tests here only run when RUN_NOTION_NETWORK_TESTS=1 and NOTION_API_TOKEN is set.
"""

import pytest_asyncio

from saabel.notion import NotionClient, config_from_env


@pytest_asyncio.fixture
async def client():
    async with NotionClient(config_from_env()) as c:
        yield c
