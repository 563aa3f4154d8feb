"""Integration tests against the live API."""

import os

import pytest

from saabel.notion.core import APIError

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_NOTION_NETWORK_TESTS") != "1" or not os.environ.get("NOTION_API_TOKEN"),
    reason="Requires network access. Set RUN_NOTION_NETWORK_TESTS=1 and NOTION_API_TOKEN to run",
)


class TestLiveAPI:
    """Test the client against the live API."""

    @pytest.mark.asyncio
    async def test_list_users(self, client):
        """Test listing users against the live API."""
        users = await client.list_users_all(max_pages=1)
        assert all("id" in user for user in users)

    @pytest.mark.asyncio
    async def test_search_pages_lazily(self, client):
        """Test lazy search against the live API."""
        async for result in client.iter_search(max_pages=2):
            assert result["object"] in ("page", "database", "data_source")

    @pytest.mark.asyncio
    async def test_unknown_page_is_not_retried(self, client):
        """Test a 404 is raised without retries."""
        with pytest.raises(APIError) as exc_info:
            await client.retrieve_page("00000000-0000-0000-0000-000000000000")
        assert exc_info.value.status_code in (400, 404)
