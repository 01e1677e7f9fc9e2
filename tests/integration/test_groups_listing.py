"""Integration tests for group listings against a live server."""

import os

import pytest
import pytest_asyncio

from relaykit.im import ClientConfig, IMClient

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_RELAYKIT_NETWORK_TESTS") != "1",
    reason="Requires network access to list groups",
)


@pytest_asyncio.fixture
async def client():
    async with IMClient(ClientConfig.from_env()) as im_client:
        yield im_client


class TestGroupListingIntegration:
    """Compare page-at-a-time and full listings on the same application."""

    @pytest.mark.asyncio
    async def test_manual_paging_matches_full_listing(self, client):
        manual = []
        page = await client.groups.list_groups(5)
        manual.extend(g.group_id for g in page.items)
        while not page.is_last:
            page = await client.groups.list_groups(5, page.next_cursor)
            manual.extend(g.group_id for g in page.items)

        full = [g.group_id async for g in client.groups.list_all_groups(5)]

        assert manual == full

    @pytest.mark.asyncio
    async def test_members_of_first_group(self, client):
        page = await client.groups.list_groups(1)
        if not page.items:
            pytest.skip("Application has no groups")

        members = [
            m async for m in client.groups.list_all_group_members(page.items[0].group_id, 10)
        ]

        assert any(m.is_owner for m in members)
