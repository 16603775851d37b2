"""Unit tests for the review endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient

from juicebox_factory.core.errors import UpstreamError
from juicebox_factory.notifications import NotificationService, user_topic

pytestmark = pytest.mark.asyncio


class TestCreateReview:
    """Test review creation and its notification side effect."""

    async def test_create_review_notifies_submitter(self, client: AsyncClient, make_tool, broker):
        tool = await make_tool("Vite", submitted_by="alice")
        subscription = await broker.subscribe(user_topic("alice"))

        response = await client.post(
            "/api/v1/reviews",
            json={"tool_id": tool.id, "user_id": "bob", "rating": 5, "review_text": "Great tool", "pros": "Fast"},
        )

        assert response.status_code == 201
        review = response.json()
        assert review["rating"] == 5
        assert review["user_id"] == "bob"
        assert review["pros"] == "Fast"
        event = await subscription.get(timeout=0.1)
        assert event["type"] == "review_reply"
        assert event["title"] == "New Review on Your Tool"

    async def test_own_review_sends_nothing(self, client: AsyncClient, make_tool, repos):
        tool = await make_tool("Vite", submitted_by="alice")

        response = await client.post("/api/v1/reviews", json={"tool_id": tool.id, "user_id": "alice", "rating": 4})

        assert response.status_code == 201
        assert await repos.notifications.count_unread("alice") == 0

    async def test_notification_failure_keeps_review(self, client: AsyncClient, make_tool, repos):
        tool = await make_tool("Vite", submitted_by="alice")
        failure = AsyncMock(side_effect=UpstreamError("database", "connection lost", external=False))

        with patch.object(NotificationService, "notify_tool_event", failure):
            response = await client.post(
                "/api/v1/reviews", json={"tool_id": tool.id, "user_id": "bob", "rating": 4}
            )

        assert response.status_code == 201
        assert response.json()["user_id"] == "bob"
        failure.assert_awaited_once()
        stored = await repos.reviews.get_by_tool_and_user(tool.id, "bob")
        assert stored is not None
        assert stored.rating == 4

    async def test_second_review_by_same_user_conflicts(self, client: AsyncClient, make_tool, make_review):
        tool = await make_tool("Vite")
        await make_review(tool.id, "bob")

        response = await client.post("/api/v1/reviews", json={"tool_id": tool.id, "user_id": "bob", "rating": 2})

        assert response.status_code == 409
        assert response.json() == {"detail": "You have already reviewed this tool"}

    async def test_unknown_tool(self, client: AsyncClient):
        response = await client.post("/api/v1/reviews", json={"tool_id": 999, "user_id": "bob", "rating": 3})
        assert response.status_code == 404

    @pytest.mark.parametrize("rating", [0, 6])
    async def test_rating_out_of_range(self, client: AsyncClient, make_tool, rating):
        tool = await make_tool("Vite")
        response = await client.post("/api/v1/reviews", json={"tool_id": tool.id, "user_id": "bob", "rating": rating})
        assert response.status_code == 422


class TestListReviews:
    """Test review listing."""

    async def test_filter_by_tool(self, client: AsyncClient, make_tool, make_review):
        vite = await make_tool("Vite")
        figma = await make_tool("Figma")
        await make_review(vite.id, "alice", rating=5)
        await make_review(figma.id, "bob", rating=2)

        response = await client.get("/api/v1/reviews", params={"tool_id": vite.id})

        assert response.status_code == 200
        assert [(r["user_id"], r["rating"]) for r in response.json()] == [("alice", 5)]

    async def test_newest_first(self, client: AsyncClient, make_tool, make_review):
        tool = await make_tool("Vite")
        await make_review(tool.id, "alice")
        await make_review(tool.id, "bob")

        response = await client.get("/api/v1/reviews")

        assert [r["user_id"] for r in response.json()] == ["bob", "alice"]
