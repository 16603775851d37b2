"""
Unit tests for the notification endpoints.

Tests cover:
- Sending single and bulk notifications
- Listing, unread counts and read state
- Deletion scoped to the owner
- Preferences
- Tool event fan-out
- The Server-Sent Events stream generator
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient

from juicebox_factory.notifications import user_topic
from juicebox_factory.server.api.v1.notifications import stream_notifications

pytestmark = pytest.mark.asyncio


def system_update(user_id: str = "alice", title: str = "Maintenance") -> dict:
    return {"user_id": user_id, "type": "system_update", "title": title, "message": "Back soon"}


class TestSendNotifications:
    """Test sending notifications."""

    async def test_send_publishes_to_subscribers(self, client: AsyncClient, broker):
        subscription = await broker.subscribe(user_topic("alice"))

        response = await client.post("/api/v1/notifications", json={**system_update(), "data": {"window": "02:00"}})

        assert response.status_code == 201
        notification = response.json()
        assert notification["id"].startswith("notif_")
        assert notification["read"] is False
        assert notification["data"] == {"window": "02:00"}
        event = await subscription.get(timeout=0.1)
        assert event["id"] == notification["id"]

    async def test_bulk(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/notifications/bulk",
            json={"user_ids": ["alice", "bob"], "type": "system_update", "title": "New feature", "message": "Try it"},
        )

        assert response.status_code == 201
        assert [n["user_id"] for n in response.json()] == ["alice", "bob"]

    async def test_bulk_requires_recipients(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/notifications/bulk",
            json={"user_ids": [], "type": "system_update", "title": "New feature", "message": "Try it"},
        )
        assert response.status_code == 422

    async def test_unknown_type(self, client: AsyncClient):
        response = await client.post("/api/v1/notifications", json={**system_update(), "type": "birthday"})
        assert response.status_code == 422


class TestInbox:
    """Test listing and read state."""

    async def test_list_with_unread_count(self, client: AsyncClient):
        await client.post("/api/v1/notifications", json=system_update(title="One"))
        await client.post("/api/v1/notifications", json=system_update(title="Two"))
        await client.post("/api/v1/notifications", json=system_update(user_id="bob"))

        response = await client.get("/api/v1/notifications", params={"user_id": "alice"})

        assert response.status_code == 200
        data = response.json()
        assert {n["title"] for n in data["notifications"]} == {"One", "Two"}
        assert data["unread_count"] == 2

    async def test_mark_read_and_unread_filter(self, client: AsyncClient):
        first = (await client.post("/api/v1/notifications", json=system_update(title="One"))).json()
        await client.post("/api/v1/notifications", json=system_update(title="Two"))

        response = await client.post(f"/api/v1/notifications/{first['id']}/read", params={"user_id": "alice"})
        assert response.status_code == 200
        assert response.json()["read"] is True

        unread = await client.get("/api/v1/notifications", params={"user_id": "alice", "unread_only": "true"})
        assert [n["title"] for n in unread.json()["notifications"]] == ["Two"]
        count = await client.get("/api/v1/notifications/unread-count", params={"user_id": "alice"})
        assert count.json() == {"user_id": "alice", "unread_count": 1}

    async def test_mark_read_of_other_users_notification(self, client: AsyncClient):
        notification = (await client.post("/api/v1/notifications", json=system_update())).json()

        response = await client.post(f"/api/v1/notifications/{notification['id']}/read", params={"user_id": "bob"})

        assert response.status_code == 404
        assert response.json() == {"detail": f"Notification not found: {notification['id']}"}

    async def test_mark_all_read(self, client: AsyncClient):
        await client.post("/api/v1/notifications", json=system_update(title="One"))
        await client.post("/api/v1/notifications", json=system_update(title="Two"))

        response = await client.post("/api/v1/notifications/read-all", params={"user_id": "alice"})

        assert response.json() == {"updated": 2}
        count = await client.get("/api/v1/notifications/unread-count", params={"user_id": "alice"})
        assert count.json()["unread_count"] == 0

    async def test_type_filter(self, client: AsyncClient):
        await client.post("/api/v1/notifications", json=system_update())

        response = await client.get("/api/v1/notifications", params={"user_id": "alice", "type": "tool_approved"})

        assert response.json()["notifications"] == []

    async def test_user_id_is_required(self, client: AsyncClient):
        response = await client.get("/api/v1/notifications")
        assert response.status_code == 422


class TestDeleteNotification:
    """Test deletion."""

    async def test_delete(self, client: AsyncClient):
        notification = (await client.post("/api/v1/notifications", json=system_update())).json()

        response = await client.delete(f"/api/v1/notifications/{notification['id']}", params={"user_id": "alice"})

        assert response.status_code == 204
        listing = await client.get("/api/v1/notifications", params={"user_id": "alice"})
        assert listing.json() == {"notifications": [], "unread_count": 0}

    async def test_delete_is_scoped_to_owner(self, client: AsyncClient):
        notification = (await client.post("/api/v1/notifications", json=system_update())).json()

        response = await client.delete(f"/api/v1/notifications/{notification['id']}", params={"user_id": "bob"})

        assert response.status_code == 404

    async def test_delete_unknown(self, client: AsyncClient):
        response = await client.delete("/api/v1/notifications/notif_missing", params={"user_id": "alice"})
        assert response.status_code == 404


class TestPreferences:
    """Test notification preferences."""

    async def test_defaults(self, client: AsyncClient):
        response = await client.get("/api/v1/notifications/preferences/alice")

        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == "alice"
        assert data["email_notifications"] is True
        assert data["trending_alerts"] is False

    async def test_partial_update(self, client: AsyncClient):
        first = await client.put("/api/v1/notifications/preferences/alice", json={"trending_alerts": True})
        second = await client.put("/api/v1/notifications/preferences/alice", json={"email_notifications": False})

        assert first.json()["trending_alerts"] is True
        assert second.json()["trending_alerts"] is True
        assert second.json()["email_notifications"] is False
        stored = await client.get("/api/v1/notifications/preferences/alice")
        assert stored.json() == second.json()


class TestToolEvents:
    """Test tool lifecycle event fan-out."""

    async def test_approved(self, client: AsyncClient, make_tool):
        tool = await make_tool("Vite", submitted_by="alice")

        response = await client.post("/api/v1/notifications/tool-events", json={"tool_id": tool.id, "event": "approved"})

        assert response.status_code == 200
        (notification,) = response.json()
        assert notification["user_id"] == "alice"
        assert notification["type"] == "tool_approved"
        assert notification["data"] == {"tool_id": tool.id, "tool_name": "Vite"}

    async def test_trending_reaches_category_reviewers(self, client: AsyncClient, make_category, make_tool, make_review):
        web = await make_category()
        vite = await make_tool("Vite", category_id=web.id)
        other = await make_tool("Parcel", category_id=web.id)
        await make_review(other.id, "bob")
        await make_review(vite.id, "alice")

        response = await client.post("/api/v1/notifications/tool-events", json={"tool_id": vite.id, "event": "trending"})

        notifications = response.json()
        assert [n["user_id"] for n in notifications] == ["alice", "bob"]
        assert notifications[0]["message"] == "Vite is trending in Web Development!"

    async def test_no_recipients(self, client: AsyncClient, make_tool):
        tool = await make_tool("Vite")

        response = await client.post("/api/v1/notifications/tool-events", json={"tool_id": tool.id, "event": "rejected"})

        assert response.status_code == 200
        assert response.json() == []

    async def test_unknown_tool(self, client: AsyncClient):
        response = await client.post("/api/v1/notifications/tool-events", json={"tool_id": 999, "event": "approved"})
        assert response.status_code == 404


class TestNotificationStream:
    """Test the SSE event generator."""

    async def test_emits_published_notifications_until_disconnect(self, broker):
        request = MagicMock()
        request.is_disconnected = AsyncMock(side_effect=[False, True])
        topic = user_topic("alice")

        response = await stream_notifications(request, broker, user_id="alice")

        async def collect():
            return [event async for event in response.body_iterator]

        task = asyncio.create_task(collect())
        for _ in range(100):
            if await broker.subscriber_count(topic) == 1:
                break
            await asyncio.sleep(0.01)
        assert await broker.publish(topic, {"id": "notif_1", "title": "Hello"}) == 1

        events = await asyncio.wait_for(task, timeout=1)

        assert events == [{"event": "notification", "data": json.dumps({"id": "notif_1", "title": "Hello"})}]
        assert await broker.subscriber_count(topic) == 0

    async def test_subscribes_only_while_streaming(self, broker):
        request = MagicMock()
        request.is_disconnected = AsyncMock(return_value=True)
        topic = user_topic("alice")

        response = await stream_notifications(request, broker, user_id="alice")

        assert response.media_type == "text/event-stream"
        assert await broker.subscriber_count(topic) == 0
        assert [event async for event in response.body_iterator] == []
        assert await broker.subscriber_count(topic) == 0

    async def test_unstarted_stream_leaves_no_subscription(self, broker):
        request = MagicMock()

        response = await stream_notifications(request, broker, user_id="alice")
        await response.body_iterator.aclose()

        assert await broker.subscriber_count(user_topic("alice")) == 0
        request.is_disconnected.assert_not_called()
