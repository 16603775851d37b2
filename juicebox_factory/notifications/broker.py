"""
In-process notification broker.

Each subscription owns a bounded queue. Publishing never blocks: when a
subscriber's queue is full its oldest event is dropped. Subscriptions live
only as long as the process.
"""

from __future__ import annotations

import asyncio
import itertools
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from juicebox_factory.core.logging_config import get_logger

logger = get_logger(__name__)

_subscription_ids = itertools.count(1)


def user_topic(user_id: str) -> str:
    return f"user:{user_id}"


@dataclass(eq=False)
class Subscription:
    """A live feed of events published on one topic."""

    topic: str
    queue: asyncio.Queue
    id: int = field(default_factory=lambda: next(_subscription_ids))

    async def get(self, timeout: Optional[float] = None) -> Optional[Any]:
        """Next event, or None when ``timeout`` elapses first."""
        if timeout is None:
            return await self.queue.get()
        try:
            return await asyncio.wait_for(self.queue.get(), timeout)
        except asyncio.TimeoutError:
            return None


class NotificationBroker:
    """Topic-based fan-out to subscriber queues."""

    def __init__(self, queue_size: int = 100) -> None:
        self.queue_size = queue_size
        self._subscriptions: Dict[str, Dict[int, Subscription]] = {}
        self._lock = asyncio.Lock()

    async def subscribe(self, topic: str) -> Subscription:
        subscription = Subscription(topic=topic, queue=asyncio.Queue(maxsize=self.queue_size))
        async with self._lock:
            self._subscriptions.setdefault(topic, {})[subscription.id] = subscription
        logger.debug(f"Subscription {subscription.id} opened on {topic}")
        return subscription

    async def unsubscribe(self, subscription: Subscription) -> None:
        async with self._lock:
            subscribers = self._subscriptions.get(subscription.topic)
            if subscribers is None:
                return
            subscribers.pop(subscription.id, None)
            if not subscribers:
                del self._subscriptions[subscription.topic]
        logger.debug(f"Subscription {subscription.id} closed on {subscription.topic}")

    async def publish(self, topic: str, event: Any) -> int:
        """
        Deliver ``event`` to every current subscriber of ``topic``.

        Returns:
            Number of subscriptions the event was queued on
        """
        async with self._lock:
            targets = list(self._subscriptions.get(topic, {}).values())

        for subscription in targets:
            if subscription.queue.full():
                subscription.queue.get_nowait()
                logger.warning(f"Subscription {subscription.id} on {topic} is full; dropped oldest event")
            subscription.queue.put_nowait(event)
        return len(targets)

    async def subscriber_count(self, topic: str) -> int:
        async with self._lock:
            return len(self._subscriptions.get(topic, {}))
