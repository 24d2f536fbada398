"""
In-process publish/subscribe channel for store mutations.

Every subscriber owns a bounded queue. Publishing never blocks: when a
subscriber falls behind, its oldest pending event is dropped.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional, Set

from restaurantos.schemas.event import Event

logger = logging.getLogger(__name__)

ORDER_PLACED = "order.placed"
ORDER_STATUS_CHANGED = "order.status_changed"
TABLE_CREATED = "table.created"
TABLE_UPDATED = "table.updated"
TABLE_DELETED = "table.deleted"
TABLE_STATUS_CHANGED = "table.status_changed"
MENU_ITEM_UPDATED = "menu.updated"
MENU_ITEM_DELETED = "menu.deleted"


class Subscription:
    def __init__(self, bus: "EventBus", maxsize: int):
        self._bus = bus
        self.queue: "asyncio.Queue[Event]" = asyncio.Queue(maxsize=maxsize)
        self.dropped = 0

    def deliver(self, event: Event) -> bool:
        """Queue the event; returns False if an older one had to go."""
        lost = False
        if self.queue.full():
            self.queue.get_nowait()
            self.dropped += 1
            lost = True
        self.queue.put_nowait(event)
        return not lost

    async def get(self, timeout: Optional[float] = None) -> Event:
        if timeout is None:
            return await self.queue.get()
        return await asyncio.wait_for(self.queue.get(), timeout=timeout)

    def pending(self) -> int:
        return self.queue.qsize()

    def close(self) -> None:
        self._bus.unsubscribe(self)


class EventBus:
    def __init__(self, queue_size: int = 100):
        self.queue_size = queue_size
        self._subscribers: Set[Subscription] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> Subscription:
        sub = Subscription(self, self.queue_size)
        self._subscribers.add(sub)
        logger.debug("Subscriber added (%d active)", len(self._subscribers))
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        self._subscribers.discard(sub)
        logger.debug("Subscriber removed (%d active)", len(self._subscribers))

    @asynccontextmanager
    async def subscription(self):
        sub = self.subscribe()
        try:
            yield sub
        finally:
            self.unsubscribe(sub)

    def publish(self, event_type: str, **data) -> Event:
        event = Event(type=event_type, data=data)
        for sub in list(self._subscribers):
            if not sub.deliver(event):
                logger.warning("Slow subscriber, %d events dropped so far", sub.dropped)
        return event
