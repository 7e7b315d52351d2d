"""Fan-out of history updates to WebSocket subscriber queues."""

import asyncio

__all__ = ["Broadcaster"]


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


class Broadcaster:
    """Holds one bounded queue per connected client.

    Must be used from the event loop thread. A full queue drops its oldest
    message, so a slow client only ever misses intermediate updates.
    """

    def __init__(self, max_queue_size: int) -> None:
        self._max_queue_size = max_queue_size
        self._queues: list[asyncio.Queue[str]] = []

    def __len__(self) -> int:
        return len(self._queues)

    def subscribe(self) -> asyncio.Queue[str]:
        """Create and register a queue for a new client."""
        queue: asyncio.Queue[str] = asyncio.Queue(maxsize=self._max_queue_size)
        self._queues.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[str]) -> None:
        self._queues.remove(queue)

    def publish(self, message: str) -> None:
        """Enqueue ``message`` on every subscriber queue."""
        for queue in list(self._queues):
            _enqueue_message(queue, message)
