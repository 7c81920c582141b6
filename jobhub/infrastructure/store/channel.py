"""Push channels carrying change events from the store to live subscribers."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Final

CHANGE_ADDED: Final[str] = "added"
CHANGE_MODIFIED: Final[str] = "modified"
CHANGE_REMOVED: Final[str] = "removed"

_CLOSED: Final = object()


@dataclass(frozen=True)
class ChangeEvent:
    """A single insert, update or delete observed by the store."""

    collection: str
    document_id: str
    change: str
    parent_id: str | None = None


class ChangeChannel:
    """Ordered, unbounded queue of :class:`ChangeEvent` for one scope.

    Iterating the channel yields events in emission order. The iteration ends
    when the channel is closed and raises when the channel failed.
    """

    def __init__(self, collection: str, parent_id: str | None = None) -> None:
        self.collection = collection
        self.parent_id = parent_id
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def matches(self, event: ChangeEvent) -> bool:
        if event.collection != self.collection:
            return False
        return self.parent_id is None or event.parent_id == self.parent_id

    def push(self, event: ChangeEvent) -> None:
        if not self._closed:
            self._queue.put_nowait(event)

    def fail(self, error: BaseException) -> None:
        """Drop the channel; the consumer sees ``error`` after pending events."""

        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(error)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_CLOSED)

    def __aiter__(self) -> "ChangeChannel":
        return self

    async def __anext__(self) -> ChangeEvent:
        item = await self._queue.get()
        if item is _CLOSED:
            raise StopAsyncIteration
        if isinstance(item, BaseException):
            raise item
        return item  # type: ignore[return-value]


__all__ = [
    "CHANGE_ADDED",
    "CHANGE_MODIFIED",
    "CHANGE_REMOVED",
    "ChangeChannel",
    "ChangeEvent",
]
