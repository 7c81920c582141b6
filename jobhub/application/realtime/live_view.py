"""In-memory, continuously refreshed projection of one store query."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

Observer = Callable[[Sequence[Any]], None]


@dataclass(frozen=True)
class QueryDescriptor:
    """Collection, optional parent scope and ordering of a live query."""

    collection: str
    parent_id: str | None = None
    order_by: str = "created_at"
    descending: bool = False

    def describe(self) -> str:
        scope = f"{self.collection}/{self.parent_id}" if self.parent_id else self.collection
        direction = "desc" if self.descending else "asc"
        return f"{scope} by {self.order_by} {direction}"


class LiveView:
    """Ordered snapshot republished to local observers on every refresh."""

    def __init__(self, descriptor: QueryDescriptor) -> None:
        self.descriptor = descriptor
        self._documents: tuple[Any, ...] = ()
        self._observers: list[Observer] = []
        self._ready = asyncio.Event()
        self._condition = asyncio.Condition()
        self._stale = False
        self._version = 0

    @property
    def documents(self) -> tuple[Any, ...]:
        return self._documents

    @property
    def ready(self) -> bool:
        return self._ready.is_set()

    @property
    def stale(self) -> bool:
        """``True`` once the subscription gave up; ``documents`` is the last good snapshot."""

        return self._stale

    @property
    def version(self) -> int:
        return self._version

    def observe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer`` and return a callable that removes it.

        An observer added after the first materialization is called immediately
        with the current snapshot, which after a give-up is the last good one;
        observers check :attr:`stale` to tell the two apart.
        """

        self._observers.append(observer)
        if self.ready:
            observer(self._documents)

        def remove() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return remove

    async def wait_ready(self, timeout: float | None = None) -> None:
        await asyncio.wait_for(self._ready.wait(), timeout)

    async def wait_until(
        self, predicate: Callable[[Sequence[Any]], bool], timeout: float | None = 5.0
    ) -> tuple[Any, ...]:
        """Wait until ``predicate`` holds for the current snapshot and return it."""

        async def _wait() -> None:
            async with self._condition:
                await self._condition.wait_for(
                    lambda: self.ready and predicate(self._documents)
                )

        await asyncio.wait_for(_wait(), timeout)
        return self._documents

    async def publish(self, documents: Sequence[Any]) -> None:
        self._documents = tuple(documents)
        self._version += 1
        self._stale = False
        self._ready.set()
        for observer in list(self._observers):
            try:
                observer(self._documents)
            except Exception:
                logger.exception("Observer of live view %s failed", self.descriptor.describe())
        async with self._condition:
            self._condition.notify_all()

    async def mark_stale(self) -> None:
        self._stale = True
        self._ready.set()
        async with self._condition:
            self._condition.notify_all()


__all__ = ["LiveView", "Observer", "QueryDescriptor"]
