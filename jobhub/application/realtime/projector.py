"""Subscription projector maintaining live views over the document store."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from jobhub.domain.errors import StoreUnavailableError
from jobhub.infrastructure.store import ChangeChannel, DocumentStore

from .live_view import LiveView, QueryDescriptor

logger = logging.getLogger(__name__)


class SubscriptionProjector:
    """Keep one live view per :meth:`subscribe` call in sync with the store.

    Every change event inside a view's scope triggers a full re-query of the
    ordered view, which is then republished to the view's observers. Each
    subscription owns its own store channel; identical queries are not shared.
    """

    def __init__(
        self,
        store: DocumentStore,
        *,
        resubscribe_attempts: int = 3,
        resubscribe_delay: float = 0.5,
    ) -> None:
        self._store = store
        self._resubscribe_attempts = resubscribe_attempts
        self._resubscribe_delay = resubscribe_delay
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def active_subscriptions(self) -> int:
        return len(self._tasks)

    def subscribe(self, descriptor: QueryDescriptor) -> tuple[LiveView, Callable[[], None]]:
        """Start a live view for ``descriptor`` without waiting for its first snapshot.

        The returned ``unsubscribe`` callable must be called once the consumer
        goes out of scope; extra calls are ignored.
        """

        view = LiveView(descriptor)
        task = asyncio.get_running_loop().create_task(
            self._run(view), name=f"live-view:{descriptor.describe()}"
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        def unsubscribe() -> None:
            task.cancel()

        return view, unsubscribe

    async def close(self) -> None:
        """Cancel every active subscription and wait for the channels to close."""

        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _run(self, view: LiveView) -> None:
        descriptor = view.descriptor
        failures = 0
        while True:
            channel: ChangeChannel | None = None
            try:
                channel = self._store.subscribe(descriptor.collection, descriptor.parent_id)
                await self._materialize(view)
                failures = 0
                async for _event in channel:
                    await self._materialize(view)
                logger.warning("Store closed the channel of live view %s", descriptor.describe())
            except StoreUnavailableError as exc:
                logger.warning("Live view %s lost its channel: %s", descriptor.describe(), exc)
            finally:
                if channel is not None:
                    self._store.unsubscribe(channel)

            failures += 1
            if failures > self._resubscribe_attempts:
                logger.error(
                    "Live view %s marked stale after %d failed resubscriptions",
                    descriptor.describe(),
                    self._resubscribe_attempts,
                )
                await view.mark_stale()
                return
            await asyncio.sleep(self._resubscribe_delay)

    async def _materialize(self, view: LiveView) -> None:
        descriptor = view.descriptor
        documents = await self._store.query(
            descriptor.collection,
            descriptor.parent_id,
            order_by=descriptor.order_by,
            descending=descriptor.descending,
        )
        await view.publish(documents)


__all__ = ["SubscriptionProjector"]
