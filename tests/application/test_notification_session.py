"""Tests for notification sessions, read-state and the session registry."""

from __future__ import annotations

import asyncio

import pytest

from jobhub.application.use_cases.notifications import (
    BADGE_CAP,
    NotificationSession,
    NotificationSessionRegistry,
    compose_message,
    format_badge,
    notify,
)
from jobhub.domain.errors import StoreUnavailableError
from jobhub.infrastructure.store import NOTIFICATIONS

pytestmark = pytest.mark.anyio


async def _seed(store, recipient_id="alice", count=3):
    ids = []
    for index in range(count):
        ids.append(
            await notify(
                store,
                recipient_id=recipient_id,
                actor_id=f"user-{index}",
                kind="reply",
                message=compose_message("reply", f"User {index}"),
            )
        )
    return ids


async def _unread_in_store(store, recipient_id="alice"):
    return sum(1 for n in await store.query(NOTIFICATIONS, recipient_id) if not n.read)


async def test_session_tracks_unread_count_and_badge(store, projector):
    async with NotificationSession(store, projector, "alice") as session:
        await session.view.wait_ready(timeout=5)
        assert session.unread_count == 0
        assert session.badge is None

        await _seed(store, count=3)
        await session.view.wait_until(lambda docs: len(docs) == 3)

        assert session.unread_count == 3
        assert session.badge == "3"
        assert session.notifications[0].message == "User 2 replied to your post"


async def test_panel_entries_are_capped(store, projector):
    await _seed(store, count=4)

    async with NotificationSession(store, projector, "alice", panel_limit=2) as session:
        await session.view.wait_until(lambda docs: len(docs) == 4)

        assert len(session.panel_entries) == 2
        assert session.unread_count == 4


async def test_opening_panel_marks_everything_read_after_delay(store, projector):
    await _seed(store, count=3)

    async with NotificationSession(store, projector, "alice", mark_read_delay=0.05) as session:
        await session.view.wait_until(lambda docs: len(docs) == 3)
        assert session.unread_count == 3

        session.open_panel()
        assert session.panel_open
        assert session.mark_read_pending

        await session.view.wait_until(lambda docs: all(n.read for n in docs))
        assert session.unread_count == 0
        assert session.badge is None
        assert await _unread_in_store(store) == 0


async def test_reopening_panel_reschedules_the_timer(store, projector):
    await _seed(store, count=2)

    async with NotificationSession(store, projector, "alice", mark_read_delay=0.5) as session:
        await session.view.wait_until(lambda docs: len(docs) == 2)

        session.open_panel()
        await asyncio.sleep(0.25)
        session.open_panel()
        await asyncio.sleep(0.35)

        assert await _unread_in_store(store) == 2
        assert session.mark_read_pending

        await session.view.wait_until(lambda docs: all(n.read for n in docs))


async def test_closing_panel_does_not_cancel_pending_mark_read(store, projector):
    await _seed(store, count=1)

    async with NotificationSession(store, projector, "alice", mark_read_delay=0.05) as session:
        await session.view.wait_until(lambda docs: len(docs) == 1)

        assert session.toggle_panel() is True
        assert session.toggle_panel() is False

        await session.view.wait_until(lambda docs: all(n.read for n in docs))


async def test_sign_out_cancels_pending_mark_read(store, projector):
    await _seed(store, count=1)

    session = NotificationSession(store, projector, "alice", mark_read_delay=0.1)
    session.start()
    await session.view.wait_until(lambda docs: len(docs) == 1)
    session.open_panel()
    session.close()
    await asyncio.sleep(0.2)

    assert await _unread_in_store(store) == 1
    with pytest.raises(RuntimeError):
        session.view


async def test_mark_all_read_skips_failed_writes(store, projector, monkeypatch):
    ids = await _seed(store, count=3)

    async with NotificationSession(store, projector, "alice") as session:
        await session.view.wait_until(lambda docs: len(docs) == 3)
        original_update = store.update

        async def flaky_update(collection, document_id, *mutations):
            if document_id == ids[1]:
                raise StoreUnavailableError("write dropped")
            await original_update(collection, document_id, *mutations)

        monkeypatch.setattr(store, "update", flaky_update)

        assert await session.mark_all_read() == 2
        documents = await session.view.wait_until(
            lambda docs: sum(1 for n in docs if not n.read) == 1
        )
        assert [n.id for n in documents if not n.read] == [ids[1]]


async def test_mark_all_read_without_unread_is_a_no_op(store, projector):
    async with NotificationSession(store, projector, "alice") as session:
        await session.view.wait_ready(timeout=5)
        assert await session.mark_all_read() == 0


async def test_registry_shares_one_session_per_user(store, projector):
    changes = []
    registry = NotificationSessionRegistry(
        store, projector, on_change=lambda session: changes.append(session.unread_count)
    )

    first = registry.acquire("alice")
    second = registry.acquire("alice")
    assert first is second

    await first.view.wait_ready(timeout=5)
    await _seed(store, count=1)
    await first.view.wait_until(lambda docs: len(docs) == 1)
    assert changes[0] == 0
    assert changes[-1] == 1

    registry.release("alice")
    assert registry.get("alice") is first
    registry.release("alice")
    assert registry.get("alice") is None
    registry.close()


@pytest.mark.parametrize(
    ("unread", "expected"),
    [(0, None), (1, "1"), (BADGE_CAP, "9"), (BADGE_CAP + 1, "9+"), (42, "9+")],
)
def test_format_badge(unread, expected):
    assert format_badge(unread) == expected


def test_compose_message_uses_template_per_kind():
    assert compose_message("like_post", "Bob") == "Bob liked your post"
    assert compose_message("like_job", "Bob") == "Bob liked your listing"
    assert compose_message("application", "Bob") == "Bob applied to your listing"
    with pytest.raises(ValueError):
        compose_message("poke", "Bob")
