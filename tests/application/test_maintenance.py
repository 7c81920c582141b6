"""Tests for the reply counter reconciliation."""

from __future__ import annotations

import asyncio

import pytest

from jobhub.application.use_cases.interactions import create_reply
from jobhub.application.use_cases.maintenance import ReplyCountSweeper, reconcile_reply_counts
from jobhub.application.use_cases.posts import create_post
from jobhub.infrastructure.store import POSTS, REPLIES, SetField

pytestmark = pytest.mark.anyio


async def test_reconcile_fixes_drifted_counters(store, alice, bob):
    drifted = await create_post(store, actor=alice, category="tip", content="One")
    healthy = await create_post(store, actor=alice, category="tip", content="Two")
    await create_reply(store, post_id=drifted, actor=bob, content="a")
    await create_reply(store, post_id=drifted, actor=bob, content="b")
    await create_reply(store, post_id=healthy, actor=bob, content="c")
    await store.update(POSTS, drifted, SetField("reply_count", 0))

    corrected = await reconcile_reply_counts(store)

    assert corrected == {drifted: 2}
    assert (await store.get(POSTS, drifted)).reply_count == 2
    assert (await store.get(POSTS, healthy)).reply_count == 1


async def test_reconcile_ignores_replies_of_deleted_posts(store):
    await store.insert(
        REPLIES, {"content": "orphan", "author_id": "bob", "author_name": "Bob"}, "gone"
    )

    assert await reconcile_reply_counts(store) == {}


async def test_sweeper_runs_periodically_until_stopped(store, alice):
    post_id = await create_post(store, actor=alice, category="tip", content="One")
    await store.insert(
        REPLIES, {"content": "a", "author_id": "bob", "author_name": "Bob"}, post_id
    )

    sweeper = ReplyCountSweeper(store, interval=0.05)
    sweeper.start()
    assert sweeper.running
    for _ in range(40):
        if (await store.get(POSTS, post_id)).reply_count == 1:
            break
        await asyncio.sleep(0.05)
    await sweeper.stop()

    assert not sweeper.running
    assert (await store.get(POSTS, post_id)).reply_count == 1
