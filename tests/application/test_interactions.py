"""Tests for the interaction use cases and their notification fan-out."""

from __future__ import annotations

import pytest

from jobhub.application.realtime import QueryDescriptor
from jobhub.application.use_cases.interactions import (
    EntityRef,
    create_reply,
    delete_entity,
    edit_entity,
    submit_application,
    toggle_like,
)
from jobhub.application.use_cases.jobs import create_job, update_job
from jobhub.application.use_cases.notifications import notify
from jobhub.application.use_cases.posts import create_post
from jobhub.domain.entities import Actor
from jobhub.domain.errors import (
    AuthorizationError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from jobhub.infrastructure.store import (
    APPLICATIONS,
    JOBS,
    NOTIFICATIONS,
    POSTS,
    REPLIES,
    Increment,
)

pytestmark = pytest.mark.anyio


async def _create_job(store, actor):
    return await create_job(
        store,
        actor=actor,
        type="offer",
        title="Care assistant",
        organization_or_name="Spital Bern",
        location="Bern",
        description="Night shifts on the surgical ward",
        employment_type="part_time",
        workload_band="60-80%",
    )


async def test_create_post_strips_content_and_starts_empty(store, alice):
    post_id = await create_post(store, actor=alice, category="question", content="  Any tips?  ")

    post = await store.get(POSTS, post_id)
    assert post.content == "Any tips?"
    assert post.author_name == "Alice"
    assert post.likes == frozenset()
    assert post.reply_count == 0


async def test_create_post_rejects_unknown_category(store, alice):
    with pytest.raises(ValidationError):
        await create_post(store, actor=alice, category="rant", content="Hi")
    assert await store.query(POSTS) == []


async def test_like_flow_notifies_owner_once(store, alice, bob):
    post_id = await create_post(store, actor=alice, category="tip", content="Hello")

    assert await toggle_like(store, entity=EntityRef.post(post_id), actor=bob) is True
    post = await store.get(POSTS, post_id)
    assert post.likes == {"bob"}

    notifications = await store.query(NOTIFICATIONS, "alice")
    assert len(notifications) == 1
    assert notifications[0].kind == "like_post"
    assert notifications[0].message == "Bob liked your post"
    assert notifications[0].read is False

    assert await toggle_like(store, entity=EntityRef.post(post_id), actor=bob) is False
    assert (await store.get(POSTS, post_id)).likes == frozenset()
    assert len(await store.query(NOTIFICATIONS, "alice")) == 1


async def test_liking_own_listing_does_not_notify(store, alice):
    job_id = await _create_job(store, alice)

    assert await toggle_like(store, entity=EntityRef.job(job_id), actor=alice) is True

    assert (await store.get(JOBS, job_id)).likes == {"alice"}
    assert await store.query(NOTIFICATIONS, "alice") == []


async def test_like_missing_entity_raises(store, bob):
    with pytest.raises(NotFoundError):
        await toggle_like(store, entity=EntityRef.post("missing"), actor=bob)


async def test_reply_flow_increments_counter_and_notifies(store, alice, bob):
    post_id = await create_post(store, actor=alice, category="question", content="Where?")

    await create_reply(store, post_id=post_id, actor=bob, content=" Zurich ")

    post = await store.get(POSTS, post_id)
    replies = await store.query(REPLIES, post_id)
    assert post.reply_count == len(replies) == 1
    assert replies[0].content == "Zurich"
    notifications = await store.query(NOTIFICATIONS, "alice")
    assert [n.message for n in notifications] == ["Bob replied to your post"]


async def test_reply_survives_failed_counter_increment(store, projector, alice, bob, monkeypatch):
    post_id = await create_post(store, actor=alice, category="question", content="Where?")
    view, unsubscribe = projector.subscribe(QueryDescriptor(REPLIES, parent_id=post_id))
    await view.wait_ready(timeout=5)

    original_update = store.update

    async def failing_update(collection, document_id, *mutations):
        if any(isinstance(mutation, Increment) for mutation in mutations):
            raise StoreUnavailableError("counter write lost")
        await original_update(collection, document_id, *mutations)

    monkeypatch.setattr(store, "update", failing_update)

    reply_id = await create_reply(store, post_id=post_id, actor=bob, content="Basel")

    documents = await view.wait_until(lambda docs: len(docs) == 1)
    assert documents[0].id == reply_id
    assert (await store.get(POSTS, post_id)).reply_count == 0
    assert len(await store.query(NOTIFICATIONS, "alice")) == 1
    unsubscribe()


async def test_reply_rejects_blank_and_long_content(store, alice, bob):
    post_id = await create_post(store, actor=alice, category="tip", content="Hello")

    with pytest.raises(ValidationError):
        await create_reply(store, post_id=post_id, actor=bob, content="   ")
    with pytest.raises(ValidationError):
        await create_reply(store, post_id=post_id, actor=bob, content="x" * 301)

    assert await store.query(REPLIES, post_id) == []


async def test_notify_suppresses_self_and_missing_recipient(store):
    assert await notify(store, recipient_id="alice", actor_id="alice", kind="reply", message="m") is None
    assert await notify(store, recipient_id=None, actor_id="alice", kind="reply", message="m") is None
    assert await store.query(NOTIFICATIONS, "alice") == []


async def test_owner_can_edit_post(store, alice):
    post_id = await create_post(store, actor=alice, category="tip", content="Hello")

    await edit_entity(store, entity=EntityRef.post(post_id), actor_id="alice", content=" Updated ")

    post = await store.get(POSTS, post_id)
    assert post.content == "Updated"
    assert post.edited_at is not None


async def test_edit_job_sets_description_and_updated_at(store, alice):
    job_id = await _create_job(store, alice)

    await edit_entity(store, entity=EntityRef.job(job_id), actor_id="alice", content="Day shifts")

    job = await store.get(JOBS, job_id)
    assert job.description == "Day shifts"
    assert job.updated_at is not None


async def test_non_owner_cannot_edit_or_delete(store, alice, bob):
    post_id = await create_post(store, actor=alice, category="tip", content="Hello")
    job_id = await _create_job(store, alice)
    job_before = await store.get(JOBS, job_id)

    with pytest.raises(AuthorizationError):
        await edit_entity(store, entity=EntityRef.post(post_id), actor_id="bob", content="Mine")
    with pytest.raises(AuthorizationError):
        await edit_entity(store, entity=EntityRef.job(job_id), actor_id="bob", content="Mine")
    with pytest.raises(AuthorizationError):
        await delete_entity(store, entity=EntityRef.post(post_id), actor_id="bob")
    with pytest.raises(AuthorizationError):
        await delete_entity(store, entity=EntityRef.job(job_id), actor_id="bob")

    post = await store.get(POSTS, post_id)
    assert post.content == "Hello"
    assert post.edited_at is None
    job_after = await store.get(JOBS, job_id)
    assert job_after == job_before
    assert job_after.description == "Night shifts on the surgical ward"
    assert job_after.updated_at is None


async def test_authorization_is_checked_before_validation(store, alice):
    post_id = await create_post(store, actor=alice, category="tip", content="Hello")

    with pytest.raises(AuthorizationError):
        await edit_entity(store, entity=EntityRef.post(post_id), actor_id="bob", content="")
    with pytest.raises(ValidationError):
        await edit_entity(store, entity=EntityRef.post(post_id), actor_id="alice", content="x" * 501)


async def test_delete_post_keeps_replies(store, alice, bob):
    post_id = await create_post(store, actor=alice, category="tip", content="Hello")
    await create_reply(store, post_id=post_id, actor=bob, content="Thanks")

    await delete_entity(store, entity=EntityRef.post(post_id), actor_id="alice")

    assert await store.get(POSTS, post_id) is None
    assert len(await store.query(REPLIES, post_id)) == 1


async def test_submit_application_notifies_owner_with_applicant_name(store, alice, bob):
    job_id = await _create_job(store, alice)

    application_id = await submit_application(
        store,
        job_id=job_id,
        job_owner_id="alice",
        actor=bob,
        applicant_name="Robert Meier",
        applicant_email="robert@example.com",
        message=" Available from May ",
    )

    applications = await store.query(APPLICATIONS, job_id)
    assert [application.id for application in applications] == [application_id]
    assert applications[0].message == "Available from May"
    notifications = await store.query(NOTIFICATIONS, "alice")
    assert [n.message for n in notifications] == ["Robert Meier applied to your listing"]


async def test_submit_application_validates_applicant(store, alice, bob):
    job_id = await _create_job(store, alice)

    with pytest.raises(ValidationError):
        await submit_application(
            store,
            job_id=job_id,
            job_owner_id="alice",
            actor=bob,
            applicant_name="",
            applicant_email="robert@example.com",
        )
    with pytest.raises(ValidationError):
        await submit_application(
            store,
            job_id=job_id,
            job_owner_id="alice",
            actor=bob,
            applicant_name="Robert",
            applicant_email="not-an-email",
        )
    assert await store.query(APPLICATIONS, job_id) == []


async def test_create_job_defaults_contact_email_to_actor(store, alice):
    job_id = await _create_job(store, alice)

    job = await store.get(JOBS, job_id)
    assert job.contact_email == "alice@example.com"
    assert job.author_id == "alice"
    assert job.likes == frozenset()


async def test_update_job_is_owner_only(store, alice):
    job_id = await _create_job(store, alice)

    await update_job(store, job_id=job_id, actor_id="alice", title="Senior care assistant")
    job = await store.get(JOBS, job_id)
    assert job.title == "Senior care assistant"
    assert job.location == "Bern"
    assert job.updated_at is not None

    with pytest.raises(AuthorizationError):
        await update_job(store, job_id=job_id, actor_id="bob", title="Taken")
    with pytest.raises(ValidationError):
        await update_job(store, job_id=job_id, actor_id="alice", workload_band="150%")


async def test_actor_name_falls_back_to_email_local_part():
    assert Actor("u1", None, "jane.doe@example.com").name == "jane.doe"
    assert Actor("u1", "  ", "jane.doe@example.com").name == "jane.doe"
    assert Actor("u1", " Jane ", None).name == "Jane"


async def test_application_notifies_the_stored_owner(store, alice, bob):
    job_id = await _create_job(store, alice)

    await submit_application(
        store,
        job_id=job_id,
        job_owner_id="carol",
        actor=bob,
        applicant_name="Robert Meier",
        applicant_email="robert@example.com",
    )

    assert len(await store.query(NOTIFICATIONS, "alice")) == 1
    assert await store.query(NOTIFICATIONS, "carol") == []
