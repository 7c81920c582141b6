"""Endpoints for community posts and their replies."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from jobhub.application.use_cases.interactions import (
    EntityRef,
    create_reply as create_reply_uc,
    delete_entity as delete_entity_uc,
    edit_entity as edit_entity_uc,
    toggle_like as toggle_like_uc,
)
from jobhub.application.use_cases.posts import create_post as create_post_uc, filter_posts
from jobhub.application.use_cases.validators import get_existing
from jobhub.domain.entities import Actor, Post
from jobhub.infrastructure.store import POSTS, REPLIES, DocumentStore
from jobhub.interfaces.api.dependencies import get_current_actor, get_store
from jobhub.interfaces.api.routes_helpers import domain_errors_as_http
from jobhub.interfaces.api.schemas import (
    LikeResult,
    PostCreate,
    PostRead,
    PostUpdate,
    ReplyCreate,
    ReplyRead,
)

router = APIRouter(prefix="/posts", tags=["posts"])


def _to_read_model(post: Post) -> PostRead:
    return PostRead(
        id=post.id,
        author_id=post.author_id,
        author_name=post.author_name,
        category=post.category,
        content=post.content,
        created_at=post.created_at,
        edited_at=post.edited_at,
        likes=sorted(post.likes),
        like_count=len(post.likes),
        reply_count=post.reply_count,
    )


@router.get("/", response_model=list[PostRead])
async def list_posts(
    category: str | None = None,
    search: str | None = None,
    store: DocumentStore = Depends(get_store),
    _: Actor = Depends(get_current_actor),
) -> list[PostRead]:
    """Return the community feed, newest first."""

    with domain_errors_as_http():
        posts = await store.query(POSTS, descending=True)
    return [_to_read_model(post) for post in filter_posts(posts, category=category, search=search)]


@router.post("/", response_model=PostRead, status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: PostCreate,
    store: DocumentStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
) -> PostRead:
    with domain_errors_as_http():
        post_id = await create_post_uc(
            store, actor=actor, category=payload.category, content=payload.content
        )
        post = await get_existing(store, POSTS, post_id)
    return _to_read_model(post)


@router.patch("/{post_id}", response_model=PostRead)
async def edit_post(
    post_id: str,
    payload: PostUpdate,
    store: DocumentStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
) -> PostRead:
    """Replace the content of a post owned by the caller."""

    with domain_errors_as_http():
        await edit_entity_uc(
            store, entity=EntityRef.post(post_id), actor_id=actor.user_id, content=payload.content
        )
        post = await get_existing(store, POSTS, post_id)
    return _to_read_model(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    store: DocumentStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
) -> Response:
    with domain_errors_as_http():
        await delete_entity_uc(store, entity=EntityRef.post(post_id), actor_id=actor.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{post_id}/like", response_model=LikeResult)
async def like_post(
    post_id: str,
    store: DocumentStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
) -> LikeResult:
    """Like the post, or remove the caller's like when already present."""

    with domain_errors_as_http():
        liked = await toggle_like_uc(store, entity=EntityRef.post(post_id), actor=actor)
    return LikeResult(liked=liked)


@router.get("/{post_id}/replies", response_model=list[ReplyRead])
async def list_replies(
    post_id: str,
    store: DocumentStore = Depends(get_store),
    _: Actor = Depends(get_current_actor),
) -> list[ReplyRead]:
    """Return the replies of a post, oldest first."""

    with domain_errors_as_http():
        replies = await store.query(REPLIES, post_id)
    return [ReplyRead.model_validate(reply) for reply in replies]


@router.post(
    "/{post_id}/replies", response_model=ReplyRead, status_code=status.HTTP_201_CREATED
)
async def create_reply(
    post_id: str,
    payload: ReplyCreate,
    store: DocumentStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
) -> ReplyRead:
    with domain_errors_as_http():
        reply_id = await create_reply_uc(
            store, post_id=post_id, actor=actor, content=payload.content
        )
        reply = await get_existing(store, REPLIES, reply_id)
    return ReplyRead.model_validate(reply)
