"""Endpoints and websocket handler for realtime notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from jobhub.application.realtime import SubscriptionProjector
from jobhub.application.use_cases.notifications import (
    NotificationSession,
    NotificationSessionRegistry,
    format_badge,
)
from jobhub.config import Settings
from jobhub.domain.entities import Actor, Notification
from jobhub.infrastructure.notifications import build_snapshot
from jobhub.infrastructure.store import NOTIFICATIONS, DocumentStore
from jobhub.interfaces.api.dependencies import (
    get_app_settings,
    get_current_actor,
    get_notification_sessions,
    get_projector,
    get_store,
)
from jobhub.interfaces.api.routes_helpers import domain_errors_as_http
from jobhub.interfaces.api.schemas import MarkReadResult, NotificationList, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)

_READY_TIMEOUT_SECONDS = 5.0


def _to_list_model(
    notifications: list[Notification] | tuple[Notification, ...], limit: int
) -> NotificationList:
    unread = sum(1 for notification in notifications if not notification.read)
    return NotificationList(
        data=[NotificationRead.model_validate(n) for n in notifications[:limit]],
        unread=unread,
        badge=format_badge(unread),
    )


@router.get("/", response_model=NotificationList)
async def list_notifications(
    store: DocumentStore = Depends(get_store),
    sessions: NotificationSessionRegistry = Depends(get_notification_sessions),
    settings: Settings = Depends(get_app_settings),
    actor: Actor = Depends(get_current_actor),
) -> NotificationList:
    """Return the most recent notifications and the unread count of the caller."""

    session = sessions.get(actor.user_id)
    if session is not None and session.view.ready and not session.view.stale:
        notifications = session.notifications
    else:
        with domain_errors_as_http():
            notifications = await store.query(
                NOTIFICATIONS, actor.user_id, descending=True
            )
    return _to_list_model(notifications, settings.notification_panel_limit)


@router.post("/read", response_model=MarkReadResult)
async def mark_notifications_read(
    store: DocumentStore = Depends(get_store),
    projector: SubscriptionProjector = Depends(get_projector),
    sessions: NotificationSessionRegistry = Depends(get_notification_sessions),
    settings: Settings = Depends(get_app_settings),
    actor: Actor = Depends(get_current_actor),
) -> MarkReadResult:
    """Mark every unread notification of the caller as read right away."""

    session = sessions.get(actor.user_id)
    with domain_errors_as_http():
        if session is not None:
            await session.view.wait_ready(_READY_TIMEOUT_SECONDS)
            marked = await session.mark_all_read()
        else:
            async with NotificationSession(
                store,
                projector,
                actor.user_id,
                panel_limit=settings.notification_panel_limit,
            ) as temporary:
                await temporary.view.wait_ready(_READY_TIMEOUT_SECONDS)
                marked = await temporary.mark_all_read()
    return MarkReadResult(marked=marked)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Stream notification snapshots and accept panel commands.

    Clients send ``{"type": "open"}`` and ``{"type": "close"}`` when the panel
    is shown or hidden, ``{"type": "mark-read"}`` to mark everything at once
    and ``{"type": "ping"}`` as a keep-alive.
    """

    user_id = (websocket.query_params.get("user_id") or "").strip()
    if not user_id:
        await websocket.close(code=1008)
        return

    state = websocket.app.state
    manager = state.notification_manager
    sessions: NotificationSessionRegistry = state.notification_sessions

    await manager.connect(user_id, websocket)
    session = sessions.acquire(user_id)
    try:
        if session.view.ready:
            await websocket.send_json(build_snapshot(session))
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except ValueError:
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
            elif message_type == "open":
                session.open_panel()
                await websocket.send_json({"type": "panel", "open": True})
            elif message_type == "close":
                session.close_panel()
                await websocket.send_json({"type": "panel", "open": False})
            elif message_type == "mark-read":
                marked = await session.mark_all_read()
                await websocket.send_json({"type": "marked", "marked": marked})
    except WebSocketDisconnect:
        logger.debug("Notification socket of %s disconnected", user_id)
    finally:
        manager.disconnect(user_id, websocket)
        sessions.release(user_id)
