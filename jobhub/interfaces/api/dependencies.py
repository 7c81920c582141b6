"""FastAPI dependency utilities."""

from fastapi import Header, HTTPException, Request, status

from jobhub.application.realtime import SubscriptionProjector
from jobhub.application.use_cases.notifications import NotificationSessionRegistry
from jobhub.config import Settings, get_settings
from jobhub.domain.entities import Actor
from jobhub.infrastructure.store import DocumentStore


def get_store(request: Request) -> DocumentStore:
    """Return the document store created by the application lifespan."""

    return request.app.state.store


def get_projector(request: Request) -> SubscriptionProjector:
    return request.app.state.projector


def get_notification_sessions(request: Request) -> NotificationSessionRegistry:
    return request.app.state.notification_sessions


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""

    return getattr(request.app.state, "settings", None) or get_settings()


def get_current_actor(
    x_user_id: str | None = Header(default=None),
    x_user_name: str | None = Header(default=None),
    x_user_email: str | None = Header(default=None),
) -> Actor:
    """Return the identity forwarded by the authentication gateway."""

    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return Actor(
        user_id=x_user_id.strip(),
        display_name=x_user_name,
        email=x_user_email,
    )
