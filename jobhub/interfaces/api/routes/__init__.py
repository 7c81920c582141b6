from fastapi import FastAPI

from .jobs import router as jobs_router
from .notifications import router as notifications_router
from .posts import router as posts_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(posts_router)
    app.include_router(jobs_router)
    app.include_router(notifications_router)
