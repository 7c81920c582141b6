import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobhub.application.realtime import SubscriptionProjector
from jobhub.application.use_cases.maintenance import ReplyCountSweeper
from jobhub.application.use_cases.notifications import NotificationSessionRegistry
from jobhub.config import Settings, get_settings
from jobhub.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from jobhub.infrastructure.notifications import (
    NotificationConnectionManager,
    NotificationPublisher,
)
from jobhub.infrastructure.store import DocumentStore
from jobhub.interfaces.api.routes import register_routes
from jobhub.utils import configure_app_timezone

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    configure_app_timezone(settings.app_timezone)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the document store on startup and release every resource on shutdown."""

        engine = build_engine(settings.database_url)
        initialize_database(engine)
        store = DocumentStore(build_session_factory(engine))
        projector = SubscriptionProjector(
            store,
            resubscribe_attempts=settings.resubscribe_attempts,
            resubscribe_delay=settings.resubscribe_delay_seconds,
        )
        manager = NotificationConnectionManager()
        publisher = NotificationPublisher(manager)
        sessions = NotificationSessionRegistry(
            store,
            projector,
            mark_read_delay=settings.mark_read_delay_seconds,
            panel_limit=settings.notification_panel_limit,
            on_change=publisher.dispatch_snapshot,
        )
        sweeper = None
        if settings.reply_count_sweep_interval_seconds > 0:
            sweeper = ReplyCountSweeper(
                store, interval=settings.reply_count_sweep_interval_seconds
            )
            sweeper.start()

        app.state.settings = settings
        app.state.store = store
        app.state.projector = projector
        app.state.notification_manager = manager
        app.state.notification_sessions = sessions
        logger.info("JobHub API started")
        try:
            yield
        finally:
            sessions.close()
            if sweeper is not None:
                await sweeper.stop()
            await projector.close()
            store.close()
            engine.dispose()
            logger.info("JobHub API stopped")

    app = FastAPI(title="JobHub API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
