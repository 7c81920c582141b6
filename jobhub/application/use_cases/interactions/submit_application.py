"""Use case for applying to a job listing."""

from __future__ import annotations

import logging

from jobhub.application.use_cases.notifications import fan_out
from jobhub.application.use_cases.validators import get_existing, require_email, require_text
from jobhub.domain.entities import NOTIFICATION_KIND_APPLICATION, Actor
from jobhub.infrastructure.store import APPLICATIONS, JOBS, DocumentStore
from jobhub.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


async def submit_application(
    store: DocumentStore,
    *,
    job_id: str,
    job_owner_id: str,
    actor: Actor,
    applicant_name: str,
    applicant_email: str,
    message: str = "",
) -> str:
    """Append an application to ``job_id`` and notify the listing owner.

    The owner is taken from the stored listing; a differing ``job_owner_id`` is
    logged and ignored.
    """

    name = require_text(applicant_name, label="Name", max_length=120)
    email = require_email(applicant_email)
    job = await get_existing(store, JOBS, job_id)
    if job_owner_id != job.owner_id:
        logger.warning(
            "Application to job %s named owner %s but the listing belongs to %s",
            job_id,
            job_owner_id,
            job.owner_id,
        )

    application_id = await store.insert(
        APPLICATIONS,
        {
            "applicant_id": actor.user_id,
            "applicant_name": name,
            "applicant_email": email,
            "message": (message or "").strip(),
            "created_at": now_in_app_timezone(),
        },
        parent_id=job_id,
    )

    await fan_out(
        store,
        recipient_id=job.owner_id,
        actor_id=actor.user_id,
        actor_name=name,
        kind=NOTIFICATION_KIND_APPLICATION,
    )
    return application_id


__all__ = ["submit_application"]
