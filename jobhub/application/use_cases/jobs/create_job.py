"""Use case for publishing a job listing."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jobhub.application.use_cases.validators import require_choice, require_email, require_text
from jobhub.domain.entities import EMPLOYMENT_TYPES, JOB_TYPES, WORKLOAD_BANDS, Actor
from jobhub.domain.errors import ValidationError
from jobhub.infrastructure.store import JOBS, DocumentStore
from jobhub.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def validate_job_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Return the cleaned listing fields or raise :class:`ValidationError`."""

    cleaned = {
        "type": require_choice(fields.get("type"), JOB_TYPES, label="Type"),
        "title": require_text(fields.get("title"), label="Title", max_length=200),
        "organization_or_name": require_text(
            fields.get("organization_or_name"), label="Organization or name", max_length=200
        ),
        "location": require_text(fields.get("location"), label="Location", max_length=120),
        "employment_type": require_choice(
            fields.get("employment_type"), EMPLOYMENT_TYPES, label="Employment type"
        ),
        "workload_band": require_choice(
            fields.get("workload_band"), WORKLOAD_BANDS, label="Workload"
        ),
        "description": require_text(fields.get("description"), label="Description"),
    }
    contact_email = fields.get("contact_email")
    cleaned["contact_email"] = require_email(contact_email) if contact_email else None
    return cleaned


async def create_job(
    store: DocumentStore,
    *,
    actor: Actor,
    type: str,
    title: str,
    organization_or_name: str,
    location: str,
    description: str,
    employment_type: str = "full_time",
    workload_band: str = "100%",
    contact_email: str | None = None,
) -> str:
    """Store a new job listing owned by ``actor``."""

    if not actor.user_id:
        raise ValidationError("A signed-in user is required to publish a listing")
    fields = validate_job_fields(
        {
            "type": type,
            "title": title,
            "organization_or_name": organization_or_name,
            "location": location,
            "employment_type": employment_type,
            "workload_band": workload_band,
            "description": description,
            "contact_email": contact_email or actor.email,
        }
    )
    job_id = await store.insert(
        JOBS,
        {**fields, "author_id": actor.user_id, "created_at": now_in_app_timezone()},
    )
    logger.info("Job %s created by %s", job_id, actor.user_id)
    return job_id


__all__ = ["create_job", "validate_job_fields"]
