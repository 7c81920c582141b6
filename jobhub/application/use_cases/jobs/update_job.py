"""Use case for editing every field of an owned job listing."""

from __future__ import annotations

from typing import Any

from jobhub.application.use_cases.validators import get_owned
from jobhub.infrastructure.store import JOBS, DocumentStore, SetField
from jobhub.utils import now_in_app_timezone

from .create_job import validate_job_fields


async def update_job(
    store: DocumentStore, *, job_id: str, actor_id: str, **changes: Any
) -> None:
    """Apply ``changes`` on top of the current listing and stamp ``updated_at``."""

    current = await get_owned(store, JOBS, job_id, actor_id)
    merged = {
        "type": current.type,
        "title": current.title,
        "organization_or_name": current.organization_or_name,
        "location": current.location,
        "employment_type": current.employment_type,
        "workload_band": current.workload_band,
        "description": current.description,
        "contact_email": current.contact_email,
    }
    unknown = set(changes) - set(merged)
    if unknown:
        raise ValueError(f"Unknown job fields: {', '.join(sorted(unknown))}")
    merged.update({key: value for key, value in changes.items() if value is not None})
    fields = validate_job_fields(merged)

    mutations = [SetField(name, value) for name, value in fields.items()]
    mutations.append(SetField("updated_at", now_in_app_timezone()))
    await store.update(JOBS, job_id, *mutations)


__all__ = ["update_job"]
