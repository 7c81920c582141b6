"""Endpoints for job listings and applications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from jobhub.application.use_cases.interactions import (
    EntityRef,
    delete_entity as delete_entity_uc,
    submit_application as submit_application_uc,
    toggle_like as toggle_like_uc,
)
from jobhub.application.use_cases.jobs import (
    create_job as create_job_uc,
    filter_jobs,
    update_job as update_job_uc,
)
from jobhub.application.use_cases.validators import get_existing
from jobhub.domain.entities import Actor, Job
from jobhub.infrastructure.store import JOBS, DocumentStore
from jobhub.interfaces.api.dependencies import get_current_actor, get_store
from jobhub.interfaces.api.routes_helpers import domain_errors_as_http
from jobhub.interfaces.api.schemas import (
    ApplicationCreate,
    ApplicationCreated,
    JobCreate,
    JobRead,
    JobUpdate,
    LikeResult,
)

router = APIRouter(prefix="/jobs", tags=["jobs"])


def _to_read_model(job: Job) -> JobRead:
    return JobRead(
        id=job.id,
        type=job.type,
        title=job.title,
        organization_or_name=job.organization_or_name,
        location=job.location,
        employment_type=job.employment_type,
        workload_band=job.workload_band,
        description=job.description,
        author_id=job.author_id,
        contact_email=job.contact_email,
        created_at=job.created_at,
        updated_at=job.updated_at,
        likes=sorted(job.likes),
        like_count=len(job.likes),
    )


@router.get("/", response_model=list[JobRead])
async def list_jobs(
    type: str | None = None,
    employment_type: str | None = None,
    workload_band: str | None = None,
    search: str | None = None,
    store: DocumentStore = Depends(get_store),
    _: Actor = Depends(get_current_actor),
) -> list[JobRead]:
    """Return the job board, newest first, narrowed by the given filters."""

    with domain_errors_as_http():
        jobs = await store.query(JOBS, descending=True)
    matches = filter_jobs(
        jobs,
        type=type,
        employment_type=employment_type,
        workload_band=workload_band,
        search=search,
    )
    return [_to_read_model(job) for job in matches]


@router.post("/", response_model=JobRead, status_code=status.HTTP_201_CREATED)
async def create_job(
    payload: JobCreate,
    store: DocumentStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
) -> JobRead:
    with domain_errors_as_http():
        job_id = await create_job_uc(store, actor=actor, **payload.model_dump())
        job = await get_existing(store, JOBS, job_id)
    return _to_read_model(job)


@router.put("/{job_id}", response_model=JobRead)
async def update_job(
    job_id: str,
    payload: JobUpdate,
    store: DocumentStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
) -> JobRead:
    """Update a listing owned by the caller."""

    with domain_errors_as_http():
        await update_job_uc(
            store,
            job_id=job_id,
            actor_id=actor.user_id,
            **payload.model_dump(exclude_unset=True),
        )
        job = await get_existing(store, JOBS, job_id)
    return _to_read_model(job)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(
    job_id: str,
    store: DocumentStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
) -> Response:
    with domain_errors_as_http():
        await delete_entity_uc(store, entity=EntityRef.job(job_id), actor_id=actor.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{job_id}/like", response_model=LikeResult)
async def like_job(
    job_id: str,
    store: DocumentStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
) -> LikeResult:
    with domain_errors_as_http():
        liked = await toggle_like_uc(store, entity=EntityRef.job(job_id), actor=actor)
    return LikeResult(liked=liked)


@router.post(
    "/{job_id}/applications",
    response_model=ApplicationCreated,
    status_code=status.HTTP_201_CREATED,
)
async def apply_to_job(
    job_id: str,
    payload: ApplicationCreate,
    store: DocumentStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
) -> ApplicationCreated:
    """Submit an application; the listing owner is notified."""

    with domain_errors_as_http():
        job = await get_existing(store, JOBS, job_id)
        application_id = await submit_application_uc(
            store,
            job_id=job_id,
            job_owner_id=job.owner_id,
            actor=actor,
            applicant_name=payload.name,
            applicant_email=payload.email,
            message=payload.message,
        )
    return ApplicationCreated(id=application_id)
