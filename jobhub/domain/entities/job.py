"""Domain entities for job listings and applications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Final

JOB_TYPE_OFFER: Final[str] = "offer"
JOB_TYPE_SEEK: Final[str] = "seek"
JOB_TYPES: Final[frozenset[str]] = frozenset({JOB_TYPE_OFFER, JOB_TYPE_SEEK})

EMPLOYMENT_TYPES: Final[tuple[str, ...]] = (
    "full_time",
    "part_time",
    "hybrid",
    "remote",
    "internship",
    "apprenticeship",
)
WORKLOAD_BANDS: Final[tuple[str, ...]] = ("< 40%", "40-60%", "60-80%", "80-100%", "100%")


@dataclass
class Job:
    """Job listing, either an offer by an organization or a person seeking work."""

    id: str | None
    type: str
    title: str
    organization_or_name: str
    location: str
    employment_type: str
    workload_band: str
    description: str
    author_id: str
    contact_email: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    likes: frozenset[str] = field(default_factory=frozenset)

    @property
    def owner_id(self) -> str:
        return self.author_id


@dataclass
class Application:
    """Append-only application submitted against a job listing."""

    id: str | None
    job_id: str
    applicant_id: str
    applicant_name: str
    applicant_email: str
    message: str
    created_at: datetime | None = None


__all__ = [
    "Application",
    "Job",
    "EMPLOYMENT_TYPES",
    "JOB_TYPES",
    "JOB_TYPE_OFFER",
    "JOB_TYPE_SEEK",
    "WORKLOAD_BANDS",
]
