"""Filtering of the job board."""

from __future__ import annotations

from collections.abc import Iterable

from jobhub.domain.entities import Job

_SEARCHABLE_FIELDS = ("title", "organization_or_name", "location", "description")


def filter_jobs(
    jobs: Iterable[Job],
    *,
    type: str | None = None,
    employment_type: str | None = None,
    workload_band: str | None = None,
    search: str | None = None,
) -> list[Job]:
    """Return the listings matching every given filter.

    ``search`` is matched case-insensitively against title, organization,
    location and description.
    """

    needle = (search or "").strip().lower()
    matches: list[Job] = []
    for job in jobs:
        if type and job.type != type:
            continue
        if employment_type and job.employment_type != employment_type:
            continue
        if workload_band and job.workload_band != workload_band:
            continue
        if needle and not any(
            needle in (getattr(job, name) or "").lower() for name in _SEARCHABLE_FIELDS
        ):
            continue
        matches.append(job)
    return matches


__all__ = ["filter_jobs"]
