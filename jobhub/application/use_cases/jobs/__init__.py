"""Use cases for job listings."""

from .create_job import create_job, validate_job_fields
from .search_jobs import filter_jobs
from .update_job import update_job

__all__ = ["create_job", "filter_jobs", "update_job", "validate_job_fields"]
