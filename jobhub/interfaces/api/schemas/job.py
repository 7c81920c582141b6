"""Schemas for job listing endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr


class JobBase(BaseModel):
    type: str
    title: str
    organization_or_name: str
    location: str
    employment_type: str = "full_time"
    workload_band: str = "100%"
    description: str
    contact_email: EmailStr | None = None


class JobCreate(JobBase):
    """Payload required to publish a job listing."""


class JobUpdate(BaseModel):
    type: str | None = None
    title: str | None = None
    organization_or_name: str | None = None
    location: str | None = None
    employment_type: str | None = None
    workload_band: str | None = None
    description: str | None = None
    contact_email: EmailStr | None = None

    model_config = ConfigDict(extra="forbid")


class JobRead(BaseModel):
    id: str
    type: str
    title: str
    organization_or_name: str
    location: str
    employment_type: str
    workload_band: str
    description: str
    author_id: str
    contact_email: str | None
    created_at: datetime | None
    updated_at: datetime | None
    likes: list[str]
    like_count: int


class ApplicationCreate(BaseModel):
    """Applicant data sent with an application."""

    name: str
    email: EmailStr
    message: str = ""


class ApplicationCreated(BaseModel):
    id: str
