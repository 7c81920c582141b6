"""SQLAlchemy models for job listings and applications."""

from sqlalchemy import Column, DateTime, String, Text

from jobhub.infrastructure.database import Base


class JobModel(Base):
    """Database representation for job listings."""

    __tablename__ = "job"

    id = Column(String(32), primary_key=True)
    type = Column(String(10), nullable=False)
    title = Column(String(200), nullable=False)
    organization_or_name = Column(String(200), nullable=False)
    location = Column(String(120), nullable=False)
    employment_type = Column(String(30), nullable=False)
    workload_band = Column(String(20), nullable=False)
    description = Column(Text, nullable=False)
    author_id = Column(String(128), nullable=False, index=True)
    contact_email = Column(String(320), nullable=True)
    created_at = Column(DateTime(), nullable=False, index=True)
    updated_at = Column(DateTime(), nullable=True)


class ApplicationModel(Base):
    """Database representation for applications; ``job_id`` is a back-reference."""

    __tablename__ = "application"

    id = Column(String(32), primary_key=True)
    job_id = Column(String(32), nullable=False, index=True)
    applicant_id = Column(String(128), nullable=False)
    applicant_name = Column(String(120), nullable=False)
    applicant_email = Column(String(320), nullable=False)
    message = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(), nullable=False, index=True)


__all__ = ["JobModel", "ApplicationModel"]
