"""Job schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.base import RequestBody
from app.schemas.company import Company


class JobCreate(RequestBody):
    """Create job request schema."""

    title: str = Field(..., min_length=1, max_length=500)
    salary: Optional[float] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1)


class JobUpdate(RequestBody):
    """Update job request schema. The owning company cannot be changed."""

    title: Optional[str] = Field(None, min_length=1, max_length=500)
    salary: Optional[float] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)


class JobBrief(BaseModel):
    id: int
    title: str
    company_handle: str


class Job(BaseModel):
    id: int
    title: str
    salary: Optional[float] = None
    equity: Optional[float] = None
    date_posted: datetime
    company_handle: str


class JobDetail(BaseModel):
    id: int
    title: str
    salary: Optional[float] = None
    equity: Optional[float] = None
    date_posted: datetime
    company: Company


class JobListResponse(BaseModel):
    jobs: List[JobBrief]


class JobResponse(BaseModel):
    job: Job


class JobDetailResponse(BaseModel):
    job: JobDetail
