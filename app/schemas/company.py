"""Company schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.db.base import INT4_MAX
from app.schemas.base import RequestBody


class CompanyCreate(RequestBody):
    """Create company request schema."""

    handle: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    num_employees: Optional[int] = Field(None, ge=0, le=INT4_MAX)
    description: Optional[str] = None
    logo_url: Optional[str] = None


class CompanyUpdate(RequestBody):
    """Update company request schema. Only supplied fields are changed."""

    handle: Optional[str] = Field(None, min_length=1, max_length=100)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    num_employees: Optional[int] = Field(None, ge=0, le=INT4_MAX)
    description: Optional[str] = None
    logo_url: Optional[str] = None


class CompanyBrief(BaseModel):
    handle: str
    name: str


class Company(CompanyBrief):
    num_employees: Optional[int] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None


class CompanyJob(BaseModel):
    """Job as nested under its company."""

    id: int
    title: str
    salary: Optional[float] = None
    equity: Optional[float] = None
    date_posted: datetime


class CompanyDetail(Company):
    jobs: List[CompanyJob] = Field(default_factory=list)


class CompanyListResponse(BaseModel):
    companies: List[CompanyBrief]


class CompanyResponse(BaseModel):
    company: Company


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail
