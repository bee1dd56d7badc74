"""Company endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncConnection

from app.api.deps import get_db, require_admin, require_login
from app.db.base import INT4_MAX
from app.repositories import company as company_repository
from app.schemas.base import MessageResponse
from app.schemas.company import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)

router = APIRouter()


@router.get("", response_model=CompanyListResponse, dependencies=[Depends(require_login)])
async def list_companies(
    search: Optional[str] = Query(None, description="Case-insensitive substring of the company name"),
    min_employees: Optional[int] = Query(None, ge=0, le=INT4_MAX, description="Minimum number of employees"),
    max_employees: Optional[int] = Query(None, ge=0, le=INT4_MAX, description="Maximum number of employees"),
    db: AsyncConnection = Depends(get_db),
):
    """
    List companies as ``{companies: [{handle, name}...]}``.

    Returns 400 when ``min_employees`` is greater than ``max_employees``.
    """
    params = {
        "search": search,
        "min_employees": min_employees,
        "max_employees": max_employees,
    }
    filters = {key: value for key, value in params.items() if value is not None}
    companies = await company_repository.get_all(db, filters)
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailResponse, dependencies=[Depends(require_login)])
async def get_company(handle: str, db: AsyncConnection = Depends(get_db)):
    """Get a company with its jobs. Returns 404 if the handle is unknown."""
    company = await company_repository.get(db, handle)
    return {"company": company}


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_company(request: CompanyCreate, db: AsyncConnection = Depends(get_db)):
    """Create a company (admin only). Returns 400 if the handle or name is taken."""
    company = await company_repository.create(db, request.model_dump())
    return {"company": company}


@router.patch("/{handle}", response_model=CompanyResponse, dependencies=[Depends(require_admin)])
async def update_company(
    handle: str,
    request: CompanyUpdate,
    db: AsyncConnection = Depends(get_db),
):
    """Update the supplied fields of a company (admin only)."""
    company = await company_repository.update(db, handle, request.model_dump(exclude_unset=True))
    return {"company": company}


@router.delete("/{handle}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_company(handle: str, db: AsyncConnection = Depends(get_db)):
    """Delete a company and its jobs (admin only)."""
    await company_repository.delete(db, handle)
    return {"message": "Company deleted"}
