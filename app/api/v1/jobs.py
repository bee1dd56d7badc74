"""Job endpoints - Browse, search and manage jobs."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncConnection

from app.api.deps import get_db, require_admin, require_login
from app.repositories import job as job_repository
from app.schemas.base import MessageResponse
from app.schemas.job import (
    JobCreate,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
    JobUpdate,
)

router = APIRouter()


@router.get("", response_model=JobListResponse, dependencies=[Depends(require_login)])
async def list_jobs(
    search: Optional[str] = Query(None, description="Case-insensitive substring of the job title"),
    min_salary: Optional[float] = Query(None, ge=0, description="Minimum salary"),
    min_equity: Optional[float] = Query(None, ge=0, le=1, description="Minimum equity (0-1)"),
    db: AsyncConnection = Depends(get_db),
):
    """
    Get list of jobs as ``{jobs: [{id, title, company_handle}...]}``.

    **Filters:**
    - `search`: partial, case-insensitive match on title
    - `min_salary`: jobs paying at least this salary
    - `min_equity`: jobs offering at least this equity
    """
    params = {"search": search, "min_salary": min_salary, "min_equity": min_equity}
    filters = {key: value for key, value in params.items() if value is not None}
    jobs = await job_repository.get_all(db, filters)
    return {"jobs": jobs}


@router.get("/{id}", response_model=JobDetailResponse, dependencies=[Depends(require_login)])
async def get_job(id: int, db: AsyncConnection = Depends(get_db)):
    """Get a job with its company. Returns 404 if the id is unknown."""
    job = await job_repository.get(db, id)
    return {"job": job}


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_job(request: JobCreate, db: AsyncConnection = Depends(get_db)):
    """Create a job (admin only). Returns 400 if the company does not exist."""
    job = await job_repository.create(db, request.model_dump())
    return {"job": job}


@router.patch("/{id}", response_model=JobResponse, dependencies=[Depends(require_admin)])
async def update_job(id: int, request: JobUpdate, db: AsyncConnection = Depends(get_db)):
    """Update the title, salary and/or equity of a job (admin only)."""
    job = await job_repository.update(db, id, request.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete("/{id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_job(id: int, db: AsyncConnection = Depends(get_db)):
    """Delete a job (admin only)."""
    await job_repository.delete(db, id)
    return {"message": "Job deleted"}
