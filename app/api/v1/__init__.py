"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import companies, jobs, users

api_router = APIRouter()

# Include all route modules
api_router.include_router(companies.router, prefix="/companies", tags=["Companies"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
