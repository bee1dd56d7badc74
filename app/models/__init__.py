"""Database models."""

# Import in dependency order so foreign keys resolve
from app.models.company import Company
from app.models.job import Job
from app.models.user import User

# Export all models
__all__ = [
    "Company",
    "Job",
    "User",
]
