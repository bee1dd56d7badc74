"""Job model."""

from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.base import Base


class Job(Base):
    """Job posting model."""

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False, index=True)
    salary = Column(Float)
    equity = Column(Float)
    date_posted = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Deleting or renaming a company carries over to its jobs
    company_handle = Column(
        String(100),
        ForeignKey("companies.handle", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    company = relationship("Company", back_populates="jobs")

    __table_args__ = (
        CheckConstraint("salary >= 0", name="salary"),
        CheckConstraint("equity >= 0 AND equity <= 1", name="equity"),
    )

    def __repr__(self):
        return f"<Job {self.title} at {self.company_handle}>"
