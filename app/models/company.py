"""Company model."""

from sqlalchemy import CheckConstraint, Column, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.base import Base


class Company(Base):
    """Company model."""

    __tablename__ = "companies"

    handle = Column(String(100), primary_key=True)
    name = Column(String(255), nullable=False, unique=True)
    num_employees = Column(Integer)
    description = Column(Text)
    logo_url = Column(Text)

    # Relationships
    jobs = relationship(
        "Job",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="num_employees"),
    )

    def __repr__(self):
        return f"<Company {self.handle}>"
