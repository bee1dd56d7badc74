"""User model."""

from sqlalchemy import Boolean, Column, String, Text, text

from app.db.base import Base


class User(Base):
    """User model for authentication."""

    __tablename__ = "users"

    username = Column(String(150), primary_key=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    first_name = Column(String(150), nullable=False)
    last_name = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    photo_url = Column(Text)
    is_admin = Column(Boolean, nullable=False, default=False, server_default=text("false"))

    def __repr__(self):
        return f"<User {self.username} (admin={self.is_admin})>"
