"""User model definitions."""

from sqlalchemy import Column, DateTime, Integer, String, func
from signup_backend.database import Base


class User(Base):
    """Represents a registered account."""
    __tablename__ = "signup"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column("password", String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    def to_public_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email}
