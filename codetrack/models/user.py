"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from codetrack.database import Base
from codetrack.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User account identified by a unique, normalized email."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    languages = relationship(
        "Language",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
