"""Per-language activity counters."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from codetrack.database import Base
from codetrack.models.mixins import TimestampMixin


class Language(Base, TimestampMixin):
    """Accumulated activity of one user in one programming language."""

    __tablename__ = "languages"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_language_user_name"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    xp = Column(Integer, nullable=False, default=0, server_default="0")
    lines_new = Column(Integer, nullable=False, default=0, server_default="0")
    lines_del = Column(Integer, nullable=False, default=0, server_default="0")
    files = Column(Integer, nullable=False, default=0, server_default="0")

    user = relationship("User", back_populates="languages")
