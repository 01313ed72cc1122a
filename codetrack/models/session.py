"""Server-side session records."""

from sqlalchemy import Column, DateTime, String

from codetrack.database import Base
from codetrack.models.mixins import TimestampMixin


class SessionRecord(Base, TimestampMixin):
    """Session state referenced by the cookie token.

    ``email`` is the only claim a session carries. It is a weak reference to
    ``users.email`` and is revalidated on every protected request.
    """

    __tablename__ = "sessions"

    token = Column(String(64), primary_key=True)
    email = Column(String(255), nullable=True, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
