"""SQLAlchemy models."""

from codetrack.models.language import Language
from codetrack.models.session import SessionRecord
from codetrack.models.user import User

__all__ = [
    "User",
    "Language",
    "SessionRecord",
]
