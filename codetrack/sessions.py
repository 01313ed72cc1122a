"""Server-side session store backed by the sessions table."""

import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from fastapi import Response
from sqlalchemy.orm import Session

from codetrack.config import Settings
from codetrack.models.session import SessionRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionData:
    """Request-scoped view of a session and its single claim."""

    token: str | None = None
    email: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.email is not None


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class SessionStore:
    """Issue, load and clear sessions. Nothing is cached between requests."""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    @property
    def cookie_name(self) -> str:
        return self.settings.session_cookie_name

    def load(self, token: str | None) -> SessionData:
        """Read the session for a cookie token; unknown or expired tokens give an empty session."""
        if not token:
            return SessionData()

        record = self.db.get(SessionRecord, token)
        if record is None:
            return SessionData()

        if _as_utc(record.expires_at) <= datetime.now(UTC):
            logger.debug("Dropping expired session")
            self.db.delete(record)
            self._commit()
            return SessionData()

        return SessionData(token=record.token, email=record.email)

    def issue(self, email: str) -> SessionData:
        """Create a new session holding the email claim.

        Expired sessions are purged first, so abandoned rows do not accumulate.
        """
        self.purge_expired()
        token = secrets.token_urlsafe(32)
        expires_at = datetime.now(UTC) + timedelta(seconds=self.settings.session_max_age_seconds)
        self.db.add(SessionRecord(token=token, email=email, expires_at=expires_at))
        self._commit()
        return SessionData(token=token, email=email)

    def clear(self, session: SessionData) -> None:
        """Erase the session's claim by removing its record."""
        if session.token:
            self.db.query(SessionRecord).filter(SessionRecord.token == session.token).delete(
                synchronize_session=False
            )
            self._commit()

    def purge_expired(self) -> int:
        """Delete every session whose expiry has passed."""
        count = (
            self.db.query(SessionRecord)
            .filter(SessionRecord.expires_at <= datetime.now(UTC))
            .delete(synchronize_session=False)
        )
        self._commit()
        if count:
            logger.info(f"Purged {count} expired session(s)")
        return count

    def revoke_email(self, email: str) -> int:
        """Remove every session whose claim references the email."""
        count = (
            self.db.query(SessionRecord)
            .filter(SessionRecord.email == email)
            .delete(synchronize_session=False)
        )
        self._commit()
        if count:
            logger.info(f"Revoked {count} session(s) for {email}")
        return count

    def set_cookie(self, response: Response, session: SessionData) -> None:
        """Attach the session token cookie to a response."""
        response.set_cookie(
            key=self.cookie_name,
            value=session.token or "",
            max_age=self.settings.session_max_age_seconds,
            httponly=True,
            samesite="lax",
            secure=self.settings.session_cookie_secure,
        )

    def delete_cookie(self, response: Response) -> None:
        """Expire the session cookie on the client."""
        response.delete_cookie(
            key=self.cookie_name,
            httponly=True,
            samesite="lax",
            secure=self.settings.session_cookie_secure,
        )

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
