"""FastAPI dependencies for accounts, sessions and the session gate."""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from codetrack.config import Settings, get_settings
from codetrack.database import get_db
from codetrack.errors import UnauthorizedError
from codetrack.queries import Queries
from codetrack.services.accounts import AccountService, build_password_context
from codetrack.sessions import SessionData, SessionStore

logger = logging.getLogger(__name__)


@lru_cache
def get_password_context() -> CryptContext:
    """Get the shared password hashing context."""
    return build_password_context()


def get_account_service(
    db: Annotated[Session, Depends(get_db)],
    password_context: Annotated[CryptContext, Depends(get_password_context)],
) -> AccountService:
    """Get account service with dependencies."""
    return AccountService(Queries(db), password_context)


def get_session_store(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SessionStore:
    """Get the session store for this request."""
    return SessionStore(db, settings)


def get_session(
    request: Request,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> SessionData:
    """Load the session referenced by the request cookie."""
    return store.load(request.cookies.get(store.cookie_name))


def require_session(
    session: Annotated[SessionData, Depends(get_session)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
) -> str:
    """Session gate: return the claimed email or reject the request.

    The claim is never trusted on its own. The account it names must still
    exist, otherwise the session is treated as unauthenticated.
    """
    if session.email is None:
        raise UnauthorizedError()

    # InternalError from the store propagates as a 500
    if not accounts.email_login(session.email):
        logger.info("Rejected session for an account that no longer exists")
        raise UnauthorizedError()

    return session.email
