"""Account API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError

from codetrack.api.dependencies import (
    get_account_service,
    get_session,
    get_session_store,
    require_session,
)
from codetrack.errors import LoginError
from codetrack.schemas.accounts import (
    AccountEmail,
    ApiResponse,
    MeResponse,
    RegisteredAccount,
    RegisterResponse,
    UserLogin,
    UserRegister,
)
from codetrack.services.accounts import AccountService, normalize_email
from codetrack.sessions import SessionData, SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/accounts", tags=["accounts"])


@router.post("/register", response_model=RegisterResponse)
def register(
    user_data: UserRegister,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Register a new user."""
    user = accounts.register(user_data.email, user_data.password)

    return RegisterResponse(
        status=200,
        message="User registered",
        data=RegisteredAccount(email=user.email, password=user_data.password),
    )


@router.post("/login", response_model=ApiResponse)
def login(
    credentials: UserLogin,
    response: Response,
    session: Annotated[SessionData, Depends(get_session)],
    store: Annotated[SessionStore, Depends(get_session_store)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Login with email and password, issuing a session cookie."""
    email = normalize_email(credentials.email)

    if session.email == email:
        raise LoginError("Already logged in")

    if not accounts.login(email, credentials.password):
        raise LoginError()

    # Logging in as someone else replaces the current session
    if session.token:
        store.clear(session)

    new_session = store.issue(email)
    store.set_cookie(response, new_session)

    return ApiResponse(status=200, message="Logged in")


@router.post("/logout", response_model=ApiResponse)
def logout(
    response: Response,
    _email: Annotated[str, Depends(require_session)],
    session: Annotated[SessionData, Depends(get_session)],
    store: Annotated[SessionStore, Depends(get_session_store)],
):
    """Logout, clearing the session."""
    store.clear(session)
    store.delete_cookie(response)

    return ApiResponse(status=200, message="Logged out")


@router.delete("/delete", response_model=ApiResponse)
def delete_account(
    response: Response,
    email: Annotated[str, Depends(require_session)],
    store: Annotated[SessionStore, Depends(get_session_store)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Delete the current account and every session that references it."""
    accounts.delete_user(email)

    # The account is already gone; leftover sessions fail revalidation at the gate
    try:
        store.revoke_email(email)
    except SQLAlchemyError:
        logger.exception(f"Deleted {email} but could not revoke its sessions")
    store.delete_cookie(response)

    return ApiResponse(status=200, message="User deleted")


@router.get("/me", response_model=MeResponse)
def get_me(
    email: Annotated[str, Depends(require_session)],
):
    """Get current account information."""
    return MeResponse(status=200, message="OK", data=AccountEmail(email=email))
