"""Account service: registration, login and account deletion rules."""

import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from codetrack.config import get_settings
from codetrack.errors import ConflictError, InternalError, NotFoundError
from codetrack.models.user import User
from codetrack.queries import Queries

logger = logging.getLogger(__name__)


def build_password_context(schemes: list[str] | None = None) -> CryptContext:
    """Create the password hashing context from configured schemes."""
    return CryptContext(schemes=schemes or get_settings().password_schemes, deprecated="auto")


def normalize_email(email: str) -> str:
    """Canonical form used for every email comparison and for storage."""
    return email.strip().lower()


class AccountService:
    """Enforces account invariants on top of the query layer."""

    def __init__(self, queries: Queries, password_context: CryptContext):
        self.queries = queries
        self.password_context = password_context

    def register(self, email: str, password: str) -> User:
        """Register a new user.

        Raises:
            ConflictError: a user with this email already exists.
            InternalError: the store failed.
        """
        email = normalize_email(email)
        if self.user_exists(email):
            raise ConflictError()

        password_hash = self.password_context.hash(password)
        try:
            user = self.queries.new_user(email, password_hash)
        except IntegrityError:
            # Lost a race against a concurrent registration of the same email
            logger.warning(f"Unique constraint rejected registration for {email}")
            raise ConflictError() from None
        except SQLAlchemyError as e:
            logger.exception("Failed to insert user")
            raise InternalError() from e

        logger.info(f"Registered user {user.id}")
        return user

    def user_exists(self, email: str) -> bool:
        """Check whether an account exists for the email."""
        try:
            return self.queries.user_exists(normalize_email(email))
        except SQLAlchemyError as e:
            logger.exception("Failed to look up user")
            raise InternalError() from e

    def login(self, email: str, password: str) -> bool:
        """Verify credentials. Unknown user and wrong password both return False."""
        try:
            user = self.queries.get_user(normalize_email(email))
        except SQLAlchemyError as e:
            logger.exception("Failed to look up user")
            raise InternalError() from e

        if user is None:
            # Same hashing cost as a real check so both failures look alike
            self.password_context.dummy_verify()
            return False

        return self.password_context.verify(password, user.password_hash)

    def email_login(self, email: str) -> bool:
        """Revalidate a session claim: does the account still exist?"""
        return self.user_exists(email)

    def delete_user(self, email: str) -> None:
        """Delete an account.

        Raises:
            NotFoundError: no account has this email.
            InternalError: the store failed.
        """
        email = normalize_email(email)
        if not self.user_exists(email):
            raise NotFoundError()

        try:
            self.queries.delete_user(email)
        except SQLAlchemyError as e:
            logger.exception("Failed to delete user")
            raise InternalError() from e

        logger.info(f"Deleted user {email}")
