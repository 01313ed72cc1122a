"""Typed read/write operations over the users table."""

from sqlalchemy.orm import Session

from codetrack.models.user import User


class Queries:
    """Storage mechanism for user records.

    Lookups return ``None`` when nothing matches. Storage failures are raised
    as the original ``SQLAlchemyError``; interpreting them is left to callers.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, email: str) -> User | None:
        """Get a user by exact email match."""
        return self.db.query(User).filter(User.email == email).first()

    def user_exists(self, email: str) -> bool:
        """Check whether a user with this email is stored."""
        return self.get_user(email) is not None

    def new_user(self, email: str, password_hash: str) -> User:
        """Insert a user. Uniqueness is enforced only by the table constraint."""
        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def delete_user(self, email: str) -> None:
        """Delete the user with this email along with its language rows."""
        try:
            self.db.query(User).filter(User.email == email).delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
