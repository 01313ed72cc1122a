"""Query layer tests."""

import pytest
from sqlalchemy.exc import IntegrityError

from codetrack.models.user import User
from codetrack.queries import Queries


def test_get_user_absent_returns_none(db):
    """Test that a missing user is reported as None, not an error."""
    assert Queries(db).get_user("nobody@example.com") is None


def test_new_user_and_get_user(db):
    """Test inserting and reading back a user."""
    queries = Queries(db)
    created = queries.new_user("bob@example.com", "hash")

    assert created.id is not None
    fetched = queries.get_user("bob@example.com")
    assert fetched.id == created.id
    assert fetched.password_hash == "hash"
    assert queries.user_exists("bob@example.com") is True
    assert queries.user_exists("other@example.com") is False


def test_lookup_is_exact_match(db):
    """Test that the query layer does not normalize emails itself."""
    queries = Queries(db)
    queries.new_user("bob@example.com", "hash")

    assert queries.get_user("Bob@example.com") is None


def test_new_user_duplicate_raises_integrity_error(db):
    """Test that the unique constraint rejects a second row for an email."""
    queries = Queries(db)
    queries.new_user("bob@example.com", "hash")

    with pytest.raises(IntegrityError):
        queries.new_user("bob@example.com", "other-hash")

    # The session was rolled back and is still usable
    assert db.query(User).count() == 1


def test_delete_user(db):
    """Test deleting a user."""
    queries = Queries(db)
    queries.new_user("bob@example.com", "hash")

    queries.delete_user("bob@example.com")

    assert queries.get_user("bob@example.com") is None
