import pytest
from sqlalchemy.orm import sessionmaker

from constants import LookupStatus
from database import create_database_engine
from exceptions import ValidationError
from models import User
from repositories.user_repository import UserRepository


def test_find_all_on_empty_table_is_empty(db_session):
    outcome = UserRepository(db_session).find_all()

    assert outcome.status is LookupStatus.EMPTY
    assert outcome.value is None
    assert outcome.error is None


def test_find_all_returns_users_in_insert_order(db_session):
    repo = UserRepository(db_session)
    repo.add("alice", "secret", "a@x.com")
    repo.add("bob", "hunter2", "bob@example.com")
    db_session.commit()

    outcome = repo.find_all()

    assert outcome.is_found
    assert [u.username for u in outcome.value] == ["alice", "bob"]


def test_find_by_id(db_session):
    repo = UserRepository(db_session)
    alice = repo.add("alice", "secret", "a@x.com")
    db_session.commit()

    found = repo.find_by_id(alice.id)
    missing = repo.find_by_id(alice.id + 1)

    assert found.status is LookupStatus.FOUND
    assert found.value.email == "a@x.com"
    assert missing.status is LookupStatus.EMPTY


def test_store_faults_are_returned_not_raised():
    # No tables created, so every query fails
    engine = create_database_engine("sqlite://")
    session = sessionmaker(bind=engine)()
    try:
        repo = UserRepository(session)

        all_outcome = repo.find_all()
        one_outcome = repo.find_by_id(1)
    finally:
        session.close()
        engine.dispose()

    assert all_outcome.status is LookupStatus.FAULT
    assert "users" in all_outcome.error
    assert one_outcome.is_fault
    assert one_outcome.value is None


def test_ids_are_assigned_by_the_store(db_session):
    repo = UserRepository(db_session)

    first = repo.add("alice", "secret", "a@x.com")
    second = repo.add("bob", "hunter2", "bob@example.com")

    assert first.id == 1
    assert second.id == 2


def test_create_rejects_caller_supplied_id(db_session):
    repo = UserRepository(db_session)

    with pytest.raises(ValidationError) as exc:
        repo.create(User(id=42, username="mallory", password="x", email="m@x.com"))

    assert exc.value.details == {"invalid_fields": {"id": 42}}
    assert repo.count() == 0


@pytest.mark.parametrize("field", ["username", "password", "email"])
def test_add_requires_every_field(db_session, field):
    values = {"username": "alice", "password": "secret", "email": "a@x.com"}
    values[field] = "  "

    with pytest.raises(ValidationError) as exc:
        UserRepository(db_session).add(**values)

    assert field in exc.value.details["invalid_fields"]


def test_users_may_share_a_password(db_session):
    repo = UserRepository(db_session)
    repo.add("alice", "same", "a@x.com")
    repo.add("bob", "same", "b@x.com")
    db_session.commit()

    assert repo.count() == 2


def test_find_by_id_outside_integer_range_is_empty(db_session):
    repo = UserRepository(db_session)
    repo.add("alice", "secret", "a@x.com")
    db_session.commit()

    assert repo.find_by_id(2**63).status is LookupStatus.EMPTY
    assert repo.find_by_id(-2**63 - 1).status is LookupStatus.EMPTY
    assert repo.find_by_id(2**63 - 1).status is LookupStatus.EMPTY
