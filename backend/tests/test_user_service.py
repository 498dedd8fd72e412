import logging

import pytest
from pydantic import ValidationError

from dtos.response.user_response import UserRecord
from models import User
from repositories.outcomes import LookupOutcome
from services.interfaces import IUserStore
from services.user_service import UserService, to_user_record


class FakeUserStore(IUserStore):
    def __init__(self, all_outcome=None, one_outcome=None):
        self.all_outcome = all_outcome or LookupOutcome.empty()
        self.one_outcome = one_outcome or LookupOutcome.empty()
        self.requested_ids = []

    def find_all(self):
        return self.all_outcome

    def find_by_id(self, user_id):
        self.requested_ids.append(user_id)
        return self.one_outcome


def _user(id, username, email, password="secret"):
    return User(id=id, username=username, password=password, email=email)


def test_projection_drops_password():
    record = to_user_record(_user(1, "alice", "a@x.com"))

    assert record == UserRecord(id=1, username="alice", email="a@x.com")
    assert "password" not in record.model_dump()


def test_get_users_projects_in_storage_order():
    store = FakeUserStore(all_outcome=LookupOutcome.found([
        _user(3, "carol", "c@x.com"),
        _user(1, "alice", "a@x.com"),
    ]))

    records = UserService(store).get_users()

    assert [r.id for r in records] == [3, 1]
    assert records[0] == UserRecord(id=3, username="carol", email="c@x.com")


def test_get_users_empty_store_returns_empty_list(caplog):
    caplog.set_level(logging.INFO)

    assert UserService(FakeUserStore()).get_users() == []
    assert "No users found" in caplog.text


def test_get_users_fault_is_logged_and_treated_as_empty(caplog):
    store = FakeUserStore(all_outcome=LookupOutcome.fault("database is locked"))

    assert UserService(store).get_users() == []
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors and "database is locked" in errors[0].getMessage()


def test_get_user_by_id_found():
    store = FakeUserStore(one_outcome=LookupOutcome.found(_user(1, "alice", "a@x.com")))

    record = UserService(store).get_user_by_id(1)

    assert record == UserRecord(id=1, username="alice", email="a@x.com")
    assert store.requested_ids == [1]


def test_get_user_by_id_missing_returns_none(caplog):
    caplog.set_level(logging.INFO)

    assert UserService(FakeUserStore()).get_user_by_id(2) is None
    assert "User not found: 2" in caplog.text


def test_get_user_by_id_fault_is_treated_as_not_found(caplog):
    store = FakeUserStore(one_outcome=LookupOutcome.fault("disk I/O error"))

    assert UserService(store).get_user_by_id(1) is None
    assert "disk I/O error" in caplog.text


def test_user_record_reads_orm_attributes_and_is_immutable():
    record = UserRecord.model_validate(_user(4, "dave", "d@x.com"))

    assert record == UserRecord(id=4, username="dave", email="d@x.com")
    with pytest.raises(ValidationError):
        record.username = "mallory"
