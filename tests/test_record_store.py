"""
Unit tests for the SQLite record store.
"""
from datetime import date

import pytest

from job_tracker_ai.errors import RecordNotFoundError
from job_tracker_ai.schemas.application import JobApplicationCreate, JobApplicationUpdate


def _create(store, owner_id, **overrides):
    fields = dict(company="Acme", position="Engineer", applied_date=date(2024, 3, 1))
    fields.update(overrides)
    return store.create(owner_id, JobApplicationCreate(**fields))


def test_get_or_create_user_is_stable(store):
    first = store.get_or_create_user("user_abc")

    assert store.get_or_create_user("user_abc") == first
    assert store.get_or_create_user("user_xyz") != first


def test_create_defaults(store):
    owner = store.get_or_create_user("u1")

    created = _create(store, owner, location="  ", notes="Referral from Sam")

    assert created.status == "APPLIED"
    assert created.location is None
    assert created.notes == "Referral from Sam"
    assert created.applied_date == date(2024, 3, 1)
    assert store.get(owner, created.id) == created


def test_list_newest_first_and_scoped_to_owner(store):
    owner = store.get_or_create_user("u1")
    other = store.get_or_create_user("u2")
    first = _create(store, owner, company="First")
    second = _create(store, owner, company="Second")
    _create(store, other, company="Someone else")

    assert [a.id for a in store.list(owner)] == [second.id, first.id]
    assert [a.company for a in store.list(other)] == ["Someone else"]


def test_update_changes_only_given_fields(store):
    owner = store.get_or_create_user("u1")
    created = _create(store, owner, salary="$100k", notes="first call")

    updated = store.update(owner, created.id, JobApplicationUpdate(status="INTERVIEWING", notes=None))

    assert updated.status == "INTERVIEWING"
    assert updated.notes is None
    assert updated.salary == "$100k"
    assert updated.company == "Acme"
    assert updated.updated_at >= created.updated_at


def test_update_never_clears_required_fields(store):
    owner = store.get_or_create_user("u1")
    created = _create(store, owner)

    updated = store.update(owner, created.id, JobApplicationUpdate(company=None, position=None))

    assert updated.company == "Acme"
    assert updated.position == "Engineer"


def test_other_owner_cannot_read_update_or_delete(store):
    owner = store.get_or_create_user("u1")
    intruder = store.get_or_create_user("u2")
    created = _create(store, owner)

    with pytest.raises(RecordNotFoundError):
        store.get(intruder, created.id)
    with pytest.raises(RecordNotFoundError):
        store.update(intruder, created.id, JobApplicationUpdate(status="REJECTED"))
    with pytest.raises(RecordNotFoundError):
        store.delete(intruder, created.id)
    assert store.get(owner, created.id).status == "APPLIED"


def test_delete(store):
    owner = store.get_or_create_user("u1")
    created = _create(store, owner)

    store.delete(owner, created.id)

    assert store.list(owner) == []
    with pytest.raises(RecordNotFoundError):
        store.delete(owner, created.id)
