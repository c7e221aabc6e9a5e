"""Tests for InMemoryContactRepository primitives, capacity and audit events."""

import pytest

from contactbook.application import (
    AUDIT_CLEARED,
    AUDIT_CREATED,
    AUDIT_DELETED,
    AUDIT_UPDATED,
)
from contactbook.domain import CapacityExceededError, Contact, ContactValidationError
from contactbook.infrastructure import (
    MAX_CAPACITY,
    InMemoryContactRepository,
    RecordingAuditSink,
)


def _contact(contact_id: str = "12345", first_name: str = "John") -> Contact:
    return Contact(contact_id, first_name, "Doe", "1234567890", "123 Main St")


def test_save_and_find_by_id() -> None:
    repo = InMemoryContactRepository()
    c = _contact()
    repo.save(c)
    assert repo.find_by_id("12345") is c
    assert repo.exists_by_id("12345")
    assert repo.count() == 1


def test_find_by_id_absent_and_blank() -> None:
    repo = InMemoryContactRepository()
    assert repo.find_by_id("nope") is None
    assert repo.find_by_id(None) is None
    assert repo.find_by_id("") is None
    assert repo.exists_by_id(None) is False


def test_save_replaces_existing_id() -> None:
    repo = InMemoryContactRepository()
    repo.save(_contact())
    repo.save(_contact(first_name="Jane"))
    assert repo.count() == 1
    assert repo.find_by_id("12345").first_name == "Jane"


def test_save_none_rejected() -> None:
    with pytest.raises(ContactValidationError):
        InMemoryContactRepository().save(None)


def test_delete_by_id() -> None:
    repo = InMemoryContactRepository()
    repo.save(_contact())
    assert repo.delete_by_id("12345") is True
    assert repo.delete_by_id("12345") is False
    assert repo.delete_by_id(None) is False
    assert repo.count() == 0


def test_find_all_is_a_snapshot() -> None:
    repo = InMemoryContactRepository()
    repo.save(_contact("1"))
    repo.save(_contact("2"))
    snapshot = repo.find_all()
    repo.save(_contact("3"))
    assert sorted(c.contact_id for c in snapshot) == ["1", "2"]
    assert repo.count() == 3


def test_default_capacity() -> None:
    assert InMemoryContactRepository().max_capacity == MAX_CAPACITY == 10000


def test_capacity_blocks_new_ids_but_allows_replacement() -> None:
    repo = InMemoryContactRepository(max_capacity=3)
    for i in range(3):
        repo.save(_contact(str(i)))

    with pytest.raises(CapacityExceededError) as exc:
        repo.save(_contact("new"))
    assert exc.value.limit == 3
    assert repo.count() == 3
    assert not repo.exists_by_id("new")

    repo.save(_contact("1", first_name="Jane"))
    assert repo.find_by_id("1").first_name == "Jane"


def test_invalid_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        InMemoryContactRepository(max_capacity=0)


def test_audit_events_distinguish_created_updated_deleted() -> None:
    audit = RecordingAuditSink()
    repo = InMemoryContactRepository(audit=audit)
    repo.save(_contact())
    repo.save(_contact(first_name="Jane"))
    repo.delete_by_id("12345")
    repo.delete_by_id("12345")
    assert audit.actions() == [AUDIT_CREATED, AUDIT_UPDATED, AUDIT_DELETED]
    assert all(e.contact_id == "12345" for e in audit.events)
    assert audit.events[1].detail["name"] == "Jane Doe"


def test_clear_reports_prior_count() -> None:
    audit = RecordingAuditSink()
    repo = InMemoryContactRepository(audit=audit)
    repo.save(_contact("1"))
    repo.save(_contact("2"))
    repo.clear()
    assert repo.count() == 0
    last = audit.events[-1]
    assert last.action == AUDIT_CLEARED
    assert last.detail == {"count": 2}


def test_capacity_rejection_emits_no_audit_event() -> None:
    audit = RecordingAuditSink()
    repo = InMemoryContactRepository(max_capacity=1, audit=audit)
    repo.save(_contact("1"))
    with pytest.raises(CapacityExceededError):
        repo.save(_contact("2"))
    assert audit.actions() == [AUDIT_CREATED]
