"""Scholarship Repository — SQLAlchemy persistence semantics.

Invariants:
    - ids assigned by the database, list ordered by id
    - update merges supplied keys only and never reassigns id
    - update/get on missing ids return None; delete on missing ids returns False
"""

from datetime import datetime, timezone

import pytest

from scholartrack.core.domain_types import ScholarshipId
from scholartrack.infrastructure.scholarship_repository import (
    SqlScholarshipRepository,
)


def _record(**overrides) -> dict:
    record = {
        "scholarship_name": "Fulbright",
        "university_name": "Columbia University",
        "country": "USA",
        "funding_type": "Full",
        "professor_email": "grants@columbia.edu",
        "required_documents": ["CV"],
        "deadline": datetime(2027, 5, 1, tzinfo=timezone.utc),
        "status": "Preparing",
        "apply_link": None,
        "notes": None,
    }
    record.update(overrides)
    return record


@pytest.fixture
def repo(test_db):
    return SqlScholarshipRepository(test_db)


async def test_create_assigns_integer_id(repo):
    item = await repo.create(_record())
    assert isinstance(item.id, int)
    assert item.scholarship_name == "Fulbright"


async def test_create_ignores_id_in_data(repo):
    first = await repo.create(_record())
    second = await repo.create(_record(id=first.id))
    assert second.id != first.id


async def test_list_all_is_ordered_by_id(repo):
    a = await repo.create(_record(scholarship_name="A"))
    b = await repo.create(_record(scholarship_name="B"))
    c = await repo.create(_record(scholarship_name="C"))

    items = await repo.list_all()

    assert [i.id for i in items] == [a.id, b.id, c.id]


async def test_count_tracks_rows(repo):
    assert await repo.count() == 0
    await repo.create_many([_record(), _record()])
    assert await repo.count() == 2


async def test_get_by_id_missing_returns_none(repo):
    assert await repo.get_by_id(ScholarshipId(404)) is None


async def test_update_merges_only_supplied_keys(repo):
    item = await repo.create(_record(notes="original"))

    updated = await repo.update(item.id, {"status": "Applied"})

    assert updated.status == "Applied"
    assert updated.notes == "original"
    assert updated.required_documents == ["CV"]


async def test_update_never_changes_id(repo):
    item = await repo.create(_record())
    original_id = item.id

    updated = await repo.update(item.id, {"id": original_id + 100, "country": "UK"})

    assert updated.id == original_id
    assert updated.country == "UK"


async def test_update_missing_returns_none_and_creates_nothing(repo):
    assert await repo.update(ScholarshipId(55), {"status": "Applied"}) is None
    assert await repo.count() == 0


async def test_delete_reports_whether_a_row_was_removed(repo):
    item = await repo.create(_record())

    assert await repo.delete(item.id) is True
    assert await repo.delete(item.id) is False
    assert await repo.get_by_id(item.id) is None


async def test_required_documents_order_preserved(repo):
    docs = ["Transcripts", "CV", "Research Proposal"]
    item = await repo.create(_record(required_documents=docs))

    fetched = await repo.get_by_id(item.id)

    assert fetched.required_documents == docs
