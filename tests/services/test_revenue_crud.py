import pytest
from datetime import date

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from app.crud import revenue as revenue_crud
from app.schemas.revenue import RevenueDataCreate


def day(value: date) -> RevenueDataCreate:
    return RevenueDataCreate(date=value, pos_revenue=1000, eatclub_revenue=200, labour_costs=300, total_covers=50)


@pytest.mark.asyncio
async def test_concurrent_insert_for_same_date_conflicts(session, monkeypatch):
    await revenue_crud.create_revenue(session, day(date(2025, 3, 3)))

    # The duplicate check runs before the other writer has committed
    real_lookup = revenue_crud.get_revenue_by_date
    calls = []

    async def lookup_misses_first(db, value):
        calls.append(value)
        if len(calls) == 1:
            return None
        return await real_lookup(db, value)

    monkeypatch.setattr(revenue_crud, "get_revenue_by_date", lookup_misses_first)

    with pytest.raises(HTTPException) as exc_info:
        await revenue_crud.create_revenue(session, day(date(2025, 3, 3)))

    assert exc_info.value.status_code == 409
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_other_integrity_errors_are_not_reported_as_duplicates(session, monkeypatch, caplog):
    async def failing_commit():
        raise IntegrityError("INSERT INTO revenue_data ...", {}, Exception("NOT NULL constraint failed"))

    monkeypatch.setattr(session, "commit", failing_commit)

    with pytest.raises(IntegrityError):
        await revenue_crud.create_revenue(session, day(date(2025, 3, 4)))

    assert "Could not store revenue data for 2025-03-04" in caplog.text
    assert await revenue_crud.get_revenue_by_date(session, date(2025, 3, 4)) is None
