import logging
import math
from datetime import date
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.db.models.revenue_data import RevenueData
from app.schemas.revenue import RevenueDataCreate, RevenueDataUpdate
from app.services.analytics.week_resolver import resolve_week

logger = logging.getLogger(__name__)


def _date_conflict() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="Revenue data already exists for this date"
    )


async def get_revenue_by_date(db: AsyncSession, day: date) -> Optional[RevenueData]:
    result = await db.execute(select(RevenueData).where(RevenueData.date == day))
    return result.scalars().first()


async def get_revenue(db: AsyncSession, revenue_id: UUID) -> Optional[RevenueData]:
    result = await db.execute(select(RevenueData).where(RevenueData.id == revenue_id))
    return result.scalars().first()


async def create_revenue(db: AsyncSession, revenue: RevenueDataCreate) -> RevenueData:
    """Creates a revenue record; week bucket and weekday are derived from its date."""
    if await get_revenue_by_date(db, revenue.date):
        raise _date_conflict()

    week = resolve_week(revenue.date)
    db_revenue = RevenueData(
        date=revenue.date,
        day_of_week=week.day_of_week,
        week_number=week.week_number,
        year=week.year,
        pos_revenue=revenue.pos_revenue,
        eatclub_revenue=revenue.eatclub_revenue,
        labour_costs=revenue.labour_costs,
        total_covers=revenue.total_covers,
        events=[event.model_dump() for event in revenue.events],
    )
    db.add(db_revenue)

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        # Lost a race with another insert for the same date
        if await get_revenue_by_date(db, revenue.date):
            raise _date_conflict()
        logger.exception("Could not store revenue data for %s", revenue.date)
        raise

    await db.refresh(db_revenue)
    logger.info("Created revenue data for %s (week %s/%s)", db_revenue.date, week.week_number, week.year)
    return db_revenue


async def update_revenue(db: AsyncSession, db_revenue: RevenueData, changes: RevenueDataUpdate) -> RevenueData:
    """Applies the fields present in ``changes``. The date and its derived fields never change."""
    values = changes.model_dump(exclude_unset=True)
    for field in ("pos_revenue", "eatclub_revenue", "labour_costs", "total_covers"):
        if values.get(field) is not None:
            setattr(db_revenue, field, values[field])
    if values.get("events") is not None:
        db_revenue.events = values["events"]

    await db.commit()
    await db.refresh(db_revenue)
    logger.info("Updated revenue data for %s", db_revenue.date)
    return db_revenue


async def delete_revenue(db: AsyncSession, db_revenue: RevenueData) -> None:
    await db.delete(db_revenue)
    await db.commit()
    logger.info("Deleted revenue data for %s", db_revenue.date)


async def list_revenue(
    db: AsyncSession,
    year: Optional[int] = None,
    week_number: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    page: int = 1,
    limit: int = 100,
) -> Tuple[List[RevenueData], int, int]:
    """Returns one page of records, newest first, with the total match count and page count."""
    conditions = []
    if year is not None:
        conditions.append(RevenueData.year == year)
    if week_number is not None:
        conditions.append(RevenueData.week_number == week_number)
    if start_date is not None:
        conditions.append(RevenueData.date >= start_date)
    if end_date is not None:
        conditions.append(RevenueData.date <= end_date)

    query = (
        select(RevenueData)
        .where(*conditions)
        .order_by(RevenueData.date.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )
    count_query = select(func.count(RevenueData.id)).where(*conditions)

    result = await db.execute(query)
    total = (await db.execute(count_query)).scalar() or 0

    return result.scalars().all(), total, math.ceil(total / limit)


async def get_week_revenue(db: AsyncSession, year: int, week_number: int) -> Sequence[RevenueData]:
    query = select(RevenueData).where(
        RevenueData.year == year,
        RevenueData.week_number == week_number
    ).order_by(RevenueData.date)
    result = await db.execute(query)
    return result.scalars().all()


async def get_range_revenue(db: AsyncSession, start_date: date, end_date: date) -> Sequence[RevenueData]:
    query = select(RevenueData).where(
        RevenueData.date >= start_date,
        RevenueData.date <= end_date
    ).order_by(RevenueData.date)
    result = await db.execute(query)
    return result.scalars().all()
