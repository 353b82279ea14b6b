"""Reset the database with two admins and three weeks of sample revenue data.

Usage: python -m app.scripts.seed
"""
import asyncio
import logging
import random
from datetime import date, timedelta

from sqlalchemy import delete

from app.core.logging_config import configure_logging
from app.db.base import AsyncSessionLocal, Base, engine
from app.db.models import Admin, RevenueData
from app.schemas.revenue import RevenueDataCreate, RevenueEvent
from app.crud.revenue import create_revenue
from app.services.auth_service import create_admin

logger = logging.getLogger(__name__)

SEED_ADMINS = [
    ("admin@restaurant.com", "admin123", "Admin User", "admin"),
    ("superadmin@restaurant.com", "superadmin123", "Super Admin User", "super_admin"),
]
SEED_WEEKS = 3


def sample_day(day: date) -> RevenueDataCreate:
    weekend = day.weekday() >= 5
    base_revenue = 2000 if weekend else 1500

    events = []
    if random.random() > 0.8:
        events.append(RevenueEvent(
            name=random.choice(["Local Festival", "Bad Weather"]),
            impact=random.choice(["positive", "negative"]),
        ))

    return RevenueDataCreate(
        date=day,
        pos_revenue=random.randint(base_revenue - 400, base_revenue + 400),
        eatclub_revenue=random.randint(300, 700),
        labour_costs=random.randint(500, 900),
        total_covers=random.randint(100, 150) if weekend else random.randint(80, 120),
        events=events,
    )


async def seed_database() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        logger.info("Clearing existing data")
        await db.execute(delete(RevenueData))
        await db.execute(delete(Admin))
        await db.commit()

        for email, password, name, role in SEED_ADMINS:
            await create_admin(email, password, name, db, role=role)

        # Monday of the week (SEED_WEEKS - 1) weeks ago, up to today
        today = date.today()
        start = today - timedelta(days=today.weekday(), weeks=SEED_WEEKS - 1)
        day = start
        while day <= today:
            await create_revenue(db, sample_day(day))
            day += timedelta(days=1)

    logger.info("Seeded %d days of revenue data starting %s", (today - start).days + 1, start)
    await engine.dispose()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(seed_database())
