from datetime import date
from typing import Any, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.revenue import get_range_revenue, get_week_revenue
from app.db.models.revenue_data import RevenueData
from app.services.analytics.revenue_stats import aggregate, compare_weeks
from app.services.analytics.week_resolver import previous_week, resolve_week


class RevenueAnalyticsService:
    """Service feeding stored revenue records into the weekly analytics."""

    @staticmethod
    async def get_week_comparison(
        db: AsyncSession,
        year: int,
        week_number: int
    ) -> Dict[str, Any]:
        """Compare an ISO week with the week before it.

        Args:
            db: Database session
            year: ISO week-numbering year
            week_number: ISO week number

        Returns:
            Dictionary with ``current_week``, ``previous_week`` (each holding
            year, week_number, data and stats) and ``comparison``
        """
        previous_year, previous_week_number = previous_week(year, week_number)

        current_data = await get_week_revenue(db, year, week_number)
        previous_data = await get_week_revenue(db, previous_year, previous_week_number)

        result = compare_weeks(current_data, previous_data)

        return {
            "current_week": {
                "year": year,
                "week_number": week_number,
                "data": current_data,
                "stats": result.current_stats,
            },
            "previous_week": {
                "year": previous_year,
                "week_number": previous_week_number,
                "data": previous_data,
                "stats": result.previous_stats,
            },
            "comparison": result.comparison,
        }

    @staticmethod
    async def get_current_week_comparison(db: AsyncSession, today: Optional[date] = None) -> Dict[str, Any]:
        """Compare the ISO week containing ``today`` (defaults to the current date) with the week before."""
        week = resolve_week(today or date.today())
        return await RevenueAnalyticsService.get_week_comparison(db, week.year, week.week_number)

    @staticmethod
    async def get_date_range_analytics(
        db: AsyncSession,
        start_date: date,
        end_date: date
    ) -> Dict[str, Any]:
        """Aggregate every record between two dates, both inclusive."""
        data = await get_range_revenue(db, start_date, end_date)
        return {
            "date_range": {"start_date": start_date, "end_date": end_date},
            "data": data,
            "stats": aggregate(data),
        }

    @staticmethod
    async def get_summary_stats(db: AsyncSession) -> Optional[Dict[str, Any]]:
        """Totals and daily averages across all stored records, or None when there are none."""
        daily_revenue = RevenueData.pos_revenue + RevenueData.eatclub_revenue
        query = select(
            func.sum(daily_revenue).label("total_revenue"),
            func.sum(RevenueData.pos_revenue).label("total_pos_revenue"),
            func.sum(RevenueData.eatclub_revenue).label("total_eatclub_revenue"),
            func.sum(RevenueData.labour_costs).label("total_labour_costs"),
            func.sum(RevenueData.total_covers).label("total_covers"),
            func.avg(daily_revenue).label("average_revenue"),
            func.avg(RevenueData.total_covers).label("average_covers"),
            func.count(RevenueData.id).label("record_count"),
        )

        result = await db.execute(query)
        row = result.fetchone()

        if row is None or not row.record_count:
            return None

        return {
            "total_revenue": float(row.total_revenue or 0),
            "total_pos_revenue": float(row.total_pos_revenue or 0),
            "total_eatclub_revenue": float(row.total_eatclub_revenue or 0),
            "total_labour_costs": float(row.total_labour_costs or 0),
            "total_covers": int(row.total_covers or 0),
            "average_revenue": float(row.average_revenue or 0),
            "average_covers": float(row.average_covers or 0),
            "record_count": int(row.record_count),
        }
