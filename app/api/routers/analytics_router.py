from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_db
from app.schemas.analytics import DateRangeAnalyticsResponse, SummaryResponse, WeekComparisonResponse
from app.services.analytics.revenue_analytics_service import RevenueAnalyticsService

router = APIRouter()

@router.get("/analytics/current-week", response_model=WeekComparisonResponse)
async def get_current_week_analytics(db: AsyncSession = Depends(get_db)):
    """
    Current ISO week compared with the previous week.
    """
    return await RevenueAnalyticsService.get_current_week_comparison(db)

@router.get("/analytics/week-comparison", response_model=WeekComparisonResponse)
async def get_week_comparison(
    year: int = Query(..., ge=1),
    week_number: int = Query(..., alias="weekNumber", ge=1, le=53),
    db: AsyncSession = Depends(get_db)
):
    """
    A specific ISO week compared with the week before it.
    """
    return await RevenueAnalyticsService.get_week_comparison(db, year, week_number)

@router.get("/analytics/date-range", response_model=DateRangeAnalyticsResponse)
async def get_analytics_by_date_range(
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    db: AsyncSession = Depends(get_db)
):
    """
    Statistics for every record between two dates (inclusive).
    """
    if start_date > end_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="startDate must not be after endDate"
        )
    return await RevenueAnalyticsService.get_date_range_analytics(db, start_date, end_date)

@router.get("/analytics/summary", response_model=SummaryResponse)
async def get_summary_stats(db: AsyncSession = Depends(get_db)):
    """
    Totals and averages across all revenue data.
    """
    return {"stats": await RevenueAnalyticsService.get_summary_stats(db)}
