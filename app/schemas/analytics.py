import datetime as dt
from typing import List, Optional

from app.schemas.base import CamelModel
from app.schemas.revenue import RevenueDataRead


class WeekStats(CamelModel):
    total_revenue: float = 0
    total_pos_revenue: float = 0
    total_eatclub_revenue: float = 0
    total_labour_costs: float = 0
    total_covers: int = 0
    average_per_day: float = 0
    average_covers_per_day: float = 0
    days_count: int = 0


class ComparisonResult(CamelModel):
    total_revenue_change: float = 0
    average_per_day_change: float = 0
    total_covers_change: float = 0


class WeekPeriod(CamelModel):
    year: int
    week_number: int
    data: List[RevenueDataRead]
    stats: WeekStats


class WeekComparisonResponse(CamelModel):
    current_week: WeekPeriod
    previous_week: WeekPeriod
    comparison: ComparisonResult


class DateRange(CamelModel):
    start_date: dt.date
    end_date: dt.date


class DateRangeAnalyticsResponse(CamelModel):
    date_range: DateRange
    data: List[RevenueDataRead]
    stats: WeekStats


class SummaryStats(CamelModel):
    total_revenue: float
    total_pos_revenue: float
    total_eatclub_revenue: float
    total_labour_costs: float
    total_covers: int
    average_revenue: float
    average_covers: float
    record_count: int


class SummaryResponse(CamelModel):
    stats: Optional[SummaryStats] = None
