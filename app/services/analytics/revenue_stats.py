import math
from typing import Iterable, NamedTuple

from app.schemas.analytics import ComparisonResult, WeekStats


class WeekComparison(NamedTuple):
    current_stats: WeekStats
    previous_stats: WeekStats
    comparison: ComparisonResult


def aggregate(records: Iterable) -> WeekStats:
    """Reduce daily revenue records to period statistics.

    Records can be ORM rows or any object exposing ``pos_revenue``,
    ``eatclub_revenue``, ``labour_costs`` and ``total_covers``. Averages are
    taken over the number of records given, not over seven days.

    Args:
        records: Daily records of one period, in any order

    Returns:
        WeekStats; every field is zero for an empty period
    """
    records = list(records)
    days_count = len(records)
    if days_count == 0:
        return WeekStats()

    # fsum is exactly rounded, so the result does not depend on record order
    total_pos_revenue = math.fsum(float(r.pos_revenue) for r in records)
    total_eatclub_revenue = math.fsum(float(r.eatclub_revenue) for r in records)
    total_labour_costs = math.fsum(float(r.labour_costs) for r in records)
    total_covers = sum(int(r.total_covers) for r in records)
    total_revenue = total_pos_revenue + total_eatclub_revenue

    return WeekStats(
        total_revenue=total_revenue,
        total_pos_revenue=total_pos_revenue,
        total_eatclub_revenue=total_eatclub_revenue,
        total_labour_costs=total_labour_costs,
        total_covers=total_covers,
        average_per_day=total_revenue / days_count,
        average_covers_per_day=total_covers / days_count,
        days_count=days_count,
    )


def percentage_change(previous: float, current: float) -> float:
    """Percentage change from previous to current.

    Growth from zero counts as +100%, and zero to zero as 0%.
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return (current - previous) / previous * 100


def compare_weeks(current_records: Iterable, previous_records: Iterable) -> WeekComparison:
    current_stats = aggregate(current_records)
    previous_stats = aggregate(previous_records)

    comparison = ComparisonResult(
        total_revenue_change=percentage_change(
            previous_stats.total_revenue, current_stats.total_revenue
        ),
        average_per_day_change=percentage_change(
            previous_stats.average_per_day, current_stats.average_per_day
        ),
        total_covers_change=percentage_change(
            previous_stats.total_covers, current_stats.total_covers
        ),
    )
    return WeekComparison(
        current_stats=current_stats,
        previous_stats=previous_stats,
        comparison=comparison,
    )
