import pytest
import pytest_asyncio
from datetime import date

from app.crud.revenue import create_revenue
from app.schemas.revenue import RevenueDataCreate
from app.services.analytics import revenue_analytics_service
from app.services.analytics.revenue_analytics_service import RevenueAnalyticsService

ANALYTICS_URL = "/api/v1/analytics"


async def add_day(session, day, pos, eatclub, labour, covers):
    return await create_revenue(session, RevenueDataCreate(
        date=day,
        pos_revenue=pos,
        eatclub_revenue=eatclub,
        labour_costs=labour,
        total_covers=covers,
    ))


@pytest_asyncio.fixture
async def two_weeks(session):
    # ISO week 1 of 2025 (Wednesday)
    await add_day(session, date(2025, 1, 1), 900, 150, 280, 45)
    # ISO week 2 of 2025 (Monday, Tuesday)
    await add_day(session, date(2025, 1, 6), 1000, 200, 300, 50)
    await add_day(session, date(2025, 1, 7), 1200, 250, 320, 55)


@pytest.mark.asyncio
async def test_week_comparison(client, two_weeks):
    response = await client.get(f"{ANALYTICS_URL}/week-comparison", params={"year": 2025, "weekNumber": 2})

    assert response.status_code == 200
    body = response.json()

    current, previous = body["currentWeek"], body["previousWeek"]
    assert (current["year"], current["weekNumber"]) == (2025, 2)
    assert (previous["year"], previous["weekNumber"]) == (2025, 1)
    assert [d["date"] for d in current["data"]] == ["2025-01-06", "2025-01-07"]
    assert [d["date"] for d in previous["data"]] == ["2025-01-01"]

    assert current["stats"]["totalRevenue"] == 2650
    assert current["stats"]["averagePerDay"] == 1325
    assert current["stats"]["daysCount"] == 2
    assert previous["stats"]["totalRevenue"] == 1050
    assert body["comparison"]["totalRevenueChange"] == pytest.approx(152.38, abs=0.01)
    assert body["comparison"]["totalCoversChange"] == pytest.approx(133.33, abs=0.01)


@pytest.mark.asyncio
async def test_week_comparison_wraps_to_week_52(client, session):
    await add_day(session, date(2024, 12, 23), 800, 100, 250, 40)
    # Calendar year 2024 but ISO week 1 of 2025
    await add_day(session, date(2024, 12, 30), 1000, 100, 250, 50)

    response = await client.get(f"{ANALYTICS_URL}/week-comparison", params={"year": 2025, "weekNumber": 1})

    body = response.json()
    assert (body["previousWeek"]["year"], body["previousWeek"]["weekNumber"]) == (2024, 52)
    assert [d["date"] for d in body["previousWeek"]["data"]] == ["2024-12-23"]
    assert [d["date"] for d in body["currentWeek"]["data"]] == ["2024-12-30"]
    assert body["comparison"]["totalRevenueChange"] == pytest.approx((1100 - 900) / 900 * 100)


@pytest.mark.asyncio
async def test_week_comparison_of_empty_weeks(client):
    response = await client.get(f"{ANALYTICS_URL}/week-comparison", params={"year": 2030, "weekNumber": 10})

    body = response.json()
    assert body["currentWeek"]["data"] == []
    assert body["currentWeek"]["stats"]["daysCount"] == 0
    assert body["comparison"] == {"totalRevenueChange": 0, "averagePerDayChange": 0, "totalCoversChange": 0}


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [
    {"year": 2025},
    {"weekNumber": 3},
    {"year": 2025, "weekNumber": 54},
    {"year": 2025, "weekNumber": 0},
])
async def test_week_comparison_requires_valid_week(client, params):
    response = await client.get(f"{ANALYTICS_URL}/week-comparison", params=params)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_current_week(client, two_weeks, monkeypatch):
    class FixedDate(date):
        @classmethod
        def today(cls):
            # Tuesday of ISO week 2, 2025
            return cls(2025, 1, 7)

    monkeypatch.setattr(revenue_analytics_service, "date", FixedDate)

    response = await client.get(f"{ANALYTICS_URL}/current-week")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"currentWeek", "previousWeek", "comparison"}
    assert (body["currentWeek"]["year"], body["currentWeek"]["weekNumber"]) == (2025, 2)
    assert (body["previousWeek"]["year"], body["previousWeek"]["weekNumber"]) == (2025, 1)
    assert body["currentWeek"]["stats"]["totalRevenue"] == 2650
    assert body["comparison"]["totalRevenueChange"] == pytest.approx(152.38, abs=0.01)


@pytest.mark.asyncio
async def test_current_week_comparison_for_given_day(session, two_weeks):
    result = await RevenueAnalyticsService.get_current_week_comparison(session, today=date(2025, 1, 1))

    assert (result["current_week"]["year"], result["current_week"]["week_number"]) == (2025, 1)
    assert (result["previous_week"]["year"], result["previous_week"]["week_number"]) == (2024, 52)
    assert result["current_week"]["stats"].total_revenue == 1050


@pytest.mark.asyncio
async def test_date_range(client, two_weeks):
    response = await client.get(
        f"{ANALYTICS_URL}/date-range", params={"startDate": "2025-01-01", "endDate": "2025-01-06"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["dateRange"] == {"startDate": "2025-01-01", "endDate": "2025-01-06"}
    assert [d["date"] for d in body["data"]] == ["2025-01-01", "2025-01-06"]
    assert body["stats"]["totalRevenue"] == 2250
    assert body["stats"]["totalLabourCosts"] == 580
    assert body["stats"]["averageCoversPerDay"] == 47.5


@pytest.mark.asyncio
async def test_date_range_validation(client):
    response = await client.get(f"{ANALYTICS_URL}/date-range", params={"startDate": "2025-01-01"})
    assert response.status_code == 422

    response = await client.get(
        f"{ANALYTICS_URL}/date-range", params={"startDate": "2025-02-01", "endDate": "2025-01-01"}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_summary_without_data(client):
    response = await client.get(f"{ANALYTICS_URL}/summary")
    assert response.json() == {"stats": None}


@pytest.mark.asyncio
async def test_summary(client, two_weeks):
    response = await client.get(f"{ANALYTICS_URL}/summary")

    stats = response.json()["stats"]
    assert stats["recordCount"] == 3
    assert stats["totalRevenue"] == pytest.approx(3700)
    assert stats["totalPosRevenue"] == pytest.approx(3100)
    assert stats["totalEatclubRevenue"] == pytest.approx(600)
    assert stats["totalLabourCosts"] == pytest.approx(900)
    assert stats["totalCovers"] == 150
    assert stats["averageRevenue"] == pytest.approx(3700 / 3)
    assert stats["averageCovers"] == pytest.approx(50)
