from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import CurrentAdmin, get_current_admin, require_super_admin
from app.crud import revenue as revenue_crud
from app.db.base import get_db
from app.schemas.revenue import (
    RevenueDataCreate,
    RevenueDataList,
    RevenueDataResponse,
    RevenueDataUpdate,
)

router = APIRouter(dependencies=[Depends(get_current_admin)])

async def _get_or_404(db: AsyncSession, revenue_id: UUID):
    db_revenue = await revenue_crud.get_revenue(db, revenue_id)
    if db_revenue is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Revenue data not found")
    return db_revenue

@router.post("/revenue", response_model=RevenueDataResponse, status_code=status.HTTP_201_CREATED)
async def create_revenue_data(
    revenue: RevenueDataCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Record the figures for one day.
    """
    db_revenue = await revenue_crud.create_revenue(db, revenue)
    return {"message": "Revenue data created successfully", "data": db_revenue}

@router.get("/revenue", response_model=RevenueDataList)
async def list_revenue_data(
    year: Optional[int] = Query(None),
    week_number: Optional[int] = Query(None, alias="weekNumber", ge=1, le=53),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    page: int = Query(1, ge=1),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db)
):
    """
    Paginated revenue data, newest first.
    """
    data, total, pages = await revenue_crud.list_revenue(
        db,
        year=year,
        week_number=week_number,
        start_date=start_date,
        end_date=end_date,
        page=page,
        limit=limit,
    )
    return {
        "data": data,
        "pagination": {"page": page, "limit": limit, "total": total, "pages": pages},
    }

@router.get("/revenue/{revenue_id}", response_model=RevenueDataResponse)
async def get_revenue_data(revenue_id: UUID, db: AsyncSession = Depends(get_db)):
    return {"data": await _get_or_404(db, revenue_id)}

@router.put("/revenue/{revenue_id}", response_model=RevenueDataResponse)
async def update_revenue_data(
    revenue_id: UUID,
    changes: RevenueDataUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Update the figures or events of a day. The date itself cannot be changed.
    """
    db_revenue = await _get_or_404(db, revenue_id)
    db_revenue = await revenue_crud.update_revenue(db, db_revenue, changes)
    return {"message": "Revenue data updated successfully", "data": db_revenue}

@router.delete("/revenue/{revenue_id}")
async def delete_revenue_data(
    revenue_id: UUID,
    db: AsyncSession = Depends(get_db),
    _admin: CurrentAdmin = Depends(require_super_admin)
):
    db_revenue = await _get_or_404(db, revenue_id)
    await revenue_crud.delete_revenue(db, db_revenue)
    return {"message": "Revenue data deleted successfully"}
