import datetime as dt
from typing import Annotated, List, Literal, Optional
import uuid

from pydantic import Field

from app.schemas.base import CamelModel

# Largest values the Numeric(12, 2) and Integer columns hold
MAX_AMOUNT = 9_999_999_999.99
MAX_COVERS = 2_147_483_647

Amount = Annotated[float, Field(ge=0, le=MAX_AMOUNT, allow_inf_nan=False)]


class RevenueEvent(CamelModel):
    name: str = Field(..., min_length=1)
    impact: Literal["positive", "negative"]


# Base model for the figures a manager enters for a day
class RevenueDataBase(CamelModel):
    pos_revenue: Amount = 0
    eatclub_revenue: Amount = 0
    labour_costs: Amount = 0
    total_covers: int = Field(0, ge=0, le=MAX_COVERS)
    events: List[RevenueEvent] = Field(default_factory=list)


# Model for creating a record (input). Week fields are derived server side.
class RevenueDataCreate(RevenueDataBase):
    date: dt.date


# Model for partial updates. The date of a record cannot change.
class RevenueDataUpdate(CamelModel):
    pos_revenue: Optional[Amount] = None
    eatclub_revenue: Optional[Amount] = None
    labour_costs: Optional[Amount] = None
    total_covers: Optional[int] = Field(None, ge=0, le=MAX_COVERS)
    events: Optional[List[RevenueEvent]] = None


# Model for reading a record (output, includes derived fields)
class RevenueDataRead(RevenueDataBase):
    id: uuid.UUID
    date: dt.date
    day_of_week: Literal["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    week_number: int
    year: int
    total_revenue: float
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class RevenueDataResponse(CamelModel):
    message: Optional[str] = None
    data: RevenueDataRead


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class RevenueDataList(CamelModel):
    data: List[RevenueDataRead]
    pagination: Pagination
