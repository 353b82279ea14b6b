import uuid
from sqlalchemy import Column, Date, DateTime, Integer, Numeric, String, JSON, Index, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.hybrid import hybrid_property
from app.db.base import Base


class RevenueData(Base):
    """One day of takings for the restaurant."""
    __tablename__ = "revenue_data"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    date = Column(Date, nullable=False, unique=True, index=True)
    day_of_week = Column(String(3), nullable=False)
    pos_revenue = Column(Numeric(precision=12, scale=2, asdecimal=False), nullable=False, default=0)
    eatclub_revenue = Column(Numeric(precision=12, scale=2, asdecimal=False), nullable=False, default=0)
    labour_costs = Column(Numeric(precision=12, scale=2, asdecimal=False), nullable=False, default=0)
    total_covers = Column(Integer, nullable=False, default=0)
    # [{"name": ..., "impact": "positive" | "negative"}]
    events = Column(JSON, nullable=False, default=list)
    # Derived from date, see app.services.analytics.week_resolver
    week_number = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_year_week_day', 'year', 'week_number', 'day_of_week'),
    )

    @hybrid_property
    def total_revenue(self) -> float:
        """POS plus EatClub revenue. Always computed, never stored."""
        return (self.pos_revenue or 0) + (self.eatclub_revenue or 0)

    @total_revenue.expression
    def total_revenue(cls):
        return cls.pos_revenue + cls.eatclub_revenue

    def __repr__(self):
        return f"<RevenueData(date={self.date}, year={self.year}, week_number={self.week_number})>"
