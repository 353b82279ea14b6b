"""create_admins_and_revenue_data

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2025-10-06 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'admins',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_admins_email', 'admins', ['email'], unique=True)

    op.create_table(
        'revenue_data',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('day_of_week', sa.String(length=3), nullable=False),
        sa.Column('pos_revenue', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('eatclub_revenue', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('labour_costs', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('total_covers', sa.Integer(), nullable=False),
        sa.Column('events', sa.JSON(), nullable=False),
        sa.Column('week_number', sa.Integer(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_revenue_data_date', 'revenue_data', ['date'], unique=True)
    op.create_index('idx_year_week_day', 'revenue_data', ['year', 'week_number', 'day_of_week'])


def downgrade() -> None:
    op.drop_index('idx_year_week_day', table_name='revenue_data')
    op.drop_index('ix_revenue_data_date', table_name='revenue_data')
    op.drop_table('revenue_data')
    op.drop_index('ix_admins_email', table_name='admins')
    op.drop_table('admins')
