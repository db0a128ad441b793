"""initial_position_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create base_position, option_position and stock_share_position tables."""
    op.create_table(
        'base_position',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('symbol', sa.String(length=20), nullable=False),
        sa.Column('position_name', sa.String(length=255), nullable=False),
        sa.Column('strategy_type', sa.String(length=20), nullable=False),
        sa.Column('underlying_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('position_status', sa.String(length=20), nullable=False),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('total_credits', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('total_debits', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('net_position_value', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_base_position_symbol'), 'base_position', ['symbol'], unique=False)
    op.create_index(op.f('ix_base_position_strategy_type'), 'base_position', ['strategy_type'], unique=False)
    op.create_index(op.f('ix_base_position_position_status'), 'base_position', ['position_status'], unique=False)
    op.create_index(op.f('ix_base_position_created_at'), 'base_position', ['created_at'], unique=False)

    op.create_table(
        'option_position',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('base_position_id', sa.Integer(), nullable=False),
        sa.Column('position_type', sa.String(length=20), nullable=False),
        sa.Column('option_type', sa.String(length=20), nullable=False),
        sa.Column('option_action', sa.String(length=20), nullable=False),
        sa.Column('strike_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('expiration_date', sa.Date(), nullable=False),
        sa.Column('contracts', sa.Integer(), nullable=False),
        sa.Column('premium_per_contract', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('fees_commissions', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('trade_date', sa.Date(), nullable=False),
        sa.Column('is_open', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['base_position_id'], ['base_position.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_option_position_base_position_id'), 'option_position', ['base_position_id'], unique=False)
    op.create_index(op.f('ix_option_position_created_at'), 'option_position', ['created_at'], unique=False)

    op.create_table(
        'stock_share_position',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('base_position_id', sa.Integer(), nullable=False),
        sa.Column('action', sa.String(length=20), nullable=False),
        sa.Column('shares', sa.Integer(), nullable=False),
        sa.Column('share_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('fees_commissions', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('trade_date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['base_position_id'], ['base_position.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_stock_share_position_base_position_id'), 'stock_share_position', ['base_position_id'], unique=False)
    op.create_index(op.f('ix_stock_share_position_created_at'), 'stock_share_position', ['created_at'], unique=False)


def downgrade() -> None:
    """Drop the position tables, legs first."""
    op.drop_index(op.f('ix_stock_share_position_created_at'), table_name='stock_share_position')
    op.drop_index(op.f('ix_stock_share_position_base_position_id'), table_name='stock_share_position')
    op.drop_table('stock_share_position')
    op.drop_index(op.f('ix_option_position_created_at'), table_name='option_position')
    op.drop_index(op.f('ix_option_position_base_position_id'), table_name='option_position')
    op.drop_table('option_position')
    op.drop_index(op.f('ix_base_position_created_at'), table_name='base_position')
    op.drop_index(op.f('ix_base_position_position_status'), table_name='base_position')
    op.drop_index(op.f('ix_base_position_strategy_type'), table_name='base_position')
    op.drop_index(op.f('ix_base_position_symbol'), table_name='base_position')
    op.drop_table('base_position')
