"""Initial schema for the Transaction Ledger API.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

Creates the transactions table. `seq` records insertion order and is the
default listing order and sort tie-breaker.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the transactions table and its indexes."""

    op.create_table(
        'transactions',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('seq', sa.BigInteger, sa.Identity(always=False), nullable=False, unique=True),
        sa.Column('timestamp', sa.BigInteger, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', sa.String(10), nullable=False),
        sa.Column('amount', sa.BigInteger, nullable=False),
        sa.Column('status', sa.String(10), nullable=False),
        sa.Column('description', sa.String(500), nullable=False, server_default=''),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.CheckConstraint("type IN ('CREDIT', 'DEBIT')", name='transactions_type_check'),
        sa.CheckConstraint("status IN ('SUCCESS', 'FAILED', 'PENDING')", name='transactions_status_check'),
        sa.CheckConstraint('amount >= 0', name='transactions_amount_check'),
    )

    op.create_index('idx_transactions_timestamp', 'transactions', ['timestamp'])
    op.create_index('idx_transactions_status', 'transactions', ['status'])
    op.create_index('idx_transactions_created_at', 'transactions', ['created_at'])


def downgrade() -> None:
    """Drop the transactions table."""
    op.drop_index('idx_transactions_created_at', table_name='transactions')
    op.drop_index('idx_transactions_status', table_name='transactions')
    op.drop_index('idx_transactions_timestamp', table_name='transactions')
    op.drop_table('transactions')
