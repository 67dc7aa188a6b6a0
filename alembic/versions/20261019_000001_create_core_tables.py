"""Create units, users, payments and messages tables

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Core schema: every table has a surrogate integer id and a created_at timestamp.
Enumerated columns are restricted to fixed lowercase value sets.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

USER_ROLE = sa.Enum('super_admin', 'building_admin', 'resident', name='user_role', create_constraint=True)
UNIT_STATUS = sa.Enum('active', 'inactive', name='unit_status', create_constraint=True)
PAYMENT_STATUS = sa.Enum('pending', 'paid', name='payment_status', create_constraint=True)
SENDER_TYPE = sa.Enum('admin', 'resident', name='sender_type', create_constraint=True)


def upgrade() -> None:
    """Create the core tables."""
    op.create_table(
        'units',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('unit_number', sa.String(50), nullable=False),
        sa.Column('floor', sa.Integer(), nullable=False),
        sa.Column('status', UNIT_STATUS, nullable=False),
        sa.Column('resident_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('username', sa.String(150), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('role', USER_ROLE, nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_users_unit_id'),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_unit_id', 'users', ['unit_id'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column('period', sa.String(50), nullable=False),
        sa.Column('status', PAYMENT_STATUS, nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_payments_unit_id'),
    )
    op.create_index('ix_payments_unit_id', 'payments', ['unit_id'])
    op.create_index('ix_payments_status', 'payments', ['status'])

    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('sender_type', SENDER_TYPE, nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], name='fk_messages_unit_id'),
    )
    op.create_index('ix_messages_unit_id', 'messages', ['unit_id'])


def downgrade() -> None:
    """Drop the core tables."""
    op.drop_index('ix_messages_unit_id', table_name='messages')
    op.drop_table('messages')
    op.drop_index('ix_payments_status', table_name='payments')
    op.drop_index('ix_payments_unit_id', table_name='payments')
    op.drop_table('payments')
    op.drop_index('ix_users_unit_id', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
    op.drop_table('units')
