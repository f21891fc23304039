"""Initial schema for the voice admin back-office

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19

Creates the six back-office tables:
- subscription_plans: pricing tiers with optional quotas
- users: accounts, optionally linked to a plan
- api_keys: per-user hashed keys
- voices: voice library
- call_sessions: one row per Twilio call
- turns: conversation turns, role restricted by the turn_role enum
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


turn_role = sa.Enum('user', 'assistant', 'tool', name='turn_role')


def upgrade() -> None:
    op.create_table(
        'subscription_plans',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('max_api_keys', sa.Integer(), nullable=True),
        sa.Column('max_monthly_calls', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_subscription_plans_name', 'subscription_plans', ['name'], unique=True)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('subscription_plan_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['subscription_plan_id'], ['subscription_plans.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_subscription_plan_id', 'users', ['subscription_plan_id'], unique=False)

    op.create_table(
        'api_keys',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('key_hash', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('last_used_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_api_keys_user_id', 'api_keys', ['user_id'], unique=False)

    op.create_table(
        'voices',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('identifier', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_voices_identifier', 'voices', ['identifier'], unique=True)
    op.create_index('ix_voices_name', 'voices', ['name'], unique=False)

    op.create_table(
        'call_sessions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('twilio_call_id', sa.String(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_call_sessions_twilio_call_id', 'call_sessions', ['twilio_call_id'], unique=True)
    op.create_index('ix_call_sessions_user_id', 'call_sessions', ['user_id'], unique=False)

    op.create_table(
        'turns',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('call_session_id', sa.Integer(), nullable=False),
        sa.Column('role', turn_role, nullable=False),
        sa.Column('text', sa.Text(), nullable=True),
        sa.Column('latency_ms', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['call_session_id'], ['call_sessions.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_turns_call_session_id', 'turns', ['call_session_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_turns_call_session_id', table_name='turns')
    op.drop_table('turns')
    turn_role.drop(op.get_bind(), checkfirst=True)
    op.drop_index('ix_call_sessions_user_id', table_name='call_sessions')
    op.drop_index('ix_call_sessions_twilio_call_id', table_name='call_sessions')
    op.drop_table('call_sessions')
    op.drop_index('ix_voices_name', table_name='voices')
    op.drop_index('ix_voices_identifier', table_name='voices')
    op.drop_table('voices')
    op.drop_index('ix_api_keys_user_id', table_name='api_keys')
    op.drop_table('api_keys')
    op.drop_index('ix_users_subscription_plan_id', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    op.drop_index('ix_subscription_plans_name', table_name='subscription_plans')
    op.drop_table('subscription_plans')
