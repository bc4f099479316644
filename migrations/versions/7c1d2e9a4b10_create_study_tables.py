"""create study tables

Revision ID: 7c1d2e9a4b10
Revises:
Create Date: 2026-10-19 09:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '7c1d2e9a4b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _owned_table(name, *columns):
    op.create_table(name,
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('user_id', sa.String(), nullable=False),
    *columns,
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f(f'ix_{name}_id'), name, ['id'], unique=False)
    op.create_index(op.f(f'ix_{name}_user_id'), name, ['user_id'], unique=False)


def upgrade() -> None:
    _owned_table('classes',
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('instructor', sa.String(), nullable=False),
        sa.Column('day', sa.String(), nullable=True),
        sa.Column('day_index', sa.Integer(), nullable=True),
        sa.Column('start_time', sa.String(), nullable=True),
        sa.Column('end_time', sa.String(), nullable=True),
        sa.Column('color', sa.String(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    _owned_table('budget_entries',
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('category', sa.String(), nullable=True),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    _owned_table('planner_tasks',
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('due_date', sa.DateTime(), nullable=True),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('priority', sa.String(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    _owned_table('wellness_entries',
        sa.Column('mood', sa.Float(), nullable=True),
        sa.Column('sleep_hours', sa.Float(), nullable=False),
        sa.Column('study_hours', sa.Float(), nullable=False),
        sa.Column('notes', sa.String(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
    )
    _owned_table('study_sessions',
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('duration', sa.Float(), nullable=False),
        sa.Column('topic', sa.String(), nullable=False),
        sa.Column('efficiency', sa.Float(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
    )
    _owned_table('study_goals',
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('target_hours', sa.Float(), nullable=False),
        sa.Column('deadline', sa.DateTime(), nullable=True),
    )
    _owned_table('quiz_results',
        sa.Column('topic', sa.String(), nullable=False),
        sa.Column('score', sa.Float(), nullable=False),
        sa.Column('total_questions', sa.Integer(), nullable=False),
        sa.Column('percentage', sa.Float(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('difficulty', sa.String(), nullable=False),
        sa.Column('time_spent', sa.Float(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    for name in ('quiz_results', 'study_goals', 'study_sessions', 'wellness_entries', 'planner_tasks', 'budget_entries', 'classes'):
        op.drop_index(op.f(f'ix_{name}_user_id'), table_name=name)
        op.drop_index(op.f(f'ix_{name}_id'), table_name=name)
        op.drop_table(name)
