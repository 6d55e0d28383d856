"""Create sessions, session_injuries and coach_insights tables

Revision ID: 001
Revises:
Create Date: 2026-03-02 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the session log and insight tables."""
    op.create_table('sessions', sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('types', sa.JSON(), nullable=False),
        sa.Column('intensity', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('performance', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('productivity', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('max_grade', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        sa.Column('hard_attempts', sa.Integer(), nullable=True),
        sa.Column('venue', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_sessions_date'), 'sessions', ['date'], unique=False)
    op.create_index(op.f('ix_sessions_intensity'), 'sessions', ['intensity'], unique=False)
    op.create_index(op.f('ix_sessions_venue'), 'sessions', ['venue'], unique=False)

    op.create_table('session_injuries', sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('session_id', sa.Uuid(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('location', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('severity', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_session_injuries_session_id'), 'session_injuries', ['session_id'], unique=False)
    op.create_index(op.f('ix_session_injuries_location'), 'session_injuries', ['location'], unique=False)

    op.create_table('coach_insights', sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('pinned', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_coach_insights_pinned'), 'coach_insights', ['pinned'], unique=False)


def downgrade() -> None:
    """Drop the session log and insight tables."""
    op.drop_index(op.f('ix_coach_insights_pinned'), table_name='coach_insights')
    op.drop_table('coach_insights')
    op.drop_index(op.f('ix_session_injuries_location'), table_name='session_injuries')
    op.drop_index(op.f('ix_session_injuries_session_id'), table_name='session_injuries')
    op.drop_table('session_injuries')
    op.drop_index(op.f('ix_sessions_venue'), table_name='sessions')
    op.drop_index(op.f('ix_sessions_intensity'), table_name='sessions')
    op.drop_index(op.f('ix_sessions_date'), table_name='sessions')
    op.drop_table('sessions')
