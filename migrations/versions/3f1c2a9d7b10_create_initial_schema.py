"""create initial schema

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 09:12:41.208113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'participants',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('archived', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'idx_participants_archived_created',
        'participants',
        ['archived', 'created_at'],
    )

    op.create_table(
        'rounds',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    # One row per (round, participant): the unique constraint is what keeps
    # concurrent pickers from choosing the same host twice in a round
    op.create_table(
        'selections',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('round_id', sa.Uuid(), nullable=False),
        sa.Column('participant_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['round_id'], ['rounds.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['participant_id'], ['participants.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'round_id', 'participant_id', name='uq_selections_round_participant'
        ),
    )
    op.create_index('idx_selections_participant', 'selections', ['participant_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_selections_participant', table_name='selections')
    op.drop_table('selections')
    op.drop_table('rounds')
    op.drop_index('idx_participants_archived_created', table_name='participants')
    op.drop_table('participants')
