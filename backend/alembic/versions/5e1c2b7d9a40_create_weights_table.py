"""create weights table

Revision ID: 5e1c2b7d9a40
Revises:
Create Date: 2025-04-21 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5e1c2b7d9a40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()
    if 'weights' not in tables:
        op.create_table(
            'weights',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('weight', sa.Float(), nullable=False),
        )
        op.create_index('ix_weights_id', 'weights', ['id'])
        op.create_index('ix_weights_date', 'weights', ['date'])


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS weights')
