"""Create redirects table

Revision ID: 001_redirects
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision: str = '001_redirects'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the key-value table backing the redirect store:
    - key: short path (primary key)
    - value: target URL
    """
    bind = op.get_bind()
    existing_tables = inspect(bind).get_table_names()

    if 'redirects' not in existing_tables:
        op.create_table(
            'redirects',
            sa.Column('key', sa.String(length=512), nullable=False),
            sa.Column('value', sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint('key')
        )


def downgrade() -> None:
    op.drop_table('redirects')
