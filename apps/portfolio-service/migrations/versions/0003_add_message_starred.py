"""Add starred flag to contact messages

Revision ID: 0003_add_message_starred
Revises: 0002_add_project_live_url
Create Date: 2025-02-21 11:05:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0003_add_message_starred'
down_revision: Union[str, None] = '0002_add_project_live_url'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Existing messages start unstarred
    op.add_column(
        'contact_messages',
        sa.Column('starred', sa.Boolean(), nullable=False, server_default=sa.text('false')),
    )


def downgrade() -> None:
    with op.batch_alter_table('contact_messages') as batch:
        batch.drop_column('starred')
