"""Add instagram_url to about_info

Revision ID: 0004_add_about_instagram_url
Revises: 0003_add_message_starred
Create Date: 2025-03-14 16:40:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0004_add_about_instagram_url'
down_revision: Union[str, None] = '0003_add_message_starred'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column('about_info', sa.Column('instagram_url', sa.Text(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table('about_info') as batch:
        batch.drop_column('instagram_url')
