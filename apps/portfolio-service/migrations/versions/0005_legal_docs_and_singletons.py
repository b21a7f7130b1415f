"""Add legal_docs and seed the singleton rows

Creates the legal document table and inserts the fixed-key rows the API
expects: about_info 'main' plus one row per legal document type. Rows that
already exist are left untouched.

Revision ID: 0005_legal_docs_and_singletons
Revises: 0004_add_about_instagram_url
Create Date: 2025-04-02 10:15:00

"""
from datetime import datetime, timezone
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0005_legal_docs_and_singletons'
down_revision: Union[str, None] = '0004_add_about_instagram_url'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


LEGAL_DEFAULTS = {
    'privacy_policy': 'Your default privacy policy content goes here.',
    'terms_of_service': 'Your default terms of service content goes here.',
}


def upgrade() -> None:
    op.create_table(
        'legal_docs',
        sa.Column('id', sa.String(40), nullable=False, primary_key=True),
        sa.Column('type', sa.String(40), nullable=False),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('type', name='uq_legal_docs_type'),
    )

    now = datetime.now(timezone.utc)
    legal_docs = sa.table(
        'legal_docs',
        sa.column('id', sa.String),
        sa.column('type', sa.String),
        sa.column('content', sa.Text),
        sa.column('updated_at', sa.DateTime(timezone=True)),
    )
    op.bulk_insert(
        legal_docs,
        [
            {'id': doc_type, 'type': doc_type, 'content': content, 'updated_at': now}
            for doc_type, content in LEGAL_DEFAULTS.items()
        ],
    )

    conn = op.get_bind()
    has_about = conn.execute(sa.text("SELECT 1 FROM about_info WHERE id = 'main'")).first()
    if not has_about:
        about_info = sa.table(
            'about_info',
            sa.column('id', sa.String),
            sa.column('name', sa.String),
            sa.column('title', sa.String),
            sa.column('bio', sa.Text),
            sa.column('response_time', sa.String),
            sa.column('working_hours', sa.String),
            sa.column('updated_at', sa.DateTime(timezone=True)),
        )
        op.bulk_insert(
            about_info,
            [{
                'id': 'main',
                'name': 'Your Name',
                'title': 'Full Stack Developer',
                'bio': 'Tell visitors about yourself.',
                'response_time': '24 hours',
                'working_hours': '9 AM - 6 PM EST',
                'updated_at': now,
            }],
        )


def downgrade() -> None:
    op.drop_table('legal_docs')
    op.execute("DELETE FROM about_info WHERE id = 'main'")
