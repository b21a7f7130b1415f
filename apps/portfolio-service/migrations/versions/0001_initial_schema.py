"""Initial schema: users, admin sessions and the content tables

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-01-10 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False, primary_key=True),
        sa.Column('username', sa.String(50), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'admin_sessions',
        sa.Column('id', sa.Uuid(), nullable=False, primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('token_id', sa.String(64), nullable=False),
        sa.Column('token_hash', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('last_used_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('revoked_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('token_id', name='uq_admin_sessions_token_id'),
    )
    op.create_index('idx_admin_sessions_user', 'admin_sessions', ['user_id'])

    op.create_table(
        'projects',
        sa.Column('id', sa.Uuid(), nullable=False, primary_key=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('github_url', sa.Text(), nullable=True),
        # JSON array of strings
        sa.Column('technologies', sa.Text(), nullable=False),
        sa.Column('featured', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        'skills',
        sa.Column('id', sa.Uuid(), nullable=False, primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('category', sa.String(20), nullable=False),
        sa.Column('proficiency', sa.Integer(), nullable=False),
        sa.Column('icon', sa.String(100), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.CheckConstraint('proficiency BETWEEN 1 AND 100', name='ck_skills_proficiency_range'),
    )

    op.create_table(
        'testimonials',
        sa.Column('id', sa.Uuid(), nullable=False, primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('role', sa.String(100), nullable=True),
        sa.Column('company', sa.String(100), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        sa.Column('is_visible', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        'contact_messages',
        sa.Column('id', sa.Uuid(), nullable=False, primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(320), nullable=False),
        sa.Column('subject', sa.String(200), nullable=True),
        sa.Column('project_type', sa.String(100), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('idx_contact_messages_created', 'contact_messages', ['created_at'])

    op.create_table(
        'about_info',
        sa.Column('id', sa.String(20), nullable=False, primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        sa.Column('resume_url', sa.Text(), nullable=True),
        sa.Column('github_url', sa.Text(), nullable=True),
        sa.Column('linkedin_url', sa.Text(), nullable=True),
        sa.Column('twitter_url', sa.Text(), nullable=True),
        sa.Column('email', sa.String(320), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('location', sa.String(200), nullable=True),
        sa.Column('available_for_work', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('response_time', sa.String(100), nullable=True),
        sa.Column('working_hours', sa.String(100), nullable=True),
        sa.Column('completed_projects', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_clients', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('years_experience', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('technologies_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table('about_info')
    op.drop_index('idx_contact_messages_created', table_name='contact_messages')
    op.drop_table('contact_messages')
    op.drop_table('testimonials')
    op.drop_table('skills')
    op.drop_table('projects')
    op.drop_index('idx_admin_sessions_user', table_name='admin_sessions')
    op.drop_table('admin_sessions')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
