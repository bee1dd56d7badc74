"""create companies, jobs and users

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'companies',
        sa.Column('handle', sa.String(length=100), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('num_employees', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.CheckConstraint('num_employees >= 0', name='companies_num_employees_check'),
        sa.PrimaryKeyConstraint('handle', name='companies_pkey'),
        sa.UniqueConstraint('name', name='companies_name_key'),
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('salary', sa.Float(), nullable=True),
        sa.Column('equity', sa.Float(), nullable=True),
        sa.Column('date_posted', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('company_handle', sa.String(length=100), nullable=False),
        sa.CheckConstraint('salary >= 0', name='jobs_salary_check'),
        sa.CheckConstraint('equity >= 0 AND equity <= 1', name='jobs_equity_check'),
        # Deleting a company removes its jobs in the same statement
        sa.ForeignKeyConstraint(
            ['company_handle'], ['companies.handle'],
            name='jobs_company_handle_fkey',
            ondelete='CASCADE',
            onupdate='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='jobs_pkey'),
    )
    op.create_index(op.f('ix_jobs_title'), 'jobs', ['title'])
    op.create_index(op.f('ix_jobs_company_handle'), 'jobs', ['company_handle'])

    op.create_table(
        'users',
        sa.Column('username', sa.String(length=150), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=150), nullable=False),
        sa.Column('last_name', sa.String(length=150), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('photo_url', sa.Text(), nullable=True),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.PrimaryKeyConstraint('username', name='users_pkey'),
        sa.UniqueConstraint('email', name='users_email_key'),
    )


def downgrade() -> None:
    op.drop_table('users')
    op.drop_index(op.f('ix_jobs_company_handle'), table_name='jobs')
    op.drop_index(op.f('ix_jobs_title'), table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('companies')
