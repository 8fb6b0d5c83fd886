"""Create resume and job tables

Revision ID: 0001
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create resumes table
    op.create_table(
        'resumes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create jobs table
    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('job_title', sa.String(length=255), nullable=False),
        sa.Column('job_description', sa.JSON(), nullable=False),
        sa.Column('is_current_job', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('resume_id', sa.Integer(), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['resume_id'], ['resumes.id'], ondelete='CASCADE'),
        sqlite_autoincrement=True,
    )

    # Create indexes
    op.create_index('idx_job_resume_id', 'jobs', ['resume_id'])
    op.create_index('idx_job_title', 'jobs', ['job_title'])


def downgrade() -> None:
    op.drop_index('idx_job_title', table_name='jobs')
    op.drop_index('idx_job_resume_id', table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('resumes')
