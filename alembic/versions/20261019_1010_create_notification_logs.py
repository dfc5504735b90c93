"""create notification_logs table

Revision ID: 20261019_1010_create_notification_logs
Revises: 20261019_1000_create_device_registrations
Create Date: 2026-10-19 10:10:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_1010_create_notification_logs'
down_revision = '20261019_1000_create_device_registrations'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'notification_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('target_type', sa.String(16), nullable=False),
        sa.Column('target_value', sa.Text(), nullable=True),
        sa.Column('content_type', sa.String(32), nullable=True),
        sa.Column('sent_by', sa.String(255), nullable=True),
        sa.Column('success', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_notification_logs_target_type', 'notification_logs', ['target_type'])

def downgrade() -> None:
    op.drop_index('ix_notification_logs_target_type', table_name='notification_logs')
    op.drop_table('notification_logs')
