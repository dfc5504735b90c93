"""create device_registrations table

Revision ID: 20261019_1000_create_device_registrations
Revises:
Create Date: 2026-10-19 10:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_1000_create_device_registrations'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'device_registrations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('token', sa.Text(), nullable=False),
        sa.Column('locale', sa.String(8), nullable=False, server_default='en'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('user_id', 'token', name='uq_device_registrations_user_token'),
    )
    op.create_index('ix_device_registrations_id', 'device_registrations', ['id'])
    op.create_index('ix_device_registrations_user_id', 'device_registrations', ['user_id'])

def downgrade() -> None:
    op.drop_index('ix_device_registrations_user_id', table_name='device_registrations')
    op.drop_index('ix_device_registrations_id', table_name='device_registrations')
    op.drop_table('device_registrations')
