"""create subscription tracker tables

Revision ID: 5c1e0a7d2b91
Revises:
Create Date: 2025-09-14 18:02:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5c1e0a7d2b91'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# SQLModel guarda los Enum por nombre de miembro
billing_cycle = sa.Enum('monthly', 'yearly', name='billingcycle')
category = sa.Enum('entertainment', 'productivity', 'health', 'shopping', 'other', name='subscriptioncategory')
usage_frequency = sa.Enum('never', 'rarely', 'monthly', 'frequently', name='usagefrequency')

def upgrade() -> None:
    """Upgrade schema: users, subscriptions, budget settings and savings history."""
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_user_email', 'user', ['email'], unique=True)

    op.create_table(
        'subscription',
        sa.Column('id', sa.String(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('cost', sa.Float(), nullable=False),
        sa.Column('billing_cycle', billing_cycle, nullable=False),
        sa.Column('next_renewal_date', sa.Date(), nullable=False),
        sa.Column('category', category, nullable=False),
        sa.Column('usage_frequency', usage_frequency, nullable=True),
        sa.Column('last_used_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_subscription_user_id', 'subscription', ['user_id'])
    op.create_index('ix_subscription_next_renewal_date', 'subscription', ['next_renewal_date'])

    op.create_table(
        'user_settings',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False, unique=True),
        sa.Column('monthly_budget', sa.Float(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        'savings_history',
        sa.Column('id', sa.String(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('subscription_name', sa.String(), nullable=False),
        sa.Column('monthly_savings', sa.Float(), nullable=False),
        sa.Column('saved_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_savings_history_user_id', 'savings_history', ['user_id'])
    op.create_index('ix_savings_history_saved_at', 'savings_history', ['saved_at'])

def downgrade() -> None:
    """Downgrade schema: drop all tracker tables."""
    op.drop_table('savings_history')
    op.drop_table('user_settings')
    op.drop_table('subscription')
    op.drop_table('user')
    usage_frequency.drop(op.get_bind(), checkfirst=True)
    category.drop(op.get_bind(), checkfirst=True)
    billing_cycle.drop(op.get_bind(), checkfirst=True)
