from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from typing import Optional
from uuid import UUID
from datetime import date, datetime

from app.models.common import new_id, utcnow
from app.models.enums import BillingCycle, SubscriptionCategory, UsageFrequency

class Subscription(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    name: str = Field(max_length=100)
    cost: float
    billing_cycle: BillingCycle = Field(default=BillingCycle.monthly)
    next_renewal_date: date = Field(index=True)
    category: SubscriptionCategory = Field(default=SubscriptionCategory.other)
    usage_frequency: Optional[UsageFrequency] = None  # None = sin definir
    last_used_date: Optional[date] = None
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
