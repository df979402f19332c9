import math

from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime
from typing import List, Optional

from app.models.enums import BillingCycle, SubscriptionCategory, UsageFrequency

MAX_NAME_LENGTH = 100

def clean_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Name can't be empty")
    if len(v) > MAX_NAME_LENGTH:
        raise ValueError(f"Name must be {MAX_NAME_LENGTH} characters or fewer")
    return v

def check_cost(v: float) -> float:
    if not math.isfinite(v):
        raise ValueError("Cost must be a valid number")
    if v <= 0:
        raise ValueError("Cost must be positive")
    return v

class SubscriptionCreate(BaseModel):
    name: str
    cost: float
    billing_cycle: BillingCycle = BillingCycle.monthly
    next_renewal_date: date
    category: SubscriptionCategory
    usage_frequency: Optional[UsageFrequency] = None
    last_used_date: Optional[date] = None

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return clean_name(v)

    @field_validator("cost")
    @classmethod
    def cost_positive(cls, v: float) -> float:
        return check_cost(v)

class SubscriptionUpdate(BaseModel):
    name: Optional[str] = None
    cost: Optional[float] = None
    billing_cycle: Optional[BillingCycle] = None
    next_renewal_date: Optional[date] = None
    category: Optional[SubscriptionCategory] = None
    usage_frequency: Optional[UsageFrequency] = None
    last_used_date: Optional[date] = None

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v):
        return clean_name(v) if v is not None else v

    @field_validator("cost")
    @classmethod
    def cost_positive(cls, v):
        return check_cost(v) if v is not None else v

    def changes(self) -> dict:
        # Solo los campos opcionales del modelo pueden volver a None
        nullable = {"usage_frequency", "last_used_date"}
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None or field in nullable
        }

class SubscriptionRead(BaseModel):
    id: str
    name: str
    cost: float
    billing_cycle: BillingCycle
    next_renewal_date: date
    category: SubscriptionCategory
    usage_frequency: Optional[UsageFrequency] = None
    last_used_date: Optional[date] = None
    created_at: datetime
    monthly_cost: float = 0.0
    days_until_renewal: int = 0
    renewal_label: str = ""

    class Config:
        from_attributes = True

class SubscriptionList(BaseModel):
    items: List[SubscriptionRead]
    total: int

class QuickAddService(BaseModel):
    name: str
    cost: float = Field(..., description="Precio de referencia")
    category: SubscriptionCategory
    billing_cycle: BillingCycle
