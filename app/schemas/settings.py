# app/schemas/settings.py

import math
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from app.core.config import MAX_MONTHLY_BUDGET

class BudgetUpdate(BaseModel):
    monthly_budget: float = Field(..., description="Presupuesto mensual")

    @field_validator("monthly_budget")
    @classmethod
    def budget_in_range(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Please enter a valid number")
        if v <= 0:
            raise ValueError("Budget must be greater than 0")
        if v > MAX_MONTHLY_BUDGET:
            raise ValueError("Budget must be less than $1,000,000")
        return v

class BudgetRead(BaseModel):
    monthly_budget: float
    updated_at: datetime

    class Config:
        from_attributes = True
