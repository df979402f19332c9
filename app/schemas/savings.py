# app/schemas/savings.py

from datetime import datetime
from pydantic import BaseModel
from typing import List

class SavingsEntryRead(BaseModel):
    id: str
    subscription_name: str
    monthly_savings: float
    saved_at: datetime

    class Config:
        from_attributes = True

class SavingsHistory(BaseModel):
    entries: List[SavingsEntryRead]
    total_monthly_savings: float
    total_yearly_savings: float

class SavingsCleared(BaseModel):
    deleted: int
