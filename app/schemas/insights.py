# app/schemas/insights.py

from pydantic import BaseModel
from typing import Dict, List, Optional

from app.models.enums import Priority
from app.schemas.subscription import SubscriptionRead

class DashboardStats(BaseModel):
    subscription_count: int
    monthly_total: float
    annual_total: float
    upcoming_renewals: int

class RecommendationRead(BaseModel):
    subscription: SubscriptionRead
    reason: str
    priority: Priority
    savings: float

class BudgetStatusRead(BaseModel):
    monthly_total: float
    monthly_budget: float
    budget_used_percent: float
    over_budget: bool
    amount_over: float
    level: str

class BudgetAnalysis(BaseModel):
    budget: Optional[BudgetStatusRead] = None
    recommendations: List[RecommendationRead]
    potential_savings: float

class MonthlySpending(BaseModel):
    month: str
    spending: float

class SpendingInsights(BaseModel):
    category_totals: Dict[str, float]
    trends: List[MonthlySpending]
    comparison: List[MonthlySpending]

class CurrencyRead(BaseModel):
    symbol: str
    code: str
    locale: str
    sample: str
