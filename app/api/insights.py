# app/api/insights.py

from dataclasses import asdict
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from app.api.subscriptions import to_read
from app.core.config import UPCOMING_WINDOW_DAYS
from app.core.security import get_current_user
from app.database import get_store
from app.repositories.base import SubscriptionStore
from app.schemas.insights import (
    BudgetAnalysis,
    BudgetStatusRead,
    DashboardStats,
    MonthlySpending,
    RecommendationRead,
    SpendingInsights,
)
from app.services.aggregation import (
    annual_total,
    category_totals,
    local_today,
    month_comparison,
    monthly_total,
    spending_trend,
    upcoming_renewals_count,
)
from app.services.recommendations import budget_status, get_recommendations, potential_savings

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get("/dashboard", response_model=DashboardStats)
def dashboard_stats(
    tz: Optional[str] = Query(None, description="Zona horaria IANA del navegador"),
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    subscriptions = store.list_subscriptions(user_id)
    return DashboardStats(
        subscription_count=len(subscriptions),
        monthly_total=monthly_total(subscriptions),
        annual_total=annual_total(subscriptions),
        upcoming_renewals=upcoming_renewals_count(subscriptions, local_today(tz), UPCOMING_WINDOW_DAYS),
    )


@router.get("/budget", response_model=BudgetAnalysis)
def budget_analysis(
    tz: Optional[str] = Query(None),
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    subscriptions = store.list_subscriptions(user_id)
    settings = store.get_budget_setting(user_id)
    today = local_today(tz)

    recommendations = get_recommendations(subscriptions)

    # Sin presupuesto guardado no hay estado que calcular (evita dividir entre 0)
    budget = None
    if settings and settings.monthly_budget > 0:
        budget = BudgetStatusRead(**asdict(budget_status(subscriptions, settings.monthly_budget)))

    return BudgetAnalysis(
        budget=budget,
        recommendations=[
            RecommendationRead(
                subscription=to_read(rec.subscription, today),
                reason=rec.reason,
                priority=rec.priority,
                savings=rec.savings,
            )
            for rec in recommendations
        ],
        potential_savings=potential_savings(recommendations),
    )


@router.get("/spending", response_model=SpendingInsights)
def spending_insights(
    tz: Optional[str] = Query(None),
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    subscriptions = store.list_subscriptions(user_id)
    today = local_today(tz)
    return SpendingInsights(
        category_totals=category_totals(subscriptions),
        trends=[MonthlySpending(**point) for point in spending_trend(subscriptions, today)],
        comparison=[MonthlySpending(**point) for point in month_comparison(subscriptions, today)],
    )
