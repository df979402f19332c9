# app/services/recommendations.py

from collections import Counter
from dataclasses import dataclass
from typing import Any, List, Optional

from app.models.enums import Priority, UsageFrequency
from app.services.aggregation import enum_value, monthly_equivalent, monthly_total

PRIORITY_WEIGHT = {Priority.high: 3, Priority.medium: 2, Priority.low: 1}

EXPENSIVE_THRESHOLD = 15
CONSOLIDATE_MIN_COUNT = 3  # más de 2 en la misma categoría

WARNING_PERCENT = 80
DANGER_PERCENT = 100


@dataclass(frozen=True)
class Recommendation:
    subscription: Any
    reason: str
    priority: Priority
    savings: float


@dataclass(frozen=True)
class BudgetStatus:
    monthly_total: float
    monthly_budget: float
    budget_used_percent: float
    over_budget: bool
    amount_over: float
    level: str


def _recommend(sub, category_counts: Counter) -> Optional[Recommendation]:
    usage = enum_value(sub.usage_frequency) if sub.usage_frequency else None
    monthly_cost = monthly_equivalent(sub)

    if usage in (UsageFrequency.never.value, UsageFrequency.rarely.value):
        label = "Never used" if usage == UsageFrequency.never.value else "Rarely used"
        return Recommendation(sub, f"{label} - easy savings!", Priority.high, monthly_cost)

    if monthly_cost > EXPENSIVE_THRESHOLD and usage in (UsageFrequency.monthly.value, None):
        return Recommendation(
            sub, "Expensive with limited use - consider alternatives", Priority.medium, monthly_cost
        )

    category = enum_value(sub.category)
    if category_counts[category] >= CONSOLIDATE_MIN_COUNT:
        return Recommendation(
            sub, f"Multiple {category} subscriptions - consolidate?", Priority.low, monthly_cost
        )

    return None


def get_recommendations(subs) -> List[Recommendation]:
    """
    Sugerencias de cancelación, como mucho una por suscripción.

    Orden: prioridad desc, luego ahorro desc. sorted() es estable, así que
    los empates conservan el orden de la lista original.
    """
    subs = list(subs)
    category_counts = Counter(enum_value(sub.category) for sub in subs)
    recommendations = [rec for rec in (_recommend(sub, category_counts) for sub in subs) if rec]
    return sorted(
        recommendations,
        key=lambda rec: (PRIORITY_WEIGHT[rec.priority], rec.savings),
        reverse=True,
    )


def potential_savings(recommendations: List[Recommendation]) -> float:
    return sum((rec.savings for rec in recommendations), 0.0)


def budget_status(subs, monthly_budget: float) -> BudgetStatus:
    total = monthly_total(subs)
    if monthly_budget:
        used = total / monthly_budget * 100
    else:
        # Presupuesto en 0: el llamador debe evitarlo; aquí no se lanza excepción
        used = float("inf") if total > 0 else 0.0

    if used >= DANGER_PERCENT:
        level = "danger"
    elif used >= WARNING_PERCENT:
        level = "warning"
    else:
        level = "ok"

    return BudgetStatus(
        monthly_total=total,
        monthly_budget=monthly_budget,
        budget_used_percent=used,
        over_budget=total > monthly_budget,
        amount_over=total - monthly_budget,
        level=level,
    )
