"""
Cálculos agregados sobre la lista de suscripciones de un usuario.

Todas las funciones son puras: reciben cualquier objeto con los atributos
``cost``, ``billing_cycle``, ``next_renewal_date`` y ``category`` (modelos
SQLModel o esquemas Pydantic) y nunca modifican la lista de entrada.
"""

from collections import defaultdict
from datetime import date, datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.errors import ValidationError
from app.models.enums import BillingCycle

DEFAULT_WINDOW_DAYS = 7


def enum_value(value):
    return getattr(value, "value", value)


def as_date(value) -> date:
    # Se compara por día calendario; la hora se ignora
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    return value


def is_yearly(sub) -> bool:
    return enum_value(sub.billing_cycle) == BillingCycle.yearly.value


def monthly_equivalent(sub) -> float:
    """Costo normalizado a un mes. Sin redondeo: se redondea al mostrar."""
    return sub.cost / 12 if is_yearly(sub) else sub.cost


def monthly_total(subs: Iterable) -> float:
    return sum((monthly_equivalent(sub) for sub in subs), 0.0)


def annual_total(subs: Iterable) -> float:
    # Fórmula directa por suscripción, no monthly_total * 12
    return sum((sub.cost if is_yearly(sub) else sub.cost * 12 for sub in subs), 0.0)


def upcoming_renewals_count(subs: Iterable, reference_date, window_days: int = DEFAULT_WINDOW_DAYS) -> int:
    start = as_date(reference_date)
    end = start + timedelta(days=window_days)
    return sum(1 for sub in subs if start <= as_date(sub.next_renewal_date) <= end)


def category_totals(subs: Iterable) -> Dict[str, float]:
    """
    Total mensual por categoría, en orden de primera aparición.

    Cada categoría se redondea a 2 decimales por separado, así que la suma
    de las partes puede diferir en centavos de monthly_total.
    """
    totals: Dict[str, float] = defaultdict(float)
    for sub in subs:
        totals[enum_value(sub.category)] += monthly_equivalent(sub)
    return {name: round(value, 2) for name, value in totals.items()}


def days_until_renewal(sub, reference_date) -> int:
    return (as_date(sub.next_renewal_date) - as_date(reference_date)).days


def renewal_label(sub, reference_date, window_days: int = DEFAULT_WINDOW_DAYS) -> str:
    days = days_until_renewal(sub, reference_date)
    if 0 <= days <= window_days:
        if days == 0:
            return "Renews today!"
        return f"Renews in {days} {'day' if days == 1 else 'days'}"
    renewal = as_date(sub.next_renewal_date)
    return f"Next: {renewal.strftime('%b')} {renewal.day}, {renewal.year}"


def _shift_month(d: date, months: int) -> date:
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def _flat_series(subs: Iterable, reference_date, months: int) -> List[dict]:
    # No hay historial real: cada mes repite el total mensual actual
    ref = as_date(reference_date)
    spending = round(monthly_total(subs), 2)
    return [
        {"month": _shift_month(ref, offset).strftime("%b"), "spending": spending}
        for offset in range(-(months - 1), 1)
    ]


def spending_trend(subs: Iterable, reference_date, months: int = 6) -> List[dict]:
    return _flat_series(list(subs), reference_date, months)


def month_comparison(subs: Iterable, reference_date) -> List[dict]:
    return _flat_series(list(subs), reference_date, 3)


def local_today(tz: Optional[str] = None) -> date:
    """Fecha de hoy en la zona horaria IANA del navegador (UTC por defecto)."""
    try:
        zone = ZoneInfo(tz or "UTC")
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError(f"Unknown time zone: {tz}") from exc
    return datetime.now(timezone.utc).astimezone(zone).date()
