# app/services/savings_ledger.py

import logging
from typing import Iterable
from uuid import UUID

from app.core.errors import PersistenceError
from app.models.savings_entry import SavingsEntry
from app.repositories.base import SubscriptionStore
from app.services.aggregation import monthly_equivalent

logger = logging.getLogger(__name__)


def record_saving(store: SubscriptionStore, user_id: UUID, subscription_name: str, monthly_savings: float) -> SavingsEntry:
    # Sin deduplicar: cada cancelación agrega una fila
    return store.insert_savings_entry(user_id, subscription_name, monthly_savings)


def total_monthly_savings(entries: Iterable[SavingsEntry]) -> float:
    return sum((float(entry.monthly_savings) for entry in entries), 0.0)


def total_yearly_savings(entries: Iterable[SavingsEntry]) -> float:
    # Aquí sí se usa el atajo x12 (a diferencia de annual_total)
    return total_monthly_savings(entries) * 12


def cancel_subscription(store: SubscriptionStore, user_id: UUID, subscription_id: str) -> SavingsEntry:
    """
    Elimina una suscripción y registra el ahorro mensual que libera.

    El registro en el historial va primero: si falla, la suscripción no se
    toca. Si falla el borrado, se revierte el registro. En ambos casos el
    PersistenceError se propaga sin reintentos.
    """
    subscription = store.get_subscription(user_id, subscription_id)
    entry = record_saving(store, user_id, subscription.name, monthly_equivalent(subscription))
    entry_id = entry.id
    try:
        store.delete_subscription(user_id, subscription_id)
    except PersistenceError:
        logger.error("Delete of subscription %s failed, reverting savings entry %s", subscription_id, entry_id)
        store.delete_savings_entry(user_id, entry_id)
        raise
    logger.info(
        "Subscription %s cancelled for user %s, saving %.2f/month",
        subscription_id, user_id, entry.monthly_savings,
    )
    return entry
