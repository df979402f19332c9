# app/repositories/memory.py

from datetime import datetime, timedelta
from typing import Dict, List, Optional
from uuid import UUID

from app.core.errors import NotFoundError
from app.models.common import utcnow
from app.models.savings_entry import SavingsEntry
from app.models.subscription import Subscription
from app.models.user_settings import UserSettings
from app.repositories.base import SubscriptionStore


class InMemorySubscriptionStore(SubscriptionStore):
    """Implementación en memoria, pensada para tests y demos sin base de datos."""

    def __init__(self):
        self.subscriptions: Dict[str, Subscription] = {}
        self.settings: Dict[UUID, UserSettings] = {}
        self.savings: Dict[str, SavingsEntry] = {}
        self._clock = utcnow()

    def _tick(self) -> datetime:
        # saved_at estrictamente creciente para que el orden sea determinista
        self._clock += timedelta(microseconds=1)
        return self._clock

    def _owned(self, user_id: UUID, subscription_id: str) -> Subscription:
        subscription = self.subscriptions.get(subscription_id)
        if not subscription or subscription.user_id != user_id:
            raise NotFoundError("Subscription not found")
        return subscription

    def list_subscriptions(self, user_id: UUID) -> List[Subscription]:
        owned = [s for s in self.subscriptions.values() if s.user_id == user_id]
        return sorted(owned, key=lambda s: s.next_renewal_date)

    def get_subscription(self, user_id: UUID, subscription_id: str) -> Subscription:
        return self._owned(user_id, subscription_id)

    def insert_subscription(self, user_id: UUID, data: dict) -> Subscription:
        subscription = Subscription(**data, user_id=user_id)
        self.subscriptions[subscription.id] = subscription
        return subscription

    def update_subscription(self, user_id: UUID, subscription_id: str, changes: dict) -> Subscription:
        subscription = self._owned(user_id, subscription_id)
        for field, value in changes.items():
            setattr(subscription, field, value)
        return subscription

    def delete_subscription(self, user_id: UUID, subscription_id: str) -> None:
        self._owned(user_id, subscription_id)
        del self.subscriptions[subscription_id]

    def get_budget_setting(self, user_id: UUID) -> Optional[UserSettings]:
        return self.settings.get(user_id)

    def upsert_budget_setting(self, user_id: UUID, amount: float) -> UserSettings:
        settings = self.settings.get(user_id)
        if settings:
            settings.monthly_budget = amount
            settings.updated_at = utcnow()
        else:
            settings = UserSettings(user_id=user_id, monthly_budget=amount)
            self.settings[user_id] = settings
        return settings

    def list_savings_entries(self, user_id: UUID) -> List[SavingsEntry]:
        owned = [e for e in self.savings.values() if e.user_id == user_id]
        return sorted(owned, key=lambda e: e.saved_at, reverse=True)

    def insert_savings_entry(self, user_id: UUID, subscription_name: str, monthly_savings: float) -> SavingsEntry:
        entry = SavingsEntry(
            user_id=user_id,
            subscription_name=subscription_name,
            monthly_savings=monthly_savings,
            saved_at=self._tick(),
        )
        self.savings[entry.id] = entry
        return entry

    def delete_savings_entry(self, user_id: UUID, entry_id: str) -> None:
        entry = self.savings.get(entry_id)
        if not entry or entry.user_id != user_id:
            raise NotFoundError("Savings entry not found")
        del self.savings[entry_id]

    def delete_all_savings_entries(self, user_id: UUID) -> int:
        owned = [entry_id for entry_id, e in self.savings.items() if e.user_id == user_id]
        for entry_id in owned:
            del self.savings[entry_id]
        return len(owned)
