# app/repositories/sql.py

import logging
from contextlib import contextmanager
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.errors import NotFoundError, PersistenceError
from app.models.common import utcnow
from app.models.savings_entry import SavingsEntry
from app.models.subscription import Subscription
from app.models.user_settings import UserSettings
from app.repositories.base import SubscriptionStore

logger = logging.getLogger(__name__)


class SqlSubscriptionStore(SubscriptionStore):
    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _guard(self, action: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Database error while trying to %s", action)
            raise PersistenceError(f"Couldn't {action}. Try again?") from exc

    def _owned_subscription(self, user_id: UUID, subscription_id: str) -> Subscription:
        subscription = self.session.exec(
            select(Subscription).where(
                Subscription.id == subscription_id,
                Subscription.user_id == user_id,
            )
        ).first()
        if not subscription:
            raise NotFoundError("Subscription not found")
        return subscription

    def list_subscriptions(self, user_id: UUID) -> List[Subscription]:
        with self._guard("load your subscriptions"):
            return list(self.session.exec(
                select(Subscription)
                .where(Subscription.user_id == user_id)
                .order_by(Subscription.next_renewal_date.asc())
            ).all())

    def get_subscription(self, user_id: UUID, subscription_id: str) -> Subscription:
        with self._guard("load that subscription"):
            return self._owned_subscription(user_id, subscription_id)

    def insert_subscription(self, user_id: UUID, data: dict) -> Subscription:
        with self._guard("add that subscription"):
            subscription = Subscription(**data, user_id=user_id)
            self.session.add(subscription)
            self.session.commit()
            self.session.refresh(subscription)
            return subscription

    def update_subscription(self, user_id: UUID, subscription_id: str, changes: dict) -> Subscription:
        with self._guard("update that subscription"):
            subscription = self._owned_subscription(user_id, subscription_id)
            for field, value in changes.items():
                setattr(subscription, field, value)
            self.session.add(subscription)
            self.session.commit()
            self.session.refresh(subscription)
            return subscription

    def delete_subscription(self, user_id: UUID, subscription_id: str) -> None:
        with self._guard("delete that subscription"):
            subscription = self._owned_subscription(user_id, subscription_id)
            self.session.delete(subscription)
            self.session.commit()

    def get_budget_setting(self, user_id: UUID) -> Optional[UserSettings]:
        with self._guard("load your budget"):
            return self.session.exec(
                select(UserSettings).where(UserSettings.user_id == user_id)
            ).first()

    def upsert_budget_setting(self, user_id: UUID, amount: float) -> UserSettings:
        with self._guard("save your budget"):
            settings = self.session.exec(
                select(UserSettings).where(UserSettings.user_id == user_id)
            ).first()
            if settings:
                settings.monthly_budget = amount
                settings.updated_at = utcnow()
            else:
                settings = UserSettings(user_id=user_id, monthly_budget=amount)
            self.session.add(settings)
            self.session.commit()
            self.session.refresh(settings)
            return settings

    def list_savings_entries(self, user_id: UUID) -> List[SavingsEntry]:
        with self._guard("load your savings history"):
            return list(self.session.exec(
                select(SavingsEntry)
                .where(SavingsEntry.user_id == user_id)
                .order_by(SavingsEntry.saved_at.desc())
            ).all())

    def insert_savings_entry(self, user_id: UUID, subscription_name: str, monthly_savings: float) -> SavingsEntry:
        with self._guard("record your savings"):
            entry = SavingsEntry(
                user_id=user_id,
                subscription_name=subscription_name,
                monthly_savings=monthly_savings,
            )
            self.session.add(entry)
            self.session.commit()
            self.session.refresh(entry)
            return entry

    def delete_savings_entry(self, user_id: UUID, entry_id: str) -> None:
        with self._guard("delete that savings entry"):
            entry = self.session.exec(
                select(SavingsEntry).where(
                    SavingsEntry.id == entry_id,
                    SavingsEntry.user_id == user_id,
                )
            ).first()
            if not entry:
                raise NotFoundError("Savings entry not found")
            self.session.delete(entry)
            self.session.commit()

    def delete_all_savings_entries(self, user_id: UUID) -> int:
        with self._guard("clear your savings history"):
            entries = self.session.exec(
                select(SavingsEntry).where(SavingsEntry.user_id == user_id)
            ).all()
            for entry in entries:
                self.session.delete(entry)
            self.session.commit()
            return len(entries)
