from datetime import date

import pytest

from app.core.errors import NotFoundError, PersistenceError
from app.models.enums import BillingCycle, SubscriptionCategory
from app.repositories.memory import InMemorySubscriptionStore
from app.services.savings_ledger import (
    cancel_subscription,
    record_saving,
    total_monthly_savings,
    total_yearly_savings,
)


def add_sub(store, user_id, **overrides):
    data = {
        "name": "Netflix",
        "cost": 12.0,
        "billing_cycle": BillingCycle.monthly,
        "next_renewal_date": date(2024, 6, 15),
        "category": SubscriptionCategory.entertainment,
    }
    data.update(overrides)
    return store.insert_subscription(user_id, data)


class FailingLedgerStore(InMemorySubscriptionStore):
    """Store whose savings writes always fail."""

    def insert_savings_entry(self, user_id, subscription_name, monthly_savings):
        raise PersistenceError("Couldn't record your savings. Try again?")


def test_cancel_records_monthly_equivalent(memory_store, user_id):
    sub = add_sub(memory_store, user_id, cost=12.0)

    entry = cancel_subscription(memory_store, user_id, sub.id)

    assert entry.subscription_name == "Netflix"
    assert entry.monthly_savings == 12.0
    assert memory_store.list_subscriptions(user_id) == []
    assert total_monthly_savings(memory_store.list_savings_entries(user_id)) == 12.0


def test_cancel_yearly_subscription(memory_store, user_id):
    sub = add_sub(memory_store, user_id, name="Prime", cost=120.0, billing_cycle=BillingCycle.yearly)
    entry = cancel_subscription(memory_store, user_id, sub.id)
    assert entry.monthly_savings == 10.0


class FailingDeleteStore(InMemorySubscriptionStore):
    """Store whose subscription deletes always fail."""

    def delete_subscription(self, user_id, subscription_id):
        raise PersistenceError("Couldn't delete that subscription. Try again?")


def test_failed_delete_reverts_savings_entry(user_id):
    store = FailingDeleteStore()
    sub = add_sub(store, user_id)

    with pytest.raises(PersistenceError):
        cancel_subscription(store, user_id, sub.id)

    assert store.list_savings_entries(user_id) == []
    assert [s.id for s in store.list_subscriptions(user_id)] == [sub.id]


def test_ledger_failure_keeps_subscription(user_id):
    store = FailingLedgerStore()
    sub = add_sub(store, user_id)

    with pytest.raises(PersistenceError):
        cancel_subscription(store, user_id, sub.id)

    assert [s.id for s in store.list_subscriptions(user_id)] == [sub.id]


def test_cancel_unknown_subscription(memory_store, user_id):
    with pytest.raises(NotFoundError):
        cancel_subscription(memory_store, user_id, "missing")
    assert memory_store.list_savings_entries(user_id) == []


def test_cannot_cancel_someone_elses_subscription(memory_store, user_id):
    from uuid import uuid4

    sub = add_sub(memory_store, uuid4())
    with pytest.raises(NotFoundError):
        cancel_subscription(memory_store, user_id, sub.id)


def test_record_saving_does_not_deduplicate(memory_store, user_id):
    record_saving(memory_store, user_id, "Spotify", 10.99)
    record_saving(memory_store, user_id, "Spotify", 10.99)

    entries = memory_store.list_savings_entries(user_id)
    assert len(entries) == 2
    assert total_monthly_savings(entries) == pytest.approx(21.98)


def test_yearly_savings_uses_times_twelve(memory_store, user_id):
    record_saving(memory_store, user_id, "Gym", 50.0)
    record_saving(memory_store, user_id, "Headspace", 69.99 / 12)

    entries = memory_store.list_savings_entries(user_id)
    assert total_yearly_savings(entries) == total_monthly_savings(entries) * 12


def test_entries_are_newest_first(memory_store, user_id):
    record_saving(memory_store, user_id, "old", 1.0)
    record_saving(memory_store, user_id, "new", 2.0)
    assert [e.subscription_name for e in memory_store.list_savings_entries(user_id)] == ["new", "old"]


def test_empty_ledger_totals():
    assert total_monthly_savings([]) == 0
    assert total_yearly_savings([]) == 0
