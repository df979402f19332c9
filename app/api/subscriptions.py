# app/api/subscriptions.py

import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.constants.subscriptions import available_services
from app.core.security import get_current_user
from app.database import get_store
from app.repositories.base import SubscriptionStore
from app.schemas.savings import SavingsEntryRead
from app.schemas.subscription import (
    QuickAddService,
    SubscriptionCreate,
    SubscriptionList,
    SubscriptionRead,
    SubscriptionUpdate,
)
from app.services.aggregation import days_until_renewal, local_today, monthly_equivalent, renewal_label
from app.services.filter_sort import ALL_CATEGORIES, filter_and_sort
from app.services.savings_ledger import cancel_subscription

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])


def to_read(subscription, today: date) -> SubscriptionRead:
    read = SubscriptionRead.model_validate(subscription)
    read.monthly_cost = monthly_equivalent(subscription)
    read.days_until_renewal = days_until_renewal(subscription, today)
    read.renewal_label = renewal_label(subscription, today)
    return read


@router.get("/", response_model=SubscriptionList)
def list_subscriptions(
    q: str = Query("", description="Búsqueda por nombre, sin distinguir mayúsculas"),
    category: str = Query(ALL_CATEGORIES),
    sort: str = Query("name", description="name | cost-high | cost-low | renewal"),
    tz: Optional[str] = Query(None, description="Zona horaria IANA del navegador, ej. America/Bogota"),
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    today = local_today(tz)
    subscriptions = filter_and_sort(store.list_subscriptions(user_id), q, category, sort)
    items = [to_read(sub, today) for sub in subscriptions]
    return SubscriptionList(items=items, total=len(items))


@router.get("/quick-add", response_model=List[QuickAddService])
def list_quick_add_services(
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    existing = [sub.name for sub in store.list_subscriptions(user_id)]
    return [
        QuickAddService(
            name=service.name,
            cost=service.default_cost,
            category=service.category,
            billing_cycle=service.billing_cycle,
        )
        for service in available_services(existing)
    ]


@router.post("/", response_model=SubscriptionRead, status_code=status.HTTP_201_CREATED)
def create_subscription(
    data: SubscriptionCreate,
    tz: Optional[str] = Query(None),
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    subscription = store.insert_subscription(user_id, data.model_dump())
    logger.info("Subscription %s created for user %s", subscription.id, user_id)
    return to_read(subscription, local_today(tz))


@router.get("/{subscription_id}", response_model=SubscriptionRead)
def get_subscription(
    subscription_id: str,
    tz: Optional[str] = Query(None),
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    return to_read(store.get_subscription(user_id, subscription_id), local_today(tz))


@router.patch("/{subscription_id}", response_model=SubscriptionRead)
def update_subscription(
    subscription_id: str,
    data: SubscriptionUpdate,
    tz: Optional[str] = Query(None),
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    # Última escritura gana: no hay control de versiones
    subscription = store.update_subscription(user_id, subscription_id, data.changes())
    return to_read(subscription, local_today(tz))


@router.delete("/{subscription_id}", response_model=SavingsEntryRead)
def delete_subscription(
    subscription_id: str,
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    return cancel_subscription(store, user_id, subscription_id)
