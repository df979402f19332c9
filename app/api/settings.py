# app/api/settings.py

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends

from app.core.security import get_current_user
from app.database import get_store
from app.repositories.base import SubscriptionStore
from app.schemas.settings import BudgetRead, BudgetUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/budget", response_model=Optional[BudgetRead])
def get_budget(
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    # null si el usuario nunca guardó un presupuesto
    return store.get_budget_setting(user_id)


@router.put("/budget", response_model=BudgetRead)
def save_budget(
    data: BudgetUpdate,
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    settings = store.upsert_budget_setting(user_id, data.monthly_budget)
    logger.info("Monthly budget for user %s set to %.2f", user_id, settings.monthly_budget)
    return settings
