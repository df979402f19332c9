# app/api/savings.py

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.core.security import get_current_user
from app.database import get_store
from app.repositories.base import SubscriptionStore
from app.schemas.savings import SavingsCleared, SavingsEntryRead, SavingsHistory
from app.services.savings_ledger import total_monthly_savings, total_yearly_savings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/savings", tags=["savings"])


@router.get("/", response_model=SavingsHistory)
def list_savings(
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    entries = store.list_savings_entries(user_id)
    return SavingsHistory(
        entries=[SavingsEntryRead.model_validate(entry) for entry in entries],
        total_monthly_savings=total_monthly_savings(entries),
        total_yearly_savings=total_yearly_savings(entries),
    )


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_savings_entry(
    entry_id: str,
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    store.delete_savings_entry(user_id, entry_id)


@router.delete("/", response_model=SavingsCleared)
def clear_savings(
    user_id: UUID = Depends(get_current_user),
    store: SubscriptionStore = Depends(get_store),
):
    deleted = store.delete_all_savings_entries(user_id)
    logger.info("Cleared %d savings entries for user %s", deleted, user_id)
    return SavingsCleared(deleted=deleted)
