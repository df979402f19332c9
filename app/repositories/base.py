# app/repositories/base.py

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from app.models.savings_entry import SavingsEntry
from app.models.subscription import Subscription
from app.models.user_settings import UserSettings


class SubscriptionStore(ABC):
    """
    Contrato de persistencia. Cualquier backend que lo cumpla sirve
    (tabla relacional, memoria en tests, etc.).

    Todas las operaciones están acotadas al usuario dueño de los datos.
    Fallos del backend -> PersistenceError; objetivo inexistente -> NotFoundError.
    """

    # Suscripciones
    @abstractmethod
    def list_subscriptions(self, user_id: UUID) -> List[Subscription]:
        """Ordenadas por next_renewal_date ascendente."""

    @abstractmethod
    def get_subscription(self, user_id: UUID, subscription_id: str) -> Subscription: ...

    @abstractmethod
    def insert_subscription(self, user_id: UUID, data: dict) -> Subscription: ...

    @abstractmethod
    def update_subscription(self, user_id: UUID, subscription_id: str, changes: dict) -> Subscription: ...

    @abstractmethod
    def delete_subscription(self, user_id: UUID, subscription_id: str) -> None: ...

    # Presupuesto
    @abstractmethod
    def get_budget_setting(self, user_id: UUID) -> Optional[UserSettings]: ...

    @abstractmethod
    def upsert_budget_setting(self, user_id: UUID, amount: float) -> UserSettings: ...

    # Historial de ahorros
    @abstractmethod
    def list_savings_entries(self, user_id: UUID) -> List[SavingsEntry]:
        """Ordenadas por saved_at descendente."""

    @abstractmethod
    def insert_savings_entry(self, user_id: UUID, subscription_name: str, monthly_savings: float) -> SavingsEntry: ...

    @abstractmethod
    def delete_savings_entry(self, user_id: UUID, entry_id: str) -> None: ...

    @abstractmethod
    def delete_all_savings_entries(self, user_id: UUID) -> int: ...
