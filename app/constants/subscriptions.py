# app/constants/subscriptions.py

from typing import Iterable, List, NamedTuple

from app.models.enums import BillingCycle, SubscriptionCategory

class PopularService(NamedTuple):
    name: str
    default_cost: float
    category: SubscriptionCategory
    billing_cycle: BillingCycle

POPULAR_SERVICES: List[PopularService] = [
    PopularService("Netflix", 15.49, SubscriptionCategory.entertainment, BillingCycle.monthly),
    PopularService("Spotify", 10.99, SubscriptionCategory.entertainment, BillingCycle.monthly),
    PopularService("YouTube Premium", 13.99, SubscriptionCategory.entertainment, BillingCycle.monthly),
    PopularService("Disney+", 13.99, SubscriptionCategory.entertainment, BillingCycle.monthly),
    PopularService("Apple Music", 10.99, SubscriptionCategory.entertainment, BillingCycle.monthly),
    PopularService("HBO Max", 15.99, SubscriptionCategory.entertainment, BillingCycle.monthly),
    PopularService("Amazon Prime", 139.00, SubscriptionCategory.shopping, BillingCycle.yearly),
    PopularService("Adobe Creative Cloud", 54.99, SubscriptionCategory.productivity, BillingCycle.monthly),
    PopularService("Microsoft 365", 99.99, SubscriptionCategory.productivity, BillingCycle.yearly),
    PopularService("Notion", 10.00, SubscriptionCategory.productivity, BillingCycle.monthly),
    PopularService("Slack", 8.75, SubscriptionCategory.productivity, BillingCycle.monthly),
    PopularService("Gym Membership", 50.00, SubscriptionCategory.health, BillingCycle.monthly),
    PopularService("Headspace", 69.99, SubscriptionCategory.health, BillingCycle.yearly),
    PopularService("Peloton", 44.00, SubscriptionCategory.health, BillingCycle.monthly),
    PopularService("ChatGPT Plus", 20.00, SubscriptionCategory.productivity, BillingCycle.monthly),
    PopularService("Canva Pro", 12.99, SubscriptionCategory.productivity, BillingCycle.monthly),
]

QUICK_ADD_LIMIT = 12

def available_services(existing_names: Iterable[str], limit: int = QUICK_ADD_LIMIT) -> List[PopularService]:
    """Servicios populares que el usuario aún no tiene (comparación sin mayúsculas)."""
    taken = {name.lower() for name in existing_names}
    return [s for s in POPULAR_SERVICES if s.name.lower() not in taken][:limit]
