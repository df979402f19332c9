import unicodedata
from typing import List

from app.services.aggregation import as_date, enum_value, monthly_equivalent

ALL_CATEGORIES = "all"
SORT_KEYS = ("name", "cost-high", "cost-low", "renewal")


def collation_key(text: str):
    """Orden alfabético tolerante a mayúsculas y acentos ("Éter" junto a "eter")."""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text.casefold(), text


def filter_subscriptions(subs, query: str = "", category: str = ALL_CATEGORIES) -> List:
    needle = (query or "").casefold()
    category = category or ALL_CATEGORIES
    return [
        sub for sub in subs
        if needle in sub.name.casefold()
        and (category == ALL_CATEGORIES or enum_value(sub.category) == category)
    ]


def sort_subscriptions(subs, sort_by: str) -> List:
    if sort_by == "name":
        return sorted(subs, key=lambda sub: collation_key(sub.name))
    if sort_by == "cost-high":
        return sorted(subs, key=monthly_equivalent, reverse=True)
    if sort_by == "cost-low":
        return sorted(subs, key=monthly_equivalent)
    if sort_by == "renewal":
        return sorted(subs, key=lambda sub: as_date(sub.next_renewal_date))
    # Clave desconocida: se conserva el orden
    return list(subs)


def filter_and_sort(subs, query: str = "", category: str = ALL_CATEGORIES, sort_by: str = "name") -> List:
    return sort_subscriptions(filter_subscriptions(subs, query, category), sort_by)
