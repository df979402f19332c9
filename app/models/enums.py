from enum import Enum

class BillingCycle(str, Enum):
    monthly = "monthly"
    yearly = "yearly"

class SubscriptionCategory(str, Enum):
    entertainment = "Entertainment"
    productivity = "Productivity"
    health = "Health"
    shopping = "Shopping"
    other = "Other"

class UsageFrequency(str, Enum):
    never = "never"
    rarely = "rarely"
    monthly = "monthly"
    frequently = "frequently"

class Priority(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"
