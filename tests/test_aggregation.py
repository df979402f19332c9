from datetime import date, datetime

import pytest

from app.models.enums import BillingCycle, SubscriptionCategory
from app.services.aggregation import (
    annual_total,
    category_totals,
    days_until_renewal,
    month_comparison,
    monthly_equivalent,
    monthly_total,
    renewal_label,
    spending_trend,
    upcoming_renewals_count,
)


class TestMonthlyEquivalent:
    def test_monthly_cost_is_unchanged(self, make_sub):
        assert monthly_equivalent(make_sub(cost=12.5)) == 12.5

    def test_yearly_cost_is_divided_by_twelve(self, make_sub):
        sub = make_sub(cost=100.0, billing_cycle=BillingCycle.yearly)
        assert monthly_equivalent(sub) == pytest.approx(100.0 / 12)

    def test_plain_string_cycle_is_accepted(self, make_sub):
        sub = make_sub(cost=120.0)
        sub.billing_cycle = "yearly"
        assert monthly_equivalent(sub) == 10.0


class TestTotals:
    def test_empty_list(self):
        assert monthly_total([]) == 0
        assert annual_total([]) == 0

    def test_mixed_cycles(self, make_sub):
        subs = [
            make_sub(cost=12.0),
            make_sub(cost=120.0, billing_cycle=BillingCycle.yearly),
        ]
        assert monthly_total(subs) == 22.0
        assert annual_total(subs) == 264.0

    def test_monthly_total_ignores_order(self, make_sub):
        subs = [
            make_sub(cost=9.99),
            make_sub(cost=139.0, billing_cycle=BillingCycle.yearly),
            make_sub(cost=54.99),
        ]
        assert monthly_total(subs) == pytest.approx(monthly_total(list(reversed(subs))))

    def test_annual_total_uses_direct_formula(self, make_sub):
        subs = [make_sub(cost=0.1), make_sub(cost=0.2), make_sub(cost=99.99, billing_cycle=BillingCycle.yearly)]
        expected = 0.1 * 12 + 0.2 * 12 + 99.99
        assert annual_total(subs) == expected


class TestUpcomingRenewals:
    def test_window_is_inclusive(self, make_sub):
        subs = [
            make_sub(next_renewal_date=date(2024, 6, 1)),
            make_sub(next_renewal_date=date(2024, 6, 8)),
            make_sub(next_renewal_date=date(2024, 6, 9)),
            make_sub(next_renewal_date=date(2024, 5, 31)),
        ]
        assert upcoming_renewals_count(subs, date(2024, 6, 1)) == 2

    def test_time_of_day_is_ignored(self, make_sub):
        subs = [make_sub(next_renewal_date=date(2024, 6, 1))]
        assert upcoming_renewals_count(subs, datetime(2024, 6, 1, 23, 59)) == 1

    def test_custom_window(self, make_sub):
        subs = [make_sub(next_renewal_date=date(2024, 6, 20))]
        assert upcoming_renewals_count(subs, date(2024, 6, 1), window_days=30) == 1
        assert upcoming_renewals_count(subs, date(2024, 6, 1)) == 0


class TestCategoryTotals:
    def test_groups_monthly_equivalents(self, make_sub):
        subs = [
            make_sub(cost=10.0, category=SubscriptionCategory.entertainment),
            make_sub(cost=5.5, category=SubscriptionCategory.entertainment),
            make_sub(cost=120.0, billing_cycle=BillingCycle.yearly, category=SubscriptionCategory.health),
        ]
        assert category_totals(subs) == {"Entertainment": 15.5, "Health": 10.0}

    def test_each_category_is_rounded_separately(self, make_sub):
        subs = [
            make_sub(cost=10.0, billing_cycle=BillingCycle.yearly, category=SubscriptionCategory.health),
            make_sub(cost=10.0, billing_cycle=BillingCycle.yearly, category=SubscriptionCategory.shopping),
            make_sub(cost=10.0, billing_cycle=BillingCycle.yearly, category=SubscriptionCategory.other),
        ]
        totals = category_totals(subs)
        assert totals == {"Health": 0.83, "Shopping": 0.83, "Other": 0.83}
        # 2.49 frente al total real de 2.50
        assert round(sum(totals.values()), 2) != round(monthly_total(subs), 2)


class TestRenewalLabels:
    def test_days_until_renewal(self, make_sub):
        sub = make_sub(next_renewal_date=date(2024, 6, 10))
        assert days_until_renewal(sub, date(2024, 6, 1)) == 9
        assert days_until_renewal(sub, date(2024, 6, 12)) == -2

    @pytest.mark.parametrize("renewal, expected", [
        (date(2024, 6, 1), "Renews today!"),
        (date(2024, 6, 2), "Renews in 1 day"),
        (date(2024, 6, 8), "Renews in 7 days"),
        (date(2024, 6, 9), "Next: Jun 9, 2024"),
        (date(2024, 5, 30), "Next: May 30, 2024"),
    ])
    def test_labels(self, make_sub, renewal, expected):
        assert renewal_label(make_sub(next_renewal_date=renewal), date(2024, 6, 1)) == expected


class TestSpendingSeries:
    def test_trend_repeats_current_total(self, make_sub):
        subs = [make_sub(cost=10.0), make_sub(cost=120.0, billing_cycle=BillingCycle.yearly)]
        trend = spending_trend(subs, date(2024, 3, 15))
        assert [point["month"] for point in trend] == ["Oct", "Nov", "Dec", "Jan", "Feb", "Mar"]
        assert {point["spending"] for point in trend} == {20.0}

    def test_comparison_has_three_months(self, make_sub):
        comparison = month_comparison([make_sub(cost=3.333)], date(2024, 1, 31))
        assert comparison == [
            {"month": "Nov", "spending": 3.33},
            {"month": "Dec", "spending": 3.33},
            {"month": "Jan", "spending": 3.33},
        ]
