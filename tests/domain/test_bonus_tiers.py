"""
Bonus tier table tests.

Tiers are evaluated top-down; a score exactly on a threshold earns the
higher tier, and scores below every threshold earn nothing.
"""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hr_kernel.domain.bonus import (
    DEFAULT_BONUS_TIERS,
    BonusTier,
    calculate_bonus,
    select_tier,
    validate_tiers,
)

SALARY = Decimal("1000")


class TestDefaultTierTable:
    """The default 15% / 10% / 5% table."""

    @pytest.mark.parametrize(
        "score, expected",
        [
            ("9.5", "150.00"),
            ("7.0", "100.00"),
            ("5.0", "50.00"),
            ("4.9", "0.00"),
        ],
    )
    def test_reference_values(self, score, expected):
        assert calculate_bonus(SALARY, Decimal(score)) == Decimal(expected)

    @pytest.mark.parametrize(
        "score, rate",
        [("9", "0.15"), ("7", "0.10"), ("5", "0.05")],
    )
    def test_boundary_takes_higher_tier(self, score, rate):
        assert select_tier(Decimal(score)).rate == Decimal(rate)

    @pytest.mark.parametrize(
        "score, rate",
        [("8.99", "0.10"), ("6.99", "0.05")],
    )
    def test_just_below_boundary_takes_lower_tier(self, score, rate):
        assert select_tier(Decimal(score)).rate == Decimal(rate)

    def test_below_lowest_tier_has_no_tier(self):
        assert select_tier(Decimal("4.99")) is None
        assert calculate_bonus(SALARY, Decimal("0")) == Decimal("0.00")

    def test_perfect_score(self):
        assert calculate_bonus(SALARY, Decimal("10")) == Decimal("150.00")

    def test_result_is_rounded_half_up_to_cents(self):
        # 333.33 * 0.05 = 16.6665
        assert calculate_bonus(Decimal("333.33"), Decimal("5")) == Decimal("16.67")

    def test_zero_salary_earns_zero(self):
        assert calculate_bonus(Decimal("0"), Decimal("9.5")) == Decimal("0.00")


class TestCustomTiers:

    def test_custom_table_is_used(self):
        tiers = (
            BonusTier(min_score=Decimal("8"), rate=Decimal("0.20")),
            BonusTier(min_score=Decimal("3"), rate=Decimal("0.01")),
        )
        assert calculate_bonus(SALARY, Decimal("8"), tiers) == Decimal("200.00")
        assert calculate_bonus(SALARY, Decimal("4"), tiers) == Decimal("10.00")
        assert calculate_bonus(SALARY, Decimal("2.99"), tiers) == Decimal("0.00")

    def test_empty_table_pays_nothing(self):
        assert calculate_bonus(SALARY, Decimal("10"), ()) == Decimal("0.00")

    def test_rate_above_one_rejected(self):
        with pytest.raises(ValueError, match="rate"):
            BonusTier(min_score=Decimal("5"), rate=Decimal("1.5"))

    def test_negative_rate_rejected(self):
        with pytest.raises(ValueError):
            BonusTier(min_score=Decimal("5"), rate=Decimal("-0.01"))

    def test_ascending_thresholds_rejected(self):
        with pytest.raises(ValueError, match="descending"):
            validate_tiers(
                [
                    BonusTier(min_score=Decimal("5"), rate=Decimal("0.05")),
                    BonusTier(min_score=Decimal("9"), rate=Decimal("0.15")),
                ]
            )

    def test_duplicate_thresholds_rejected(self):
        with pytest.raises(ValueError):
            validate_tiers(
                [
                    BonusTier(min_score=Decimal("7"), rate=Decimal("0.10")),
                    BonusTier(min_score=Decimal("7"), rate=Decimal("0.05")),
                ]
            )

    def test_default_table_is_valid(self):
        assert validate_tiers(DEFAULT_BONUS_TIERS) == DEFAULT_BONUS_TIERS


scores = st.decimals(min_value=0, max_value=10, places=2)
salaries = st.decimals(min_value=0, max_value=10_000_000, places=2)


class TestBonusProperties:

    @given(salary=salaries, low=scores, high=scores)
    def test_bonus_is_monotonic_in_score(self, salary, low, high):
        if low > high:
            low, high = high, low
        assert calculate_bonus(salary, low) <= calculate_bonus(salary, high)

    @given(salary=salaries, score=scores)
    def test_bonus_never_exceeds_top_rate(self, salary, score):
        bonus = calculate_bonus(salary, score)
        assert Decimal("0") <= bonus <= salary * Decimal("0.15") + Decimal("0.005")

    @given(salary=salaries, score=scores)
    def test_bonus_has_two_decimal_places(self, salary, score):
        assert calculate_bonus(salary, score).as_tuple().exponent == -2
