"""Change percentage arithmetic for salary history."""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hr_kernel.domain.salary import ZeroSalaryPolicy, change_percentage, is_valid_salary


class TestChangePercentage:

    def test_ten_percent_raise(self):
        assert change_percentage(Decimal("1000"), Decimal("1100")) == Decimal("10.00")

    def test_pay_cut_is_negative(self):
        assert change_percentage(Decimal("1000"), Decimal("900")) == Decimal("-10.00")

    def test_rounds_half_up_to_two_places(self):
        # 1/3 * 100 = 33.333...
        assert change_percentage(Decimal("3"), Decimal("4")) == Decimal("33.33")
        # 1.01 / 200 * 100 = 0.505
        assert change_percentage(Decimal("200"), Decimal("201.01")) == Decimal("0.51")

    def test_cut_to_zero_is_minus_one_hundred(self):
        assert change_percentage(Decimal("1000"), Decimal("0")) == Decimal("-100.00")

    def test_zero_prior_salary_is_undefined(self):
        assert change_percentage(Decimal("0"), Decimal("500")) is None

    @given(
        old=st.decimals(min_value=1, max_value=1_000_000, places=2),
        new=st.decimals(min_value=0, max_value=1_000_000, places=2),
    )
    def test_sign_follows_direction(self, old, new):
        pct = change_percentage(old, new)
        if new > old:
            assert pct >= 0
        elif new < old:
            assert pct <= 0
        else:
            assert pct == 0


class TestZeroSalaryPolicy:

    def test_values(self):
        assert ZeroSalaryPolicy("reject") is ZeroSalaryPolicy.REJECT
        assert ZeroSalaryPolicy("record_null") is ZeroSalaryPolicy.RECORD_NULL

    def test_unknown_value(self):
        with pytest.raises(ValueError):
            ZeroSalaryPolicy("ignore")


class TestIsValidSalary:

    @pytest.mark.parametrize("amount", ["0", "0.01", "85000", "1E+12"])
    def test_finite_non_negative_accepted(self, amount):
        assert is_valid_salary(Decimal(amount))

    @pytest.mark.parametrize("amount", ["-0.01", "NaN", "sNaN", "Infinity", "-Infinity"])
    def test_rejected(self, amount):
        assert not is_valid_salary(Decimal(amount))
