import pytest

from wealthchat.tools.calculators import (
    MAX_GOAL_YEARS,
    adjust_for_inflation,
    compound_interest,
    future_value,
    monthly_contribution_for_goal,
    real_return_rate,
    suggested_bonus_savings,
    years_to_reach_goal,
)


def test_future_value_zero_rate():
    assert future_value(1000, 100, 0.0, 2) == pytest.approx(3400)


def test_future_value_matches_monthly_compounding():
    assert future_value(1000, 0, 0.12, 1) == pytest.approx(1000 * 1.01 ** 12)


def test_compound_interest_excludes_principal():
    assert compound_interest(1000, 0.12, 1) == pytest.approx(1000 * 1.01 ** 12 - 1000)


def test_years_to_reach_goal():
    assert years_to_reach_goal(100, 0, 50) == 0
    assert years_to_reach_goal(0, 1000, 12000, annual_rate=0.0) == 1
    assert years_to_reach_goal(0, 0, 1) == MAX_GOAL_YEARS


def test_monthly_contribution_for_goal():
    assert monthly_contribution_for_goal(0, 1200, 1, annual_rate=0.0) == pytest.approx(100)
    assert monthly_contribution_for_goal(2_000_000, 1_000_000, 10) == 0.0
    needed = monthly_contribution_for_goal(0, 100_000, 10)
    assert future_value(0, needed, 0.11, 10) == pytest.approx(100_000)


def test_monthly_contribution_rejects_non_positive_years():
    with pytest.raises(ValueError):
        monthly_contribution_for_goal(0, 1000, 0)


def test_inflation_helpers():
    assert adjust_for_inflation(1025, 1) == pytest.approx(1000)
    assert real_return_rate(0.11) == pytest.approx(1.11 / 1.025 - 1)


@pytest.mark.parametrize("income,amount", [
    (0, 75), (49_999, 75), (50_000, 100), (120_000, 150),
    (199_999, 200), (250_000, 350), (300_000, 500), (5_000_000, 500),
])
def test_suggested_bonus_savings(income, amount):
    assert suggested_bonus_savings(income) == amount
