# PURPOSE: Closed-form savings helpers used by local replies and the projection summary.
# CONTEXT: The two-phase engine itself simulates month by month; these helpers answer
#          simpler single-rate questions ("how long until I reach X?").

from __future__ import annotations

from wealthchat.constants.projection import (
    BONUS_SAVINGS_BRACKETS,
    BONUS_SAVINGS_TOP_BRACKET,
    INFLATION_RATE,
    PERIODS_PER_YEAR,
    PRE_TRANSITION_RATE,
)

MAX_GOAL_YEARS = 100


def future_value(principal: float, monthly_contribution: float, annual_rate: float, years: float,
                 periods_per_year: int = PERIODS_PER_YEAR) -> float:
    """
    Future value of a principal plus a level contribution each period.

    FV = P(1 + r/n)^(nt) + PMT * ((1 + r/n)^(nt) - 1) / (r/n)

    With a zero rate the annuity term degrades to PMT * n * t.
    """
    periodic_rate = annual_rate / periods_per_year
    periods = periods_per_year * years
    principal_fv = principal * (1 + periodic_rate) ** periods
    if periodic_rate > 0:
        contribution_fv = monthly_contribution * (((1 + periodic_rate) ** periods - 1) / periodic_rate)
    else:
        contribution_fv = monthly_contribution * periods
    return principal_fv + contribution_fv


def compound_interest(principal: float, annual_rate: float, years: float,
                      periods_per_year: int = PERIODS_PER_YEAR) -> float:
    """Interest earned on a principal alone (no contributions)."""
    return principal * (1 + annual_rate / periods_per_year) ** (periods_per_year * years) - principal


def years_to_reach_goal(principal: float, monthly_contribution: float, goal: float,
                        annual_rate: float = PRE_TRANSITION_RATE) -> int:
    """
    Whole years until the balance first reaches goal, capped at MAX_GOAL_YEARS.

    returns:
    - int – 0 when the principal already meets the goal.
    """
    years = 0
    value = principal
    while value < goal and years < MAX_GOAL_YEARS:
        years += 1
        value = future_value(principal, monthly_contribution, annual_rate, years)
    return years


def monthly_contribution_for_goal(principal: float, goal: float, years: float,
                                  annual_rate: float = PRE_TRANSITION_RATE) -> float:
    """
    Level monthly contribution needed to reach goal in the given number of years.

    returns:
    - float – 0.0 when the principal alone gets there.

    raises:
    - ValueError – if years is not positive.
    """
    if years <= 0:
        raise ValueError("years must be positive")
    n = PERIODS_PER_YEAR
    periodic_rate = annual_rate / n
    periods = n * years
    remaining = goal - principal * (1 + periodic_rate) ** periods
    if remaining <= 0:
        return 0.0
    if periodic_rate == 0:
        return remaining / periods
    return max(0.0, remaining * periodic_rate / ((1 + periodic_rate) ** periods - 1))


def adjust_for_inflation(future_amount: float, years: float, inflation_rate: float = INFLATION_RATE) -> float:
    """Express a future amount in today's money."""
    return future_amount / (1 + inflation_rate) ** years


def real_return_rate(nominal_rate: float, inflation_rate: float = INFLATION_RATE) -> float:
    return (1 + nominal_rate) / (1 + inflation_rate) - 1


def suggested_bonus_savings(annual_income: float) -> int:
    """Typical monthly savings from the spending-control feature for an income level."""
    for ceiling, amount in BONUS_SAVINGS_BRACKETS:
        if annual_income < ceiling:
            return amount
    return BONUS_SAVINGS_TOP_BRACKET
