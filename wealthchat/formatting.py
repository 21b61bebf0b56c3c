# PURPOSE: Turn a ProjectionResult into chat text.
# CONTEXT: projection_message() is shown once when the projection is ready;
#          projection_context() is the compact summary sent to external responders.

from __future__ import annotations
from typing import List

from wealthchat.constants.messages import DISCLAIMER
from wealthchat.model_interface.types import FinancialProfile, ProjectionResult
from wealthchat.tools.calculators import adjust_for_inflation, compound_interest, real_return_rate
from wealthchat.utils.rounding import round_currency

INTEREST_PREVIEW_YEARS = 5


def format_currency(amount: float) -> str:
    """Whole-dollar amount with thousands separators, e.g. 1234567.4 -> '$1,234,567'."""
    value = round_currency(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,}"


def _milestone_lines(profile: FinancialProfile, projection: ProjectionResult, company: str) -> List[str]:
    lines = []
    for year, m in sorted(projection.milestones.items()):
        if year == 0:
            continue
        lines.append(
            f"- In {year} years (age {profile.age + year}): {format_currency(m.baseline)} on your own, "
            f"{format_currency(m.with_bonus)} with {company} (+{format_currency(m.bonus_contribution)})"
        )
    return lines


def projection_message(profile: FinancialProfile, projection: ProjectionResult, company: str) -> str:
    final = projection.milestones[projection.horizon]
    parts = [
        "Here's your wealth projection!",
        "",
        f"Starting from {format_currency(profile.current_savings)} and contributing "
        f"{format_currency(profile.work_monthly_contribution)}/month plus "
        f"{format_currency(profile.bonus_savings)}/month saved with {company}:",
        "",
        *_milestone_lines(profile, projection, company),
        "",
        f"By age {profile.age + projection.horizon} {company} could add "
        f"{format_currency(final.bonus_contribution)} to your wealth.",
        "",
        DISCLAIMER,
    ]
    return "\n".join(parts)


def projection_context(profile: FinancialProfile, projection: ProjectionResult) -> str:
    """
    Compact, single-paragraph summary of the user's numbers for a language model.

    notes:
    - Includes the horizon balance in today's money and the real (after
      inflation) growth rates so the model can talk about purchasing power
      without doing its own inflation maths.
    """
    horizon = projection.horizon
    final = projection.milestones[horizon]
    a = projection.assumptions
    real_final = adjust_for_inflation(final.with_bonus, horizon, a.inflation_rate)
    current_rate = a.pre_transition_rate if profile.age <= a.transition_age else a.post_transition_rate
    first_years = min(INTEREST_PREVIEW_YEARS, horizon)
    savings_interest = compound_interest(profile.current_savings, current_rate, first_years)
    checkpoints = ", ".join(
        f"year {y}: {format_currency(m.baseline)} / {format_currency(m.with_bonus)}"
        for y, m in sorted(projection.milestones.items())
    )
    return (
        f"User projection context: age {profile.age}, annual income {format_currency(profile.annual_income)}, "
        f"current savings {format_currency(profile.current_savings)}, monthly contribution "
        f"{format_currency(profile.work_monthly_contribution)} (after a {profile.increase_percentage:g}% increase), "
        f"extra monthly savings {format_currency(profile.bonus_savings)}. "
        f"Milestones (baseline / with extra savings): {checkpoints}. "
        f"Horizon value with extra savings is about {format_currency(real_final)} in today's money "
        f"at {a.inflation_rate:.1%} inflation. "
        f"Real return is about {real_return_rate(a.pre_transition_rate, a.inflation_rate):.1%} a year "
        f"up to age {a.transition_age} and {real_return_rate(a.post_transition_rate, a.inflation_rate):.1%} after. "
        f"Current savings alone earn about {format_currency(savings_interest)} interest "
        f"in the first {first_years} years."
    )
