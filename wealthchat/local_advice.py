"""
Canned, number-aware replies used when no external responder is configured
or when the responder fails.
"""

from __future__ import annotations
from typing import Optional

from wealthchat.constants.messages import LOCAL_REPLIES, RESTART_PROMPT
from wealthchat.constants.projection import TRANSITION_AGE
from wealthchat.formatting import format_currency
from wealthchat.model_interface.types import FinancialProfile, ProjectionResult
from wealthchat.tools.calculators import monthly_contribution_for_goal, years_to_reach_goal

RETIREMENT_GOAL = 1_000_000
FIRST_GOALS = (100_000, 1_000_000)


def _value_near_year(projection: ProjectionResult, year: int):
    """Milestone at `year`, or the latest milestone before it."""
    eligible = [y for y in projection.milestones if y <= year]
    return projection.milestones[max(eligible) if eligible else projection.horizon]


def _retirement_fields(profile: FinancialProfile, projection: ProjectionResult) -> dict:
    years_to_70 = TRANSITION_AGE - profile.age
    if 0 < years_to_70 <= len(projection.year_by_year):
        at_70 = projection.year_by_year[years_to_70 - 1].with_bonus
    else:
        at_70 = projection.milestones[0].with_bonus
    monthly_needed = monthly_contribution_for_goal(profile.current_savings, RETIREMENT_GOAL, max(1, years_to_70))
    return {
        "at_70": format_currency(at_70),
        "goal": format_currency(RETIREMENT_GOAL),
        "monthly_needed": format_currency(monthly_needed),
    }


def _savings_fields(profile: FinancialProfile) -> dict:
    first_goal = next((g for g in FIRST_GOALS if g > profile.current_savings), FIRST_GOALS[-1] * 10)
    monthly = profile.work_monthly_contribution + profile.bonus_savings
    return {
        "first_goal": format_currency(first_goal),
        "years": years_to_reach_goal(profile.current_savings, monthly, first_goal),
    }


def local_reply(intent: str, profile: Optional[FinancialProfile], projection: Optional[ProjectionResult],
                company: str) -> str:
    """
    Pick and fill a local reply for an intent label.

    returns:
    - str – intents that need numbers fall back to the general reply when no
      projection is available yet.
    """
    if intent == "restart":
        return RESTART_PROMPT
    has_numbers = profile is not None and projection is not None
    if intent == "retirement" and has_numbers:
        return LOCAL_REPLIES["retirement"].format(company=company, **_retirement_fields(profile, projection))
    if intent == "savings_tips" and has_numbers:
        return LOCAL_REPLIES["savings_tips"].format(company=company, **_savings_fields(profile))
    if intent == "education" and has_numbers:
        bonus_30 = _value_near_year(projection, 30).bonus_contribution
        return LOCAL_REPLIES["education"].format(company=company, bonus_30=format_currency(bonus_30))
    if intent in ("investment", "product_info", "closing", "help"):
        return LOCAL_REPLIES[intent].format(company=company)
    return LOCAL_REPLIES["general"].format(company=company)
