# PURPOSE: Two-phase wealth projection with and without the spending-control bonus.
# CONTEXT: Phase 1 (ages up to 70) compounds at 11% with work contributions plus bonus;
#          phase 2 (after 70) compounds at 6% and only the bonus keeps flowing in.
#          Simulated month by month so the transition year behaves exactly.

from __future__ import annotations
import math
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from zoneinfo import ZoneInfo

import structlog

from wealthchat.constants.projection import (
    HORIZON_AGE,
    INFLATION_RATE,
    MILESTONE_YEARS,
    MIN_HORIZON_YEARS,
    PERIODS_PER_YEAR,
    POST_TRANSITION_RATE,
    PRE_TRANSITION_RATE,
    PROFILE_BOUNDS,
    TRANSITION_AGE,
)
from wealthchat.model_interface.projection_model import Clock, ProjectionModel
from wealthchat.model_interface.types import (
    Assumptions,
    FinancialProfile,
    Milestone,
    ProfileError,
    ProjectionResult,
    YearRecord,
)
from wealthchat.observability import xray_segment
from wealthchat.utils.rounding import round_currency

TZ = ZoneInfo("Europe/London")

log = structlog.get_logger(__name__)


def validate_profile(profile: FinancialProfile) -> None:
    """
    Reject profiles the engine cannot project.

    raises:
    - ProfileError – non-numeric, non-finite, fractional age, or outside PROFILE_BOUNDS.
    """
    if not isinstance(profile, FinancialProfile):
        raise ProfileError(f"Expected FinancialProfile, got {type(profile).__name__}")
    for field, (low, high) in PROFILE_BOUNDS.items():
        value = getattr(profile, field)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ProfileError(f"{field} must be a finite number, got {value!r}")
        if value < low or value > high:
            raise ProfileError(f"{field}={value} is outside [{low}, {high}]")
    if int(profile.age) != profile.age:
        raise ProfileError(f"age must be a whole number, got {profile.age!r}")


def projection_horizon(age: int) -> int:
    """Final simulated year: up to age 90, never fewer than five years."""
    return max(MIN_HORIZON_YEARS, HORIZON_AGE - int(age))


def _phase(age_reached: int, work: float, bonus: float) -> Tuple[float, float, float]:
    """
    Monthly rate and contributions for a year ending at age_reached.

    returns:
    - (monthly_rate, baseline_contribution, with_bonus_contribution)
    """
    if age_reached <= TRANSITION_AGE:
        return PRE_TRANSITION_RATE / PERIODS_PER_YEAR, work, work + bonus
    return POST_TRANSITION_RATE / PERIODS_PER_YEAR, 0.0, bonus


class TwoPhaseModel(ProjectionModel):
    """
    Deterministic projection engine.

    Both trajectories start from current savings and advance together one month
    at a time. Balances stay unrounded; rounding happens only when milestones
    and year records are published.
    """

    def project(self, profile: FinancialProfile, clock: Optional[Clock] = None) -> ProjectionResult:
        """
        Run the projection for a complete profile.

        parameters:
        - profile: FinancialProfile – validated, immutable inputs.
        - clock: callable|None – returns an aware datetime used for as_of only.

        returns:
        - ProjectionResult – milestones at 0,5,...,70 within the horizon plus the
          horizon itself, and one record per simulated year.
        """
        validate_profile(profile)
        now = (clock or (lambda: datetime.now(TZ)))()

        with xray_segment("projection.run"):
            age = int(profile.age)
            horizon = projection_horizon(age)
            work = profile.work_monthly_contribution
            bonus = float(profile.bonus_savings)

            baseline = float(profile.current_savings)
            with_bonus = float(profile.current_savings)
            contributions = float(profile.current_savings)

            rounded: Dict[int, Tuple[int, int]] = {0: (round_currency(baseline), round_currency(with_bonus))}
            records: List[YearRecord] = []

            for year in range(1, horizon + 1):
                age_reached = age + year
                rate, base_in, bonus_in = _phase(age_reached, work, bonus)
                for _ in range(PERIODS_PER_YEAR):
                    baseline = baseline * (1 + rate) + base_in
                    with_bonus = with_bonus * (1 + rate) + bonus_in
                contributions += bonus_in * PERIODS_PER_YEAR

                b, wb = round_currency(baseline), round_currency(with_bonus)
                c = round_currency(contributions)
                rounded[year] = (b, wb)
                records.append(YearRecord(
                    year=year,
                    age=age_reached,
                    baseline=b,
                    with_bonus=wb,
                    total_contributions=c,
                    total_earnings=wb - c,
                    bonus_contribution=wb - b,
                ))

        checkpoints = sorted({y for y in MILESTONE_YEARS if y <= horizon} | {horizon})
        milestones = {
            y: Milestone(baseline=rounded[y][0], with_bonus=rounded[y][1], bonus_contribution=rounded[y][1] - rounded[y][0])
            for y in checkpoints
        }

        log.info("projection.completed", horizon=horizon, milestones=len(milestones),
                 final_with_bonus=rounded[horizon][1])

        return ProjectionResult(
            milestones=milestones,
            year_by_year=tuple(records),
            assumptions=Assumptions(
                pre_transition_rate=PRE_TRANSITION_RATE,
                post_transition_rate=POST_TRANSITION_RATE,
                inflation_rate=INFLATION_RATE,
                transition_age=TRANSITION_AGE,
                horizon_age=HORIZON_AGE,
            ),
            as_of=now.isoformat(timespec="seconds"),
        )


def calculate_projection(profile: FinancialProfile, clock: Optional[Clock] = None) -> ProjectionResult:
    """Convenience wrapper around TwoPhaseModel().project()."""
    return TwoPhaseModel().project(profile, clock=clock)
