from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from wealthchat.model_impl.two_phase_model import TwoPhaseModel, calculate_projection, projection_horizon
from wealthchat.model_interface.loader import load_model
from wealthchat.model_interface.types import (
    FinancialProfile,
    PartialProfile,
    ProfileError,
    ProfileIncompleteError,
)
from wealthchat.tools.calculators import future_value
from wealthchat.utils.rounding import round_currency


def _profile(**overrides):
    base = dict(age=30, annual_income=50000, current_savings=0, monthly_savings=0,
                monthly_investment=0, increase_percentage=0, bonus_savings=0)
    base.update(overrides)
    return FinancialProfile(**base)


def _fixed_clock():
    return datetime(2026, 1, 1, 9, 30, tzinfo=ZoneInfo("Europe/London"))


def test_transition_year_profile():
    # age 68, 100k saved, 1000/month own contributions, 200/month bonus
    p = _profile(age=68, current_savings=100000, monthly_savings=600, monthly_investment=400, bonus_savings=200)
    result = TwoPhaseModel().project(p, clock=_fixed_clock)

    assert result.horizon == 22
    assert sorted(result.milestones) == [0, 5, 10, 15, 20, 22]
    assert result.milestones[0].baseline == 100000
    assert result.milestones[0].with_bonus == 100000
    assert result.milestones[0].bonus_contribution == 0

    years = {r.year: r for r in result.year_by_year}
    assert len(years) == 22
    assert years[2].age == 70 and years[3].age == 71
    assert years[1].total_contributions == 114400
    assert years[2].total_contributions == 128800
    assert years[3].total_contributions == 131200

    # after 70: baseline only compounds at 6%, with-bonus keeps the 200/month
    growth = (1 + 0.06 / 12) ** 12
    assert abs(years[3].baseline - years[2].baseline * growth) <= 2
    expected_wb = years[2].with_bonus * growth + 200 * ((growth - 1) / (0.06 / 12))
    assert abs(years[3].with_bonus - expected_wb) <= 2


def test_invariants_hold_for_every_record(profile):
    result = calculate_projection(profile, clock=_fixed_clock)
    for m in result.milestones.values():
        assert m.with_bonus >= m.baseline
        assert m.bonus_contribution == m.with_bonus - m.baseline
    for r in result.year_by_year:
        assert r.bonus_contribution == r.with_bonus - r.baseline
        assert r.total_earnings == r.with_bonus - r.total_contributions


def test_pre_transition_matches_closed_form():
    p = _profile(age=30, current_savings=5000, monthly_savings=250, monthly_investment=50, increase_percentage=20)
    result = TwoPhaseModel().project(p)
    work = 300 * 1.2
    for year in (1, 10, 25):
        expected = round_currency(future_value(5000, work, 0.11, year))
        assert abs(result.year_by_year[year - 1].baseline - expected) <= 1


def test_single_year_growth_of_savings():
    result = TwoPhaseModel().project(_profile(current_savings=1000))
    assert result.year_by_year[0].baseline == 1116
    assert result.year_by_year[0].with_bonus == 1116


def test_contributions_only_first_year():
    result = TwoPhaseModel().project(_profile(monthly_savings=100))
    assert result.year_by_year[0].baseline == 1262


def test_zero_profile_projects_zeros():
    result = TwoPhaseModel().project(_profile())
    assert all(r.baseline == 0 and r.with_bonus == 0 for r in result.year_by_year)


@pytest.mark.parametrize("age,horizon", [(18, 72), (30, 60), (85, 5), (88, 5), (100, 5)])
def test_horizon(age, horizon):
    assert projection_horizon(age) == horizon
    result = TwoPhaseModel().project(_profile(age=age))
    assert result.horizon == horizon
    assert len(result.year_by_year) == horizon


def test_old_profile_has_only_post_transition_years():
    p = _profile(age=88, current_savings=1000, monthly_savings=500, bonus_savings=100)
    result = TwoPhaseModel().project(p)
    assert sorted(result.milestones) == [0, 5]
    # work contributions never apply after 70
    assert result.year_by_year[0].total_contributions == 1000 + 100 * 12
    assert result.year_by_year[0].baseline == round_currency(1000 * (1 + 0.06 / 12) ** 12)


def test_young_profile_milestones_stop_at_seventy():
    result = TwoPhaseModel().project(_profile(age=18))
    assert sorted(result.milestones) == [0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 72]


def test_as_of_and_assumptions():
    result = TwoPhaseModel().project(_profile(), clock=_fixed_clock)
    assert result.as_of == "2026-01-01T09:30:00+00:00"
    assert result.assumptions.pre_transition_rate == 0.11
    assert result.assumptions.post_transition_rate == 0.06
    assert result.assumptions.compounding_frequency == "monthly"


def test_result_is_read_only():
    result = TwoPhaseModel().project(_profile())
    with pytest.raises(TypeError):
        result.milestones[5] = None
    assert isinstance(result.year_by_year, tuple)


def test_to_dict_uses_integer_milestone_keys():
    d = TwoPhaseModel().project(_profile()).to_dict()
    assert 0 in d["milestones"]
    assert d["year_by_year"][0]["year"] == 1


@pytest.mark.parametrize("overrides", [
    {"age": 17},
    {"age": 101},
    {"age": 35.5},
    {"annual_income": -1},
    {"annual_income": 100_000_001},
    {"increase_percentage": 501},
    {"bonus_savings": 10_001},
    {"current_savings": float("nan")},
    {"current_savings": float("inf")},
    {"current_savings": 1e30},
    {"monthly_investment": 10_000_001},
    {"monthly_savings": "100"},
])
def test_invalid_profiles_raise(overrides):
    with pytest.raises(ProfileError):
        TwoPhaseModel().project(_profile(**overrides))


def test_incomplete_profile_cannot_be_frozen():
    with pytest.raises(ProfileIncompleteError) as e:
        PartialProfile(age=30, annual_income=1000).freeze()
    assert "bonus_savings" in e.value.missing
    assert "age" not in e.value.missing


def test_load_model_default_and_env(monkeypatch):
    assert isinstance(load_model(), TwoPhaseModel)
    monkeypatch.setenv("PROJECTION_MODEL", "wealthchat.model_impl.two_phase_model:TwoPhaseModel")
    assert isinstance(load_model(), TwoPhaseModel)


def test_round_currency_half_up():
    assert round_currency(2.5) == 3
    assert round_currency(1234.5) == 1235
    assert round_currency(1234.49) == 1234
    assert round_currency(-2.5) == -3


def test_round_currency_beyond_default_decimal_precision():
    assert round_currency(1e30) == int(1e30)
    assert round_currency(-1e300) == int(-1e300)


@pytest.mark.parametrize("overrides", [
    {},
    {"current_savings": 25000, "monthly_savings": 300, "increase_percentage": 20, "bonus_savings": 150},
    {"age": 68, "current_savings": 100000, "monthly_savings": 600, "monthly_investment": 400, "bonus_savings": 200},
    {"age": 88, "bonus_savings": 100},
    {"age": 18, "current_savings": 10_000_000_000, "monthly_investment": 10_000_000, "bonus_savings": 10_000},
])
def test_trajectories_never_decrease(overrides):
    result = TwoPhaseModel().project(_profile(**overrides))

    start = result.milestones[0]
    baselines = [start.baseline] + [r.baseline for r in result.year_by_year]
    with_bonus = [start.with_bonus] + [r.with_bonus for r in result.year_by_year]
    assert baselines == sorted(baselines)
    assert with_bonus == sorted(with_bonus)

    ordered = [result.milestones[y] for y in sorted(result.milestones)]
    assert [m.baseline for m in ordered] == sorted(m.baseline for m in ordered)
    assert [m.with_bonus for m in ordered] == sorted(m.with_bonus for m in ordered)
