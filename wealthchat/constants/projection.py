PRE_TRANSITION_RATE = 0.11   # annual, up to and including the transition age
POST_TRANSITION_RATE = 0.06  # annual, after the transition age
INFLATION_RATE = 0.025
PERIODS_PER_YEAR = 12
TRANSITION_AGE = 70
HORIZON_AGE = 90
MIN_HORIZON_YEARS = 5

MILESTONE_YEARS = (0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70)

# Inclusive (low, high) bounds per profile field.
PROFILE_BOUNDS = {
    "age":                 (18, 100),
    "annual_income":       (0, 100_000_000),
    "current_savings":     (0, 10_000_000_000),
    "monthly_savings":     (0, 10_000_000),
    "monthly_investment":  (0, 10_000_000),
    "increase_percentage": (0, 500),
    "bonus_savings":       (0, 10_000),
}

# Suggested monthly bonus savings by annual income: (income below, amount).
BONUS_SAVINGS_BRACKETS = (
    (50_000, 75),
    (100_000, 100),
    (150_000, 150),
    (200_000, 200),
    (300_000, 350),
)
BONUS_SAVINGS_TOP_BRACKET = 500
