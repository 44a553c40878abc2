APP_NAME = "Retirement Scenario Simulator"

# Default inputs (percentages are whole numbers, money is per month unless noted)
DEFAULTS = {
    "current_age": 30,
    "retirement_age": 65,
    "current_savings": 50_000,        # lump sum today
    "monthly_contribution": 2_000,
    "expected_return": 7.0,           # nominal %/yr
    "inflation_rate": 3.0,            # %/yr
    "retirement_expenses": 5_000,     # monthly, today's money
}

# (min, max, step) for each input; None = unbounded
INPUT_LIMITS = {
    "current_age": (18, 80, 1),
    "retirement_age": (50, 80, 1),
    "current_savings": (0, None, 1_000),
    "monthly_contribution": (0, None, 100),
    "expected_return": (1.0, 15.0, 0.5),
    "inflation_rate": (1.0, 8.0, 0.1),
    "retirement_expenses": (0, None, 100),
}

# 4% rule: share of the pot drawable per year
WITHDRAWAL_RATE = 0.04
MONTHS_PER_YEAR = 12

BASE_CASE = "Base Case"

# +/- % vs base case before a difference counts as up/down
TREND_BAND_PCT = 5.0

LOG_LEVEL = "INFO"
