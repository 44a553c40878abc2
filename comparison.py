"""
Side-by-side comparison of a scenario set against the base case.

Read-only over ScenarioResult; deltas are percentages of the base value.
"""
import numpy as np
import pandas as pd
from typing import Optional, Sequence

from config import BASE_CASE, TREND_BAND_PCT
from simulation import ScenarioResult

INSIGHTS = {
    "Inflation Spike (5%)": "Higher inflation reduces purchasing power of retirement savings",
    "Early Retirement (60)": "Retiring 5 years early significantly reduces accumulation time",
    "Market Downturn (4% return)": "Lower returns require higher savings or later retirement",
    "Optimistic (10% return)": "Higher returns can significantly boost retirement readiness",
}
DEFAULT_INSIGHT = "Your baseline retirement projection"

RISKS = [
    "Inflation can erode purchasing power over time",
    "Market downturns reduce growth potential",
    "Early retirement reduces accumulation period",
    "Healthcare costs may increase in retirement",
]
STRATEGIES = [
    "Increase contributions during high-income years",
    "Diversify investments to manage risk",
    "Consider tax-advantaged retirement accounts",
    "Plan for healthcare and long-term care costs",
]

COLUMNS = [
    "name", "color", "is_base",
    "final_amount", "savings_diff_pct", "savings_trend", "savings_share_pct",
    "monthly_income", "income_diff_pct", "income_trend",
    "years_of_income", "insight",
]


def find_base_case(results: Sequence[ScenarioResult]) -> Optional[ScenarioResult]:
    return next((r for r in results if r.name == BASE_CASE), None)


def percent_difference(value: float, base: float) -> float:
    # zero base gives +/-inf or nan rather than raising
    with np.errstate(divide="ignore", invalid="ignore"):
        return float((np.float64(value) - base) / np.float64(base) * 100)


def trend(pct: float, band: float = TREND_BAND_PCT) -> str:
    if pct > band:
        return "up"
    if pct < -band:
        return "down"
    return "flat"


def insight(name: str) -> str:
    return INSIGHTS.get(name, DEFAULT_INSIGHT)


def compare(results: Sequence[ScenarioResult]) -> pd.DataFrame:
    """One row per scenario, in input order. Empty if there is no base case."""
    base = find_base_case(results)
    if base is None:
        return pd.DataFrame(columns=COLUMNS)

    max_final = max(r.final_amount for r in results)
    rows = []
    for r in results:
        savings_diff = percent_difference(r.final_amount, base.final_amount)
        income_diff = percent_difference(r.monthly_income, base.monthly_income)
        with np.errstate(divide="ignore", invalid="ignore"):
            share = float(np.float64(r.final_amount) / max_final * 100)
        rows.append({
            "name": r.name,
            "color": r.color,
            "is_base": r.name == BASE_CASE,
            "final_amount": r.final_amount,
            "savings_diff_pct": savings_diff,
            "savings_trend": trend(savings_diff),
            "savings_share_pct": share,
            "monthly_income": r.monthly_income,
            "income_diff_pct": income_diff,
            "income_trend": trend(income_diff),
            "years_of_income": r.years_of_income,
            "insight": insight(r.name),
        })
    return pd.DataFrame(rows, columns=COLUMNS)
