import numpy as np
from dataclasses import dataclass, asdict
from typing import Mapping, Optional, Tuple

from config import INPUT_LIMITS, MONTHS_PER_YEAR, WITHDRAWAL_RATE
from log_setup import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SimulationInputs:
    current_age: int
    retirement_age: int
    current_savings: float
    monthly_contribution: float
    expected_return: float       # nominal %/yr, e.g. 7 for 7%
    inflation_rate: float        # %/yr
    retirement_expenses: float   # monthly

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age


@dataclass(frozen=True)
class YearPoint:
    age: int
    nominal: float
    real: float      # nominal restated in today's money


@dataclass(frozen=True)
class ScenarioResult:
    name: str
    color: str
    final_amount: float
    monthly_income: float        # 4% rule, today's money
    years_of_income: float       # nominal pot / nominal annual expenses
    trajectory: Tuple[YearPoint, ...]
    inputs: SimulationInputs     # effective inputs after overrides
    degenerate: bool = False     # horizon <= 0, no growth simulated


def clone_inputs(inputs: SimulationInputs, **overrides) -> SimulationInputs:
    base = asdict(inputs)
    base.update(overrides)
    return SimulationInputs(**base)


def check_inputs(inputs: SimulationInputs) -> None:
    """
    Raise ValueError listing every field outside its INPUT_LIMITS range.
    Used by the input side; project() itself never validates.
    """
    problems = []
    for field, (lo, hi, _step) in INPUT_LIMITS.items():
        value = getattr(inputs, field)
        if lo is not None and value < lo:
            problems.append(f"{field}={value} is below {lo}")
        elif hi is not None and value > hi:
            problems.append(f"{field}={value} is above {hi}")
    if problems:
        raise ValueError("Invalid inputs: " + "; ".join(problems))


def _discount(amount: float, inflation_rate: float, years: int) -> float:
    return amount / (1 + inflation_rate / 100) ** years


def _coverage(final_amount: float, monthly_expenses: float) -> float:
    # zero expenses -> inf (0/0 -> nan); left for the caller to format
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(final_amount) / np.float64(monthly_expenses * MONTHS_PER_YEAR))


def _grow(inputs: SimulationInputs):
    """Walk years 0..horizon, compounding monthly; the last year gets no steps."""
    years = inputs.years_to_retirement
    monthly_rate = inputs.expected_return / 100 / MONTHS_PER_YEAR
    amount = float(inputs.current_savings)
    points = []
    for year in range(years + 1):
        if year < years:
            for _ in range(MONTHS_PER_YEAR):
                # contribution lands after the month's growth
                amount = amount * (1 + monthly_rate) + inputs.monthly_contribution
        points.append(YearPoint(
            age=inputs.current_age + year,
            nominal=amount,
            real=_discount(amount, inputs.inflation_rate, year),
        ))
    return amount, tuple(points)


def project(base: SimulationInputs, name: str, color: str,
            override: Optional[Mapping] = None) -> ScenarioResult:
    inputs = clone_inputs(base, **(override or {}))
    years = inputs.years_to_retirement

    degenerate = years <= 0
    if degenerate:
        logger.debug("%s: horizon of %d years, no growth simulated", name, years)
        amount = float(inputs.current_savings)
        trajectory = (YearPoint(age=inputs.current_age, nominal=amount, real=amount),)
    else:
        amount, trajectory = _grow(inputs)

    final_amount = amount
    monthly_income = _discount(final_amount * WITHDRAWAL_RATE / MONTHS_PER_YEAR,
                               inputs.inflation_rate, years)

    return ScenarioResult(
        name=name,
        color=color,
        final_amount=final_amount,
        monthly_income=monthly_income,
        years_of_income=_coverage(final_amount, inputs.retirement_expenses),
        trajectory=trajectory,
        inputs=inputs,
        degenerate=degenerate,
    )
