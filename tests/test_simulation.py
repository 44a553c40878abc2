"""
Tests for the projection engine in ``simulation``.
"""

from __future__ import annotations

import dataclasses
import math

import pytest

from config import DEFAULTS
from simulation import (
    ScenarioResult,
    SimulationInputs,
    YearPoint,
    check_inputs,
    clone_inputs,
    project,
)


def make_inputs(**overrides) -> SimulationInputs:
    values = {**DEFAULTS, **overrides}
    return SimulationInputs(**values)


@pytest.fixture
def one_year() -> SimulationInputs:
    return SimulationInputs(
        current_age=30,
        retirement_age=31,
        current_savings=1000,
        monthly_contribution=0,
        expected_return=12,
        inflation_rate=0,
        retirement_expenses=100,
    )


class TestOneYearProjection:
    """A 30 -> 31 horizon at 12%/yr (1% a month) with no contributions."""

    def test_two_points_with_terminal_duplicate(self, one_year: SimulationInputs) -> None:
        result = project(one_year, "Base Case", "#000")

        assert [p.age for p in result.trajectory] == [30, 31]
        expected = 1000 * 1.01 ** 12
        assert result.trajectory[0].nominal == pytest.approx(expected)
        assert result.trajectory[1].nominal == result.trajectory[0].nominal

    def test_summary_figures(self, one_year: SimulationInputs) -> None:
        result = project(one_year, "Base Case", "#000")

        assert result.final_amount == pytest.approx(1126.825, abs=1e-3)
        assert result.years_of_income == pytest.approx(1126.825 / 1200, abs=1e-4)
        assert result.years_of_income == pytest.approx(0.939, abs=1e-3)
        # zero inflation: income is just 4% of the pot per year, monthly
        assert result.monthly_income == pytest.approx(result.final_amount * 0.04 / 12)
        assert result.degenerate is False

    def test_contribution_added_after_growth(self, one_year: SimulationInputs) -> None:
        result = project(one_year, "x", "#000", {"current_savings": 0, "monthly_contribution": 100})

        # first contribution earns 11 months of growth, the last earns none
        expected = sum(100 * 1.01 ** k for k in range(12))
        assert result.final_amount == pytest.approx(expected)


class TestTrajectoryShape:
    def test_length_and_ages(self) -> None:
        inputs = make_inputs(current_age=40, retirement_age=52)
        result = project(inputs, "Base Case", "#000")

        assert len(result.trajectory) == 13
        ages = [p.age for p in result.trajectory]
        assert ages == list(range(40, 53))

    def test_final_amount_is_last_point(self) -> None:
        result = project(make_inputs(), "Base Case", "#000")
        assert result.final_amount == result.trajectory[-1].nominal

    def test_last_two_points_equal(self) -> None:
        result = project(make_inputs(), "Base Case", "#000")
        assert result.trajectory[-1].nominal == result.trajectory[-2].nominal

    def test_nominal_non_decreasing(self) -> None:
        result = project(make_inputs(), "Base Case", "#000")
        nominals = [p.nominal for p in result.trajectory]
        assert all(b >= a for a, b in zip(nominals, nominals[1:]))

    def test_real_equals_nominal_at_start(self) -> None:
        result = project(make_inputs(), "Base Case", "#000")
        first = result.trajectory[0]
        assert first.real == first.nominal

    def test_real_is_discounted_by_year_offset(self) -> None:
        inputs = make_inputs(inflation_rate=3)
        result = project(inputs, "Base Case", "#000")
        point = result.trajectory[10]
        assert point.real == pytest.approx(point.nominal / 1.03 ** 10)

    def test_monthly_income_discounted_over_horizon(self) -> None:
        inputs = make_inputs()
        result = project(inputs, "Base Case", "#000")
        years = inputs.retirement_age - inputs.current_age
        expected = result.final_amount * 0.04 / 12 / 1.03 ** years
        assert result.monthly_income == pytest.approx(expected)

    def test_coverage_is_not_inflation_adjusted(self) -> None:
        inputs = make_inputs()
        result = project(inputs, "Base Case", "#000")
        assert result.years_of_income == pytest.approx(
            result.final_amount / (inputs.retirement_expenses * 12)
        )


class TestDeterminismAndImmutability:
    def test_repeat_calls_identical(self) -> None:
        inputs = make_inputs()
        first = project(inputs, "Base Case", "#0891b2", {"expected_return": 4})
        second = project(inputs, "Base Case", "#0891b2", {"expected_return": 4})
        assert first == second

    def test_override_does_not_touch_base(self) -> None:
        inputs = make_inputs()
        result = project(inputs, "x", "#000", {"inflation_rate": 5})

        assert inputs.inflation_rate == DEFAULTS["inflation_rate"]
        assert result.inputs.inflation_rate == 5
        assert result.inputs.expected_return == inputs.expected_return

    def test_result_is_frozen(self) -> None:
        result = project(make_inputs(), "Base Case", "#000")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.final_amount = 0.0  # type: ignore[misc]

    def test_unknown_override_field_raises(self) -> None:
        with pytest.raises(TypeError):
            project(make_inputs(), "x", "#000", {"salary": 10})


class TestEdgeCases:
    def test_negative_horizon_is_single_point(self) -> None:
        inputs = make_inputs(current_age=70, retirement_age=60, current_savings=12_345)
        result = project(inputs, "Early", "#000")

        assert result.degenerate is True
        assert result.trajectory == (YearPoint(age=70, nominal=12_345.0, real=12_345.0),)
        assert result.final_amount == 12_345.0
        assert result.years_of_income == pytest.approx(12_345 / (DEFAULTS["retirement_expenses"] * 12))
        # horizon of -10 years: the exponent is not clamped
        assert result.monthly_income == pytest.approx(12_345 * 0.04 / 12 / 1.03 ** -10)

    def test_zero_horizon_is_single_point(self) -> None:
        inputs = make_inputs(current_age=60, retirement_age=60, current_savings=500)
        result = project(inputs, "x", "#000")

        assert result.degenerate is True
        assert len(result.trajectory) == 1
        assert result.trajectory[0].age == 60
        assert result.final_amount == 500.0

    def test_zero_expenses_gives_infinite_coverage(self) -> None:
        result = project(make_inputs(retirement_expenses=0), "x", "#000")
        assert math.isinf(result.years_of_income)

    def test_zero_savings_and_expenses_gives_nan(self) -> None:
        inputs = make_inputs(current_age=65, retirement_age=60, current_savings=0, retirement_expenses=0)
        result = project(inputs, "x", "#000")
        assert math.isnan(result.years_of_income)


class TestInputHelpers:
    def test_clone_inputs_replaces_fields(self) -> None:
        base = make_inputs()
        clone = clone_inputs(base, retirement_age=60)
        assert clone.retirement_age == 60
        assert clone.current_age == base.current_age
        assert base.retirement_age == DEFAULTS["retirement_age"]

    def test_check_inputs_accepts_defaults(self) -> None:
        check_inputs(make_inputs())

    def test_check_inputs_lists_every_problem(self) -> None:
        inputs = make_inputs(current_age=10, expected_return=20, current_savings=-1)
        with pytest.raises(ValueError) as excinfo:
            check_inputs(inputs)
        message = str(excinfo.value)
        assert "current_age" in message
        assert "expected_return" in message
        assert "current_savings" in message

    def test_years_to_retirement(self) -> None:
        assert make_inputs(current_age=30, retirement_age=65).years_to_retirement == 35


def test_result_type() -> None:
    assert isinstance(project(make_inputs(), "Base Case", "#000"), ScenarioResult)
