from datetime import datetime, timezone
from decimal import Decimal

from src.engine.profit_timer import (
    MAX_MONTHS,
    round_whole,
    calculate_time_to_positive,
    negative_cash_flow_scenarios,
    build_calculation_record,
)
from src.models.profit_timer import Adjustment, AdjustmentType, ProfitTimerInputs
from src.models.property import Scenario

PCT = AdjustmentType.PERCENTAGE
FIXED = AdjustmentType.FIXED


def run(scenario, rent_growth=None, expense_reduction=None):
    return calculate_time_to_positive(ProfitTimerInputs(
        scenario=scenario,
        rent_growth=rent_growth or Adjustment(PCT, Decimal("0")),
        expense_reduction=expense_reduction or Adjustment(PCT, Decimal("0")),
    ))


class TestRoundWhole:
    def test_half_rounds_up(self):
        assert round_whole(Decimal("2.5")) == Decimal("3")

    def test_negative_half_rounds_toward_positive(self):
        assert round_whole(Decimal("-2.5")) == Decimal("-2")

    def test_below_half(self):
        assert round_whole(Decimal("-1000.4")) == Decimal("-1000")


class TestAlreadyPositive:
    def test_short_circuit(self, make_inputs):
        inputs = make_inputs(expected_rent=Decimal("10000"), other_costs=Decimal("9500"))
        result = run(Scenario(id="pos", name="pos", inputs=inputs))
        assert result.months_to_positive == 0
        assert result.years_to_positive == Decimal("0")
        assert len(result.monthly_timeline) == 1
        assert result.is_never_positive is False
        assert result.final_cash_flow == Decimal("500")

    def test_current_state_entry(self, make_inputs):
        inputs = make_inputs(expected_rent=Decimal("10000"), other_costs=Decimal("9500"))
        item = run(Scenario(id="pos", name="pos", inputs=inputs)).monthly_timeline[0]
        assert item.month == 0
        assert item.rent == Decimal("10000")
        assert item.expenses == Decimal("9500")
        assert item.cash_flow == Decimal("500")
        assert item.is_positive is True

    def test_ignores_adjustments(self, make_inputs):
        inputs = make_inputs(expected_rent=Decimal("10000"), other_costs=Decimal("9500"))
        result = run(
            Scenario(id="pos", name="pos", inputs=inputs),
            rent_growth=Adjustment(PCT, Decimal("-50")),
            expense_reduction=Adjustment(FIXED, Decimal("-5000")),
        )
        assert result.months_to_positive == 0
        assert len(result.monthly_timeline) == 1

    def test_zero_cash_flow_counts_as_positive(self, make_inputs):
        inputs = make_inputs(expected_rent=Decimal("10000"), other_costs=Decimal("10000"))
        result = run(Scenario(id="zero", name="zero", inputs=inputs))
        assert result.months_to_positive == 0


class TestConvergence:
    def test_percentage_rent_growth(self, negative_scenario):
        """10,000 rent growing 5%/yr against 11,000 costs: 11,025 after year 2."""
        result = run(negative_scenario, rent_growth=Adjustment(PCT, Decimal("5")))
        assert result.months_to_positive == 24
        assert result.years_to_positive == Decimal("2.0")
        assert result.is_never_positive is False
        assert result.final_cash_flow == Decimal("25")
        assert len(result.monthly_timeline) == 24

    def test_first_crossing(self, negative_scenario):
        result = run(negative_scenario, rent_growth=Adjustment(PCT, Decimal("5")))
        timeline = result.monthly_timeline
        m = result.months_to_positive
        assert timeline[m - 1].cash_flow >= 0
        assert timeline[m - 1].is_positive is True
        assert timeline[m - 2].cash_flow < 0
        assert all(not item.is_positive for item in timeline[:-1])

    def test_timeline_chronological(self, negative_scenario):
        result = run(negative_scenario, rent_growth=Adjustment(PCT, Decimal("5")))
        assert [i.month for i in result.monthly_timeline] == list(range(1, 25))

    def test_fractional_years(self, negative_scenario):
        timeline = run(negative_scenario, rent_growth=Adjustment(PCT, Decimal("5"))).monthly_timeline
        assert timeline[0].year == Decimal("0.1")  # 1/12
        assert timeline[5].year == Decimal("0.5")
        assert timeline[17].year == Decimal("1.5")

    def test_percentage_expense_reduction(self, negative_scenario):
        result = run(negative_scenario, expense_reduction=Adjustment(PCT, Decimal("10")))
        assert result.months_to_positive == 12
        assert result.monthly_timeline[-1].expenses == Decimal("9900")
        assert result.final_cash_flow == Decimal("100")

    def test_years_rounded_to_one_decimal(self, negative_scenario):
        # 11,000 - 10,000 closed by 100/yr fixed growth: 10 years
        result = run(negative_scenario, rent_growth=Adjustment(FIXED, Decimal("100")))
        assert result.months_to_positive == 120
        assert result.years_to_positive == Decimal("10.0")

    def test_sign_uses_unrounded_cash_flow(self, make_inputs):
        """-0.40 displays as 0 but is still negative; the loop keeps going."""
        inputs = make_inputs(expected_rent=Decimal("10000"), other_costs=Decimal("10000.4"))
        result = run(
            Scenario(id="frac", name="frac", inputs=inputs),
            expense_reduction=Adjustment(FIXED, Decimal("1")),
        )
        first = result.monthly_timeline[0]
        assert first.cash_flow == Decimal("0")
        assert first.is_positive is False
        assert all(not item.is_positive for item in result.monthly_timeline[:11])
        assert result.months_to_positive == 12
        assert result.final_cash_flow == Decimal("1")  # 0.6 rounded


class TestNonConvergence:
    def test_no_growth(self, negative_scenario):
        result = run(negative_scenario)
        assert result.is_never_positive is True
        assert result.months_to_positive == MAX_MONTHS == 600
        assert result.years_to_positive == Decimal("50")
        assert len(result.monthly_timeline) == 600
        assert result.final_cash_flow == Decimal("-1000")

    def test_shrinking_rent(self, negative_scenario):
        result = run(negative_scenario, rent_growth=Adjustment(PCT, Decimal("-2")))
        assert result.is_never_positive is True
        assert len(result.monthly_timeline) == 600
        assert result.monthly_timeline[-1].month == 600


class TestAnnualAdjustmentTiming:
    def test_only_at_year_end(self, negative_scenario):
        timeline = run(negative_scenario, rent_growth=Adjustment(FIXED, Decimal("100"))).monthly_timeline
        assert all(item.rent == Decimal("10000") for item in timeline[:11])
        assert timeline[11].rent == Decimal("10100")  # month 12
        assert all(item.rent == Decimal("10100") for item in timeline[11:23])
        assert timeline[23].rent == Decimal("10200")  # month 24

    def test_percentage_compounds(self, make_inputs):
        inputs = make_inputs(expected_rent=Decimal("10000"), other_costs=Decimal("20000"))
        timeline = run(
            Scenario(id="c", name="c", inputs=inputs),
            rent_growth=Adjustment(PCT, Decimal("5")),
        ).monthly_timeline
        assert timeline[11].rent == Decimal("10500")
        assert timeline[23].rent == Decimal("11025")  # not 11000
        assert timeline[35].rent == Decimal("11576")  # 11576.25

    def test_expense_reduction_compounds(self, make_inputs):
        inputs = make_inputs(expected_rent=Decimal("1000"), other_costs=Decimal("10000"))
        timeline = run(
            Scenario(id="c", name="c", inputs=inputs),
            expense_reduction=Adjustment(PCT, Decimal("10")),
        ).monthly_timeline
        assert timeline[11].expenses == Decimal("9000")
        assert timeline[23].expenses == Decimal("8100")

    def test_fixed_reduction_floored_at_zero(self, make_inputs):
        inputs = make_inputs(expected_rent=Decimal("0"), other_costs=Decimal("300"))
        result = run(
            Scenario(id="f", name="f", inputs=inputs),
            expense_reduction=Adjustment(FIXED, Decimal("1000")),
        )
        assert result.months_to_positive == 12
        assert result.monthly_timeline[-1].expenses == Decimal("0")
        assert result.final_cash_flow == Decimal("0")

    def test_mortgage_never_adjusted(self, make_inputs):
        # 1.2M at 0% over 10 years = 10,000/month
        inputs = make_inputs(
            mortgage_amount=Decimal("1200000"),
            loan_term_years=Decimal("10"),
            expected_rent=Decimal("10000"),
            other_costs=Decimal("500"),
        )
        result = run(
            Scenario(id="m", name="m", inputs=inputs),
            expense_reduction=Adjustment(FIXED, Decimal("100")),
        )
        assert result.monthly_timeline[0].expenses == Decimal("10500")
        assert result.months_to_positive == 60
        assert result.monthly_timeline[-1].expenses == Decimal("10000")


class TestNegativeCashFlowScenarios:
    def test_filters_and_keeps_order(self, make_inputs, negative_scenario):
        positive = Scenario(
            id="pos", name="pos",
            inputs=make_inputs(expected_rent=Decimal("10000"), other_costs=Decimal("9000")),
        )
        breakeven = Scenario(
            id="even", name="even",
            inputs=make_inputs(expected_rent=Decimal("10000"), other_costs=Decimal("10000")),
        )
        other_negative = Scenario(
            id="neg-2", name="neg-2",
            inputs=make_inputs(other_costs=Decimal("100")),
        )
        result = negative_cash_flow_scenarios(
            [negative_scenario, positive, breakeven, other_negative]
        )
        assert [s.id for s in result] == ["neg-1", "neg-2"]

    def test_empty(self):
        assert negative_cash_flow_scenarios([]) == []


class TestBuildCalculationRecord:
    def test_record_fields(self, negative_scenario):
        inputs = ProfitTimerInputs(
            scenario=negative_scenario,
            rent_growth=Adjustment(PCT, Decimal("5")),
            expense_reduction=Adjustment(FIXED, Decimal("0")),
        )
        result = calculate_time_to_positive(inputs)
        now = datetime(2026, 1, 15, tzinfo=timezone.utc)
        record = build_calculation_record("Studio +5%", inputs, result, now=now)
        assert record.name == "Studio +5%"
        assert record.scenario_id == "neg-1"
        assert record.rent_growth == Adjustment(PCT, Decimal("5"))
        assert record.expense_reduction.type is FIXED
        assert record.months_to_positive == 24
        assert record.years_to_positive == Decimal("2.0")
        assert record.created_at == record.updated_at == now

    def test_unique_ids(self, negative_scenario):
        inputs = ProfitTimerInputs(scenario=negative_scenario)
        result = calculate_time_to_positive(inputs)
        a = build_calculation_record("a", inputs, result)
        b = build_calculation_record("b", inputs, result)
        assert a.id != b.id
        assert a.created_at.tzinfo is not None
