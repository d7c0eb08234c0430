"""Tests for the fixed grading rubric."""

from loan_grader.candidate.domain.parser import ParsedOutput, parse_output
from loan_grader.scoring.domain.cases import (
    BlendedRateCase,
    CompoundInterestCase,
    ExampleCase,
    MonthlyRateCase,
    NoResultExpectedCase,
    default_cases,
)
from tests.candidate_output import output_lines, reference_lines


def _parsed(
    requested: str = "1000",
    rate: str = "7.0",
    monthly: str = "30.78",
    total: str = "1108.10",
) -> ParsedOutput:
    return parse_output(
        output_lines(requested=requested, rate=rate, monthly=monthly, total=total)
    )


def _nothing() -> ParsedOutput:
    return parse_output([])


class TestDefaultCases:
    def test_fixed_order_and_amounts(self) -> None:
        cases = default_cases()

        assert [(c.name, c.amount, c.max_score) for c in cases] == [
            ("Example case", 1000, 100),
            ("Amount too high", 15100, 25),
            ("Amount too low", 900, 25),
            ("Increments", 1050, 25),
            ("Monthly rate calculation", 1000, 100),
            ("Blended interest rates", 1200, 100),
            ("Compound interest", 1200, 100),
        ]


class TestExampleCase:
    def test_reference_values_score_full_marks(self) -> None:
        result = ExampleCase().score(parse_output(reference_lines()))

        assert result.score == 100
        assert result.max_score == 100
        assert result.diagnostics == []

    def test_equal_values_with_different_scale_match(self) -> None:
        result = ExampleCase().score(_parsed(requested="1000.00", rate="7"))

        assert result.score == 100

    def test_each_field_is_worth_25(self) -> None:
        assert ExampleCase().score(_parsed(requested="1100")).score == 75
        assert ExampleCase().score(_parsed(rate="7.1")).score == 75
        assert ExampleCase().score(_parsed(monthly="30.79")).score == 75
        assert ExampleCase().score(_parsed(total="1200")).score == 75

    def test_total_within_tolerance_scores_20(self) -> None:
        result = ExampleCase().score(_parsed(total="1108.12"))

        assert result.score == 95
        assert len(result.diagnostics) == 1
        assert "reduced precision" in result.diagnostics[0]

    def test_monthly_has_no_tolerance(self) -> None:
        result = ExampleCase().score(_parsed(monthly="30.77"))

        assert result.score == 75
        assert "Monthly repayment" in result.diagnostics[0]

    def test_all_wrong_scores_zero_with_diagnostic_per_field(self) -> None:
        result = ExampleCase().score(
            _parsed(requested="1", rate="1", monthly="1", total="1")
        )

        assert result.score == 0
        assert len(result.diagnostics) == 4

    def test_no_result_scores_zero(self) -> None:
        result = ExampleCase().score(_nothing())

        assert result.score == 0
        assert "did not produce 4 output values" in result.diagnostics[0]


class TestNoResultExpectedCases:
    def _cases(self) -> list[NoResultExpectedCase]:
        return [c for c in default_cases() if isinstance(c, NoResultExpectedCase)]

    def test_there_are_three_boundary_cases(self) -> None:
        assert [c.amount for c in self._cases()] == [15100, 900, 1050]

    def test_no_output_scores_full_marks(self) -> None:
        for case in self._cases():
            result = case.score(_nothing())
            assert result.score == 25
            assert result.max_score == 25
            assert result.diagnostics == []

    def test_refusal_message_scores_full_marks(self) -> None:
        parsed = parse_output(["It is not possible to provide a quote at this time."])
        for case in self._cases():
            assert case.score(parsed).score == 25

    def test_unparsable_output_scores_full_marks(self) -> None:
        parsed = _parsed(total="n/a")
        for case in self._cases():
            assert case.score(parsed).score == 25

    def test_four_values_score_zero(self) -> None:
        for case in self._cases():
            result = case.score(_parsed())
            assert result.score == 0
            assert f"({case.amount})" in result.diagnostics[0]

    def test_increments_diagnostic_names_the_rule(self) -> None:
        case = NoResultExpectedCase(
            name="Increments", amount=1050, reason="is not an increment of 100"
        )

        result = case.score(_parsed())

        assert result.diagnostics == [
            "No result should be produced if the amount (1050)"
            " is not an increment of 100"
        ]


class TestMonthlyRateCase:
    def test_exact_match_scores_100(self) -> None:
        result = MonthlyRateCase().score(parse_output(reference_lines()))

        assert result.score == 100
        assert result.diagnostics == []

    def test_reduced_precision_scores_80(self) -> None:
        result = MonthlyRateCase().score(_parsed(monthly="30.8"))

        assert result.score == 80
        assert "reduced precision" in result.diagnostics[0]

    def test_divided_by_twelve_scores_80(self) -> None:
        result = MonthlyRateCase().score(_parsed(monthly="30.88"))

        assert result.score == 80
        assert "divided annual rate by 12" in result.diagnostics[0]

    def test_divided_by_twelve_tolerance(self) -> None:
        assert MonthlyRateCase().score(_parsed(monthly="30.90")).score == 80
        assert MonthlyRateCase().score(_parsed(monthly="30.91")).score == 0

    def test_wrong_value_scores_zero(self) -> None:
        result = MonthlyRateCase().score(_parsed(monthly="45.00"))

        assert result.score == 0
        assert result.diagnostics

    def test_no_result_scores_zero(self) -> None:
        assert MonthlyRateCase().score(_nothing()).score == 0


class TestBlendedRateCase:
    def test_within_tolerance_scores_100(self) -> None:
        assert BlendedRateCase().score(_parsed(monthly="36.96")).score == 100
        assert BlendedRateCase().score(_parsed(monthly="36.98")).score == 100
        assert BlendedRateCase().score(_parsed(monthly="36.94")).score == 100

    def test_even_average_scores_20(self) -> None:
        result = BlendedRateCase().score(_parsed(monthly="30.88"))

        assert result.score == 20
        assert "evenly averaged" in result.diagnostics[0]

    def test_wrong_value_scores_zero(self) -> None:
        assert BlendedRateCase().score(_parsed(monthly="36.99")).score == 0

    def test_no_result_scores_zero(self) -> None:
        assert BlendedRateCase().score(_nothing()).score == 0


class TestCompoundInterestCase:
    def test_amortised_total_scores_100(self) -> None:
        result = CompoundInterestCase().score(_parsed(total="1108.10"))

        assert result.score == 100
        assert result.diagnostics == []

    def test_amortised_total_within_tolerance_scores_100(self) -> None:
        assert CompoundInterestCase().score(_parsed(total="1108.11")).score == 100

    def test_unamortised_band_scores_25(self) -> None:
        result = CompoundInterestCase().score(_parsed(total="1250"))

        assert result.score == 25
        assert len(result.diagnostics) == 2
        assert "without an amortising schedule" in result.diagnostics[1]

    def test_band_is_exclusive(self) -> None:
        assert CompoundInterestCase().score(_parsed(total="1200")).score == 0
        assert CompoundInterestCase().score(_parsed(total="1300")).score == 0

    def test_far_too_high_scores_zero_with_diagnosis(self) -> None:
        result = CompoundInterestCase().score(_parsed(total="1350"))

        assert result.score == 0
        assert "far too high" in result.diagnostics[-1]

    def test_too_low_scores_zero_without_far_too_high(self) -> None:
        result = CompoundInterestCase().score(_parsed(total="1000"))

        assert result.score == 0
        assert len(result.diagnostics) == 1

    def test_no_result_scores_zero(self) -> None:
        assert CompoundInterestCase().score(_nothing()).score == 0
