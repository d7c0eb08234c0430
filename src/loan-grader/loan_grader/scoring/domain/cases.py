"""The fixed grading rubric for the loan repayment exercise.

Reference figures come from the exercise's worked example: a £1000 loan over
36 months at 7.0% repays £30.78 a month and £1108.10 in total. The diagnosis
branches are heuristics on the observed values, not proof of a particular bug.
"""

from dataclasses import dataclass
from decimal import Decimal

from loan_grader.candidate.domain.parser import ParsedOutput, describe_failure
from loan_grader.scoring.domain.case import GradingCase
from loan_grader.scoring.domain.result import CaseResult
from loan_grader.scoring.domain.tolerance import equal_within

EXAMPLE_AMOUNT = 1000
BLENDED_AMOUNT = 1200

EXPECTED_REQUESTED_AMOUNT = Decimal("1000")
EXPECTED_INTEREST_RATE = Decimal("7.0")
EXPECTED_MONTHLY_REPAYMENT = Decimal("30.78")
EXPECTED_TOTAL_REPAYMENT = Decimal("1108.10")
EXPECTED_BLENDED_MONTHLY_REPAYMENT = Decimal("36.96")

# Monthly repayment produced by dividing the annual rate by 12, and also by
# taking the plain mean of the lenders' rates for the blended case.
NAIVE_MONTHLY_REPAYMENT = Decimal("30.88")

# Totals in this band suggest the principal was compounded without amortising.
UNAMORTISED_TOTAL_LOWER = Decimal("1200")
UNAMORTISED_TOTAL_UPPER = Decimal("1300")

# Empirical bands; revisit if the reference figures above ever change.
TOLERANCE = Decimal("0.02")


def _no_result(name: str, max_score: int, parsed: ParsedOutput) -> CaseResult:
    return CaseResult(
        name=name,
        score=0,
        max_score=max_score,
        diagnostics=[f"Unexpected output from submission, {describe_failure(parsed)}"],
    )


@dataclass(frozen=True)
class ExampleCase:
    """The worked example: every field is checked, 25 points each."""

    name: str = "Example case"
    amount: int = EXAMPLE_AMOUNT
    max_score: int = 100

    def score(self, parsed: ParsedOutput) -> CaseResult:
        if parsed.output is None:
            return _no_result(self.name, self.max_score, parsed)
        output = parsed.output
        score = 0
        diagnostics: list[str] = []

        if output.requested_amount == EXPECTED_REQUESTED_AMOUNT:
            score += 25
        else:
            diagnostics.append(
                f"Requested amount {output.requested_amount} does not match"
                f" {EXPECTED_REQUESTED_AMOUNT}"
            )

        if output.interest_rate == EXPECTED_INTEREST_RATE:
            score += 25
        else:
            diagnostics.append(
                f"Interest rate {output.interest_rate} does not match"
                f" {EXPECTED_INTEREST_RATE}"
            )

        if output.monthly_repayment == EXPECTED_MONTHLY_REPAYMENT:
            score += 25
        else:
            diagnostics.append(
                f"Monthly repayment {output.monthly_repayment} does not match"
                f" {EXPECTED_MONTHLY_REPAYMENT}"
            )

        if output.total_repayment == EXPECTED_TOTAL_REPAYMENT:
            score += 25
        elif equal_within(output.total_repayment, EXPECTED_TOTAL_REPAYMENT, TOLERANCE):
            score += 20
            diagnostics.append(
                f"Total repayment has reduced precision; total repayment:"
                f" {output.total_repayment}"
            )
        else:
            diagnostics.append(
                f"Total repayment {output.total_repayment} does not match"
                f" {EXPECTED_TOTAL_REPAYMENT}"
            )

        return CaseResult(
            name=self.name,
            score=score,
            max_score=self.max_score,
            diagnostics=diagnostics,
        )


@dataclass(frozen=True)
class NoResultExpectedCase:
    """An invalid loan amount: full credit only when nothing usable comes back."""

    name: str
    amount: int
    reason: str
    max_score: int = 25

    def score(self, parsed: ParsedOutput) -> CaseResult:
        if parsed.produced_result:
            return CaseResult(
                name=self.name,
                score=0,
                max_score=self.max_score,
                diagnostics=[
                    f"No result should be produced if the amount ({self.amount})"
                    f" {self.reason}"
                ],
            )
        return CaseResult(name=self.name, score=self.max_score, max_score=self.max_score)


@dataclass(frozen=True)
class MonthlyRateCase:
    """Checks the conversion of the annual rate into a monthly rate."""

    name: str = "Monthly rate calculation"
    amount: int = EXAMPLE_AMOUNT
    max_score: int = 100

    def score(self, parsed: ParsedOutput) -> CaseResult:
        if parsed.output is None:
            return _no_result(self.name, self.max_score, parsed)
        monthly = parsed.output.monthly_repayment

        if monthly == EXPECTED_MONTHLY_REPAYMENT:
            return CaseResult(name=self.name, score=100, max_score=self.max_score)

        if equal_within(monthly, EXPECTED_MONTHLY_REPAYMENT, TOLERANCE):
            return CaseResult(
                name=self.name,
                score=80,
                max_score=self.max_score,
                diagnostics=[
                    f"Result has reduced precision; monthly payment: {monthly}"
                ],
            )

        if equal_within(monthly, NAIVE_MONTHLY_REPAYMENT, TOLERANCE):
            return CaseResult(
                name=self.name,
                score=80,
                max_score=self.max_score,
                diagnostics=[
                    f"Candidate potentially divided annual rate by 12;"
                    f" monthly payment: {monthly}"
                ],
            )

        return CaseResult(
            name=self.name,
            score=0,
            max_score=self.max_score,
            diagnostics=[
                f"Failed to produce expected monthly payment"
                f" ({EXPECTED_MONTHLY_REPAYMENT}): {monthly}"
            ],
        )


@dataclass(frozen=True)
class BlendedRateCase:
    """Checks that lenders' rates are blended by the amount each one lends."""

    name: str = "Blended interest rates"
    amount: int = BLENDED_AMOUNT
    max_score: int = 100

    def score(self, parsed: ParsedOutput) -> CaseResult:
        if parsed.output is None:
            return _no_result(self.name, self.max_score, parsed)
        monthly = parsed.output.monthly_repayment

        if equal_within(monthly, EXPECTED_BLENDED_MONTHLY_REPAYMENT, TOLERANCE):
            return CaseResult(name=self.name, score=100, max_score=self.max_score)

        if equal_within(monthly, NAIVE_MONTHLY_REPAYMENT, TOLERANCE):
            return CaseResult(
                name=self.name,
                score=20,
                max_score=self.max_score,
                diagnostics=[
                    f"Candidate appears to have evenly averaged the interest rates"
                    f" of the lenders; monthly payment: {monthly}"
                ],
            )

        return CaseResult(
            name=self.name,
            score=0,
            max_score=self.max_score,
            diagnostics=[
                f"Failed to produce expected blended monthly payment"
                f" ({EXPECTED_BLENDED_MONTHLY_REPAYMENT}): {monthly}"
            ],
        )


@dataclass(frozen=True)
class CompoundInterestCase:
    """Checks that the total repayment follows an amortising schedule."""

    name: str = "Compound interest"
    amount: int = BLENDED_AMOUNT
    max_score: int = 100

    def score(self, parsed: ParsedOutput) -> CaseResult:
        if parsed.output is None:
            return _no_result(self.name, self.max_score, parsed)
        total = parsed.output.total_repayment

        if equal_within(total, EXPECTED_TOTAL_REPAYMENT, TOLERANCE):
            return CaseResult(name=self.name, score=100, max_score=self.max_score)

        diagnostics = [
            f"Failed to produce expected amortised ({EXPECTED_TOTAL_REPAYMENT})"
            f" total repayment: {total}"
        ]

        if UNAMORTISED_TOTAL_LOWER < total < UNAMORTISED_TOTAL_UPPER:
            diagnostics.append(
                f"Candidate has potentially compounded the principal without an"
                f" amortising schedule; total repayment: {total}"
            )
            return CaseResult(
                name=self.name, score=25, max_score=self.max_score, diagnostics=diagnostics
            )

        if total > UNAMORTISED_TOTAL_UPPER:
            diagnostics.append(
                f"Candidate's total repayment is far too high; total repayment: {total}"
            )

        return CaseResult(
            name=self.name, score=0, max_score=self.max_score, diagnostics=diagnostics
        )


def default_cases() -> list[GradingCase]:
    """Return the seven cases in their fixed reporting order."""
    return [
        ExampleCase(),
        NoResultExpectedCase(name="Amount too high", amount=15100, reason="is too high"),
        NoResultExpectedCase(name="Amount too low", amount=900, reason="is too low"),
        NoResultExpectedCase(
            name="Increments", amount=1050, reason="is not an increment of 100"
        ),
        MonthlyRateCase(),
        BlendedRateCase(),
        CompoundInterestCase(),
    ]

