"""Output parser — turns raw candidate stdout lines into a CandidateOutput.

Output grammar, one value per line::

    [label text ...] <token>

Only the last whitespace-separated token of each line matters. Every character
of that token other than an ASCII digit, ``.`` or ``-`` is discarded, so
``Monthly repayment: £30.78`` yields ``30.78``. A blank line yields an empty
value and still counts towards the total.

Exactly four values must be present, in the order requested amount, interest
rate, monthly repayment, total repayment. Anything else is reported as an
explicit absence rather than an error: for invalid loan amounts producing no
result is the correct behaviour.
"""

import re
from decimal import Decimal, InvalidOperation
from enum import StrEnum

from pydantic import BaseModel, Field

from loan_grader.candidate.domain.output import CandidateOutput

EXPECTED_VALUE_COUNT = 4

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


class ParseFailure(StrEnum):
    WRONG_VALUE_COUNT = "wrong_value_count"
    UNPARSABLE_VALUE = "unparsable_value"


class ParsedOutput(BaseModel, frozen=True):
    """Result of parsing one invocation's stdout.

    Exactly one of ``output`` and ``failure`` is set. ``values`` always holds the
    cleaned per-line tokens, which is useful for diagnostics either way.
    """

    output: CandidateOutput | None = None
    failure: ParseFailure | None = None
    values: list[str] = Field(default_factory=list)

    @property
    def produced_result(self) -> bool:
        return self.output is not None


def clean_line(line: str) -> str:
    """Return the numeric characters of the last whitespace-separated token."""
    tokens = line.split()
    last_token = tokens[-1] if tokens else ""
    return _NON_NUMERIC.sub("", last_token)


def parse_output(lines: list[str]) -> ParsedOutput:
    values = [clean_line(line) for line in lines]

    if len(values) != EXPECTED_VALUE_COUNT:
        return ParsedOutput(failure=ParseFailure.WRONG_VALUE_COUNT, values=values)

    try:
        decimals = [Decimal(value) for value in values]
    except InvalidOperation:
        return ParsedOutput(failure=ParseFailure.UNPARSABLE_VALUE, values=values)

    requested_amount, interest_rate, monthly_repayment, total_repayment = decimals
    return ParsedOutput(
        output=CandidateOutput(
            requested_amount=requested_amount,
            interest_rate=interest_rate,
            monthly_repayment=monthly_repayment,
            total_repayment=total_repayment,
        ),
        values=values,
    )


def describe_failure(parsed: ParsedOutput) -> str:
    """Human-readable explanation of why no result was produced."""
    if parsed.failure is ParseFailure.WRONG_VALUE_COUNT:
        return (
            f"did not produce {EXPECTED_VALUE_COUNT} output values: {parsed.values}"
        )
    if parsed.failure is ParseFailure.UNPARSABLE_VALUE:
        return f"outputs are not parsable: {parsed.values}"
    return "produced a result"
