"""CandidateOutput — the four values a candidate prints for one loan request."""

from decimal import Decimal

from pydantic import BaseModel


class CandidateOutput(BaseModel, frozen=True):
    """Immutable record of one successful candidate invocation.

    Values are kept as exact decimals so that rubric comparisons never suffer
    from binary floating-point rounding.
    """

    requested_amount: Decimal
    interest_rate: Decimal
    monthly_repayment: Decimal
    total_repayment: Decimal
