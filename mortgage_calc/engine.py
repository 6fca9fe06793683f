"""
Calculation engine: derives the monthly payment breakdown for a loan profile
and a set of normalized inputs.

The engine is pure (profile + inputs in -> result out) and keeps no state
between calls, so it is safe to invoke on every keystroke.

Order of derivation matters: the origination fee is rolled into the loan, and
both principal & interest and PMI are computed on that fee-inclusive balance.
Hazard insurance, on the other hand, is charged on the original loan amount.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass

from mortgage_calc.errors import InvalidInputError
from mortgage_calc.inputs import CalculationInputs
from mortgage_calc.profiles import LoanProfile

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class CalculationResult:
    """Currency amounts for one calculation pass (not rounded)."""

    down_payment_amount: float
    net_principal: float
    origination_fees: float
    total_borrowed: float
    monthly_principal_and_interest: float
    monthly_pmi: float
    annual_insurance: float
    monthly_insurance: float
    monthly_taxes: float
    total_monthly_payment: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def amortized_payment(principal: float, annual_rate: float, term_years: int) -> float:
    r"""
    Level monthly payment that fully amortizes `principal` over `term_years`.

    With n = term_years * 12 payments and monthly rate i = annual_rate / 12:

        M = P * i * (1 + i)^n / ((1 + i)^n - 1)

    A zero rate degenerates to straight-line repayment, M = P / n.
    """
    if not math.isfinite(principal):
        raise InvalidInputError("principal", principal, "must be finite")
    if not math.isfinite(annual_rate) or annual_rate < 0:
        raise InvalidInputError("interest_rate", annual_rate, "must be a finite non-negative rate")
    if term_years < 1:
        raise InvalidInputError("term_years", term_years, "must be at least 1")

    n = term_years * MONTHS_PER_YEAR
    i = annual_rate / MONTHS_PER_YEAR
    if i == 0:
        return principal / n
    try:
        growth = (1 + i) ** n
    except OverflowError:
        raise InvalidInputError("interest_rate", annual_rate, "too large to amortize") from None
    payment = principal * (i * growth) / (growth - 1)
    if not math.isfinite(payment):
        raise InvalidInputError("principal", principal, "payment is not a finite amount")
    return payment


def calculate(profile: LoanProfile, inputs: CalculationInputs) -> CalculationResult:
    """Compute the full breakdown. Raises InvalidInputError on a contract violation."""
    _validate_profile(profile)
    _validate_inputs(inputs)

    down_payment_amount = inputs.loan_amount * inputs.down_payment_rate
    net_principal = inputs.loan_amount - down_payment_amount
    origination_fees = profile.loan_fee_rate * net_principal
    total_borrowed = net_principal + origination_fees

    monthly_pi = amortized_payment(total_borrowed, inputs.interest_rate, inputs.term_years)
    monthly_pmi = profile.standard_pmi_rate * total_borrowed / MONTHS_PER_YEAR
    annual_insurance = inputs.insurance_rate * inputs.loan_amount
    monthly_insurance = annual_insurance / MONTHS_PER_YEAR
    monthly_taxes = inputs.annual_taxes / MONTHS_PER_YEAR
    total = monthly_pi + monthly_pmi + monthly_taxes + monthly_insurance

    logger.debug(
        "%s: borrowed=%.2f p&i=%.2f pmi=%.2f total=%.2f",
        profile.short_name,
        total_borrowed,
        monthly_pi,
        monthly_pmi,
        total,
    )
    return CalculationResult(
        down_payment_amount=down_payment_amount,
        net_principal=net_principal,
        origination_fees=origination_fees,
        total_borrowed=total_borrowed,
        monthly_principal_and_interest=monthly_pi,
        monthly_pmi=monthly_pmi,
        annual_insurance=annual_insurance,
        monthly_insurance=monthly_insurance,
        monthly_taxes=monthly_taxes,
        total_monthly_payment=total,
    )


def _validate_profile(profile: LoanProfile) -> None:
    for field in (
        "loan_fee_rate",
        "standard_pmi_rate",
        "minimum_down_payment_rate",
        "fixed_interest_rate_estimate",
    ):
        _require_non_negative(field, getattr(profile, field))


def _validate_inputs(inputs: CalculationInputs) -> None:
    for field in ("loan_amount", "down_payment_rate", "interest_rate", "annual_taxes", "insurance_rate"):
        _require_non_negative(field, getattr(inputs, field))
    if inputs.down_payment_rate > 1:
        raise InvalidInputError("down_payment_rate", inputs.down_payment_rate, "must not exceed 1")
    term = inputs.term_years
    if isinstance(term, bool) or not isinstance(term, int):
        raise InvalidInputError("term_years", term, "must be a whole number of years")
    if term < 1:
        raise InvalidInputError("term_years", term, "must be at least 1")


def _require_non_negative(field: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, value, "must be a number")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite or value < 0:
        raise InvalidInputError(field, value, "must be a finite non-negative number")
