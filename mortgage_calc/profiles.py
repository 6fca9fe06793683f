"""
Loan-type profiles (data only; calculation lives in the engine).

The catalog is a fixed, ordered tuple of three `LoanProfile` records indexed
by the closed `LoanType` enumeration. Profiles are frozen and the catalog
exposes no mutation, so values never change after construction.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import asdict, dataclass
from enum import IntEnum

from mortgage_calc.errors import OutOfRangeError


class LoanType(IntEnum):
    """Catalog index of each loan type."""

    USDA = 0
    FHA = 1
    TRADITIONAL = 2


@dataclass(frozen=True)
class LoanProfile:
    """
    Financial parameters of one loan type. Rates are decimal fractions.

    - `loan_fee_rate` is charged on the amount borrowed net of down payment
      and rolled into the loan.
    - `standard_pmi_rate` is annual, charged on the fee-inclusive balance.
    - `minimum_down_payment_rate` and `fixed_interest_rate_estimate` are the
      defaults used when the user leaves those inputs blank.
    """

    name: str
    short_name: str
    loan_fee_rate: float
    standard_pmi_rate: float
    minimum_down_payment_rate: float
    fixed_interest_rate_estimate: float
    description: str

    def rates_as_percent(self) -> dict[str, float]:
        """Fee, PMI and minimum down payment as percentages (for an info table)."""
        return {
            "loan_fee": round(self.loan_fee_rate * 100, 2),
            "standard_pmi": round(self.standard_pmi_rate * 100, 2),
            "minimum_down_payment": round(self.minimum_down_payment_rate * 100, 2),
        }

    def to_dict(self) -> dict[str, str | float]:
        return asdict(self)


USDA = LoanProfile(
    name="USDA Rural Housing Development Loan",
    short_name="USDA",
    loan_fee_rate=0.02,
    standard_pmi_rate=0.005,
    minimum_down_payment_rate=0.0,
    fixed_interest_rate_estimate=0.035,
    description=(
        "USDA Rural Housing Development Loans are granted to home purchasers who meet "
        "specific income requirements and plan to purchase homes in areas specified by "
        "the USDA. Most other FHA loan requirements apply as well. There is a 2% fee that "
        "is built into the total loan amount ($100,000 loan will actually be $102,000), "
        "and a 0.5% mortgage guarantee monthly fee, which is ultimately the USDA's version "
        "of PMI. There is no minimum down payment for USDA loans, however you should still "
        "have money set aside for closing costs and other expenses."
    ),
)

FHA = LoanProfile(
    name="FHA Guaranteed Loan",
    short_name="FHA",
    loan_fee_rate=0.008,
    standard_pmi_rate=0.015,
    minimum_down_payment_rate=0.035,
    fixed_interest_rate_estimate=0.035,
    description=(
        "FHA Loans are granted through the HUD program, and are a great option for "
        "first-time home buyers, and those who do not have the means of coming up with the "
        "traditional 20% down payment required for most mortgages. FHA requires a minimum "
        "down payment of 3.5% and roughly a 0.8% fee. You must intend to live in the home "
        "as a primary residence, and also meet certain other criteria."
    ),
)

TRADITIONAL = LoanProfile(
    name="Traditional Loan",
    short_name="TRADITIONAL",
    loan_fee_rate=0.02,
    standard_pmi_rate=0.02,
    minimum_down_payment_rate=0.2,
    fixed_interest_rate_estimate=0.04,
    description=(
        "Traditional loans typically require up to 20% down, and also will have PMI issued "
        "against the loan. In some cases there is no PMI if putting down more than 20% of "
        "the loan. These are traditionally more difficult to secure if you have less than "
        "perfect credit."
    ),
)


class ProfileCatalog:
    """
    Read-only, ordered registry of loan profiles.

    Lookups are strict: negative indexes are not wrapped around and anything
    outside [0, profile_count() - 1] raises OutOfRangeError.
    """

    def __init__(self, profiles: tuple[LoanProfile, ...]) -> None:
        self._profiles = tuple(profiles)

    def profile_count(self) -> int:
        return len(self._profiles)

    def profile(self, index: int | LoanType) -> LoanProfile:
        """Return the profile at `index`. Raises OutOfRangeError if not in the catalog."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise OutOfRangeError(index, self.profile_count())
        if not 0 <= index < self.profile_count():
            raise OutOfRangeError(index, self.profile_count())
        return self._profiles[index]

    def by_short_name(self, short_name: str) -> LoanProfile:
        """Case-insensitive lookup by abbreviation (e.g. 'fha')."""
        wanted = short_name.strip().upper()
        for profile in self._profiles:
            if profile.short_name.upper() == wanted:
                return profile
        raise OutOfRangeError(short_name, self.profile_count())

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self) -> Iterator[LoanProfile]:
        return iter(self._profiles)


# Order must match LoanType.
DEFAULT_CATALOG = ProfileCatalog((USDA, FHA, TRADITIONAL))
