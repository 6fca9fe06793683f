"""Demo: monthly payment breakdown for each loan type on a $300,000 home."""

import logging

from mortgage_calc.calculator import MortgageCalculator
from mortgage_calc.config import log_level
from mortgage_calc.engine import CalculationResult
from mortgage_calc.profiles import LoanProfile, LoanType


class ConsolePresenter:
    """Prints what a UI would render; formatting lives here, not in the engine."""

    def show_profile(self, profile: LoanProfile) -> None:
        rates = profile.rates_as_percent()
        print(f"=== {profile.name} ({profile.short_name}) ===")
        print(
            f"   Loan fee {rates['loan_fee']:.2f}%  |  PMI {rates['standard_pmi']:.2f}%"
            f"  |  Minimum down {rates['minimum_down_payment']:.2f}%"
        )

    def show_inputs(self, echo: dict[str, float], corrected: frozenset[str]) -> None:
        if corrected:
            print(f"   Defaulted: {', '.join(sorted(corrected))}")
        print(
            f"   Loan ${echo['loan_amount']:,}  down {echo['down_payment_rate']:.2f}%"
            f"  rate {echo['interest_rate']:.2f}%  term {echo['term_years']}y"
        )

    def show_result(self, result: CalculationResult) -> None:
        print(f"   Total borrowed      = ${result.total_borrowed:,.2f}")
        print(f"   Down payment        = ${result.down_payment_amount:,.2f}")
        print(f"   Origination fees    = ${result.origination_fees:,.2f}")
        print(f"   Principal+interest  = ${result.monthly_principal_and_interest:,.2f}")
        print(f"   PMI                 = ${result.monthly_pmi:,.2f}")
        print(f"   Insurance           = ${result.monthly_insurance:,.2f}")
        print(f"   Taxes               = ${result.monthly_taxes:,.2f}")
        print(f"   Total monthly       = ${result.total_monthly_payment:,.2f}\n")


def main() -> None:
    logging.basicConfig(level=log_level())
    calculator = MortgageCalculator()
    # Taxes and insurance stay fixed; rate and down payment follow each profile.
    calculator.recalculate({"loan_amount": "300000", "annual_taxes": "3600", "insurance_rate": "0.5"})
    calculator.presenter = ConsolePresenter()
    for loan_type in LoanType:
        calculator.select_profile(loan_type)
        calculator.recalculate()
    print("Done.")


if __name__ == "__main__":
    main()
