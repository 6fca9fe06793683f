"""Mortgage payment calculator: loan profiles, input normalization, payment engine."""

from mortgage_calc.calculator import CalculationPass, MortgageCalculator
from mortgage_calc.config import DEFAULTS, CalculatorDefaults
from mortgage_calc.engine import CalculationResult, amortized_payment, calculate
from mortgage_calc.errors import InvalidInputError, MortgageCalcError, OutOfRangeError
from mortgage_calc.inputs import (
    CalculationInputs,
    NormalizationResult,
    normalize_field,
    normalize_inputs,
)
from mortgage_calc.interfaces import Presenter
from mortgage_calc.profiles import (
    DEFAULT_CATALOG,
    FHA,
    TRADITIONAL,
    USDA,
    LoanProfile,
    LoanType,
    ProfileCatalog,
)

__version__ = "0.1.0"

__all__ = [
    "MortgageCalculator",
    "CalculationPass",
    "CalculatorDefaults",
    "DEFAULTS",
    "CalculationResult",
    "amortized_payment",
    "calculate",
    "MortgageCalcError",
    "OutOfRangeError",
    "InvalidInputError",
    "CalculationInputs",
    "NormalizationResult",
    "normalize_field",
    "normalize_inputs",
    "Presenter",
    "LoanProfile",
    "LoanType",
    "ProfileCatalog",
    "DEFAULT_CATALOG",
    "USDA",
    "FHA",
    "TRADITIONAL",
]
