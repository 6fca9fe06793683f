"""
User-editable calculation inputs and their normalization.

Raw values arrive as the user typed them (strings, numbers or nothing at all).
Normalization never rejects a value: anything missing, unparseable or out of
its domain is replaced by a default, and the replacement is reported back so
the presentation layer can echo it into the edited field.

Rates are entered as percentages ("3.5") and stored as decimal fractions
(0.035). Parsing is lenient in the way browser form parsing is: leading
whitespace is skipped, the longest numeric prefix is read and trailing text
is dropped ("250,000" reads as 250, "3.5%" as 3.5).
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from mortgage_calc.config import DEFAULTS, CalculatorDefaults
from mortgage_calc.errors import InvalidInputError
from mortgage_calc.profiles import LoanProfile

logger = logging.getLogger(__name__)

FIELDS = (
    "loan_amount",
    "down_payment_rate",
    "interest_rate",
    "term_years",
    "annual_taxes",
    "insurance_rate",
)
INTEGER_FIELDS = frozenset({"loan_amount", "term_years", "annual_taxes"})
PERCENT_FIELDS = frozenset({"down_payment_rate", "interest_rate", "insurance_rate"})

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass
class CalculationInputs:
    """Current (always valid) input values. Rates are decimal fractions."""

    loan_amount: int
    down_payment_rate: float
    interest_rate: float
    term_years: int
    annual_taxes: int
    insurance_rate: float

    @classmethod
    def initial(
        cls, profile: LoanProfile, defaults: CalculatorDefaults = DEFAULTS
    ) -> CalculationInputs:
        """Inputs as they stand before the user has typed anything."""
        return cls(
            loan_amount=defaults.loan_amount,
            down_payment_rate=profile.minimum_down_payment_rate,
            interest_rate=profile.fixed_interest_rate_estimate,
            term_years=defaults.term_years,
            annual_taxes=defaults.annual_taxes,
            insurance_rate=defaults.insurance_rate,
        )

    def to_raw(self) -> dict[str, float]:
        """Values in entry units (percent for rates), suitable for re-normalizing."""
        return {field: _entry_value(field, getattr(self, field)) for field in FIELDS}

    def copy(self) -> CalculationInputs:
        return replace(self)


@dataclass(frozen=True)
class NormalizationResult:
    """
    Outcome of one normalization pass.

    - `inputs`: the valid values to calculate with.
    - `echo`: per-field value to write back into the editable field, in entry
      units (rates as percentages rounded to 2 decimals).
    - `corrected`: fields whose raw value could not be used as given and were
      defaulted or clamped; these are the ones the UI should overwrite.
    """

    inputs: CalculationInputs
    echo: dict[str, float]
    corrected: frozenset[str]


def parse_int(raw: Any) -> int | None:
    """Leading-integer parse; None when no integer can be read."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, numbers.Real):
        try:
            value = float(raw)
        except OverflowError:
            return None
        return int(value) if math.isfinite(value) else None
    if not isinstance(raw, str):
        return None
    match = _INT_PREFIX.match(raw)
    if not match:
        return None
    try:
        parsed = int(match.group(1))
        # Must also be representable as a float for the engine.
        float(parsed)
    except (ValueError, OverflowError):
        return None
    return parsed


def parse_float(raw: Any) -> float | None:
    """Leading-number parse; None when nothing finite can be read."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, numbers.Real):
        try:
            value = float(raw)
        except OverflowError:
            return None
    elif isinstance(raw, str):
        match = _FLOAT_PREFIX.match(raw)
        if not match:
            return None
        value = float(match.group(1))
    else:
        return None
    return value if math.isfinite(value) else None


def field_default(
    field: str,
    profile: LoanProfile,
    previous: CalculationInputs | None = None,
    defaults: CalculatorDefaults = DEFAULTS,
) -> int | float:
    """Value substituted for `field` when its raw input is unusable."""
    if field == "loan_amount":
        return previous.loan_amount if previous is not None else defaults.loan_amount
    if field == "down_payment_rate":
        return profile.minimum_down_payment_rate
    if field == "interest_rate":
        return profile.fixed_interest_rate_estimate
    if field == "term_years":
        return defaults.term_years
    if field == "annual_taxes":
        return defaults.annual_taxes
    if field == "insurance_rate":
        return defaults.insurance_rate
    raise InvalidInputError(field, None, "unknown input field")


def normalize_field(
    field: str,
    raw: Any,
    profile: LoanProfile,
    previous: CalculationInputs | None = None,
    defaults: CalculatorDefaults = DEFAULTS,
) -> tuple[int | float, bool]:
    """
    Normalize one raw value. Returns (value, corrected).

    Raises InvalidInputError only for an unknown field name.
    """
    default = field_default(field, profile, previous, defaults)

    if field in INTEGER_FIELDS:
        value: int | float | None = parse_int(raw)
    else:
        value = parse_float(raw)
        if value is not None:
            value = value / 100

    if value is None:
        logger.debug("%s: unusable input %r, using default %r", field, raw, default)
        return default, True

    if field == "term_years" and value < defaults.min_term_years:
        logger.debug("term_years: %r raised to minimum %d", raw, defaults.min_term_years)
        return defaults.min_term_years, True
    if field == "term_years" and value > defaults.max_term_years:
        logger.debug("term_years: %r lowered to maximum %d", raw, defaults.max_term_years)
        return defaults.max_term_years, True
    if value < 0 or value > _upper_bound(field, defaults):
        logger.debug("%s: %r out of range, using default %r", field, raw, default)
        return default, True
    return value, False


def normalize_inputs(
    raw: Mapping[str, Any] | None,
    profile: LoanProfile,
    previous: CalculationInputs | None = None,
    defaults: CalculatorDefaults = DEFAULTS,
    partial: bool = False,
) -> NormalizationResult:
    """
    Turn raw field values into valid CalculationInputs.

    A field missing from `raw` counts as blank, unless `partial` is set, in
    which case it keeps its value from `previous`. `previous` also supplies
    the fallback loan amount; the other fallbacks come from `profile` and
    `defaults`.
    """
    raw = raw or {}
    unknown = set(raw) - set(FIELDS)
    if unknown:
        name = sorted(unknown)[0]
        raise InvalidInputError(name, raw[name], "unknown input field")

    values: dict[str, int | float] = {}
    corrected: set[str] = set()
    for field in FIELDS:
        if partial and previous is not None and field not in raw:
            values[field] = getattr(previous, field)
            continue
        value, was_corrected = normalize_field(field, raw.get(field), profile, previous, defaults)
        values[field] = value
        if was_corrected:
            corrected.add(field)

    inputs = CalculationInputs(**values)
    echo = {field: _echo_value(field, values[field]) for field in FIELDS}
    return NormalizationResult(inputs=inputs, echo=echo, corrected=frozenset(corrected))


def _upper_bound(field: str, defaults: CalculatorDefaults) -> float:
    if field == "down_payment_rate":
        return 1
    if field in PERCENT_FIELDS:
        return defaults.max_rate
    return defaults.max_amount


def _entry_value(field: str, value: int | float) -> int | float:
    return value * 100 if field in PERCENT_FIELDS else value


def _echo_value(field: str, value: int | float) -> int | float:
    if field in PERCENT_FIELDS:
        return round(value * 100, 2)
    return value
