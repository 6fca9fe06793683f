"""Tests for input parsing and normalization."""

import pytest

from mortgage_calc.config import CalculatorDefaults
from mortgage_calc.errors import InvalidInputError
from mortgage_calc.inputs import (
    FIELDS,
    CalculationInputs,
    normalize_field,
    normalize_inputs,
    parse_float,
    parse_int,
)
from mortgage_calc.profiles import FHA, TRADITIONAL, USDA

VALID_RAW = {
    "loan_amount": "300000",
    "down_payment_rate": "3.5",
    "interest_rate": "4.25",
    "term_years": "15",
    "annual_taxes": "3600",
    "insurance_rate": "0.5",
}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("250000", 250_000),
        ("  42 ", 42),
        ("250000abc", 250_000),
        ("3.7", 3),
        ("-12", -12),
        ("1e5", 1),
        (15, 15),
        (15.9, 15),
        ("", None),
        ("abc", None),
        (None, None),
        (True, None),
        (float("nan"), None),
    ],
)
def test_parse_int(raw, expected) -> None:
    assert parse_int(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("3.5", 3.5),
        ("3.5%", 3.5),
        (".25", 0.25),
        ("1e2", 100.0),
        ("-0.5", -0.5),
        (4, 4.0),
        ("", None),
        ("  ", None),
        ("percent", None),
        ("inf", None),
        (float("inf"), None),
        ([], None),
    ],
)
def test_parse_float(raw, expected) -> None:
    assert parse_float(raw) == expected


def test_valid_inputs_are_parsed() -> None:
    result = normalize_inputs(VALID_RAW, FHA)
    inputs = result.inputs
    assert inputs.loan_amount == 300_000
    assert inputs.down_payment_rate == pytest.approx(0.035)
    assert inputs.interest_rate == pytest.approx(0.0425)
    assert inputs.term_years == 15
    assert inputs.annual_taxes == 3_600
    assert inputs.insurance_rate == pytest.approx(0.005)
    assert result.corrected == frozenset()


def test_echo_is_in_entry_units() -> None:
    echo = normalize_inputs(VALID_RAW, FHA).echo
    assert echo == {
        "loan_amount": 300_000,
        "down_payment_rate": 3.5,
        "interest_rate": 4.25,
        "term_years": 15,
        "annual_taxes": 3_600,
        "insurance_rate": 0.5,
    }


@pytest.mark.parametrize("blank", [None, "", "n/a"])
def test_blank_inputs_get_documented_defaults(blank) -> None:
    raw = {field: blank for field in FIELDS}
    result = normalize_inputs(raw, TRADITIONAL)
    assert result.inputs == CalculationInputs(
        loan_amount=200_000,
        down_payment_rate=0.2,
        interest_rate=0.04,
        term_years=30,
        annual_taxes=0,
        insurance_rate=0.005,
    )
    assert result.corrected == frozenset(FIELDS)
    assert result.echo["down_payment_rate"] == 20.0
    assert result.echo["interest_rate"] == 4.0
    assert result.echo["insurance_rate"] == 0.5


def test_missing_keys_count_as_blank() -> None:
    result = normalize_inputs({}, FHA)
    assert result.inputs == CalculationInputs.initial(FHA)
    assert normalize_inputs(None, FHA).inputs == result.inputs


def test_loan_amount_falls_back_to_previous_value() -> None:
    previous = CalculationInputs.initial(USDA)
    previous.loan_amount = 415_000
    value, corrected = normalize_field("loan_amount", "", USDA, previous)
    assert (value, corrected) == (415_000, True)


def test_rate_defaults_follow_profile() -> None:
    assert normalize_field("down_payment_rate", "", FHA) == (0.035, True)
    assert normalize_field("interest_rate", "x", TRADITIONAL) == (0.04, True)
    assert normalize_field("down_payment_rate", None, USDA) == (0.0, True)


@pytest.mark.parametrize("raw", ["0", "-3", 0])
def test_term_is_raised_to_one_year(raw) -> None:
    assert normalize_field("term_years", raw, FHA) == (1, True)


@pytest.mark.parametrize(
    "field, raw",
    [
        ("loan_amount", "-5000"),
        ("down_payment_rate", "150"),
        ("down_payment_rate", "-1"),
        ("interest_rate", "-2"),
        ("annual_taxes", "-100"),
        ("insurance_rate", "-0.5"),
    ],
)
def test_out_of_range_values_are_defaulted(field: str, raw: str) -> None:
    value, corrected = normalize_field(field, raw, FHA)
    assert corrected
    assert value == normalize_field(field, None, FHA)[0]


def test_full_down_payment_is_allowed() -> None:
    assert normalize_field("down_payment_rate", "100", FHA) == (1.0, False)


def test_normalizing_valid_inputs_round_trips() -> None:
    inputs = CalculationInputs(
        loan_amount=350_000,
        down_payment_rate=0.1,
        interest_rate=0.0625,
        term_years=20,
        annual_taxes=4_800,
        insurance_rate=0.0035,
    )
    result = normalize_inputs(inputs.to_raw(), FHA)
    assert result.corrected == frozenset()
    for field in FIELDS:
        assert getattr(result.inputs, field) == pytest.approx(getattr(inputs, field))


def test_partial_keeps_previous_values() -> None:
    previous = normalize_inputs(VALID_RAW, FHA).inputs
    result = normalize_inputs({"term_years": "20"}, FHA, previous, partial=True)
    assert result.inputs.term_years == 20
    assert result.inputs.loan_amount == previous.loan_amount
    assert result.inputs.interest_rate == previous.interest_rate
    assert result.corrected == frozenset()


def test_custom_defaults_are_used() -> None:
    defaults = CalculatorDefaults(loan_amount=150_000, term_years=15, insurance_rate=0.004)
    result = normalize_inputs({}, FHA, defaults=defaults)
    assert result.inputs.loan_amount == 150_000
    assert result.inputs.term_years == 15
    assert result.inputs.insurance_rate == 0.004


def test_unknown_field_is_a_programming_error() -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        normalize_inputs({"loan_amonut": "1"}, FHA)
    assert exc_info.value.field == "loan_amonut"
    with pytest.raises(InvalidInputError):
        normalize_field("hoa_fees", "100", FHA)


@pytest.mark.parametrize("raw", ["1" + "0" * 400, "9" * 5000, 10**400])
def test_integers_too_large_for_a_float_are_unreadable(raw) -> None:
    assert parse_int(raw) is None


def test_float_parse_of_huge_integer_is_unreadable() -> None:
    assert parse_float(10**400) is None


def test_huge_loan_amount_is_defaulted() -> None:
    value, corrected = normalize_field("loan_amount", "9" * 5000, FHA)
    assert (value, corrected) == (200_000, True)
    value, corrected = normalize_field("annual_taxes", "1" + "0" * 400, FHA)
    assert (value, corrected) == (0, True)


def test_amount_above_maximum_is_defaulted() -> None:
    defaults = CalculatorDefaults(max_amount=1_000_000)
    assert normalize_field("loan_amount", "2000000", FHA, defaults=defaults) == (200_000, True)
    assert normalize_field("loan_amount", "1000000", FHA, defaults=defaults) == (1_000_000, False)


@pytest.mark.parametrize("raw", ["101", "30000"])
def test_term_is_lowered_to_maximum(raw) -> None:
    assert normalize_field("term_years", raw, FHA) == (100, True)


@pytest.mark.parametrize("field", ["interest_rate", "insurance_rate"])
@pytest.mark.parametrize("raw", ["101", "1e300"])
def test_rate_above_maximum_is_defaulted(field: str, raw: str) -> None:
    value, corrected = normalize_field(field, raw, TRADITIONAL)
    assert corrected
    assert value == normalize_field(field, None, TRADITIONAL)[0]
