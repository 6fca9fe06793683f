"""Tests for the loan profile catalog."""

import dataclasses

import pytest

from mortgage_calc.errors import OutOfRangeError
from mortgage_calc.profiles import DEFAULT_CATALOG, FHA, TRADITIONAL, USDA, LoanType


def test_catalog_has_three_profiles_in_enum_order() -> None:
    """Index 0..2 map to USDA, FHA, TRADITIONAL."""
    assert DEFAULT_CATALOG.profile_count() == 3
    assert len(DEFAULT_CATALOG) == 3
    assert DEFAULT_CATALOG.profile(0) is USDA
    assert DEFAULT_CATALOG.profile(1) is FHA
    assert DEFAULT_CATALOG.profile(2) is TRADITIONAL
    assert [p.short_name for p in DEFAULT_CATALOG] == [t.name for t in LoanType]


def test_profile_accepts_loan_type() -> None:
    assert DEFAULT_CATALOG.profile(LoanType.FHA) is FHA


def test_fha_parameters() -> None:
    assert FHA.loan_fee_rate == 0.008
    assert FHA.standard_pmi_rate == 0.015
    assert FHA.minimum_down_payment_rate == 0.035
    assert FHA.fixed_interest_rate_estimate == 0.035


def test_traditional_and_usda_parameters() -> None:
    assert TRADITIONAL.loan_fee_rate == 0.02
    assert TRADITIONAL.standard_pmi_rate == 0.02
    assert TRADITIONAL.minimum_down_payment_rate == 0.2
    assert TRADITIONAL.fixed_interest_rate_estimate == 0.04
    assert USDA.loan_fee_rate == 0.02
    assert USDA.standard_pmi_rate == 0.005
    assert USDA.minimum_down_payment_rate == 0.0


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_range_index_raises(index: int) -> None:
    """Negative indexes are not wrapped around."""
    with pytest.raises(OutOfRangeError) as exc_info:
        DEFAULT_CATALOG.profile(index)
    assert exc_info.value.index == index
    assert exc_info.value.details["valid_range"] == (0, 2)


@pytest.mark.parametrize("index", [True, 1.0, "1", None])
def test_non_integer_index_raises(index) -> None:
    with pytest.raises(OutOfRangeError):
        DEFAULT_CATALOG.profile(index)


def test_out_of_range_error_is_index_error() -> None:
    with pytest.raises(IndexError):
        DEFAULT_CATALOG.profile(5)


def test_by_short_name_is_case_insensitive() -> None:
    assert DEFAULT_CATALOG.by_short_name("fha") is FHA
    assert DEFAULT_CATALOG.by_short_name(" Traditional ") is TRADITIONAL
    with pytest.raises(OutOfRangeError):
        DEFAULT_CATALOG.by_short_name("VA")


def test_profiles_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        FHA.loan_fee_rate = 0.5  # type: ignore[misc]


def test_rates_as_percent() -> None:
    assert TRADITIONAL.rates_as_percent() == {
        "loan_fee": 2.0,
        "standard_pmi": 2.0,
        "minimum_down_payment": 20.0,
    }
    assert FHA.rates_as_percent()["minimum_down_payment"] == 3.5


def test_to_dict_round_trips_through_constructor() -> None:
    data = USDA.to_dict()
    assert data["short_name"] == "USDA"
    assert type(USDA)(**data) == USDA
