"""
Calculator session: the selected loan profile plus the current inputs.

Most callers only need this class. It owns the one mutable piece of state
(selection and inputs), delegates to the pure normalization and engine
functions, and forwards everything to an optional presenter.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from mortgage_calc.config import DEFAULTS, CalculatorDefaults
from mortgage_calc.engine import CalculationResult, calculate
from mortgage_calc.inputs import CalculationInputs, NormalizationResult, normalize_inputs
from mortgage_calc.interfaces import Presenter
from mortgage_calc.profiles import DEFAULT_CATALOG, LoanProfile, LoanType, ProfileCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationPass:
    """Everything produced by one recalculation."""

    profile: LoanProfile
    normalization: NormalizationResult
    result: CalculationResult

    @property
    def inputs(self) -> CalculationInputs:
        return self.normalization.inputs


class MortgageCalculator:
    """
    Interactive calculator state.

    `recalculate()` accepts partial updates: fields not mentioned keep their
    current value, while a field passed as None or "" counts as cleared and
    falls back to its default.
    """

    def __init__(
        self,
        catalog: ProfileCatalog = DEFAULT_CATALOG,
        defaults: CalculatorDefaults = DEFAULTS,
        presenter: Presenter | None = None,
    ) -> None:
        self.catalog = catalog
        self.defaults = defaults
        self.presenter = presenter
        self._selected_index = int(LoanType.USDA)
        self._inputs = CalculationInputs.initial(self.selected_profile, defaults)
        self._last_result: CalculationResult | None = None

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def selected_profile(self) -> LoanProfile:
        return self.catalog.profile(self._selected_index)

    @property
    def inputs(self) -> CalculationInputs:
        """A copy of the current inputs."""
        return self._inputs.copy()

    @property
    def last_result(self) -> CalculationResult | None:
        return self._last_result

    def select_profile(
        self, index: int | LoanType, apply_profile_defaults: bool = True
    ) -> LoanProfile:
        """
        Switch loan type. Raises OutOfRangeError (selection unchanged) for a bad index.

        With `apply_profile_defaults`, the interest rate and down payment are
        reset to the new profile's estimate and minimum.
        """
        profile = self.catalog.profile(index)
        self._selected_index = int(index)
        if apply_profile_defaults:
            self._inputs = replace(
                self._inputs,
                interest_rate=profile.fixed_interest_rate_estimate,
                down_payment_rate=profile.minimum_down_payment_rate,
            )
        logger.info("Selected loan profile %d (%s)", self._selected_index, profile.short_name)
        if self.presenter is not None:
            self.presenter.show_profile(profile)
        return profile

    def recalculate(self, raw: Mapping[str, Any] | None = None) -> CalculationPass:
        """Normalize `raw` over the current inputs, then compute a fresh result."""
        profile = self.selected_profile
        normalization = normalize_inputs(
            raw, profile, self._inputs, self.defaults, partial=True
        )
        self._inputs = normalization.inputs
        result = calculate(profile, self._inputs)
        self._last_result = result

        if normalization.corrected:
            logger.debug("Corrected inputs: %s", ", ".join(sorted(normalization.corrected)))
        if self.presenter is not None:
            self.presenter.show_inputs(normalization.echo, normalization.corrected)
            self.presenter.show_result(result)
        return CalculationPass(profile=profile, normalization=normalization, result=result)
