"""
Boundary to the presentation layer.

The calculator does not render anything. A presenter is any object with the
methods below (structural subtyping, no inheritance needed); it receives
plain numbers and is responsible for formatting them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mortgage_calc.engine import CalculationResult
    from mortgage_calc.profiles import LoanProfile


@runtime_checkable
class Presenter(Protocol):
    """Receives profile, normalized inputs and results after each change."""

    def show_profile(self, profile: LoanProfile) -> None:
        """Display the newly selected loan profile (name, description, rates)."""
        ...

    def show_inputs(self, echo: dict[str, float], corrected: frozenset[str]) -> None:
        """Write normalized values back into the editable fields.

        `corrected` names the fields whose typed value was replaced.
        """
        ...

    def show_result(self, result: CalculationResult) -> None:
        """Display the payment breakdown."""
        ...
