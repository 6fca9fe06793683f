"""Exceptions raised by the mortgage calculator.

User-entered values never raise: normalization substitutes defaults instead.
These errors signal programming mistakes (a bad profile index, or a contract
violation that slipped past normalization into the engine).
"""

from __future__ import annotations

from typing import Any


class MortgageCalcError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class OutOfRangeError(MortgageCalcError, IndexError):
    """Raised when a profile index (or short name) is not in the catalog."""

    def __init__(self, index: Any, count: int) -> None:
        details = {"index": index, "valid_range": (0, count - 1)}
        super().__init__(f"Loan profile {index!r} is out of range", details)
        self.index = index


class InvalidInputError(MortgageCalcError, ValueError):
    """Raised when a structurally invalid value reaches the engine."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f"Invalid {field}: {reason}", {"field": field, "value": value})
        self.field = field
        self.value = value
