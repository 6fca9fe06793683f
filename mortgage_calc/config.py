"""
Calculator defaults.

Values used when an input is missing or unparseable and no loan profile
supplies one. `DEFAULTS` is the built-in set; `CalculatorDefaults.from_env()`
builds a set with overrides taken from `MORTGAGE_CALC_*` environment
variables (unset or unparseable variables keep the built-in value).
"""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ENV_PREFIX = "MORTGAGE_CALC_"
LOG_LEVEL_ENV = ENV_PREFIX + "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class CalculatorDefaults:
    """Fallback input values (rates as decimal fractions)."""

    loan_amount: int = 200_000
    term_years: int = 30
    annual_taxes: int = 0
    insurance_rate: float = 0.005
    min_term_years: int = 1
    max_term_years: int = 100
    # Upper bounds beyond which a typed value is treated as unusable.
    max_rate: float = 1.0
    max_amount: int = 10**12

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CalculatorDefaults:
        """Return defaults with MORTGAGE_CALC_* overrides applied."""
        env = os.environ if environ is None else environ
        base = cls()
        return cls(
            loan_amount=_env_number(env, "LOAN_AMOUNT", base.loan_amount, int),
            term_years=min(
                base.max_term_years,
                max(
                    base.min_term_years,
                    _env_number(env, "TERM_YEARS", base.term_years, int),
                ),
            ),
            annual_taxes=_env_number(env, "ANNUAL_TAXES", base.annual_taxes, int),
            insurance_rate=_env_number(env, "INSURANCE_RATE", base.insurance_rate, float),
            min_term_years=base.min_term_years,
            max_term_years=base.max_term_years,
            max_rate=base.max_rate,
            max_amount=base.max_amount,
        )


def _env_number(env: Mapping[str, str], name: str, fallback, kind):
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return fallback
    try:
        value = kind(raw.strip())
        as_float = float(value)
    except (ValueError, OverflowError):
        logger.warning("Ignoring %s%s=%r: not a valid %s", ENV_PREFIX, name, raw, kind.__name__)
        return fallback
    if not math.isfinite(as_float) or value < 0:
        logger.warning("Ignoring %s%s=%r: must be a finite non-negative number", ENV_PREFIX, name, raw)
        return fallback
    return value


def log_level(environ: Mapping[str, str] | None = None) -> str:
    """Log level name for the demo (MORTGAGE_CALC_LOG_LEVEL, default WARNING)."""
    env = os.environ if environ is None else environ
    level = env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring %s=%r: unknown log level", LOG_LEVEL_ENV, level)
        return DEFAULT_LOG_LEVEL
    return level


DEFAULTS = CalculatorDefaults()
